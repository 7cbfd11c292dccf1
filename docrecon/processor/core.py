"""Core. Turns a complete block set into one reconstructed document."""

from collections.abc import Iterable

from docrecon.blocks.models import Block, BlockSet, BlockType, OperationKind
from docrecon.common.models import ProcessingOptions
from docrecon.common.utils.logger import get_logger
from docrecon.processor.forms import extract_forms
from docrecon.processor.graph import index_blocks
from docrecon.processor.models import DocumentResult, FormField, StructuredData, Table
from docrecon.processor.ordering import order_lines
from docrecon.processor.tables import extract_tables
from docrecon.processor.text import reconstruct_text

logger = get_logger(__name__)


def empty_result() -> DocumentResult:
    """What an empty block set reconstructs to, whatever the operation."""
    return DocumentResult(text="", page_count=0, word_count=0, has_structured_data=False)


def _extract_structured(
    blocks: list[Block], options: ProcessingOptions
) -> tuple[list[Table], list[FormField]]:
    if len(blocks) > options.structured_block_limit:
        logger.info(
            f"{len(blocks)} blocks exceeds the structured block limit "
            f"({options.structured_block_limit}), skipping tables and forms"
        )
        return [], []

    index = index_blocks(blocks)
    return extract_tables(blocks, index), extract_forms(blocks, index)


def process_document(
    blocks: BlockSet | Iterable[Block],
    operation: OperationKind | str | None = None,
    options: ProcessingOptions | None = None,
) -> DocumentResult:
    """Reconstruct ordered text, statistics and (for analysis) tables and forms.

    Can be called as:
    - process_document(block_set)  # operation taken from the block set
    - process_document(block_set, "ANALYSIS")
    - process_document([block, ...], OperationKind.TEXT_DETECTION)

    Any operation string other than "ANALYSIS" means plain text detection.
    """
    if operation is None:
        operation = blocks.operation if isinstance(blocks, BlockSet) else OperationKind.TEXT_DETECTION
    operation = OperationKind.parse(operation)
    options = options or ProcessingOptions()

    all_blocks = list(blocks)
    if not all_blocks:
        logger.debug("Empty block set, nothing to reconstruct")
        return empty_result()

    logger.debug(f"Processing {len(all_blocks)} blocks ({operation.value})")

    lines = [b for b in all_blocks if b.is_type(BlockType.LINE)]
    summary = reconstruct_text(all_blocks, order_lines(lines, options))

    structured_data: StructuredData | None = None
    if operation is OperationKind.ANALYSIS:
        tables, forms = _extract_structured(all_blocks, options)
        structured_data = StructuredData(tables=tables, forms=forms)

    result = DocumentResult(
        text=summary.text,
        page_count=summary.page_count,
        word_count=summary.word_count,
        has_structured_data=bool(structured_data and (structured_data.tables or structured_data.forms)),
        average_confidence=summary.average_confidence,
        structured_data=structured_data,
    )

    logger.info(
        f"Processed {operation.value.lower()}: {len(result.text)} characters, {result.page_count} pages, "
        f"{result.word_count} words"
        + (
            f", {len(structured_data.tables)} tables, {len(structured_data.forms)} forms"
            if structured_data
            else ""
        )
    )
    return result
