"""Resolve KEY_VALUE_SET blocks into flat key/value pairs."""

from collections.abc import Iterable

from docrecon.blocks.models import Block, BlockType, EntityType
from docrecon.common.models import RelationshipType
from docrecon.common.utils.logger import get_logger
from docrecon.processor.graph import BlockIndex, block_text, resolve
from docrecon.processor.models import FormField
from docrecon.processor.ordering import reading_key

logger = get_logger(__name__)


def _is_key(block: Block) -> bool:
    return block.is_type(BlockType.KEY_VALUE_SET) and EntityType.KEY.value in block.entity_types


def _form_field(key_block: Block, index: BlockIndex) -> FormField | None:
    # Values are looked up among all blocks, not just KEY_VALUE_SET ones
    values = resolve(key_block.related_ids(RelationshipType.VALUE), index)
    if not values:
        return None

    value_block = values[0]
    return FormField(
        key=block_text(key_block, index),
        value=block_text(value_block, index),
        key_confidence=key_block.confidence,
        value_confidence=value_block.confidence,
        page=key_block.page,
    )


def extract_forms(blocks: Iterable[Block], index: BlockIndex) -> list[FormField]:
    """One `FormField` per KEY block that resolves to a value, in reading order."""
    forms: list[FormField] = []
    skipped = 0

    for key_block in sorted(filter(_is_key, blocks), key=reading_key):
        field = _form_field(key_block, index)
        if field is None:
            skipped += 1
            continue
        forms.append(field)

    if skipped:
        logger.debug(f"Skipped {skipped} key block(s) without a resolvable value")
    return forms
