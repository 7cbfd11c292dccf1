"""Assemble a complete block set from already-fetched, paginated OCR result responses."""

import json
import pathlib
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from docrecon.blocks.models import Block, BlockSet, OperationKind
import docrecon.common.utils.config as config_module
from docrecon.common.utils.logger import get_logger

logger = get_logger(__name__)

SUCCEEDED = "SUCCEEDED"

# Only analysis responses carry this key
ANALYSIS_MODEL_VERSION_KEY = "AnalyzeDocumentModelVersion"


class JobFailedError(RuntimeError):
    """The OCR job did not finish successfully, so its blocks cannot be trusted."""

    def __init__(self, status: str | None, job_id: str | None = None):
        self.status = status
        self.job_id = job_id
        where = f" {job_id}" if job_id else ""
        super().__init__(f"OCR job{where} failed with status: {status}")


def infer_operation(response: Mapping[str, Any]) -> OperationKind:
    """Tell analysis responses apart from text-detection ones."""
    if ANALYSIS_MODEL_VERSION_KEY in response:
        return OperationKind.ANALYSIS
    return OperationKind.TEXT_DETECTION


def _as_response(payload: Any) -> Mapping[str, Any]:
    """Accept either a response object or a bare list of blocks."""
    match payload:
        case Mapping():
            return payload
        case list():
            return {"Blocks": payload}
        case _:
            raise ValueError(f"Expected a result response object or a list of blocks, got {type(payload).__name__}")


def load_result_pages(
    pages: Iterable[Any],
    operation: OperationKind | str | None = None,
    job_id: str | None = None,
) -> BlockSet:
    """Merge paginated result responses into one `BlockSet`.

    Every page must report `JobStatus == "SUCCEEDED"`; a page without a status
    (a plain block dump) is accepted as is. When `operation` is not given it
    is inferred from the first page.
    """
    max_pages = config_module.config.max_result_pages
    blocks: list[Block] = []
    page_count = 0
    inferred: OperationKind | None = None

    for payload in pages:
        if page_count >= max_pages:
            logger.warning(f"Reached maximum page limit ({max_pages}), stopping pagination")
            break

        response = _as_response(payload)
        status = response.get("JobStatus")
        if status is not None and status != SUCCEEDED:
            raise JobFailedError(status, job_id or response.get("JobId"))

        if job_id is None:
            job_id = response.get("JobId")
        if inferred is None:
            inferred = infer_operation(response)

        page_blocks = [Block.model_validate(raw) for raw in response.get("Blocks") or []]
        blocks.extend(page_blocks)
        page_count += 1
        logger.debug(f"Added {len(page_blocks)} blocks from result page {page_count}")

    resolved = OperationKind.parse(operation) if operation is not None else inferred
    logger.info(f"Completed pagination: {page_count} pages, {len(blocks)} total blocks")

    return BlockSet(
        job_id=job_id,
        operation=resolved or OperationKind.TEXT_DETECTION,
        blocks=blocks,
    )


def _read_json(path: pathlib.Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def read_result_files(
    paths: Sequence[str | pathlib.Path],
    operation: OperationKind | str | None = None,
) -> BlockSet:
    """Load result pages saved as JSON files, in the given order."""
    logger.debug(f"Reading {len(paths)} result file(s)")
    return load_result_pages((_read_json(pathlib.Path(p)) for p in paths), operation=operation)
