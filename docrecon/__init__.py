"""Main entrypoint. Exposes the public API."""

from docrecon.blocks import Block, BlockSet, JobFailedError, OperationKind, load_result_pages, read_result_files
from docrecon.processor import DocumentResult, process_document

__all__ = [
    "process_document",
    "load_result_pages",
    "read_result_files",
    "Block",
    "BlockSet",
    "OperationKind",
    "DocumentResult",
    "JobFailedError",
]
