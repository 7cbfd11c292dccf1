"""Internally exposed API for loading raw OCR blocks from result responses."""

from docrecon.blocks.core import JobFailedError, infer_operation, load_result_pages, read_result_files
from docrecon.blocks.models import Block, BlockSet, BlockType, EntityType, OperationKind
from docrecon.blocks.synthetic import synthetic_block_set

__all__ = [
    "load_result_pages",
    "read_result_files",
    "infer_operation",
    "JobFailedError",
    "Block",
    "BlockSet",
    "BlockType",
    "EntityType",
    "OperationKind",
    "synthetic_block_set",
]
