"""Resolve TABLE blocks into row/column grids."""

from collections import defaultdict
from collections.abc import Iterable

from docrecon.blocks.models import Block, BlockType
from docrecon.common.models import RelationshipType
from docrecon.processor.graph import BlockIndex, block_text, resolve
from docrecon.processor.models import Table, TableCell
from docrecon.processor.ordering import reading_key


def _table_rows(table_block: Block, index: BlockIndex) -> list[list[TableCell]]:
    cells = resolve(table_block.related_ids(RelationshipType.CHILD), index, BlockType.CELL)

    rows: dict[int, list[TableCell]] = defaultdict(list)
    for cell in cells:
        rows[cell.row_index or 0].append(
            TableCell(
                column_index=cell.column_index or 0,
                text=block_text(cell, index),
                confidence=cell.confidence,
            )
        )

    return [sorted(rows[r], key=lambda c: c.column_index) for r in sorted(rows)]


def extract_tables(blocks: Iterable[Block], index: BlockIndex) -> list[Table]:
    """One `Table` per TABLE block, in reading order. A table without cells has no rows."""
    table_blocks = sorted((b for b in blocks if b.is_type(BlockType.TABLE)), key=reading_key)
    return [
        Table(page=tb.page, confidence=tb.confidence, rows=_table_rows(tb, index))
        for tb in table_blocks
    ]
