"""Id lookups over the block relationship graph."""

from collections.abc import Iterable, Mapping
from typing import TypeAlias

from docrecon.blocks.models import Block, BlockType
from docrecon.common.models import RelationshipType

BlockIndex: TypeAlias = Mapping[str, Block]


def index_blocks(blocks: Iterable[Block]) -> dict[str, Block]:
    return {block.id: block for block in blocks}


def resolve(ids: Iterable[str], index: BlockIndex, block_type: BlockType | None = None) -> list[Block]:
    """Blocks for `ids`, in id order, without duplicates. Unknown ids are skipped."""
    seen: set[str] = set()
    found: list[Block] = []
    for block_id in ids:
        if block_id in seen:
            continue
        seen.add(block_id)
        block = index.get(block_id)
        if block is None or (block_type is not None and not block.is_type(block_type)):
            continue
        found.append(block)
    return found


def block_text(block: Block, index: BlockIndex) -> str:
    """The block's own text, or else the words and checkbox states it points to."""
    if block.text is not None:
        return block.text

    parts: list[str] = []
    for child in resolve(block.related_ids(RelationshipType.CHILD), index):
        if child.is_type(BlockType.WORD) and child.text:
            parts.append(child.text)
        elif child.is_type(BlockType.SELECTION_ELEMENT) and child.selection_status:
            parts.append(child.selection_status)
    return " ".join(parts)
