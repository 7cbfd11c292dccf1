"""Deterministic synthetic block sets for profiling and large-input checks."""

import random

from docrecon.blocks.models import Block, BlockSet, BlockType, EntityType, OperationKind
from docrecon.common.models import BoundingBox, Geometry, Relationship, RelationshipType

WORDS = ["annual", "report", "members", "camp", "board", "minutes", "program", "youth", "budget", "hall"]


def _box(top: float, left: float) -> Geometry:
    return Geometry(bounding_box=BoundingBox(top=top, left=left, width=0.3, height=0.01))


def _table(rng: random.Random, page: int, prefix: str) -> list[Block]:
    cells = [
        Block(
            id=f"{prefix}-cell-{r}-{c}",
            block_type=BlockType.CELL.value,
            page=page,
            geometry=_box(0.8 + r * 0.02, c * 0.2),
            confidence=rng.uniform(80, 100),
            text=rng.choice(WORDS),
            row_index=r,
            column_index=c,
        )
        for r in range(1, 3)
        for c in range(1, 3)
    ]
    table = Block(
        id=f"{prefix}-table",
        block_type=BlockType.TABLE.value,
        page=page,
        geometry=_box(0.8, 0.0),
        confidence=rng.uniform(80, 100),
        relationships=(Relationship(type=RelationshipType.CHILD.value, ids=tuple(c.id for c in cells)),),
    )
    return [table, *cells]


def _form_field(rng: random.Random, page: int, prefix: str) -> list[Block]:
    value = Block(
        id=f"{prefix}-value",
        block_type=BlockType.KEY_VALUE_SET.value,
        page=page,
        geometry=_box(0.9, 0.5),
        confidence=rng.uniform(80, 100),
        text=rng.choice(WORDS),
        entity_types=(EntityType.VALUE.value,),
    )
    key = Block(
        id=f"{prefix}-key",
        block_type=BlockType.KEY_VALUE_SET.value,
        page=page,
        geometry=_box(0.9, 0.0),
        confidence=rng.uniform(80, 100),
        text=rng.choice(WORDS).title(),
        entity_types=(EntityType.KEY.value,),
        relationships=(Relationship(type=RelationshipType.VALUE.value, ids=(value.id,)),),
    )
    return [key, value]


def synthetic_block_set(
    line_count: int,
    pages: int = 1,
    structured: bool = False,
    seed: int = 0,
    operation: OperationKind = OperationKind.TEXT_DETECTION,
) -> BlockSet:
    """Build `line_count` LINE blocks spread over `pages` pages, in shuffled order.

    With `structured=True` every page also gets one 2x2 table and one key/value pair.
    """
    rng = random.Random(seed)
    blocks: list[Block] = []

    for i in range(line_count):
        blocks.append(
            Block(
                id=f"line-{i}",
                block_type=BlockType.LINE.value,
                page=i % pages + 1,
                geometry=_box(round(rng.random(), 4), round(rng.random(), 4)),
                confidence=rng.uniform(50, 100),
                text=" ".join(rng.choices(WORDS, k=rng.randint(1, 8))),
            )
        )

    if structured:
        for page in range(1, pages + 1):
            blocks.extend(_table(rng, page, f"p{page}"))
            blocks.extend(_form_field(rng, page, f"p{page}"))

    rng.shuffle(blocks)
    return BlockSet(job_id=f"synthetic-{seed}", operation=operation, blocks=blocks)
