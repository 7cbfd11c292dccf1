"""Raw OCR block models, as returned by the text detection and analysis APIs."""

from collections.abc import Iterator
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from docrecon.common.models import BoundingBox, Geometry, Relationship, RelationshipType


# Only LINE, CELL, TABLE, KEY_VALUE_SET (and WORD/SELECTION_ELEMENT as text
# sources) are read. Anything else is carried along untouched.
class BlockType(str, Enum):
    PAGE = "PAGE"
    LINE = "LINE"
    WORD = "WORD"
    TABLE = "TABLE"
    CELL = "CELL"
    MERGED_CELL = "MERGED_CELL"
    KEY_VALUE_SET = "KEY_VALUE_SET"
    SELECTION_ELEMENT = "SELECTION_ELEMENT"


class EntityType(str, Enum):
    KEY = "KEY"
    VALUE = "VALUE"


class OperationKind(str, Enum):
    ANALYSIS = "ANALYSIS"
    TEXT_DETECTION = "TEXT_DETECTION"

    @classmethod
    def parse(cls, value: "str | OperationKind | None") -> "OperationKind":
        """Exactly "ANALYSIS" means analysis; any other value means plain text detection."""
        if isinstance(value, OperationKind):
            return value
        if value == cls.ANALYSIS.value:
            return cls.ANALYSIS
        return cls.TEXT_DETECTION


class Block(BaseModel):
    """One OCR-detected element. Immutable."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="Id")
    block_type: str = Field(alias="BlockType")  # kept as str so unknown types pass through
    page: int | None = Field(default=None, alias="Page")
    geometry: Geometry = Field(default_factory=Geometry, alias="Geometry")
    confidence: float | None = Field(default=None, alias="Confidence")
    text: str | None = Field(default=None, alias="Text")
    entity_types: tuple[str, ...] = Field(default=(), alias="EntityTypes")
    relationships: tuple[Relationship, ...] = Field(default=(), alias="Relationships")
    row_index: int | None = Field(default=None, alias="RowIndex")
    column_index: int | None = Field(default=None, alias="ColumnIndex")
    selection_status: str | None = Field(default=None, alias="SelectionStatus")

    @property
    def bounding_box(self) -> BoundingBox:
        return self.geometry.bounding_box

    def is_type(self, block_type: BlockType) -> bool:
        return self.block_type == block_type.value

    def related_ids(self, relationship_type: RelationshipType) -> tuple[str, ...]:
        """Ids of the first relationship of the given type, or () when there is none."""
        for rel in self.relationships:
            if rel.type == relationship_type.value:
                return rel.ids
        return ()


class BlockSet(BaseModel):
    """A complete result set: every block of one OCR job, plus how it was produced."""

    job_id: str | None = None
    operation: OperationKind = OperationKind.TEXT_DETECTION
    blocks: list[Block]

    def __getitem__(self, index: int) -> Block:
        return self.blocks[index]

    def __iter__(self) -> Iterator[Block]:  # pyright: ignore[reportIncompatibleMethodOverride]
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)
