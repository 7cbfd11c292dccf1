"""Shared geometry and relationship models for OCR blocks."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RelationshipType(str, Enum):
    CHILD = "CHILD"
    VALUE = "VALUE"


class BoundingBox(BaseModel):
    """Axis-aligned box in page-relative coordinates, all in [0, 1]."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    top: float = Field(default=0.0, alias="Top")
    left: float = Field(default=0.0, alias="Left")
    width: float = Field(default=0.0, alias="Width")
    height: float = Field(default=0.0, alias="Height")


class Geometry(BaseModel):
    # Polygon points are ignored; ordering only needs the box
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    bounding_box: BoundingBox = Field(default_factory=BoundingBox, alias="BoundingBox")


class Relationship(BaseModel):
    """Directed reference from one block to others, by id."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: str = Field(alias="Type")  # CHILD, VALUE, or anything else the service adds
    ids: tuple[str, ...] = Field(default=(), alias="Ids")
