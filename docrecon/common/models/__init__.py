"""Models shared across the blocks and processor packages."""

from docrecon.common.models.base import BoundingBox, Geometry, Relationship, RelationshipType
from docrecon.common.models.settings import ProcessingOptions

__all__ = ["BoundingBox", "Geometry", "Relationship", "RelationshipType", "ProcessingOptions"]
