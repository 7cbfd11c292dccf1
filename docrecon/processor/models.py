"""Reconstructed document models."""

from functools import cached_property

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class OutputModel(BaseModel):
    """Serializes with camelCase keys; accepts either spelling on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TableCell(OutputModel):
    column_index: int
    text: str
    confidence: float | None = None


class Table(OutputModel):
    page: int | None = None
    confidence: float | None = None
    rows: list[list[TableCell]] = []


class FormField(OutputModel):
    key: str
    value: str
    key_confidence: float | None = None
    value_confidence: float | None = None
    page: int | None = None


class StructuredData(OutputModel):
    tables: list[Table] = []
    forms: list[FormField] = []


class TextSummary(OutputModel):
    text: str
    page_count: int
    word_count: int
    average_confidence: float


def _cell_md(text: str) -> str:
    return " ".join(text.split()).replace("|", "\\|")


class DocumentResult(OutputModel):
    """The reconstructed document.

    A: read fields directly

    B: access camelCase JSON via .json property

    C: access markdown via .markdown property
    """

    text: str
    page_count: int
    word_count: int
    has_structured_data: bool = False
    average_confidence: float = 0.0
    structured_data: StructuredData | None = None

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)

    @cached_property
    def json(self) -> str:  # pyright: ignore[reportIncompatibleMethodOverride]
        return self.model_dump_json(by_alias=True, indent=2)

    @cached_property
    def markdown(self) -> str:
        lines: list[str] = []
        if self.text:
            lines.append(f"{self.text}\n\n")

        if self.structured_data is None:
            return "".join(lines)

        for table in self.structured_data.tables:
            if not table.rows:
                continue

            max_cols = max(len(row) for row in table.rows)
            if max_cols == 0:
                continue

            # Pad short rows so every row has the same number of columns
            grid = [[_cell_md(c.text) for c in row] + [""] * (max_cols - len(row)) for row in table.rows]

            # First row is header
            lines.append("| " + " | ".join(grid[0]) + " |\n")
            lines.append("| " + " | ".join(["---"] * max_cols) + " |\n")
            for row in grid[1:]:
                lines.append("| " + " | ".join(row) + " |\n")
            lines.append("\n")

        if self.structured_data.forms:
            for field in self.structured_data.forms:
                lines.append(f"- **{field.key}**: {field.value}\n")
            lines.append("\n")

        return "".join(lines)
