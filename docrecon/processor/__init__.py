"""Reconstruct ordered text and structured data from raw OCR blocks. Main logic."""

from docrecon.processor.core import empty_result, process_document
from docrecon.processor.forms import extract_forms
from docrecon.processor.models import DocumentResult, FormField, StructuredData, Table, TableCell
from docrecon.processor.ordering import order_lines
from docrecon.processor.tables import extract_tables
from docrecon.processor.text import reconstruct_text

__all__ = [
    "process_document",
    "empty_result",
    "order_lines",
    "reconstruct_text",
    "extract_tables",
    "extract_forms",
    "DocumentResult",
    "StructuredData",
    "Table",
    "TableCell",
    "FormField",
]
