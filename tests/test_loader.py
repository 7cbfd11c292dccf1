"""
Unit tests for docrecon.blocks (models and result-page loading).
"""
import json

import pytest
from pydantic import ValidationError

from docrecon.blocks import (
    Block,
    BlockType,
    JobFailedError,
    OperationKind,
    infer_operation,
    load_result_pages,
    read_result_files,
)
from factories import raw_block, raw_line, result_page


class TestBlockModel:
    """Parsing service-shaped JSON."""

    def test_parses_pascal_case(self):
        raw = raw_block(
            "cell-1",
            "CELL",
            Page=2,
            Confidence=87.25,
            Text="Dues",
            RowIndex=3,
            ColumnIndex=4,
            Geometry={"BoundingBox": {"Top": 0.4, "Left": 0.2, "Width": 0.1, "Height": 0.02}},
            Relationships=[{"Type": "CHILD", "Ids": ["w1", "w2"]}],
            EntityTypes=["COLUMN_HEADER"],
        )

        b = Block.model_validate(raw)

        assert b.is_type(BlockType.CELL)
        assert (b.page, b.row_index, b.column_index) == (2, 3, 4)
        assert b.bounding_box.top == 0.4
        assert b.relationships[0].ids == ("w1", "w2")

    def test_optional_fields_default(self):
        b = Block.model_validate(raw_block("x", "LINE"))

        assert b.page is None
        assert b.confidence is None
        assert b.relationships == ()
        assert b.bounding_box.top == 0.0

    def test_unknown_block_type_passes_through(self):
        b = Block.model_validate(raw_block("q", "QUERY_RESULT", Text="42"))

        assert b.block_type == "QUERY_RESULT"

    def test_blocks_are_frozen(self):
        b = Block.model_validate(raw_block("x", "LINE"))

        with pytest.raises(ValidationError):
            b.text = "changed"

    def test_missing_id_is_rejected(self):
        with pytest.raises(ValidationError):
            Block.model_validate({"BlockType": "LINE"})


class TestOperationKind:
    """Operation string parsing."""

    def test_analysis(self):
        assert OperationKind.parse("ANALYSIS") is OperationKind.ANALYSIS
        assert OperationKind.parse(OperationKind.ANALYSIS) is OperationKind.ANALYSIS

    @pytest.mark.parametrize("raw", ["TEXT_DETECTION", "DETECTION", "analysis", " ANALYSIS ", "Analysis", "", None])
    def test_everything_else(self, raw):
        assert OperationKind.parse(raw) is OperationKind.TEXT_DETECTION

    def test_inferred_from_response(self):
        assert infer_operation(result_page([], analysis=True)) is OperationKind.ANALYSIS
        assert infer_operation(result_page([])) is OperationKind.TEXT_DETECTION


class TestLoadResultPages:
    """Merging paginated responses."""

    def test_merges_pages_in_order(self):
        pages = [
            result_page([raw_line("a", "one")], next_token="t1"),
            result_page([raw_line("b", "two"), raw_line("c", "three")]),
        ]

        block_set = load_result_pages(pages)

        assert [b.id for b in block_set] == ["a", "b", "c"]
        assert len(block_set) == 3

    @pytest.mark.parametrize("status", ["FAILED", "IN_PROGRESS", "PARTIAL_SUCCESS"])
    def test_non_success_status_fails(self, status):
        pages = [result_page([raw_line("a", "one")]), result_page([], status=status)]

        with pytest.raises(JobFailedError) as exc_info:
            load_result_pages(pages, job_id="job-7")

        assert exc_info.value.status == status
        assert "job-7" in str(exc_info.value)

    def test_bare_block_list_is_accepted(self):
        block_set = load_result_pages([[raw_line("a", "one")]])

        assert block_set[0].text == "one"
        assert block_set.operation is OperationKind.TEXT_DETECTION

    def test_operation_inferred_from_first_page(self):
        block_set = load_result_pages([result_page([], analysis=True), result_page([])])

        assert block_set.operation is OperationKind.ANALYSIS

    def test_explicit_operation_wins(self):
        block_set = load_result_pages([result_page([], analysis=True)], operation="TEXT_DETECTION")

        assert block_set.operation is OperationKind.TEXT_DETECTION

    def test_job_id_from_response(self):
        page = result_page([])
        page["JobId"] = "abc123"

        assert load_result_pages([page]).job_id == "abc123"

    def test_invalid_payload(self):
        with pytest.raises(ValueError):
            load_result_pages(["not a response"])

    def test_page_limit_stops_merging(self, patch_config):
        patch_config(max_result_pages=2)
        pages = [result_page([raw_line(f"l{i}", "x")]) for i in range(5)]

        block_set = load_result_pages(pages)

        assert [b.id for b in block_set] == ["l0", "l1"]

    def test_no_pages(self):
        block_set = load_result_pages([])

        assert len(block_set) == 0


class TestReadResultFiles:
    """Loading saved responses from disk."""

    def test_reads_files_in_order(self, tmp_path):
        first = tmp_path / "page-1.json"
        second = tmp_path / "page-2.json"
        first.write_text(json.dumps(result_page([raw_line("a", "one")], analysis=True)), encoding="utf-8")
        second.write_text(json.dumps([raw_line("b", "two")]), encoding="utf-8")

        block_set = read_result_files([first, str(second)])

        assert [b.id for b in block_set] == ["a", "b"]
        assert block_set.operation is OperationKind.ANALYSIS

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            read_result_files([tmp_path / "nope.json"])
