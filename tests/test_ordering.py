"""
Unit tests for docrecon.processor.ordering.
"""
import pytest

from docrecon.blocks import synthetic_block_set
from docrecon.common.models import ProcessingOptions
from docrecon.processor.ordering import MISSING_PAGE, order_lines, reading_key
from factories import line


def ids(blocks):
    return [b.id for b in blocks]


class TestReadingOrder:
    """Page, then band, then left."""

    def test_near_equal_tops_break_ties_on_left(self, options):
        """Tops 0.50 and 0.505 share a band, so left decides."""
        lines = [
            line("a", "left 0.1", top=0.50, left=0.1),
            line("b", "left 0.05", top=0.505, left=0.05),
            line("c", "top 0.2", top=0.20, left=0.0),
        ]

        assert ids(order_lines(lines, options)) == ["c", "b", "a"]

    def test_pages_come_before_position(self, options):
        lines = [
            line("p2", "second page", page=2, top=0.1, left=0.1),
            line("p1", "first page", page=1, top=0.9, left=0.9),
        ]

        assert ids(order_lines(lines, options)) == ["p1", "p2"]

    def test_missing_page_sorts_first(self, options):
        lines = [
            line("numbered", "x", page=1, top=0.1),
            line("unnumbered", "y", page=None, top=0.9),
        ]

        assert MISSING_PAGE == 0
        assert ids(order_lines(lines, options)) == ["unnumbered", "numbered"]

    def test_bands_do_not_span_pages(self, options):
        lines = [
            line("p1", "x", page=1, top=0.5, left=0.9),
            line("p2", "y", page=2, top=0.5, left=0.1),
        ]

        assert ids(order_lines(lines, options)) == ["p1", "p2"]

    def test_gap_of_exactly_the_tolerance_is_same_line(self, options):
        lines = [
            line("right", "x", top=0.50, left=0.6),
            line("left", "y", top=0.51, left=0.1),
        ]

        assert ids(order_lines(lines, options)) == ["left", "right"]

    def test_gap_above_tolerance_is_new_line(self, options):
        lines = [
            line("lower", "x", top=0.52, left=0.1),
            line("upper", "y", top=0.50, left=0.6),
        ]

        assert ids(order_lines(lines, options)) == ["upper", "lower"]


class TestTransitiveBands:
    """Chains of close tops collapse into one band."""

    def test_chain_forms_single_band(self, options):
        """0.100 and 0.116 are not close, but each is close to 0.108."""
        lines = [
            line("a", "x", top=0.100, left=0.5),
            line("b", "y", top=0.108, left=0.3),
            line("c", "z", top=0.116, left=0.1),
        ]

        assert ids(order_lines(lines, options)) == ["c", "b", "a"]

    def test_chain_is_input_order_independent(self, options, rng):
        lines = [line(f"l{i}", "x", top=0.1 + i * 0.006, left=(i * 37 % 10) / 10) for i in range(12)]
        expected = ids(order_lines(lines, options))

        for _ in range(10):
            shuffled = lines[:]
            rng.shuffle(shuffled)
            assert ids(order_lines(shuffled, options)) == expected

    def test_identical_positions_fall_back_to_id(self, options):
        lines = [line("b", "x", top=0.3, left=0.3), line("a", "y", top=0.3, left=0.3)]

        assert ids(order_lines(lines, options)) == ["a", "b"]


class TestSorterProperties:
    """Idempotence, batching and size."""

    @pytest.fixture
    def synthetic_lines(self):
        return synthetic_block_set(3000, pages=7, seed=42).blocks

    def test_idempotent(self, synthetic_lines, options):
        once = order_lines(synthetic_lines, options)
        twice = order_lines(once, options)

        assert ids(once) == ids(twice)

    def test_shuffle_invariant(self, synthetic_lines, options, rng):
        expected = ids(order_lines(synthetic_lines, options))
        shuffled = synthetic_lines[:]
        rng.shuffle(shuffled)

        assert ids(order_lines(shuffled, options)) == expected

    @pytest.mark.parametrize("batch_size", [1, 7, 1000, 10_000])
    def test_batch_size_does_not_change_order(self, synthetic_lines, options, batch_size):
        expected = ids(order_lines(synthetic_lines, options))
        batched = ProcessingOptions(batch_size=batch_size, line_tolerance=0.01, structured_block_limit=10000)

        assert ids(order_lines(synthetic_lines, batched)) == expected

    def test_nothing_added_or_dropped(self, synthetic_lines, options):
        ordered = order_lines(synthetic_lines, options)

        assert len(ordered) == len(synthetic_lines)
        assert sorted(ids(ordered)) == sorted(ids(synthetic_lines))

    def test_large_input(self, options):
        """Tens of thousands of lines sort without deep recursion."""
        lines = synthetic_block_set(60_000, pages=300, seed=7).blocks

        ordered = order_lines(lines, options)

        assert len(ordered) == 60_000
        pages = [b.page for b in ordered]
        assert pages == sorted(pages)

    def test_empty(self, options):
        assert order_lines([], options) == []

    def test_reading_key_is_strict(self):
        a = line("a", "x", page=None, top=0.2, left=0.3)

        assert reading_key(a) == (0, 0.2, 0.3, "a")
