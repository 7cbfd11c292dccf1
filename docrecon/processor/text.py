"""Document text and summary statistics from ordered LINE blocks."""

from collections.abc import Iterable, Sequence

from docrecon.blocks.models import Block
from docrecon.common.utils.statistics import statistics
from docrecon.processor.models import TextSummary

# pageCount never drops below this for a non-empty block set
MIN_PAGE_COUNT = 1


def join_lines(sorted_lines: Iterable[Block]) -> str:
    """Stripped line texts joined by newlines. Blank lines are dropped entirely."""
    texts = ((line.text or "").strip() for line in sorted_lines)
    return "\n".join(t for t in texts if t)


def count_words(text: str) -> int:
    return len(text.split())


def max_page(blocks: Iterable[Block]) -> int:
    """Highest page number seen on any block, with a floor of 1."""
    return max([MIN_PAGE_COUNT, *(b.page for b in blocks if b.page is not None)])


def average_confidence(blocks: Iterable[Block]) -> float:
    """Mean over blocks that report a confidence; 0 when none do."""
    return statistics(b.confidence for b in blocks if b.confidence is not None).mean


def reconstruct_text(blocks: Sequence[Block], sorted_lines: Sequence[Block]) -> TextSummary:
    text = join_lines(sorted_lines)
    return TextSummary(
        text=text,
        page_count=max_page(blocks),
        word_count=count_words(text),
        average_confidence=average_confidence(blocks),
    )
