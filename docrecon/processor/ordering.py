"""Reading-order sort for LINE blocks.

Lines are sorted batch by batch, then once more over the whole sequence, then
grouped into horizontal bands. A band is a run of lines on the same page whose
consecutive tops are within the same-line tolerance of each other, i.e. the
transitive closure of "close enough to be on the same line". Inside a band,
lines read left to right. A stack of lines spaced closer than the tolerance
therefore chains into one band and reads left to right, not top to bottom.

`sorted` is Timsort, which is iterative, so stack depth does not grow with
the number of lines.
"""

from collections.abc import Iterable, Iterator

from docrecon.blocks.models import Block
from docrecon.common.models import ProcessingOptions

# Lines without a page number read before page 1
MISSING_PAGE = 0

# Absorbs float noise so a gap of exactly the tolerance (0.51 - 0.50) counts as the same line
_FLOAT_SLACK = 1e-9


def page_of(block: Block) -> int:
    return block.page if block.page is not None else MISSING_PAGE


def reading_key(block: Block) -> tuple[int, float, float, str]:
    """Strict total order: page, top, left, then id."""
    box = block.bounding_box
    return (page_of(block), box.top, box.left, block.id)


def _band_key(block: Block) -> tuple[float, float, str]:
    box = block.bounding_box
    return (box.left, box.top, block.id)


def _sort_batches(lines: list[Block], batch_size: int) -> list[Block]:
    ordered: list[Block] = []
    for start in range(0, len(lines), batch_size):
        ordered.extend(sorted(lines[start : start + batch_size], key=reading_key))
    return ordered


def _bands(ordered: list[Block], tolerance: float) -> Iterator[list[Block]]:
    band: list[Block] = []
    last_page, last_top = MISSING_PAGE, 0.0

    for block in ordered:
        page, top = page_of(block), block.bounding_box.top
        if band and page == last_page and top - last_top <= tolerance + _FLOAT_SLACK:
            band.append(block)
        else:
            if band:
                yield band
            band = [block]
        last_page, last_top = page, top

    if band:
        yield band


def order_lines(lines: Iterable[Block], options: ProcessingOptions | None = None) -> list[Block]:
    """Return `lines` in reading order. Nothing is added or dropped."""
    options = options or ProcessingOptions()
    merged = sorted(_sort_batches(list(lines), options.batch_size), key=reading_key)

    result: list[Block] = []
    for band in _bands(merged, options.line_tolerance):
        result.extend(sorted(band, key=_band_key))
    return result
