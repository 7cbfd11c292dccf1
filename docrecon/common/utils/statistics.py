"""Order-independent summary statistics."""

import math
from collections.abc import Iterable

from pydantic import BaseModel


class Statistics(BaseModel):
    mean: float
    count: int


EMPTY = Statistics(mean=0.0, count=0)


def statistics(values: Iterable[float]) -> Statistics:
    """Summarize `values`. An empty input yields zeros.

    The mean uses `math.fsum`, which is exactly rounded, so the same values in
    any order give the same float.
    """
    collected = list(values)
    if not collected:
        return EMPTY

    return Statistics(mean=math.fsum(collected) / len(collected), count=len(collected))
