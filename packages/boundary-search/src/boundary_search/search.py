from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable


class Evaluation(IntEnum):
    """Where an index sits relative to the target."""

    TOO_LOW = 0  # if there's a hit, it's at a higher index
    TOO_HIGH = 1  # if there's a hit, it's at a lower index
    HIT = 2


Evaluator = Callable[[int], Evaluation]


@dataclass(slots=True)
class BoundarySearchResult:
    index: int
    probes: list[int] = field(default_factory=list)
    outcome: Evaluation | None = None


# Binary search over [first, first + size) driven by a three-way evaluator.
#
# Returns the lowest index evaluated HIT if there is one, otherwise the highest
# index evaluated TOO_LOW, otherwise miss_index. The evaluations are expected
# to form a TOO_LOW prefix, a HIT block and a TOO_HIGH suffix (any of them may
# be empty). The evaluator is never called when size <= 0 and never called
# with an index outside the range, whatever it returns.
def too_low_or_hit(first: int, size: int, miss_index: int, evaluator: Evaluator) -> int:
    if size <= 1:
        if size <= 0 or evaluator(first) == Evaluation.TOO_HIGH:
            return miss_index
        return first

    beyond = first + size
    a, b = first, beyond
    while True:
        i = (a + b) // 2
        ev = evaluator(i)
        if ev == Evaluation.TOO_LOW:
            if b - i <= 1:
                if b < beyond and evaluator(b) == Evaluation.HIT:
                    return b
                return i
            a = i
        elif ev == Evaluation.TOO_HIGH:
            if i - a <= 1:
                if a <= first and evaluator(first) == Evaluation.TOO_HIGH:
                    return miss_index
                return a
            b = i
        else:
            if i - a <= 1:
                if a >= i or evaluator(a) == Evaluation.HIT:
                    return a
                return i
            b = i


def trace_too_low_or_hit(first: int, size: int, miss_index: int, evaluator: Evaluator) -> BoundarySearchResult:
    """Run `too_low_or_hit` and record every index handed to the evaluator.

    `outcome` is the last evaluation seen for the returned index, or None when
    the search fell back to `miss_index`.
    """
    probes: list[int] = []
    seen: dict[int, Evaluation] = {}

    def _recording(index: int) -> Evaluation:
        ev = Evaluation(evaluator(index))
        probes.append(index)
        seen[index] = ev
        return ev

    index = too_low_or_hit(first, size, miss_index, _recording)
    # miss_index may collide with a probed index when every probe was TOO_HIGH
    if index not in seen or seen[index] == Evaluation.TOO_HIGH:
        return BoundarySearchResult(index=index, probes=probes, outcome=None)
    return BoundarySearchResult(index=index, probes=probes, outcome=seen[index])
