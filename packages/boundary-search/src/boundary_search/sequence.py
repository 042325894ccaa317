from __future__ import annotations

from typing import Any, Callable, Sequence

from .search import Evaluation, Evaluator, too_low_or_hit


def make_sequence_evaluator(
    values: Sequence[Any],
    target: Any,
    *,
    key: Callable[[Any], Any] | None = None,
) -> Evaluator:
    """Build an evaluator comparing `values[index]` (through `key`) with `target`."""

    def _evaluate(index: int) -> Evaluation:
        v = values[index] if key is None else key(values[index])
        if v > target:
            return Evaluation.TOO_HIGH
        if v < target:
            return Evaluation.TOO_LOW
        return Evaluation.HIT

    return _evaluate


# Lowest index equal to target, else highest index below it, else miss_index.
# values must already be sorted ascending (after key).
def too_low_or_hit_sequence(
    values: Sequence[Any],
    target: Any,
    *,
    miss_index: int = -1,
    key: Callable[[Any], Any] | None = None,
) -> int:
    return too_low_or_hit(0, len(values), int(miss_index), make_sequence_evaluator(values, target, key=key))
