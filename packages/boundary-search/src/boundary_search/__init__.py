"""Three-way boundary binary search."""

from .search import BoundarySearchResult, Evaluation, Evaluator, too_low_or_hit, trace_too_low_or_hit
from .sequence import make_sequence_evaluator, too_low_or_hit_sequence

__all__ = [
    "BoundarySearchResult",
    "Evaluation",
    "Evaluator",
    "too_low_or_hit",
    "trace_too_low_or_hit",
    "make_sequence_evaluator",
    "too_low_or_hit_sequence",
]
