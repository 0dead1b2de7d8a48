"""Bounded string similarity built on a weighted Levenshtein distance."""

from __future__ import annotations

from dataclasses import dataclass

from rapidfuzz.distance import Levenshtein


@dataclass(frozen=True)
class SimilarityConfig:
    """Edit costs and case handling for :func:`similarity`.

    A substitution costs as much as a deletion plus an insertion, so a
    changed character counts as further apart than a missing one.
    """
    case_sensitive: bool = False
    insert_cost: int = 1
    delete_cost: int = 1
    substitute_cost: int = 2

    @property
    def weights(self) -> tuple[int, int, int]:
        return (self.insert_cost, self.delete_cost, self.substitute_cost)


DEFAULT_SIMILARITY = SimilarityConfig()


def distance(a: str, b: str, config: SimilarityConfig = DEFAULT_SIMILARITY) -> int:
    """Weighted edit distance between ``a`` and ``b``."""
    if not config.case_sensitive:
        a, b = a.lower(), b.lower()
    return Levenshtein.distance(a, b, weights=config.weights)


def similarity(a: str, b: str, config: SimilarityConfig = DEFAULT_SIMILARITY) -> float:
    """Similarity in [0.0, 1.0], 1.0 meaning identical.

    Computed as ``1 - distance / max(len(a), len(b))`` and clamped, since
    weighted substitutions can push the distance past the longer length.
    """
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    score = 1.0 - distance(a, b, config) / max_len
    return min(1.0, max(0.0, score))
