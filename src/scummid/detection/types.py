"""Value types and failure taxonomy for parsing ScummVM detection output.

Everything here is transient: a candidate list is built fresh for one block of
``--detect`` output, consumed by a single disambiguation pass, and dropped.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Candidate:
    """One row of the ``GameID / Description / Full Path`` table.

    Attributes:
        identifier: Engine-qualified game id, e.g. ``scumm:loom``.
        description: Human label, often with ``(platform/language)`` qualifiers.
        source_path: Path column exactly as printed, trailing separator included.
    """
    identifier: str
    description: str
    source_path: str


@dataclass(frozen=True)
class GameMatch:
    """Winning identification for one detection run."""
    identifier: str
    description: str

    @classmethod
    def from_candidate(cls, candidate: Candidate) -> GameMatch:
        return cls(identifier=candidate.identifier, description=candidate.description)


@dataclass(frozen=True)
class NormalizedCandidate:
    """Stemmed forms of a candidate's description and final path segment."""
    candidate: Candidate
    description_stem: str
    path_stem: str


@dataclass(frozen=True)
class ScoredCandidate:
    """A candidate with its similarity score.

    ``score`` is None when the candidate could not be normalized and was
    left out of the comparison.
    """
    index: int
    candidate: Candidate
    score: float | None

    @property
    def skipped(self) -> bool:
        return self.score is None


class DetectionError(Exception):
    """Base class for every parse failure of detection output."""


class NotFoundError(DetectionError):
    """ScummVM explicitly reported that no game was found."""


class NoTableFoundError(DetectionError):
    """The output has no result table (header or dash rule missing)."""


class EmptyCandidateSetError(DetectionError):
    """A result table was present but yielded no valid rows."""


class NormalizationError(DetectionError):
    """A description or path segment could not be reduced to a stem."""
