"""Parsing and disambiguation of ``scummvm --detect`` output.

Pure functions only: text in, match or exception out. Nothing in this package
runs processes, touches the file system, or logs.

Modules:
    table: Locate the result table and split rows into candidates
    normalize: Stem descriptions and directory names
    similarity: Weighted Levenshtein similarity
    disambiguate: Choose one candidate out of several
"""

from .disambiguate import choose_candidate, parse_detect_output, pick_best, score_candidates
from .normalize import normalize_candidate, path_segment, stem
from .similarity import DEFAULT_SIMILARITY, SimilarityConfig, distance, similarity
from .table import extract_candidates, split_row
from .types import (
    Candidate,
    DetectionError,
    EmptyCandidateSetError,
    GameMatch,
    NormalizationError,
    NormalizedCandidate,
    NoTableFoundError,
    NotFoundError,
    ScoredCandidate,
)

__all__ = [
    # Entry points
    "parse_detect_output",
    "choose_candidate",
    "pick_best",
    "score_candidates",
    # Components
    "extract_candidates",
    "split_row",
    "normalize_candidate",
    "path_segment",
    "stem",
    "similarity",
    "distance",
    "SimilarityConfig",
    "DEFAULT_SIMILARITY",
    # Types
    "Candidate",
    "GameMatch",
    "NormalizedCandidate",
    "ScoredCandidate",
    # Failures
    "DetectionError",
    "NotFoundError",
    "NoTableFoundError",
    "EmptyCandidateSetError",
    "NormalizationError",
]
