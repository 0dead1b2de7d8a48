"""Reduce candidate descriptions and paths to comparable stems."""

from __future__ import annotations

import re
from pathlib import PureWindowsPath

import snowballstemmer

from scummid.detection.types import Candidate, NormalizationError, NormalizedCandidate

WORD_CHAR = re.compile(r"\w")


def path_segment(source_path: str) -> str:
    """Return the deepest component of a path as printed by ScummVM.

    Accepts both Windows and POSIX separators and ignores trailing ones, so
    ``G:\\games\\Loom (CD DOS VGA)\\`` gives ``Loom (CD DOS VGA)``.
    """
    return PureWindowsPath(source_path.strip().rstrip("\\/")).name


def stem(text: str, stemmer=None) -> str:
    """Lowercase and stem ``text`` as a single unit.

    Args:
        text: Description or directory name.
        stemmer: Snowball stemmer to reuse. Stemmer instances keep working
            state, so one must not be shared between threads.

    Raises:
        NormalizationError: If there is nothing stemmable in ``text``.
    """
    cleaned = text.strip().lower()
    if not WORD_CHAR.search(cleaned):
        raise NormalizationError(f"nothing to stem in {text!r}")

    if stemmer is None:
        stemmer = snowballstemmer.stemmer("english")
    stemmed = stemmer.stemWord(cleaned)
    if not stemmed:
        raise NormalizationError(f"stemming {text!r} produced an empty string")
    return stemmed


def normalize_candidate(candidate: Candidate, language: str = "english") -> NormalizedCandidate:
    """Stem a candidate's description and the last segment of its path.

    Raises:
        NormalizationError: If either side cannot be stemmed.
    """
    segment = path_segment(candidate.source_path)
    if not segment:
        raise NormalizationError(f"no directory name in {candidate.source_path!r}")

    stemmer = snowballstemmer.stemmer(language)
    return NormalizedCandidate(
        candidate=candidate,
        description_stem=stem(candidate.description, stemmer),
        path_stem=stem(segment, stemmer),
    )
