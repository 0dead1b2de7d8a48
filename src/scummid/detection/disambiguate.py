"""Pick a single game out of ScummVM detection output.

ScummVM prints one row when it is sure and several when the data files match
more than one known game. In the ambiguous case each row's description is
compared with the name of the directory the files live in; the closest one
wins.
"""

from __future__ import annotations

from scummid.detection.normalize import normalize_candidate
from scummid.detection.similarity import DEFAULT_SIMILARITY, SimilarityConfig, similarity
from scummid.detection.table import extract_candidates
from scummid.detection.types import (
    Candidate,
    EmptyCandidateSetError,
    GameMatch,
    NormalizationError,
    ScoredCandidate,
)


def score_candidates(
    candidates: list[Candidate],
    config: SimilarityConfig = DEFAULT_SIMILARITY,
) -> list[ScoredCandidate]:
    """Score every candidate's description against its directory name.

    Candidates that cannot be normalized get a score of None.
    """
    scored: list[ScoredCandidate] = []
    for index, candidate in enumerate(candidates):
        try:
            normalized = normalize_candidate(candidate)
        except NormalizationError:
            scored.append(ScoredCandidate(index=index, candidate=candidate, score=None))
            continue
        score = similarity(normalized.description_stem, normalized.path_stem, config)
        scored.append(ScoredCandidate(index=index, candidate=candidate, score=score))
    return scored


def choose_candidate(
    candidates: list[Candidate],
    config: SimilarityConfig = DEFAULT_SIMILARITY,
) -> Candidate:
    """Return the best candidate.

    A single candidate is returned as is. Otherwise the first candidate whose
    score strictly beats everything before it (starting from 0.0) wins, so
    ties go to the earlier row and the first row wins when nothing scores
    above zero.

    Raises:
        EmptyCandidateSetError: If ``candidates`` is empty.
    """
    if not candidates:
        raise EmptyCandidateSetError("no candidates to choose from")
    if len(candidates) == 1:
        return candidates[0]
    return pick_best(score_candidates(candidates, config))


def pick_best(scored: list[ScoredCandidate]) -> Candidate:
    """Return the winner of an already scored candidate list.

    Raises:
        EmptyCandidateSetError: If ``scored`` is empty.
    """
    if not scored:
        raise EmptyCandidateSetError("no candidates to choose from")

    best = scored[0]
    best_score = 0.0
    for entry in scored:
        if entry.score is not None and entry.score > best_score:
            best = entry
            best_score = entry.score
    return best.candidate


def parse_detect_output(
    text: str,
    config: SimilarityConfig = DEFAULT_SIMILARITY,
) -> GameMatch:
    """Turn one run's ``--detect`` output into a single game match.

    Args:
        text: Complete captured stdout of ``scummvm --detect``.
        config: Similarity settings used when several rows compete.

    Returns:
        The identifier and description of the chosen row.

    Raises:
        NotFoundError: ScummVM reported that no game was found.
        NoTableFoundError: The output has no result table.
        EmptyCandidateSetError: The table had no usable rows.
    """
    candidates = extract_candidates(text)
    return GameMatch.from_candidate(choose_candidate(candidates, config))
