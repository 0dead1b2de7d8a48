"""Run detection over every game directory under a data root."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from scummid.detection import (
    DEFAULT_SIMILARITY,
    DetectionError,
    GameMatch,
    SimilarityConfig,
    extract_candidates,
    pick_best,
    score_candidates,
)
from scummid.scummvm import DEFAULT_TIMEOUT, ScummVMError, detect

logger = logging.getLogger(__name__)


@dataclass
class DirectoryResult:
    """Outcome for one game directory: a match or an error message."""

    directory: Path
    match: GameMatch | None = None
    error: str | None = None
    candidate_count: int = 0

    @property
    def ok(self) -> bool:
        return self.match is not None


@dataclass
class ScanReport:
    """Results for a whole data root, in directory order."""

    matches: list[DirectoryResult] = field(default_factory=list)
    errors: list[DirectoryResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.matches) + len(self.errors)

    @property
    def ambiguous(self) -> int:
        return sum(1 for r in self.matches if r.candidate_count > 1)


def list_game_directories(root: Path) -> list[Path]:
    """Immediate subdirectories of ``root``, sorted by name."""
    return sorted((p for p in root.iterdir() if p.is_dir()), key=lambda p: p.name)


def identify_directory(
    binary: str | Path,
    directory: Path,
    timeout: float = DEFAULT_TIMEOUT,
    config: SimilarityConfig = DEFAULT_SIMILARITY,
) -> DirectoryResult:
    """Detect and disambiguate the game in ``directory``.

    Per-directory failures are captured in the result, never raised.
    """
    try:
        output = detect(binary, directory, timeout=timeout)
        candidates = extract_candidates(output)
    except (ScummVMError, DetectionError) as e:
        logger.debug(f"{directory.name}: {type(e).__name__}: {e}")
        return DirectoryResult(directory=directory, error=str(e))

    if len(candidates) == 1:
        winner = candidates[0]
    else:
        scored = score_candidates(candidates, config)
        for entry in scored:
            score = "skipped" if entry.skipped else f"{entry.score:.3f}"
            logger.debug(
                f"{directory.name}: candidate {entry.candidate.identifier!r} "
                f"({entry.candidate.description}) score={score}"
            )
        winner = pick_best(scored)

    return DirectoryResult(
        directory=directory,
        match=GameMatch.from_candidate(winner),
        candidate_count=len(candidates),
    )


def scan(
    binary: str | Path,
    directories: list[Path],
    workers: int = 1,
    timeout: float = DEFAULT_TIMEOUT,
    config: SimilarityConfig = DEFAULT_SIMILARITY,
    on_result: Callable[[int, DirectoryResult], None] | None = None,
) -> ScanReport:
    """Identify every directory and split the outcomes into matches and errors.

    Args:
        binary: ScummVM executable.
        directories: Game directories to identify.
        workers: Number of detection runs in flight at once.
        timeout: Per-run timeout in seconds.
        config: Similarity settings for ambiguous output.
        on_result: Called as ``on_result(index, result)`` when each
            directory finishes; ``index`` counts from 1 in directory order.

    Returns:
        ScanReport whose lists follow the order of ``directories``.
    """
    def _identify(directory: Path) -> DirectoryResult:
        return identify_directory(binary, directory, timeout=timeout, config=config)

    results: list[DirectoryResult] = []
    if workers <= 1:
        for i, directory in enumerate(directories, 1):
            result = _identify(directory)
            results.append(result)
            if on_result:
                on_result(i, result)
    else:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            for i, result in enumerate(executor.map(_identify, directories), 1):
                results.append(result)
                if on_result:
                    on_result(i, result)

    report = ScanReport()
    for result in results:
        (report.matches if result.ok else report.errors).append(result)
    return report
