"""Locate and parse the result table in ``scummvm --detect`` output.

A successful detection prints something like::

    GameID                         Description                    Full Path
    ------------------------------ ------------------------------ -------------------
    scumm:loom                     Loom (VGA/DOS/English)         G:\\games\\Loom\\

possibly preceded by warnings or an "unknown game variant" report. Columns are
padded with runs of spaces, while values themselves only ever contain single
spaces, so a run of two or more whitespace characters separates fields.
"""

from __future__ import annotations

import re

from scummid.detection.types import (
    Candidate,
    EmptyCandidateSetError,
    NoTableFoundError,
    NotFoundError,
)

NOT_FOUND_SENTINEL = "could not find any game"

HEADER_PATTERN = re.compile(r"GameID\s+Description\s+Full Path")
RULE_PATTERN = re.compile(r"-+\s-+\s-+")
ROW_PATTERN = re.compile(
    r"(?P<identifier>.+?)\s{2,}(?P<description>.+)\s{2,}(?P<source_path>.+)"
)


def detect_line_ending(text: str) -> str:
    """Return ``"\\r\\n"`` if the text uses Windows line endings, else ``"\\n"``."""
    return "\r\n" if "\r\n" in text else "\n"


def is_rule_line(line: str) -> bool:
    """True for the dashed separator line under the table header."""
    return RULE_PATTERN.fullmatch(line.strip()) is not None


def split_row(line: str) -> Candidate | None:
    """Split one table row into its three columns.

    Returns None when the line does not have three columns or any column
    is empty once trimmed.
    """
    match = ROW_PATTERN.fullmatch(line.strip())
    if match is None:
        return None

    identifier = match.group("identifier").strip()
    description = match.group("description").strip()
    source_path = match.group("source_path").strip()
    if not identifier or not description or not source_path:
        return None

    return Candidate(
        identifier=identifier,
        description=description,
        source_path=source_path,
    )


def extract_candidates(text: str) -> list[Candidate]:
    """Extract every candidate row from raw detection output.

    Args:
        text: Complete captured stdout of one ``--detect`` run.

    Returns:
        Candidates in the order they appear in the table.

    Raises:
        NotFoundError: The not-found warning is present. This wins over
            any table that may also be in the text.
        NoTableFoundError: The column header or the dash rule is missing.
        EmptyCandidateSetError: The table has no usable rows.
    """
    if NOT_FOUND_SENTINEL in text:
        raise NotFoundError("scummvm could not find any game")

    if HEADER_PATTERN.search(text) is None:
        raise NoTableFoundError(
            "scummvm output has no 'GameID  Description  Full Path' header"
        )

    lines = text.split(detect_line_ending(text))

    rule_index = next(
        (i for i, line in enumerate(lines) if is_rule_line(line)),
        None,
    )
    if rule_index is None:
        raise NoTableFoundError("scummvm output has no table separator line")

    candidates: list[Candidate] = []
    for line in lines[rule_index + 1:]:
        # A second table repeats its header and rule; neither is a game.
        if is_rule_line(line) or HEADER_PATTERN.match(line.strip()):
            continue
        candidate = split_row(line)
        if candidate is not None:
            candidates.append(candidate)

    if not candidates:
        raise EmptyCandidateSetError("scummvm output table has no valid rows")

    return candidates
