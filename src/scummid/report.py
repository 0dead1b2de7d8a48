"""Report and marker file output for a scan.

``success.json`` and ``error.json`` hold one record per directory::

    {"GameID": "scumm:loom", "Description": "Loom (VGA/DOS/English)", "Directory": "..."}

Failed directories get ``GameID`` ``"unknown"`` and the failure message as
their description. Each identified directory also gets a sibling marker file,
``<directory>.scummvm``, containing just its GameID.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TypedDict

from scummid.scan import DirectoryResult, ScanReport

logger = logging.getLogger(__name__)

UNKNOWN_GAME_ID = "unknown"
SUCCESS_REPORT = "success.json"
ERROR_REPORT = "error.json"
DEFAULT_MARKER_SUFFIX = ".scummvm"


class GameRecord(TypedDict):
    """One entry of success.json or error.json."""
    GameID: str
    Description: str
    Directory: str


def to_record(result: DirectoryResult) -> GameRecord:
    if result.match is not None:
        return {
            "GameID": result.match.identifier,
            "Description": result.match.description,
            "Directory": str(result.directory),
        }
    return {
        "GameID": UNKNOWN_GAME_ID,
        "Description": result.error or "",
        "Directory": str(result.directory),
    }


def write_reports(report: ScanReport, output_dir: Path) -> tuple[Path, Path]:
    """Write success.json and error.json into ``output_dir``.

    Returns:
        Paths of the success and error reports.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    success_path = output_dir / SUCCESS_REPORT
    error_path = output_dir / ERROR_REPORT

    success_path.write_text(
        json.dumps([to_record(r) for r in report.matches], indent=4, ensure_ascii=False),
        encoding="utf-8",
    )
    error_path.write_text(
        json.dumps([to_record(r) for r in report.errors], indent=4, ensure_ascii=False),
        encoding="utf-8",
    )
    logger.info(f"Wrote {len(report.matches)} matches to {success_path}")
    logger.info(f"Wrote {len(report.errors)} errors to {error_path}")
    return success_path, error_path


def marker_path(directory: Path, suffix: str = DEFAULT_MARKER_SUFFIX) -> Path:
    """``/games/Loom`` -> ``/games/Loom.scummvm``"""
    return directory.with_name(directory.name + suffix)


def write_markers(report: ScanReport, suffix: str = DEFAULT_MARKER_SUFFIX) -> list[Path]:
    """Write a marker file holding the GameID next to each identified directory."""
    written: list[Path] = []
    for result in report.matches:
        path = marker_path(result.directory, suffix)
        path.write_text(result.match.identifier, encoding="utf-8")
        logger.debug(f"Wrote {path}")
        written.append(path)
    return written
