"""Identify every ScummVM game directory under a data root.

Usage:
    scummid /usr/bin/scummvm /data/scummvm --workers 4 --output reports/

For each immediate subdirectory of the data root, runs
``scummvm --detect --path=<dir>``, picks one GameID from the output, and
writes ``<dir>.scummvm`` containing that GameID. ``success.json`` and
``error.json`` summarising the run are written to the output directory.

Environment Variables (overridden by the matching flags):
    SCUMMID_OUTPUT_DIR: Directory for success.json / error.json (default: .)
    SCUMMID_WORKERS: Parallel detection runs (default: 1)
    SCUMMID_TIMEOUT: Seconds allowed per ScummVM run (default: 60)
    SCUMMID_MARKER_SUFFIX: Marker file suffix (default: .scummvm)
    SCUMMID_DRY_RUN: Skip writing marker files (default: false)
    SCUMMID_LOG_FILE: INFO+ log file (default: none)
    SCUMMID_TRACE_FILE: Full trace log file, including candidate scores (default: none)
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any

from scummid.report import DEFAULT_MARKER_SUFFIX, write_markers, write_reports
from scummid.scan import DirectoryResult, list_game_directories, scan
from scummid.scummvm import DEFAULT_TIMEOUT, ScummVMError, check_version
from scummid.shared.logger import RunLogger


def parse_bool(value: str) -> bool:
    """Parse boolean from environment variable."""
    return value.lower() in ("true", "1", "yes", "on")


def _optional_path(value: str | None) -> Path | None:
    return Path(value) if value else None


def parse_env() -> dict[str, Any]:
    """Parse environment variables with defaults."""
    return {
        "output_dir": Path(os.getenv("SCUMMID_OUTPUT_DIR", ".")),
        "workers": int(os.getenv("SCUMMID_WORKERS", "1")),
        "timeout": float(os.getenv("SCUMMID_TIMEOUT", str(DEFAULT_TIMEOUT))),
        "marker_suffix": os.getenv("SCUMMID_MARKER_SUFFIX", DEFAULT_MARKER_SUFFIX),
        "dry_run": parse_bool(os.getenv("SCUMMID_DRY_RUN", "false")),
        "log_file": _optional_path(os.getenv("SCUMMID_LOG_FILE")),
        "trace_file": _optional_path(os.getenv("SCUMMID_TRACE_FILE")),
    }


def build_parser(env: dict[str, Any]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scummid",
        description="Write .scummvm GameID marker files for a directory of ScummVM games.",
    )
    parser.add_argument("binary", type=Path, help="ScummVM executable")
    parser.add_argument("data_dir", type=Path, help="Directory holding one subdirectory per game")
    parser.add_argument("--output", type=Path, default=env["output_dir"],
                        help="Where to write success.json and error.json")
    parser.add_argument("--workers", type=int, default=env["workers"],
                        help="Number of ScummVM detection runs in parallel")
    parser.add_argument("--timeout", type=float, default=env["timeout"],
                        help="Seconds allowed per ScummVM run")
    parser.add_argument("--marker-suffix", default=env["marker_suffix"],
                        help="Suffix appended to each game directory for its marker file")
    parser.add_argument("--dry-run", action="store_true", default=env["dry_run"],
                        help="Write the JSON reports but no marker files")
    parser.add_argument("--log-file", type=Path, default=env["log_file"],
                        help="INFO+ log file (readable summary)")
    parser.add_argument("--trace-file", type=Path, default=env["trace_file"],
                        help="TRACE+ log file (full detail, every line)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser(parse_env()).parse_args(argv)

    if not args.binary.is_file():
        print(f"Error: ScummVM binary is not a file: {args.binary}", file=sys.stderr)
        return 1
    if not args.data_dir.is_dir():
        print(f"Error: Data directory does not exist: {args.data_dir}", file=sys.stderr)
        return 1

    log = RunLogger(
        log_file=args.log_file,
        trace_file=args.trace_file,
        console=True,
        min_level="INFO",
    )
    log.install_stdlib_bridge(root_logger="scummid", level=logging.DEBUG)

    try:
        return _run(args, log)
    finally:
        log.remove_stdlib_bridge(root_logger="scummid")
        log.close()


def _run(args: argparse.Namespace, log: RunLogger) -> int:
    log.section("ScummVM Game Identification")
    log.info(f"Binary:     {args.binary}")
    log.info(f"Data dir:   {args.data_dir}")
    log.info(f"Output:     {args.output}")
    log.info(f"Workers:    {max(1, args.workers)}")
    if args.dry_run:
        log.info("Dry run:    marker files will not be written")

    try:
        version = check_version(args.binary, timeout=args.timeout)
    except ScummVMError as e:
        log.error(f"ScummVM sanity check failed: {e}")
        if e.output:
            log.error(e.output.strip())
        return 1
    log.info(f"Version:    {version}")

    try:
        directories = list_game_directories(args.data_dir)
    except OSError as e:
        log.error(f"Cannot list {args.data_dir}: {e}")
        return 1

    if not directories:
        log.warn(f"No game directories found in {args.data_dir}")
    log.metric("directories_found", len(directories))

    def _on_result(index: int, result: DirectoryResult) -> None:
        log.progress(index, len(directories), str(result.directory), ok=result.ok)
        if result.ok:
            log.trace(f"  -> {result.match.identifier} ({result.match.description})")
        else:
            log.trace(f"  -> {result.error}")

    log.section(f"Detecting {len(directories)} directories")
    with log.timer("detection"):
        report = scan(
            args.binary,
            directories,
            workers=max(1, args.workers),
            timeout=args.timeout,
            on_result=_on_result,
        )

    try:
        write_reports(report, args.output)
    except OSError as e:
        log.error(f"Cannot write reports to {args.output}: {e}")
        return 1

    if not args.dry_run:
        log.info("Writing entries out to marker files...")
        try:
            write_markers(report, args.marker_suffix)
        except OSError as e:
            log.error(f"Cannot write marker files: {e}")
            return 1

    log.section("Detection Summary")
    log.metric("directories_identified", len(report.matches))
    log.metric("directories_ambiguous", report.ambiguous)
    log.metric("directories_failed", len(report.errors))

    if report.errors:
        log.subsection("Errors")
        for result in report.errors:
            log.warn(f"  {result.directory.name}: {result.error}")

    log.summary()
    return 0


if __name__ == "__main__":
    sys.exit(main())
