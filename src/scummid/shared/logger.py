from __future__ import annotations

import logging
import threading
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Any, TextIO


class RunLogger:
    """Batch-run logger writing to up to three sinks at once.

    - console   : INFO+  (human-readable)
    - info_file : INFO+  (same lines, persisted)
    - trace_file: every line, including per-candidate scoring detail

    Each sink has its own level gate.
    """

    LEVELS: dict[str, int] = {
        "TRACE": -1,
        "INFO": 1,
        "PROG": 1,
        "METRIC": 1,
        "WARN": 2,
        "ERROR": 3,
    }

    def __init__(
        self,
        log_file: str | Path | None = None,
        trace_file: str | Path | None = None,
        console: bool = True,
        min_level: str = "INFO",
    ) -> None:
        self.console = console
        self.min_level = self.LEVELS.get(min_level.upper(), 1)
        self.log_path = Path(log_file) if log_file else None
        self.trace_path = Path(trace_file) if trace_file else None
        self._info_file = self._open_sink(self.log_path, "scummid log")
        self._trace_file = self._open_sink(self.trace_path, "scummid trace")
        self._timers: dict[str, tuple[float, float | None]] = {}
        self._start = time.perf_counter()
        self._lock = threading.Lock()

    @staticmethod
    def _open_sink(path: Path | None, title: str) -> TextIO | None:
        if path is None:
            return None
        path.parent.mkdir(parents=True, exist_ok=True)
        sink = open(path, "w", encoding="utf-8", buffering=1)
        sink.write("=" * 80 + "\n")
        sink.write(f"{title} - {time.strftime('%Y-%m-%d %H:%M:%S')}\n")
        sink.write("=" * 80 + "\n\n")
        return sink

    def _write_files(self, line: str, info: bool = True) -> None:
        if info and self._info_file:
            self._info_file.write(line + "\n")
        if self._trace_file:
            self._trace_file.write(line + "\n")

    def _emit(self, level: str, msg: str) -> None:
        level_int = self.LEVELS.get(level, 1)
        elapsed = time.perf_counter() - self._start
        line = f"[{time.strftime('%H:%M:%S')}] [{elapsed:7.2f}s] {level:6} | {msg}"

        with self._lock:
            if self.console and level_int >= self.min_level:
                print(line, flush=True)
            self._write_files(line, info=level_int >= 1)

    def trace(self, msg: str) -> None:
        self._emit("TRACE", msg)

    def info(self, msg: str) -> None:
        self._emit("INFO", msg)

    def warn(self, msg: str) -> None:
        self._emit("WARN", msg)

    def error(self, msg: str) -> None:
        self._emit("ERROR", msg)

    def section(self, title: str) -> None:
        self._banner(title, "=" * 80)

    def subsection(self, title: str) -> None:
        self._banner(title, "-" * 60)

    def _banner(self, title: str, sep: str) -> None:
        with self._lock:
            for line in ("", sep, f"  {title}", sep):
                if self.console:
                    print(line, flush=True)
                self._write_files(line)

    def progress(self, current: int, total: int, label: str = "", ok: bool | None = None) -> None:
        """Log a progress bar line, optionally marked with a pass/fail glyph."""
        pct = (current / total * 100) if total else 0
        filled = int(20 * current / total) if total else 0
        bar = "█" * filled + "░" * (20 - filled)
        msg = f"[{current:>4}/{total}] {bar} {pct:5.1f}%"
        if ok is not None:
            msg += "  ✅" if ok else "  ❌"
        if label:
            msg += f"  {label}"
        self._emit("PROG", msg)

    def metric(self, name: str, value: Any, unit: str = "") -> None:
        vstr = f"{value:.3f}" if isinstance(value, float) else str(value)
        if unit:
            vstr += f" {unit}"
        self._emit("METRIC", f"{name} = {vstr}")

    @contextmanager
    def timer(self, name: str):
        start = time.perf_counter()
        self._timers[name] = (start, None)
        try:
            yield
        finally:
            end = time.perf_counter()
            self._timers[name] = (start, end)
            self._emit("METRIC", f"timer:{name} = {end - start:.3f}s")

    def summary(self) -> None:
        self.section("RUN SUMMARY")
        self.info(f"Total wall time: {time.perf_counter() - self._start:.2f}s")

        completed = {
            name: end - start for name, (start, end) in self._timers.items() if end is not None
        }
        for name, elapsed in sorted(completed.items(), key=lambda x: -x[1]):
            self.info(f"  {name:<40} {elapsed:>8.3f}s")

        if self.log_path:
            self.info(f"Info log : {self.log_path}")
        if self.trace_path:
            self.info(f"Trace log: {self.trace_path}")

    def install_stdlib_bridge(self, root_logger: str = "", level: int = logging.INFO) -> None:
        """Forward stdlib ``logging`` records under ``root_logger`` to this logger."""
        handler = _BridgeHandler(self)
        handler.setLevel(level)
        root = logging.getLogger(root_logger)
        root.setLevel(min(root.level or logging.DEBUG, level))
        if not any(isinstance(h, _BridgeHandler) for h in root.handlers):
            root.addHandler(handler)

    def remove_stdlib_bridge(self, root_logger: str = "") -> None:
        root = logging.getLogger(root_logger)
        for h in [h for h in root.handlers if isinstance(h, _BridgeHandler)]:
            root.removeHandler(h)

    def close(self) -> None:
        with self._lock:
            for sink in (self._info_file, self._trace_file):
                if sink:
                    sink.close()
            self._info_file = None
            self._trace_file = None

    def __enter__(self) -> RunLogger:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()


class _BridgeHandler(logging.Handler):
    _MAP = {
        logging.DEBUG: "trace",
        logging.INFO: "info",
        logging.WARNING: "warn",
        logging.ERROR: "error",
        logging.CRITICAL: "error",
    }

    def __init__(self, logger: RunLogger) -> None:
        super().__init__()
        self._run_logger = logger

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            getattr(self._run_logger, self._MAP.get(record.levelno, "info"))(
                f"[{record.name}] {msg}"
            )
        except Exception:
            self.handleError(record)
