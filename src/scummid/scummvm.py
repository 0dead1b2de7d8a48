"""Thin wrapper around the ScummVM executable.

Only two invocations are used:

    scummvm --version                 sanity check that the binary is ScummVM
    scummvm --detect --path=<dir>     identify the game stored in <dir>
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60.0


class ScummVMError(Exception):
    """The ScummVM binary could not be run or reported failure."""

    def __init__(self, message: str, output: str = "") -> None:
        super().__init__(message)
        self.output = output


@dataclass
class ToolOutput:
    """Captured result of one ScummVM invocation."""

    args: list[str]
    stdout: str
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def check(self) -> ToolOutput:
        """Raise ScummVMError if the process exited with a non-zero status."""
        if not self.ok:
            raise ScummVMError(f"exit status {self.returncode}", output=self.stdout)
        return self


def run_scummvm(
    binary: str | Path,
    args: list[str],
    timeout: float = DEFAULT_TIMEOUT,
) -> ToolOutput:
    """Run ScummVM with ``args`` and capture its standard output.

    Raises:
        ScummVMError: If the binary cannot be started or does not finish
            within ``timeout`` seconds.
    """
    cmd = [str(binary), *args]
    logger.debug(f"Running {cmd}")
    try:
        proc = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            stdin=subprocess.DEVNULL,
            text=True,
            errors="replace",
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        raise ScummVMError(f"timed out after {timeout:g}s") from e
    except OSError as e:
        raise ScummVMError(f"cannot run {binary}: {e}") from e

    logger.debug(f"{cmd[1:]} exited with {proc.returncode}")
    return ToolOutput(args=list(args), stdout=proc.stdout or "", returncode=proc.returncode)


def check_version(binary: str | Path, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Verify that ``binary`` is ScummVM and return its version banner.

    Raises:
        ScummVMError: If the binary fails or does not identify as ScummVM.
    """
    output = run_scummvm(binary, ["--version"], timeout=timeout).check()
    if "ScummVM" not in output.stdout:
        raise ScummVMError(f"{binary} does not look like a ScummVM binary", output=output.stdout)
    return output.stdout.strip().splitlines()[0]


def detect(binary: str | Path, path: str | Path, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Run game detection on one directory and return the raw output.

    Raises:
        ScummVMError: If ScummVM cannot be run or exits with an error.
    """
    return run_scummvm(binary, ["--detect", f"--path={path}"], timeout=timeout).check().stdout
