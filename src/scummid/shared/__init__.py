"""Shared utilities for the scummid command line tools."""

from scummid.shared.logger import RunLogger

__all__ = ["RunLogger"]
