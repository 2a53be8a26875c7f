"""Exceptions raised by cloverlogger."""
from __future__ import annotations

from pathlib import Path
from typing import Union


class CloverloggerError(Exception):
    """Base class for cloverlogger errors."""


class WriteError(CloverloggerError):
    """The destination log file could not be opened or written."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = str(path)
        super().__init__(f"cloverlogger could not write to file '{self.path}'")
