"""Append-only writes to the destination log file."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from .errors import WriteError

logger = logging.getLogger(__name__)


def append_line(line: str, path: Union[str, Path]) -> None:
    """Append ``line`` to ``path`` with a single write, then close the file.

    The file is created when absent, its parent directory is not. Text that
    UTF-8 cannot encode (lone surrogates from undecodable file names or argv)
    is written as backslash escapes. Lines from separate processes writing
    the same file may interleave since no lock is taken.

    Raises WriteError when the file cannot be opened or written.
    """
    try:
        with open(path, "a", encoding="utf-8", errors="backslashreplace") as fh:
            fh.write(line)
    except OSError as exc:
        logger.debug("append to %s failed: %s", path, exc)
        raise WriteError(path) from exc
