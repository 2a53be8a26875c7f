"""File logger that stamps every line with time, tag and call site.

Each call appends one line to the configured file::

    2025-01-15-09:30:00::warn::/app/src/worker.py::process_job::42::job failed::retry=3

The tag is free-form. Besides ``log(tag, ...)`` any public attribute of a
``Logger`` acts as a tag, so ``logger.warn("job failed")`` logs with tag
``warn``. The method names ``log``, ``log_kv`` and ``format_line`` are
reserved; log those tags through ``log`` itself.
"""
from __future__ import annotations

import functools
from datetime import datetime
from typing import Any, Callable, Iterable, Optional

from .caller import CallerInfo, resolve_caller
from .settings import LogConfig, load_config
from .writer import append_line

TIMESTAMP_FORMAT = "%Y-%m-%d-%H:%M:%S"


class Logger:
    """Append formatted lines to a file.

    Pass ``config`` to pin the settings; without it the config file is read
    again on every call, so edits take effect without a restart.
    """

    def __init__(self, config: Optional[LogConfig] = None) -> None:
        self._config = config

    def _resolve_config(self) -> LogConfig:
        return self._config if self._config is not None else load_config()

    def log(self, tag: str, *args: Any, stacklevel: int = 1) -> None:
        """Append one line tagged ``tag`` holding ``args``.

        Raises ValueError for an empty tag and WriteError when the file
        cannot be written.
        """
        if not tag:
            raise ValueError("log tag must be a non-empty string")
        config = self._resolve_config()
        caller = resolve_caller(stacklevel)
        line = self.format_line(tag, args, caller, separator=config.separator)
        append_line(line, config.file_path)

    def log_kv(self, tag: str, *args: Any, stacklevel: int = 1, **fields: Any) -> None:
        """Like ``log`` with ``key=value`` segments appended after ``args``."""
        parts = [*args, *(f"{k}={v}" for k, v in fields.items())]
        self.log(tag, *parts, stacklevel=stacklevel)

    def format_line(
        self,
        tag: str,
        args: Iterable[Any],
        caller: CallerInfo,
        separator: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> str:
        sep = separator if separator is not None else self._resolve_config().separator
        stamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
        joined = sep.join(str(a) for a in args)
        fields = [stamp, tag, caller.file, caller.function, str(caller.line), joined]
        return sep.join(fields) + "\n"

    def __getattr__(self, name: str) -> Callable[..., None]:
        if name.startswith("_"):
            raise AttributeError(name)
        return functools.partial(self.log, name)


logger = Logger()


def log(tag: str, *args: Any, stacklevel: int = 1) -> None:
    """Log through the process-wide default ``Logger``."""
    logger.log(tag, *args, stacklevel=stacklevel)
