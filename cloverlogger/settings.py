"""Logger configuration.

Settings come from a small ``KEY=value`` file, ``cloverlogger.conf``, that sits
next to the ``cloverlogger`` package directory. In a source checkout that is
the project root; once the package is pip-installed it is ``site-packages``,
so installed copies should set ``CLOVERLOGGER_CONF`` to read a different file.

Recognized keys:

- ``SEPARATOR``: field delimiter, default ``::``
- ``FILE``: destination log file, default ``/tmp/cloverlog``

A missing, unreadable or malformed file is not an error; the defaults apply.
A malformed file is ignored as a whole, never applied line by line.
"""
from __future__ import annotations

import io
import logging
import os
import re
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from dotenv.parser import parse_stream
from pydantic import BaseModel

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "cloverlogger.conf"
CONFIG_ENV_VAR = "CLOVERLOGGER_CONF"

DEFAULT_SEPARATOR = "::"
DEFAULT_FILE_PATH = "/tmp/cloverlog"

_KEY_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_.\-]*$")


class LogConfig(BaseModel):
    """Resolved logger settings."""

    separator: str = DEFAULT_SEPARATOR
    file_path: str = DEFAULT_FILE_PATH

    @classmethod
    def from_values(cls, values: Mapping[str, Optional[str]]) -> "LogConfig":
        """Build a config from raw file values; absent keys keep their defaults.

        A key written without a value (``FILE`` on its own line) counts as
        absent. An empty value (``SEPARATOR=``) is kept as-is.
        """
        fields = {}
        separator = values.get("SEPARATOR")
        if separator is not None:
            fields["separator"] = separator
        file_path = values.get("FILE")
        if file_path is not None:
            fields["file_path"] = file_path
        return cls(**fields)


DEFAULT_LOG_CONFIG = LogConfig()


def config_path() -> Path:
    """Return the config file location used when no explicit path is given."""
    override = os.getenv(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    # <root>/cloverlogger/settings.py -> <root>/cloverlogger.conf
    return Path(__file__).resolve().parents[1] / CONFIG_FILE_NAME


def parse_config_text(text: str) -> Optional[Dict[str, Optional[str]]]:
    """Parse ``KEY=value`` text; return None if any line is malformed.

    Quoting and comments follow python-dotenv. A line is malformed when the
    dotenv parser rejects it or its key is not a plain name (letters, digits,
    ``_``, ``.`` and ``-``, not starting with a digit).
    """
    values: Dict[str, Optional[str]] = {}
    for binding in parse_stream(io.StringIO(text)):
        bad_key = binding.key is not None and not _KEY_RE.match(binding.key)
        if binding.error or bad_key:
            logger.debug("malformed config line %d: %r", binding.original.line, binding.original.string)
            return None
        if binding.key is not None:
            values[binding.key] = binding.value
    return values


def load_config(path: Optional[Union[str, Path]] = None) -> LogConfig:
    """Read the config file and return a ``LogConfig``.

    Never raises: when the file is missing, cannot be read or cannot be
    parsed the defaults are returned.
    """
    conf = Path(path) if path is not None else config_path()
    if not conf.is_file():
        if conf.exists():
            logger.warning("cloverlogger config %s is not a regular file; using defaults", conf)
        else:
            logger.debug("cloverlogger config %s not found; using defaults", conf)
        return LogConfig()

    try:
        text = conf.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("cloverlogger config %s unreadable (%s); using defaults", conf, exc)
        return LogConfig()

    values = parse_config_text(text)
    if values is None:
        logger.warning("cloverlogger config %s could not be parsed; using defaults", conf)
        return LogConfig()
    return LogConfig.from_values(values)
