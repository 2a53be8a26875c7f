"""cloverlogger: append tagged, caller-stamped lines to a file.

    from cloverlogger import log, logger

    log("info", "user logged in", 42)
    logger.warn("job failed", "retry=3")
"""
from .caller import CallerInfo, resolve_caller  # noqa: F401
from .errors import CloverloggerError, WriteError  # noqa: F401
from .facade import Logger, log, logger  # noqa: F401
from .settings import LogConfig, config_path, load_config  # noqa: F401
from .writer import append_line  # noqa: F401

__version__ = "0.1.0"
