"""Call-site lookup for log lines.

The caller is the first stack frame outside cloverlogger's own dispatch code,
found the same way ``logging.Logger.findCaller`` skips its source file. Adding
or removing internal wrappers therefore never shifts the reported location.
"""
from __future__ import annotations

import inspect
import os
from types import FrameType
from typing import Optional

from pydantic import BaseModel

NO_FUNCTION = "-"

_HERE = os.path.dirname(os.path.abspath(__file__))
_INTERNAL_FILES = frozenset(
    os.path.normcase(os.path.join(_HERE, name)) for name in ("caller.py", "facade.py")
)


class CallerInfo(BaseModel):
    file: str
    function: str
    line: int


def _is_internal(frame: FrameType) -> bool:
    return os.path.normcase(os.path.abspath(frame.f_code.co_filename)) in _INTERNAL_FILES


def _function_name(frame: FrameType) -> str:
    # <module>, <lambda>, <listcomp> ... are not named functions
    name = frame.f_code.co_name
    return NO_FUNCTION if name.startswith("<") else name


def resolve_caller(stacklevel: int = 1) -> CallerInfo:
    """Return file, enclosing function and line of the code that called the logger.

    ``stacklevel`` works like the ``logging`` argument of the same name: 1 is
    the direct caller, 2 is its caller, and so on. Use it when wrapping
    ``log`` in a helper of your own.
    """
    frame: Optional[FrameType] = inspect.currentframe()
    try:
        while frame is not None and _is_internal(frame):
            frame = frame.f_back
        for _ in range(stacklevel - 1):
            if frame is None or frame.f_back is None:
                break
            frame = frame.f_back
        if frame is None:
            return CallerInfo(file=NO_FUNCTION, function=NO_FUNCTION, line=0)
        return CallerInfo(
            file=frame.f_code.co_filename,
            function=_function_name(frame),
            line=frame.f_lineno,
        )
    finally:
        del frame
