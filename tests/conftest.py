"""Pytest conftest for cloverlogger tests.

Responsibilities:
- Put the project root on sys.path so `import cloverlogger` works from a checkout.
- Point config lookup at a per-test temporary file so a developer's own
  `cloverlogger.conf` never leaks into test results.
- Print a short banner before each test so output is self-descriptive.
"""
from __future__ import annotations

import inspect
import sys
from datetime import datetime
from pathlib import Path
from typing import Dict

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cloverlogger.settings import CONFIG_ENV_VAR  # noqa: E402


@pytest.fixture(autouse=True)
def conf_file(tmp_path, monkeypatch) -> Path:
    """Path of the config file the logger reads; it does not exist until written."""
    path = tmp_path / "cloverlogger.conf"
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    return path


@pytest.fixture
def log_file(tmp_path) -> Path:
    return tmp_path / "logs" / "clover.log"


@pytest.fixture
def configured(conf_file, log_file) -> Path:
    """Write a config file sending lines to `log_file` and return that path."""
    log_file.parent.mkdir(parents=True, exist_ok=True)
    conf_file.write_text(f"FILE={log_file}\n", encoding="utf-8")
    return log_file


# Simple collection index so we can show "N of M" in the pre-test banner
_ITEM_INDEX: Dict[str, int] = {}
_TOTAL_ITEMS: int = 0


def _color(text: str, code: str) -> str:
    return f"\x1b[{code}m{text}\x1b[0m"


def pytest_collection_modifyitems(session, config, items):
    """Populate a mapping of nodeid -> sequential index for prettier banners."""
    global _TOTAL_ITEMS
    _TOTAL_ITEMS = len(items)
    for idx, item in enumerate(items, start=1):
        _ITEM_INDEX[item.nodeid] = idx


def pytest_runtest_setup(item):
    """Print `RUN [n/M] test_name  timestamp` and the first docstring line."""
    idx = _ITEM_INDEX.get(item.nodeid, "?")
    total = _TOTAL_ITEMS or "?"
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"{_color('RUN', '36')} [{idx}/{total}] {item.name}  {ts}", flush=True)

    func = getattr(item, "obj", None)
    doc = inspect.getdoc(func) if func is not None else None
    if doc:
        print(f"{_color('What it does:', '33')} {doc.splitlines()[0].strip()}", flush=True)


def pytest_runtest_logreport(report):
    """Print a colored PASS/FAIL line after the call phase."""
    if report.when != "call":
        return
    outcome = report.outcome.upper()
    col = {"PASSED": "32", "FAILED": "31"}.get(outcome, "33")
    print(f"{_color(outcome, col)} ({report.duration:.2f}s)", flush=True)
    print(flush=True)
