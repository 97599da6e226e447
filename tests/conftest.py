from __future__ import annotations

import logging
from pathlib import Path

import pytest

from chief.utils.logging_setup import LOGGER_NAME


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each test in an empty directory with no user config or CHIEF_* vars."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    for key in ("CHIEF_TOOL", "CHIEF_DOTENV", "CHIEF_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    return tmp_path


@pytest.fixture(autouse=True)
def reset_chief_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    logging.getLogger("dotenv").setLevel(logging.NOTSET)
