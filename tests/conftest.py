"""Shared pytest fixtures for valobj tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest

from valobj.config.settings import ValobjSettings
from valobj.services.codec import CodecService


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep VALOBJ_* variables from the host out of every test."""
    for name in list(os.environ):
        if name.startswith("VALOBJ_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo any configure_logging call made by a test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    valobj_logger = logging.getLogger("valobj")
    valobj_level = valobj_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    valobj_logger.setLevel(valobj_level)


@pytest.fixture
def settings(tmp_path: Path) -> ValobjSettings:
    """Default settings rooted at an empty temporary directory."""
    return ValobjSettings.load(start=tmp_path)


@pytest.fixture
def codec_service(settings: ValobjSettings) -> CodecService:
    return CodecService(settings)
