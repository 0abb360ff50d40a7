"""Shared pytest fixtures for dirjson tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from dirjson.config.settings import DirJsonSettings
from dirjson.services.coding import FileCoordinator


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ``DIRJSON_*`` variables from the host out of every test."""
    for key in list(os.environ):
        if key.startswith("DIRJSON_"):
            monkeypatch.delenv(key)


@pytest.fixture
def sandbox(tmp_path: Path) -> Path:
    """Root under which every directory category resolves."""
    return tmp_path / "sandbox"


@pytest.fixture
def settings(sandbox: Path) -> DirJsonSettings:
    return DirJsonSettings(root=sandbox)


@pytest.fixture
def coordinator(settings: DirJsonSettings) -> FileCoordinator:
    return FileCoordinator(settings)
