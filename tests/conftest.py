"""Shared fixtures."""

from pathlib import Path

import pytest

from deformat import config as config_module


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    """Point every default config location into tmp_path."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    monkeypatch.chdir(work)
    monkeypatch.delenv(config_module.ENV_VAR, raising=False)
    return home, work
