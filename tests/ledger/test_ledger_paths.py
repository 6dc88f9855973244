"""Tests for the ledger directory resolver."""

import sys
from pathlib import Path

import pytest

from commit_poker.exceptions import StorageUnavailableError
from commit_poker.ledger import default_data_dir, default_ledger_path


class TestDefaultDataDir:
    def test_xdg_data_home_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg"))
        assert default_data_dir() == tmp_path / "xdg" / "commit-poker"

    @pytest.mark.skipif(sys.platform != "linux", reason="linux default layout")
    def test_linux_fallback(self, isolated_env, monkeypatch):
        monkeypatch.delenv("XDG_DATA_HOME")
        assert default_data_dir() == isolated_env / ".local" / "share" / "commit-poker"

    def test_ledger_file_name(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
        assert default_ledger_path() == tmp_path / "commit-poker" / "highscores.json"

    def test_missing_home_is_unavailable(self, monkeypatch):
        monkeypatch.delenv("XDG_DATA_HOME")

        def no_home():
            raise RuntimeError("Could not determine home directory.")

        monkeypatch.setattr(Path, "home", staticmethod(no_home))
        if sys.platform == "win32":
            monkeypatch.delenv("LOCALAPPDATA", raising=False)
        with pytest.raises(StorageUnavailableError, match="data dir"):
            default_data_dir()
