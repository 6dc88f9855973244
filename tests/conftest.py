"""Shared test fixtures for Commit Poker."""

import shutil
import subprocess

import pytest

from commit_poker.git import CommitInfo
from commit_poker.ledger import HighScoreLedger, ScoreRecord


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep tests away from the real home directory and COMMIT_POKER_* vars."""
    import os

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_DATA_HOME", str(home / ".local" / "share"))
    for key in list(os.environ):
        if key.startswith("COMMIT_POKER_"):
            monkeypatch.delenv(key)
    return home


@pytest.fixture
def ledger_path(tmp_path):
    return tmp_path / "data" / "highscores.json"


@pytest.fixture
def ledger(ledger_path):
    return HighScoreLedger.open(ledger_path)


@pytest.fixture
def repo_dirs(tmp_path):
    """Two existing directories standing in for repositories."""
    first = tmp_path / "repo-one"
    second = tmp_path / "repo-two"
    first.mkdir()
    second.mkdir()
    return first, second


def make_record(repo, commit="abc1234", score=100, date=1700000000, rules=("Flush",)):
    return ScoreRecord(repo=str(repo), commit=commit, score=score, date=date, rules=tuple(rules))


def make_commit(repo, short_hash="abcdef", date=1700000000):
    return CommitInfo(
        repo=str(repo),
        short_hash=short_hash,
        full_hash=short_hash.ljust(40, "0"),
        date=date,
        summary="test commit",
    )


@pytest.fixture
def git_repo(tmp_path, monkeypatch):
    """An initialised git repository with identity configured."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test Player")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "player@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test Player")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "player@example.com")

    repo = tmp_path / "repo"
    repo.mkdir()
    subprocess.run(["git", "init", "-q"], cwd=repo, check=True)
    subprocess.run(["git", "config", "commit.gpgsign", "false"], cwd=repo, check=True)
    return repo
