"""Tests for the highscores and score utility commands."""

import json
import re

from typer.testing import CliRunner

from commit_poker import __version__
from commit_poker.cli import app
from commit_poker.cli._common import format_score, format_timestamp
from commit_poker.ledger import HighScoreLedger
from conftest import make_record

runner = CliRunner()


def _seed(ledger_path, repo_dirs):
    ledger = HighScoreLedger.open(ledger_path)
    ledger.append(make_record(repo_dirs[0], commit="aaaaaaa", score=300, rules=("2 of a kind",)))
    ledger.append(make_record(repo_dirs[1], commit="bbbbbbb", score=900, rules=("Flush",)))
    ledger.append(make_record(repo_dirs[0], commit="ccccccc", score=600, rules=("6 pairs!", "Flush")))
    return ledger


class TestHighscores:
    def test_lists_all_sorted(self, ledger_path, repo_dirs, monkeypatch):
        monkeypatch.setenv("COMMIT_POKER_LEDGER_PATH", str(ledger_path))
        _seed(ledger_path, repo_dirs)

        result = runner.invoke(app, ["highscores"])

        assert result.exit_code == 0, result.output
        lines = [line for line in result.output.splitlines() if line.strip()]
        assert lines[0].startswith("bbbbbbb: 900 points (Flush) scored on ")
        assert lines[1].startswith("ccccccc: 600 points (6 pairs!, Flush) scored on ")
        assert lines[2].startswith("aaaaaaa: 300 points (2 of a kind) scored on ")

    def test_limit_and_repo_filter(self, ledger_path, repo_dirs, monkeypatch):
        monkeypatch.setenv("COMMIT_POKER_LEDGER_PATH", str(ledger_path))
        _seed(ledger_path, repo_dirs)

        result = runner.invoke(app, ["highscores", "-n", "1", "--repo", str(repo_dirs[0])])

        assert result.exit_code == 0, result.output
        assert "ccccccc" in result.output
        assert "aaaaaaa" not in result.output
        assert "bbbbbbb" not in result.output

    def test_default_limit_from_config(self, ledger_path, repo_dirs, monkeypatch):
        monkeypatch.setenv("COMMIT_POKER_LEDGER_PATH", str(ledger_path))
        monkeypatch.setenv("COMMIT_POKER_HIGHSCORE_LIMIT", "2")
        _seed(ledger_path, repo_dirs)

        result = runner.invoke(app, ["highscores", "--json"])

        data = json.loads(result.stdout)
        assert [r["commit"] for r in data] == ["bbbbbbb", "ccccccc"]
        assert set(data[0]) == {"repo", "commit", "score", "date", "rules"}

    def test_empty_ledger(self, ledger_path, monkeypatch):
        monkeypatch.setenv("COMMIT_POKER_LEDGER_PATH", str(ledger_path))
        result = runner.invoke(app, ["highscores"])

        assert result.exit_code == 0
        assert "No scores recorded yet." in result.output

    def test_config_file_option(self, ledger_path, repo_dirs, tmp_path):
        _seed(ledger_path, repo_dirs)
        config = tmp_path / "poker.toml"
        config.write_text(f'ledger_path = "{ledger_path}"\nhighscore_limit = 1\n')

        result = runner.invoke(app, ["--config", str(config), "highscores"])

        assert result.exit_code == 0, result.output
        assert "bbbbbbb" in result.output
        assert "ccccccc" not in result.output

    def test_corrupt_ledger_reports_error(self, ledger_path, monkeypatch):
        monkeypatch.setenv("COMMIT_POKER_LEDGER_PATH", str(ledger_path))
        ledger_path.parent.mkdir(parents=True)
        ledger_path.write_text("{broken")

        result = runner.invoke(app, ["highscores"])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_missing_repo_reports_error(self, ledger_path, tmp_path, monkeypatch):
        monkeypatch.setenv("COMMIT_POKER_LEDGER_PATH", str(ledger_path))
        result = runner.invoke(app, ["highscores", "--repo", str(tmp_path / "nowhere")])

        assert result.exit_code == 1
        assert "Error:" in result.output


class TestScore:
    def test_scores_a_hash(self):
        result = runner.invoke(app, ["score", "abcdef"])

        assert result.exit_code == 0, result.output
        assert "Your commit hash is ... abcdef" in result.output
        assert "> Straight - abcdef" in result.output
        assert "Points:  167772160" in result.output
        assert "> Flush - all letters" in result.output
        assert "Total points: 167773838" in result.output

    def test_upper_case_is_normalised(self):
        result = runner.invoke(app, ["score", "ABCDEF", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["hash"] == "abcdef"
        assert data["total_points"] == 167773838
        assert [m["kind"] for m in data["matches"]] == ["straight", "flush"]

    def test_nothing_is_recorded(self, ledger_path, monkeypatch):
        monkeypatch.setenv("COMMIT_POKER_LEDGER_PATH", str(ledger_path))
        runner.invoke(app, ["score", "abcdef"])
        assert not ledger_path.exists()

    def test_rejects_non_hex(self):
        result = runner.invoke(app, ["score", "xyz"])

        assert result.exit_code == 1
        assert "Not a hexadecimal hash" in result.output


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestFormatting:
    def test_format_timestamp_shape(self):
        assert re.fullmatch(
            r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} [+-]\d{4}", format_timestamp(1700000000)
        )

    def test_format_timestamp_out_of_range(self):
        assert format_timestamp(10**20) == f"@{10**20}"

    def test_format_score(self, tmp_path):
        record = make_record(tmp_path, commit="abc1234", score=42, rules=("Flush", "2 of a kind"))
        assert format_score(record).startswith("abc1234: 42 points (Flush, 2 of a kind) scored on ")


class TestLogging:
    def test_verbose_log_file(self, ledger_path, tmp_path, monkeypatch):
        log_file = tmp_path / "poker.log"
        monkeypatch.setenv("COMMIT_POKER_LEDGER_PATH", str(ledger_path))
        monkeypatch.setenv("COMMIT_POKER_LOG_FILE", str(log_file))

        result = runner.invoke(app, ["--verbose", "highscores"])

        assert result.exit_code == 0, result.output
        assert "High-score ledger at" in log_file.read_text()
