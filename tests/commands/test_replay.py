"""Tests for the replay command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from vkwire.cli import cli

pytestmark = pytest.mark.usefixtures("_no_config")

POLL = {
    "id": "4",
    "owner_id": 1,
    "created": 1600000000,
    "question": "?",
    "answers": [{"id": 1, "text": "yes", "votes": "2", "rate": 100}],
    "end_date": 0,
}


def _saved(tmp_path: Path, document: object) -> str:
    path = tmp_path / "saved.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return str(path)


class TestReplayCommand:
    def test_decodes_saved_payload(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = _saved(tmp_path, {"response": POLL})
        result = cli_runner.invoke(cli, ["--json", "replay", path, "--as", "poll"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["data"]["response"]["id"] == 4
        assert data["data"]["response"]["answers"][0]["votes"] == 2
        assert data["meta"]["target"] == "poll"

    def test_human_output(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = _saved(tmp_path, {"response": 1})
        result = cli_runner.invoke(cli, ["replay", path])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["OK: replay", "  response: 1"]

    def test_fault(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = _saved(tmp_path, {"error": {"error_code": 6, "error_msg": "Too many requests"}})
        result = cli_runner.invoke(cli, ["replay", path])
        assert result.exit_code == 1
        assert "[DOMAIN_ERROR] Too many requests" in result.stderr
        assert "fault_code: 6" in result.stderr

    def test_decode_failure(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = _saved(tmp_path, {"response": {"id": "four"}})
        result = cli_runner.invoke(cli, ["replay", path, "--as", "poll"])
        assert result.exit_code == 1
        assert "PAYLOAD_DECODE_ERROR" in result.stderr

    def test_malformed(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = _saved(tmp_path, {"data": []})
        result = cli_runner.invoke(cli, ["replay", path])
        assert result.exit_code == 1
        assert "MALFORMED_ENVELOPE" in result.stderr

    def test_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["replay", str(tmp_path / "absent.json")])
        assert result.exit_code == 1
        assert "READ_ERROR" in result.stderr

    def test_generic_keys(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = _saved(tmp_path, {"fault": {"code": 3, "message": "nope"}})
        result = cli_runner.invoke(
            cli, ["replay", path, "--payload-key", "payload", "--fault-key", "fault"]
        )
        assert result.exit_code == 1
        assert "[DOMAIN_ERROR] nope" in result.stderr
