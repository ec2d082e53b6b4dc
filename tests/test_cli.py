"""Tests for the passaudit command-line interface."""

import json
import logging
from unittest.mock import patch

from passaudit.cli import main

STRONG = "Zq8#mW2!vR6$kT9&"

GOOD = ["--reuse", "no", "--password-manager", "yes", "--mfa", "yes"]
BAD = ["--reuse", "yes", "--password-manager", "no", "--mfa", "no"]


# ── assess ─────────────────────────────────────────────────────────────────


class TestAssess:
    def test_low_risk_exits_zero(self, capsys):
        assert main(["assess", STRONG, *GOOD]) == 0
        out = capsys.readouterr().out
        assert "LOW (30/100)" in out
        assert "70/100" in out

    def test_high_risk_exits_one(self, capsys):
        assert main(["assess", "password", *BAD]) == 1
        out = capsys.readouterr().out
        assert "HIGH (100/100)" in out
        assert "! Common password detected" in out
        assert "[critical]" in out

    def test_json_output(self, capsys):
        main(["assess", STRONG, *GOOD, "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["riskLevel"] == "low"
        assert data["riskScore"] == 30
        assert data["passwordStrength"] == 70
        assert len(data["recommendations"]) == 3

    def test_password_never_printed(self, capsys):
        main(["assess", STRONG, *GOOD])
        assert STRONG not in capsys.readouterr().out

    @patch("passaudit.cli.getpass.getpass", return_value=STRONG)
    def test_prompts_for_password(self, mock_getpass, capsys):
        assert main(["assess", *GOOD]) == 0
        mock_getpass.assert_called_once()

    @patch("passaudit.cli.getpass.getpass", return_value="")
    def test_empty_password_rejected(self, mock_getpass, capsys):
        assert main(["assess", *GOOD]) == 2
        assert "please enter a password" in capsys.readouterr().err


# ── score ──────────────────────────────────────────────────────────────────


class TestScore:
    def test_strong(self, capsys):
        assert main(["score", STRONG]) == 0
        assert "70/100" in capsys.readouterr().out

    def test_weak(self, capsys):
        assert main(["score", "password"]) == 1
        out = capsys.readouterr().out
        assert "Very Weak" in out
        assert "missing: length, uppercase, numbers, special" in out
        assert "! Common password detected" in out

    def test_from_file(self, tmp_path, capsys):
        f = tmp_path / "pw.txt"
        f.write_text(f"{STRONG}\n\nTr0ub4dor&3xyz\n")
        assert main(["score", "-f", str(f)]) == 0
        out = capsys.readouterr().out
        assert out.count("/100") == 2

    def test_no_passwords(self, capsys):
        assert main(["score"]) == 1
        assert "Error" in capsys.readouterr().err


def test_verbose_logs_scores_not_password(caplog, capsys):
    caplog.set_level(logging.DEBUG, logger="passaudit")
    assert main(["-v", "assess", STRONG, *GOOD]) == 0
    messages = [r.getMessage() for r in caplog.records]
    assert any("strength=70" in m for m in messages)
    assert any("level=low" in m for m in messages)
    assert all(STRONG not in m for m in messages)


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage: passaudit" in capsys.readouterr().out
