"""
Tests for the command-line entry point.
"""

import io
import json

from truthshield.cli import main


class TestCli:
    def test_message_json(self, capsys):
        code = main(["message", "--json", "Wake up sheeple, the rigged election was a false flag."])
        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["score"] == 36

    def test_message_report(self, capsys):
        main(["message", "The city council meets on Tuesday to discuss the new library budget."])
        out = capsys.readouterr().out
        assert "Score:       100/100" in out

    def test_fraud_from_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("Please send your ssn today."))
        main(["fraud", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["score"] == 75
        assert data["risk_level"] == "Some Concerns"

    def test_audio_no_sample(self, capsys):
        main(["audio", "--no-audio", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["score"] == 50

    def test_challenge_by_id(self, capsys):
        main(["challenge", "--id", "b1", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["category"] == "Source Verification"

    def test_challenge_text(self, capsys):
        main(["challenge", "--difficulty", "beginner"])
        out = capsys.readouterr().out
        assert "beginner" in out
        assert "0. " in out

    def test_unknown_challenge_exit_code(self, capsys):
        assert main(["challenge", "--id", "missing"]) == 1
        assert "Challenge not found" in capsys.readouterr().err
