"""Command-line entry point tests."""

from __future__ import annotations

import main


class TestCli:
    def test_valid_phrase_exits_zero(self, capsys) -> None:
        assert main.main(["cento e vinte e dois"]) == 0
        assert "122" in capsys.readouterr().out

    def test_invalid_phrase_exits_one(self, capsys) -> None:
        assert main.main(["mil", "cento dois"]) == 1
        out = capsys.readouterr().out
        assert "1000" in out
        assert "InvalidNumber" in out

    def test_explain_prints_reason(self, capsys) -> None:
        main.main(["--explain", "cento e e dois"])
        assert "DOUBLED_SEPARATOR" in capsys.readouterr().out

    def test_short_scale_flag(self, capsys) -> None:
        main.main(["--short-scale", "um bilião"])
        out = capsys.readouterr().out
        assert "1000000000" in out
        assert "1000000000000" not in out

    def test_environment_default_scale(self, capsys, monkeypatch) -> None:
        monkeypatch.setenv("NUMERALS_SHORT_SCALE", "true")
        main.main(["dois biliões"])
        out = capsys.readouterr().out
        assert "2000000000" in out
        assert "2000000000000" not in out

    def test_no_short_scale_overrides_environment(self, capsys, monkeypatch) -> None:
        monkeypatch.setenv("NUMERALS_SHORT_SCALE", "true")
        assert main.main(["--no-short-scale", "um bilião"]) == 0
        assert "1000000000000" in capsys.readouterr().out
