"""
Command-line tests: batch mode, interactive mode and --format.

main() is called in-process; output is captured with capsys.
"""

from __future__ import annotations

import io

import pytest

import main as cli
from roman_validator.config import ParserSettings
from roman_validator.parser import RomanNumeralParser


class TestBatchMode:
    def test_all_valid_exits_zero(self, capsys):
        assert cli.main(["XIV", "mcmlix"]) == 0
        out = capsys.readouterr().out
        assert "XIV is 14" in out
        assert "mcmlix is 1959" in out
        assert "detected" not in out

    def test_errors_exit_one(self, capsys):
        assert cli.main(["XIV", "XXL"]) == 1
        out = capsys.readouterr().out
        assert "XXL returned error: 'L' is out of sequence after 'XX'" in out
        assert "1 error detected!" in out

    def test_error_count_is_plural(self, capsys):
        assert cli.main(["Z, IIII", "XIV"]) == 1
        out = capsys.readouterr().out
        assert "2 errors detected!" in out

    def test_permissive_flag(self, capsys):
        assert cli.main(["--permissive", "IIII"]) == 0
        assert "IIII is 4" in capsys.readouterr().out

    def test_bad_settings_exit_two(self, capsys, monkeypatch):
        monkeypatch.setenv("ROMAN_MAX_REPEATS", "99")
        assert cli.main(["XIV"]) == 2
        assert "Error loading settings" in capsys.readouterr().err


class TestFormatMode:
    def test_format_with_numerals_is_rejected(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--format", "5", "XIV"])
        assert exc_info.value.code == 2
        captured = capsys.readouterr()
        assert "cannot be combined" in captured.err
        assert "XIV is 14" not in captured.out

    def test_format(self, capsys):
        assert cli.main(["--format", "1994"]) == 0
        assert "1994 is MCMXCIV" in capsys.readouterr().out

    def test_format_lowercase(self, capsys):
        assert cli.main(["--format", "14", "--lower"]) == 0
        assert "14 is xiv" in capsys.readouterr().out

    def test_format_out_of_range(self, capsys):
        assert cli.main(["--format", "4000"]) == 1
        assert "4000 returned error" in capsys.readouterr().out


class TestInteractiveMode:
    @staticmethod
    def _reader(lines):
        feed = iter(lines)
        return lambda prompt: next(feed)

    def test_reads_until_blank_line(self, capsys):
        parser = RomanNumeralParser(ParserSettings())
        errors = cli.run_interactive(parser, read=self._reader(["xiv", "Z", "", "X"]))
        out = capsys.readouterr().out
        assert errors == 1
        assert "Welcome to the Roman Number Translator" in out
        assert "xiv is 14" in out
        assert "Z returned error" in out
        assert "X is 10" not in out

    def test_stops_at_eof(self, capsys):
        def _eof(prompt):
            raise EOFError

        assert cli.run_interactive(RomanNumeralParser(), read=_eof) == 0

    def test_main_exits_one_after_rejections(self, capsys, monkeypatch):
        feed = iter(["XIV", "Z", "XXL", ""])
        monkeypatch.setattr("builtins.input", lambda prompt: next(feed))
        assert cli.main([]) == 1
        out = capsys.readouterr().out
        assert "XIV is 14" in out
        assert "2 errors detected!" in out

    def test_main_exits_zero_when_all_valid(self, capsys, monkeypatch):
        feed = iter(["mmxxi", ""])
        monkeypatch.setattr("builtins.input", lambda prompt: next(feed))
        assert cli.main([]) == 0
        assert "detected" not in capsys.readouterr().out


class TestFormatResult:
    def test_plain_success(self):
        result = RomanNumeralParser().parse("IX")
        assert cli.format_result(result) == "IX is 9"

    def test_colored_failure_carries_code(self):
        result = RomanNumeralParser().parse("VV")
        line = cli.format_result(result, color=True)
        assert "OUT_OF_SEQUENCE" in line
        assert "\033[" in line

    def test_plain_failure(self):
        result = RomanNumeralParser().parse("VV")
        assert cli.format_result(result) == "VV returned error: 'V' is out of sequence after 'V'"


class TestPrintReport:
    def test_writes_to_current_stdout(self, capsys):
        report = cli.parse_batch(["X", "Q"])
        assert cli.print_report(report) == 1
        out = capsys.readouterr().out
        assert "X is 10" in out
        assert "1 error detected!" in out

    def test_writes_to_given_stream(self, capsys):
        buffer = io.StringIO()
        assert cli.print_report(cli.parse_batch(["IV"]), out=buffer) == 0
        assert buffer.getvalue() == "IV is 4\n"
        assert capsys.readouterr().out == ""
