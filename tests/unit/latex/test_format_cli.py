"""
Unit tests for the expression formatter CLI
"""

import io

import pytest
from core.latex import format_cli


class TestFormatCli:
    """Test argument handling and output of mathfmt"""

    def test_formats_positional_expressions(self, capsys):
        exit_code = format_cli.main(["(x + 1)", "2 * x"])

        out = capsys.readouterr().out.splitlines()
        assert exit_code == 0
        assert out == ["x + 1", "2x"]

    def test_reads_stdin_when_no_arguments(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("a/b\n\n0\n"))

        format_cli.main([])

        assert capsys.readouterr().out.splitlines() == [r"\frac{a}{b}", "0"]

    def test_inline_wrap_skips_sentinels(self, capsys):
        format_cli.main(["--wrap", "inline", "x = 3/4", "Error"])

        out = capsys.readouterr().out.splitlines()
        assert out == [r"$x = \frac{3}{4}$", "Error"]

    def test_display_wrap(self, capsys):
        format_cli.main(["-w", "display", "2 * y"])

        assert capsys.readouterr().out.strip() == r"\[2y\]"

    def test_trace_lists_stages(self, capsys):
        format_cli.main(["--trace", "(2 * x)", "x"])

        out = capsys.readouterr().out.splitlines()
        assert out[0] == "2x\t[outer_parens, multiply]"
        assert out[1] == "x\t[-]"

    def test_stats_summary(self, capsys):
        format_cli.main(["--stats", "a/b", "0"])

        out = capsys.readouterr().out
        assert "Total:       2" in out
        assert "Passthrough: 1" in out
        assert "fraction" in out

    def test_invalid_wrap_mode_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            format_cli.main(["--wrap", "block", "x"])

        assert exc_info.value.code == 2
