"""
lexdump Command-Line Tests
==========================

Tests for the token dump tool, run through click's CliRunner.
"""

import json

import pytest
from click.testing import CliRunner

from lexor import __version__
from lexor.cli.lexdump import format_token, main
from lexor.tokens import Token, TokenKind


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv("LEXOR_LINE_COMMENTS", raising=False)
    monkeypatch.delenv("LEXOR_MAX_ERRORS", raising=False)


@pytest.mark.usefixtures("clean_env")
class TestLexdump:
    """Tests for the lexdump command."""

    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "INPUT_FILE" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_dump(self, runner, tmp_path):
        source = tmp_path / "hello.lex"
        source.write_text('PRINT: "hi"$\n')
        result = runner.invoke(main, [str(source)])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 5
        assert "PRINT" in lines[0]
        assert "STATEMENT_END" in lines[3]
        assert "END_OF_INPUT" in lines[4]

    def test_json(self, runner, tmp_path):
        source = tmp_path / "hello.lex"
        source.write_text("x = 1$")
        result = runner.invoke(main, ["--json", str(source)])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [t["kind"] for t in data] == [
            "IDENTIFIER", "ASSIGN", "NUMBER", "STATEMENT_END", "END_OF_INPUT",
        ]
        assert data[2] == {"kind": "NUMBER", "text": "1", "line": 1, "column": 5}

    def test_line_number(self, runner, tmp_path):
        source = tmp_path / "snippet.lex"
        source.write_text("x = 1$")
        result = runner.invoke(main, ["--json", "-n", "40", str(source)])
        assert result.exit_code == 0
        assert json.loads(result.output)[0]["line"] == 40

    def test_comments_off_by_default(self, runner, tmp_path):
        source = tmp_path / "mod.lex"
        source.write_text("a %% b")
        result = runner.invoke(main, ["--json", str(source)])
        assert result.exit_code == 0
        assert [t["kind"] for t in json.loads(result.output)].count("MODULO") == 2

    def test_comments_from_env(self, runner, tmp_path, monkeypatch):
        monkeypatch.setenv("LEXOR_LINE_COMMENTS", "1")
        source = tmp_path / "mod.lex"
        source.write_text("a %% b")
        result = runner.invoke(main, ["--json", str(source)])
        assert [t["kind"] for t in json.loads(result.output)] == ["IDENTIFIER", "END_OF_INPUT"]

    def test_comments_flag(self, runner, tmp_path):
        source = tmp_path / "mod.lex"
        source.write_text("x = 7 %% 2$\ny$")
        result = runner.invoke(main, ["--json", "--comments", str(source)])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [t["kind"] for t in data] == [
            "IDENTIFIER", "ASSIGN", "NUMBER", "IDENTIFIER", "STATEMENT_END", "END_OF_INPUT",
        ]
        assert data[3]["line"] == 2

    def test_no_comments_overrides_env(self, runner, tmp_path, monkeypatch):
        monkeypatch.setenv("LEXOR_LINE_COMMENTS", "1")
        source = tmp_path / "mod.lex"
        source.write_text("a %% b")
        result = runner.invoke(main, ["--json", "--no-comments", str(source)])
        assert [t["kind"] for t in json.loads(result.output)].count("MODULO") == 2

    def test_lexical_errors_exit_one(self, runner, tmp_path):
        source = tmp_path / "bad.lex"
        source.write_text("x = @$\n")
        result = runner.invoke(main, [str(source)])
        assert result.exit_code == 1
        assert "unknown character '@'" in result.output
        assert "1 error" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path / "missing.lex")])
        assert result.exit_code == 2


class TestFormatToken:
    """Tests for the text output format."""

    def test_plain_token(self):
        line = format_token(Token(TokenKind.IDENTIFIER, "x", 2, 5))
        assert line.split() == ["2:5", "IDENTIFIER", "'x'"]

    def test_error_token(self):
        from lexor.lexer import tokenize

        line = format_token(tokenize("@")[0])
        assert line.startswith("1:1")
        assert "ERROR" in line
        assert "(unknown character '@' (U+0040))" in line
