"""Tests for the argline CLI."""

import json

from typer.testing import CliRunner

from argline.cli import app

runner = CliRunner()


class TestParseCommand:
    """Tests for 'argline parse'."""

    def test_prints_json_mapping(self):
        """Test that a successful parse prints the values as JSON."""
        result = runner.invoke(
            app, ["parse", "--arg", "file", "--arg", "n:integer*", "--arg", "v:boolean*", "--", '-n 3 "my file" -v']
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"n": 3, "file": "my file", "v": True}

    def test_without_schema(self):
        """Test schema-less parsing from the CLI."""
        result = runner.invoke(app, ["parse", "a b"])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"0": "a", "1": "b"}

    def test_non_json_values_are_printed(self):
        """Test that decimals are rendered through pretty()."""
        result = runner.invoke(app, ["parse", "2.50", "-a", "price:decimal"])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"price": "2.5"}

    def test_errors_exit_nonzero(self):
        """Test that a failed parse prints the errors and exits with 1."""
        result = runner.invoke(app, ["parse", "abc", "-a", "count:int"])
        assert result.exit_code == 1
        assert "count" in result.stdout
        assert "1 error(s)" in result.stdout

    def test_bad_declaration(self):
        """Test that an invalid declaration exits with 2."""
        result = runner.invoke(app, ["parse", "x", "-a", "n:huge"])
        assert result.exit_code == 2

    def test_duplicate_declaration(self):
        """Test that two declarations with one name exit with 2."""
        result = runner.invoke(app, ["parse", "x", "-a", "a", "-a", "a:int*"])
        assert result.exit_code == 2
        assert result.exception is None or isinstance(result.exception, SystemExit)


class TestReplCommand:
    """Tests for 'argline repl'."""

    def test_parses_lines_until_quit(self):
        """Test that each line is parsed and 'quit' ends the loop."""
        result = runner.invoke(app, ["repl", "-a", "src", "-a", "n:int*"], input="-n 2 here\n\nquit\n-n never\n")
        assert result.exit_code == 0
        assert "Schema: src:string, n:integer*" in result.stdout
        assert '"src": "here"' in result.stdout
        assert "never" not in result.stdout

    def test_eof_ends_loop(self):
        """Test that end of input ends the loop."""
        result = runner.invoke(app, ["repl"], input="a\n")
        assert result.exit_code == 0
        assert '"0": "a"' in result.stdout
        assert "Goodbye" in result.stdout

    def test_duplicate_declaration(self):
        """Test that a broken schema exits with 2 before reading input."""
        result = runner.invoke(app, ["repl", "-a", "a", "-a", "a"], input="x\n")
        assert result.exit_code == 2
        assert "Schema:" not in result.stdout
