"""Tests for the CLI module."""

import json
from pathlib import Path
from typing import Any
from unittest.mock import patch

import click.testing

from mdbook_blog.cli import cli

from .conftest import make_input


class TestCLI:
    """Test CLI commands."""

    def test_cli_help(self) -> None:
        """Test CLI help command."""
        runner = click.testing.CliRunner()
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "mdBook preprocessor" in result.output
        assert "preprocess" in result.output
        assert "supports" in result.output

    def test_version(self) -> None:
        runner = click.testing.CliRunner()
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "mdbook-blog" in result.output

    def test_supports_html(self) -> None:
        """Test the renderer support query for html."""
        runner = click.testing.CliRunner()
        result = runner.invoke(cli, ["supports", "html"])

        assert result.exit_code == 0

    def test_supports_other_renderer(self) -> None:
        """Test the renderer support query for an unknown renderer."""
        runner = click.testing.CliRunner()
        result = runner.invoke(cli, ["supports", "epub"])

        assert result.exit_code == 1

    def test_bare_invocation_runs_preprocess(self, book_root: Path) -> None:
        """Test that running without a command preprocesses stdin."""
        posts_dir = book_root / "src" / "posts"
        posts_dir.mkdir()
        (posts_dir / "2024-01-01-hello.md").write_text("# Hello\n")
        (posts_dir / "2024-03-05-world.md").write_text("# World\n")

        runner = click.testing.CliRunner()
        result = runner.invoke(cli, [], input=make_input(book_root))

        assert result.exit_code == 0
        book = json.loads(result.stdout)
        names = [item["Chapter"]["name"] for item in book["sections"]]
        assert names == ["Chapter 1", "World", "Hello"]

    def test_preprocess_command_without_posts(self, book_root: Path) -> None:
        """Test the explicit preprocess command on a book without posts."""
        payload = make_input(book_root, {"directory": "blogs"})

        runner = click.testing.CliRunner()
        result = runner.invoke(cli, ["preprocess", "--verbose"], input=payload)

        assert result.exit_code == 0
        assert json.loads(result.stdout) == json.loads(payload)[1]

    def test_preprocess_invalid_input(self) -> None:
        """Test that malformed input exits with an error."""
        runner = click.testing.CliRunner()
        result = runner.invoke(cli, ["preprocess"], input="not json")

        assert result.exit_code == 1
        assert "Error" in result.output
        assert result.stdout == ""

    @patch("mdbook_blog.cli.BlogPreprocessor.run")
    def test_preprocess_fatal_error(self, mock_run: Any, book_root: Path) -> None:
        """Test that a failing run exits with status 1."""
        mock_run.side_effect = OSError("disk on fire")

        runner = click.testing.CliRunner()
        result = runner.invoke(cli, ["preprocess"], input=make_input(book_root))

        assert result.exit_code == 1
        assert "disk on fire" in result.output
        mock_run.assert_called_once()
