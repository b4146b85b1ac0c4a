"""Typer-based CLI for trying argument schemas against command lines."""

from __future__ import annotations

import json
import os
import sys
from typing import List, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from argline.config import ParserConfig
from argline.core.parsers import CommandParser, sanitize_schema
from argline.domain.types import ArgumentSpec, ParseResult
from argline.formatting import pretty
from argline.logger import get_logger, setup_logger

load_dotenv()

logger = get_logger("cli")

app = typer.Typer(
    name="argline",
    help="Parse '-name value' command lines against a declared argument schema",
    epilog="""
    Examples:
    $ argline parse --arg file --arg n:integer* --arg v:boolean* -- '-v -n 3 "my file"'
    $ argline repl --arg src --arg dst --arg force:bool*
    """,
    add_completion=False,
)

ARG_HELP = "Argument declaration 'name:type', '*' suffix for optional (repeatable)"


def _build_parser(declarations: Optional[List[str]]) -> tuple[CommandParser, Optional[list[ArgumentSpec]]]:
    try:
        config = ParserConfig.from_env()
        specs = [ArgumentSpec.from_declaration(d) for d in declarations] if declarations else None
        if specs:
            sanitize_schema(specs)
    except ValueError as exc:
        typer.echo(f"❌ {exc}", err=True)
        raise typer.Exit(code=2)
    return CommandParser(config), specs


def _configure_logging(debug: bool) -> None:
    setup_logger(log_level="DEBUG" if debug else "WARNING", console_output=debug)


def _render_result(result: ParseResult) -> None:
    if result.ok:
        typer.echo(json.dumps(result.values, default=pretty, indent=2))
        return

    table = Table(title="Parse errors")
    table.add_column("Kind", style="red")
    table.add_column("Argument", style="cyan")
    table.add_column("Value")
    table.add_column("Message")
    for error in result.errors:
        table.add_row(error.kind.name, error.arg_name, pretty(error.value), error.message)
    Console().print(table)
    typer.echo(f"{len(result.errors)} error(s)")


def _read_command(prompt: str) -> str:
    """Read a command from stdin, stripping carriage returns."""
    typer.echo(prompt, nl=False)
    sys.stdout.flush()

    line = sys.stdin.readline()
    if line == "":
        raise EOFError
    return line.replace("\r", "").strip()


@app.command("parse")
def parse_command(
    text: str = typer.Argument(..., help="Command text to parse"),
    arg: Optional[List[str]] = typer.Option(None, "--arg", "-a", help=ARG_HELP),
    debug: bool = typer.Option(os.getenv("DEBUG", "false").lower() == "true", "--debug", help="Enable debug logging"),
):
    """Parse one command line and print the typed arguments as JSON."""
    _configure_logging(debug)
    parser, specs = _build_parser(arg)

    result = parser.parse(text, specs)
    _render_result(result)
    if not result.ok:
        raise typer.Exit(code=1)


@app.command("repl")
def repl_command(
    arg: Optional[List[str]] = typer.Option(None, "--arg", "-a", help=ARG_HELP),
    debug: bool = typer.Option(os.getenv("DEBUG", "false").lower() == "true", "--debug", help="Enable debug logging"),
):
    """Parse command lines from stdin until 'quit' or end of input."""
    _configure_logging(debug)
    parser, specs = _build_parser(arg)

    schema_text = ", ".join(str(spec) for spec in specs) if specs else "(none, validation off)"
    typer.echo(f"Schema: {schema_text}")
    typer.echo("Type a command line, or 'quit' to exit.")

    while True:
        try:
            line = _read_command("argline> ")
        except (KeyboardInterrupt, EOFError):
            typer.echo("\n👋 Goodbye!")
            break

        if line == "quit":
            break
        if not line:
            continue

        logger.debug(f"REPL input: {line!r}")
        _render_result(parser.parse(line, specs))
