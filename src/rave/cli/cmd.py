"""
Command-line interface for Rave.
Each command applies one text helper to an argument, or to standard input when
the argument is omitted, and prints the result.
"""
# typer relies on function calls used as default values
# pyright: reportCallInDefaultInitializer=false

from __future__ import annotations

import json
import sys
from typing import Any

import typer
from rich.console import Console

from rave.convert import data_to_json, each_to_js
from rave.env import env
from rave.ident import to_var_name
from rave.pad import quote as quote_code
from rave.pad import unquote as unquote_code
from rave.reformat import sanitize as sanitize_text
from rave.reformat import unfold_code, wrap_cdata

cli = typer.Typer(
	name="rave",
	help="Rave - format Python values and text for embedding in script blocks",
	no_args_is_help=True,
)

err_console = Console(stderr=True)

TEXT_HELP = "Input text. Read from stdin when omitted."


def _read_text(text: str | None) -> str:
	if text is not None:
		return text
	return sys.stdin.read().rstrip("\n")


def _fail(message: str) -> typer.Exit:
	err_console.print(f"❌ {message}")
	return typer.Exit(1)


def _load_json(text: str | None) -> Any:
	raw = _read_text(text)
	try:
		return json.loads(raw)
	except json.JSONDecodeError as e:
		raise _fail(f"Invalid JSON input: {e}") from None


@cli.command("quote")
def quote(
	text: str | None = typer.Argument(None, help=TEXT_HELP),
	quote_char: str = typer.Option('"', "--quote-char", "-q", help="Quote character"),
):
	"""Quote text unless it already reads as a script literal."""
	typer.echo(quote_code(_read_text(text), quote_char))


@cli.command("unquote")
def unquote(text: str | None = typer.Argument(None, help=TEXT_HELP)):
	"""Remove quotes around literal-looking values."""
	typer.echo(unquote_code(_read_text(text)))


@cli.command("unfold")
def unfold(
	text: str | None = typer.Argument(None, help=TEXT_HELP),
	indent: str | None = typer.Option(None, "--indent", help="Indent per line"),
):
	"""Add line breaks and indentation to one-line script."""
	if indent is None:
		indent = env.indent
	typer.echo(unfold_code(_read_text(text), indent=indent, offset=indent, wrap="\n"))


@cli.command("cdata")
def cdata(
	text: str | None = typer.Argument(None, help=TEXT_HELP),
	indent: str | None = typer.Option(None, "--indent", help="Indent before the closing marker"),
):
	"""Wrap script in CDATA markers."""
	if indent is None:
		indent = env.indent
	typer.echo(wrap_cdata(_read_text(text), indent=indent))


@cli.command("sanitize")
def sanitize(
	text: str | None = typer.Argument(None, help=TEXT_HELP),
	space: str = typer.Option("-", "--space", help="Replacement for whitespace runs"),
	keep_case: bool = typer.Option(False, "--keep-case", help="Do not lower-case"),
	other: str = typer.Option("", "--other", help="Replacement for illegal characters"),
):
	"""Reduce text to a slug of letters, digits, dashes and underscores."""
	typer.echo(sanitize_text(_read_text(text), space, not keep_case, other))


@cli.command("var-name")
def var_name(
	text: str | None = typer.Argument(None, help=TEXT_HELP),
	camel: bool = typer.Option(False, "--camel", help="camelCase instead of snake_case"),
	offset: int = typer.Option(1, "--offset", help="First segment to capitalize"),
):
	"""Convert text into a script variable name."""
	result = to_var_name(_read_text(text), camel, offset)
	if result is False:
		raise _fail("Input cannot be converted to a variable name.")
	typer.echo(result)


@cli.command("to-js")
def to_js(
	json_text: str | None = typer.Argument(None, help="JSON array or object. " + TEXT_HELP),
	grouping: str | None = typer.Option(
		None, "--grouping", "-g", help="Opening bracket per depth, e.g. '{['"
	),
	quote_style: int | None = typer.Option(
		None, "--quote-style", help="1 for single quotes, 2 for double quotes"
	),
):
	"""Render JSON data as a script array/object literal."""
	data = _load_json(json_text)
	if grouping is None:
		grouping = env.grouping
	if quote_style is None:
		quote_style = env.quote_style
	result = each_to_js(data, grouping, quote_style)
	if result is False:
		raise _fail("Input must be a JSON array or object and grouping must contain [ or {.")
	typer.echo(result)


@cli.command("to-json")
def to_json(
	json_text: str | None = typer.Argument(None, help="JSON value. " + TEXT_HELP),
	attr: str | None = typer.Option(None, "--attr", help="Format as an HTML attribute"),
	indent: int | None = typer.Option(None, "--indent", help="Pretty-print indent"),
):
	"""Re-encode JSON, optionally as an HTML attribute."""
	data = _load_json(json_text)
	typer.echo(data_to_json(data, attr if attr is not None else False, indent=indent))


def main():
	"""Main CLI entry point."""
	try:
		cli()
	except Exception:
		err_console.print_exception()
		raise typer.Exit(1) from None


if __name__ == "__main__":
	main()
