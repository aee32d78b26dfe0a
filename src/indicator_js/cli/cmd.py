"""
Command-line interface for the indicator formula translator.
"""
# typer relies on function calls used as default values
# pyright: reportCallInDefaultInitializer=false

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from indicator_js.env import env
from indicator_js.errors import TranslationError
from indicator_js.tokens import tokenize
from indicator_js.translator import Translator, TranslatorConfig
from indicator_js.version import __version__

cli = typer.Typer(
	name="indicator-js",
	help="Translate indicator formulas into JavaScript expressions",
	no_args_is_help=True,
)


@cli.callback()
def main_callback(
	verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
):
	level = "DEBUG" if verbose else env.log_level
	logging.basicConfig(
		level=level,
		format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
	)


@cli.command("translate")
def translate_cmd(
	formula: str | None = typer.Argument(None, help="Formula to translate"),
	file: Path | None = typer.Option(
		None,
		"--file",
		"-f",
		help="Translate every non-blank line of this file",
		exists=True,
		dir_okay=False,
		readable=True,
	),
	delimiter: str | None = typer.Option(
		None, "--delimiter", help="Wrapper around field names (default: **)"
	),
):
	"""Translate a formula, or a file of formulas, into JavaScript."""
	if (formula is None) == (file is None):
		typer.echo("❌ Pass either a FORMULA or --file, not both.")
		raise typer.Exit(1)

	config = TranslatorConfig() if delimiter is None else TranslatorConfig(delimiter)
	translator = Translator(config)

	if formula is not None:
		try:
			typer.echo(translator.translate(formula))
		except TranslationError as exc:
			typer.echo(f"❌ {exc}")
			raise typer.Exit(1) from None
		return

	assert file is not None
	failed = 0
	for line in file.read_text().splitlines():
		line = line.strip()
		if not line:
			continue
		try:
			js = translator.translate(line)
		except TranslationError as exc:
			failed += 1
			typer.echo(f"❌ {line} -> {exc}")
			continue
		typer.echo(f"{line} -> {js}")
	if failed:
		raise typer.Exit(1)


@cli.command("tokens")
def tokens_cmd(formula: str = typer.Argument(..., help="Formula to tokenize")):
	"""Show the token sequence of a formula."""
	try:
		toks = tokenize(formula)
	except TranslationError as exc:
		typer.echo(f"❌ {exc}")
		raise typer.Exit(1) from None

	table = Table("#", "Type", "Text")
	for i, tok in enumerate(toks):
		table.add_row(str(i), tok.type.name, Text(tok.text))
	Console().print(table)


@cli.command("functions")
def functions_cmd():
	"""List the functions formulas are allowed to call."""
	table = Table("Function", "Translation")
	for name, rule in sorted(TranslatorConfig().functions.items()):
		table.add_row(name, Text(rule.describe()))
	Console().print(table)


@cli.command("version")
def version_cmd():
	"""Print the package version."""
	typer.echo(__version__)


def main():
	cli()


if __name__ == "__main__":
	main()
