"""
Command-line front end.

    pyliteral "{'name': 'John', 'age': 30}"
    echo "[1, 2, (3, 4)]" | pyliteral --format python
"""

import logging
import sys

import click

from . import __version__
from .lexer import DiagnosticError
from .parser import DEFAULT_MAX_DEPTH, ParserConfiguration
from .pipeline import parse
from .converters import JsonConverter, NativeConverter, ValidationVisitor

LOG_LEVELS = {0: logging.WARNING, 1: logging.INFO}


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("literal", required=False, default="-")
@click.option("--format", "output_format", type=click.Choice(["json", "python"]), default="json",
              show_default=True, help="Print JSON text or the Python repr of the converted value.")
@click.option("--validate", "run_validation", is_flag=True,
              help="Reject input that exceeds the validation limits.")
@click.option("--max-depth", type=click.IntRange(min=1), default=DEFAULT_MAX_DEPTH, show_default=True,
              help="Maximum container nesting accepted by the parser.")
@click.option("-v", "--verbose", count=True, help="Log more (-v info, -vv debug).")
@click.version_option(__version__, prog_name="pyliteral")
def main(literal, output_format, run_validation, max_depth, verbose):
    """Translate a Python object LITERAL into JSON. Reads stdin when LITERAL is '-' or omitted."""
    logging.basicConfig(
        level=LOG_LEVELS.get(verbose, logging.DEBUG),
        format="%(levelname)s %(name)s: %(message)s",
    )

    source = click.get_text_stream("stdin").read() if literal == "-" else literal

    try:
        tree = parse(source, ParserConfiguration(max_depth=max_depth))
    except DiagnosticError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    if run_validation:
        result = ValidationVisitor().validate(tree)
        if not result.valid:
            click.echo(f"Error: {result.error_message}", err=True)
            sys.exit(1)

    if output_format == "json":
        click.echo(JsonConverter().serialize(tree))
    else:
        click.echo(repr(NativeConverter().convert(tree)))


if __name__ == "__main__":
    main()
