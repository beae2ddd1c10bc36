"""Command-line interface for utilkit.

Exposes the string and range helpers for quick use from a shell::

    python -m utilkit case snake "XMLHttpRequest"
    python -m utilkit split "fooBar baz"
    python -m utilkit prefix interstellar internet internal
    python -m utilkit range 3 8

Structured results are printed as JSON; ``UTILKIT_JSON_INDENT`` controls the
indentation.
"""
from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any, Callable, Dict, List

import typer

from .config import get_settings
from .errors import OutOfRangeError
from .ranges import int_range, int_range_safe
from .strings.casing import (
    common_prefix,
    split_string_parts,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
    to_title_case,
)

logger = logging.getLogger(__name__)

app = typer.Typer(help="utilkit helper CLI")


class CaseStyle(str, Enum):
    pascal = "pascal"
    camel = "camel"
    kebab = "kebab"
    snake = "snake"
    title = "title"


_CONVERTERS: Dict[CaseStyle, Callable[[str], str]] = {
    CaseStyle.pascal: to_pascal_case,
    CaseStyle.camel: to_camel_case,
    CaseStyle.kebab: to_kebab_case,
    CaseStyle.snake: to_snake_case,
    CaseStyle.title: to_title_case,
}


def _echo_json(value: Any) -> None:
    typer.echo(json.dumps(value, indent=get_settings().JSON_INDENT, ensure_ascii=False))


@app.callback()
def main() -> None:
    """utilkit CLI.

    Use a subcommand like 'case' or 'range'.
    """
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)


@app.command(help="Convert TEXT to the given case style.")
def case(
    style: CaseStyle = typer.Argument(..., help="Target style"),
    text: str = typer.Argument(..., help="Text to convert"),
) -> None:
    typer.echo(_CONVERTERS[style](text))


@app.command(help="Print the word tokens of TEXT as a JSON list.")
def split(text: str = typer.Argument(..., help="Text to segment")) -> None:
    _echo_json(split_string_parts(text))


@app.command(help="Print the longest common prefix of the given strings.")
def prefix(strings: List[str] = typer.Argument(None, help="Strings to compare")) -> None:
    typer.echo(common_prefix(*(strings or [])))


@app.command(name="range", help="Print the integers from LOWER to UPPER (inclusive) as JSON.")
def range_(
    lower: int = typer.Argument(..., help="Lower bound"),
    upper: int = typer.Argument(..., help="Upper bound"),
    safe: bool = typer.Option(False, "--safe", help="Accept the bounds in either order"),
) -> None:
    try:
        values = int_range_safe(lower, upper) if safe else int_range(lower, upper)
    except OutOfRangeError as exc:
        logger.debug("range command rejected bounds (%s, %s)", lower, upper)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)
    _echo_json(values)


if __name__ == "__main__":  # pragma: no cover
    app()
