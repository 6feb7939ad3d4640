import math

import click

from storefront.core.gateway import QueryResult

INVALID_INPUT_TEXT = "Your input is invalid!"


class Console:
    """Line-oriented terminal I/O used by every handler."""

    def echo(self, message: str = "") -> None:
        click.echo(message)

    def error(self, message: str) -> None:
        click.echo(message, err=True)

    def prompt(self, text: str) -> str:
        return click.prompt(
            text, default="", show_default=False, prompt_suffix=": "
        )

    def confirm(self, text: str) -> bool:
        return click.confirm(text, default=False)

    def prompt_int(self, text: str) -> int:
        """Ask until the answer parses as an integer."""
        while True:
            raw = self.prompt(text)
            try:
                return int(raw.strip())
            except ValueError:
                self.echo(INVALID_INPUT_TEXT)

    def prompt_float(self, text: str) -> float:
        """Ask until the answer parses as a finite number; nan and inf are refused."""
        while True:
            raw = self.prompt(text)
            try:
                value = float(raw.strip())
            except ValueError:
                value = None
            if value is not None and math.isfinite(value):
                return value
            self.echo(INVALID_INPUT_TEXT)


def render_cell(value) -> str:
    return "null" if value is None else value


def print_table(console: Console, result: QueryResult) -> int:
    """
    Prints a query result as tab-separated text.

    The header line is written only when there is at least one row; the
    ``Total row(s)`` line is always written.

    Returns:
        int: Number of rows printed
    """
    if result.rows:
        console.echo("\t".join(result.columns))
        for row in result.rows:
            console.echo("\t".join(render_cell(value) for value in row))
    console.echo(f"Total row(s): {len(result.rows)}")
    return len(result.rows)
