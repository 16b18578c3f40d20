from __future__ import annotations

import logging
from typing import TextIO

import click

from ledger.domain.exceptions import DomainException
from ledger.infrastructure.bootstrap import new_session
from ledger.infrastructure.cli.interpreter import CommandError, CommandInterpreter

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="LEDGER_LOG_LEVEL",
    help="Logging level for engine events (written to stderr).",
)
def cli(log_level: str) -> None:
    """Retail Ledger: products, orders and dynamically priced campaigns"""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


@cli.command("run")
@click.option(
    "--file",
    "scenario",
    type=click.File("r"),
    default=None,
    help="Scenario file with one command per line (default: interactive).",
)
def run(scenario: TextIO | None) -> None:
    """Execute ledger commands against a fresh in-memory session."""
    interpreter = CommandInterpreter(new_session())

    if scenario is not None:
        for line in scenario:
            _execute(interpreter, line)
        return

    click.echo("Please enter command")
    stdin = click.get_text_stream("stdin")
    for line in stdin:
        if line.strip() == "exit":
            return
        _execute(interpreter, line)


@cli.command("commands")
def commands() -> None:
    """List the commands understood by ``run``."""
    for name in CommandInterpreter(new_session()).command_names:
        click.echo(name)


def _execute(interpreter: CommandInterpreter, line: str) -> None:
    """Run one line and echo its outcome; errors never stop the session."""
    try:
        response = interpreter.execute(line)
    except (CommandError, DomainException) as exc:
        click.echo(f"Error: {exc}")
        return
    if response is not None:
        click.echo(response)
