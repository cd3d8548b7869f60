"""Text and JSON output for CLI commands."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from typing import Any, NoReturn

import click

from mediaconv.cli.exit_codes import ExitCode


@dataclass
class CLIResult:
    """Outcome of a command that finished successfully.

    ``message`` is what text mode prints. JSON mode prints the message
    together with ``data``.
    """

    message: str
    data: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> str:
        return json.dumps(
            {"status": "completed", "message": self.message, **self.data}, indent=2
        )


def error_exit(message: str, code: ExitCode, json_output: bool = False) -> NoReturn:
    """Print an error to stderr and exit with ``code``."""
    if json_output:
        payload = {
            "status": "failed",
            "error": {"code": code.name, "message": message},
        }
        click.echo(json.dumps(payload), err=True)
    else:
        click.echo(f"Error: {message}", err=True)
    sys.exit(int(code))


def success_output(result: CLIResult, json_output: bool = False) -> None:
    if json_output:
        click.echo(result.to_json())
    else:
        click.echo(result.message)


def warning_output(message: str, json_output: bool = False) -> None:
    """Print a warning to stderr. JSON mode stays silent."""
    if not json_output:
        click.echo(f"Warning: {message}", err=True)
