"""CLI interface using Typer."""

import logging
import os
import traceback
from pathlib import Path

import typer
from rich.console import Console

from activerules import __version__
from activerules.config import load_config
from activerules.errors import ActiveRulesError
from activerules.loader import load_active_rules
from activerules.models import Severity
from activerules.output import get_formatter

app = typer.Typer(
  name="activerules",
  help="Load the active rules of a quality profile from an analysis server",
  no_args_is_help=True,
)

console = Console()


def _is_debug() -> bool:
  return os.environ.get("ACTIVERULES_DEBUG", "").lower() in ("1", "true", "yes")


def version_callback(value: bool) -> None:
  if value:
    console.print(f"activerules {__version__}")
    raise typer.Exit()


@app.command()
def main(
  profile_key: str = typer.Argument(..., help="Quality profile key"),
  server: str = typer.Option(None, "--server", "-s", help="Server base URL"),
  format_type: str = typer.Option(
    None, "--format", help="Output format: terminal, json, markdown"
  ),
  default_severity: str = typer.Option(
    None, "--default-severity", help="Severity for activations that carry none"
  ),
  config: Path = typer.Option(None, "--config", "-c", help="Config file path"),
  debug: bool = typer.Option(False, "--debug", "-d", help="Show debug logs and tracebacks"),
  version: bool = typer.Option(None, "--version", "-v", callback=version_callback, is_eager=True),
) -> None:
  """Load and print every active rule of a quality profile."""
  show_traceback = debug or _is_debug()
  logging.basicConfig(
    level=logging.DEBUG if show_traceback else logging.WARNING,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
  )

  try:
    settings = load_config(config).model_copy(deep=True)
    if server:
      settings.server_url = server
    if format_type:
      settings.format = format_type
    if default_severity:
      settings.default_severity = _parse_severity(default_severity)

    formatter = get_formatter(settings.format)
    rules = load_active_rules(profile_key, settings)

    output = formatter.format(profile_key, rules)
    if output:
      console.print(output, markup=False, highlight=False, emoji=False, soft_wrap=True)

  except ActiveRulesError as e:
    console.print(f"[red]Error:[/red] {e}")
    raise typer.Exit(1) from None
  except Exception as e:
    console.print(f"[red]Error:[/red] {e}")
    if show_traceback:
      console.print("\n[dim]Traceback:[/dim]")
      console.print(traceback.format_exc())
    raise typer.Exit(1) from None


def _parse_severity(value: str) -> Severity:
  try:
    return Severity(value.strip().upper())
  except ValueError:
    choices = ", ".join(s.value for s in Severity)
    raise ValueError(f"Unknown severity '{value}'. Choose from: {choices}") from None


if __name__ == "__main__":
  app()
