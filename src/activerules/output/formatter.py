"""Output formatting for loaded active rules."""

import json
from abc import ABC, abstractmethod
from typing import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from activerules.models import LoadedActiveRule, Severity


class OutputFormatter(ABC):
  """Base output formatter."""

  @abstractmethod
  def format(self, profile_key: str, rules: Sequence[LoadedActiveRule]) -> str:
    """Format a profile's active rules for output."""
    ...


class TerminalFormatter(OutputFormatter):
  """Rich terminal output formatter."""

  SEVERITY_STYLES = {
    Severity.BLOCKER: "bold red",
    Severity.CRITICAL: "red",
    Severity.MAJOR: "yellow",
    Severity.MINOR: "blue",
    Severity.INFO: "dim",
  }

  def __init__(self, console: Console | None = None):
    self.console = console or Console()

  def format(self, profile_key: str, rules: Sequence[LoadedActiveRule]) -> str:
    if not rules:
      self.console.print(f"\n[yellow]No active rules in profile {profile_key}.[/yellow]")
      return ""

    table = Table(title=f"Active rules of {profile_key}", show_header=True, header_style="bold")
    table.add_column("Rule", min_width=12)
    table.add_column("Severity", width=10)
    table.add_column("Language", width=10)
    table.add_column("Parameters", min_width=30)

    for rule in rules:
      style = self.SEVERITY_STYLES.get(rule.severity, "")
      params = ", ".join(f"{k}={v}" for k, v in sorted(rule.params.items()))
      table.add_row(
        str(rule.rule_key),
        Text(rule.severity.value, style=style),
        rule.language or "-",
        Text(params or "-"),
      )

    self.console.print()
    self.console.print(table)
    self.console.print(f"\n[dim]{len(rules)} active rule(s)[/dim]")
    return ""


class JsonFormatter(OutputFormatter):
  """JSON output formatter."""

  def format(self, profile_key: str, rules: Sequence[LoadedActiveRule]) -> str:
    data = {
      "profile": profile_key,
      "total": len(rules),
      "rules": [
        {
          "key": str(r.rule_key),
          "severity": r.severity.value,
          "params": dict(r.params),
          "name": r.name,
          "language": r.language,
          "internalKey": r.internal_key,
          "templateRuleKey": r.template_rule_key,
          "deprecatedKeys": sorted(str(k) for k in r.deprecated_keys),
          "createdAt": r.created_at.isoformat() if r.created_at else None,
          "updatedAt": r.updated_at.isoformat() if r.updated_at else None,
        }
        for r in rules
      ],
    }
    return json.dumps(data, indent=2)


class MarkdownFormatter(OutputFormatter):
  """Markdown output formatter."""

  def format(self, profile_key: str, rules: Sequence[LoadedActiveRule]) -> str:
    lines = [
      "# Active Rules",
      "",
      f"**Profile:** {profile_key}",
      "",
    ]

    if not rules:
      lines.extend(["No active rules.", ""])
      return "\n".join(lines)

    lines.extend(["| Rule | Severity | Parameters |", "| --- | --- | --- |"])
    for rule in rules:
      params = ", ".join(f"`{k}={v}`" for k, v in sorted(rule.params.items()))
      lines.append(f"| {rule.rule_key} | {rule.severity.value} | {params or '-'} |")
    lines.append("")

    return "\n".join(lines)


def get_formatter(format_type: str) -> OutputFormatter:
  """Get formatter by type name."""
  formatters = {
    "terminal": TerminalFormatter,
    "json": JsonFormatter,
    "markdown": MarkdownFormatter,
  }
  formatter_class = formatters.get(format_type)
  if not formatter_class:
    raise ValueError(f"Unknown format: {format_type}")
  return formatter_class()
