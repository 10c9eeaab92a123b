"""Core domain models for loaded active rules."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Mapping


class Severity(Enum):
  """Rule severity levels, as the server spells them."""

  INFO = "INFO"
  MINOR = "MINOR"
  MAJOR = "MAJOR"
  CRITICAL = "CRITICAL"
  BLOCKER = "BLOCKER"


@dataclass(frozen=True)
class RuleKey:
  """Repository-scoped rule identifier, rendered as 'repo:rule'."""

  repository: str
  rule: str

  @classmethod
  def parse(cls, value: str) -> "RuleKey":
    """Parse a 'repository:rule' string.

    Only the first ':' separates the parts, so rule ids may contain colons.
    """
    repository, sep, rule = value.partition(":")
    if not sep or not repository or not rule:
      raise ValueError(f"Invalid rule key: {value!r}")
    return cls(repository, rule)

  def __str__(self) -> str:
    return f"{self.repository}:{self.rule}"


@dataclass(frozen=True)
class PagingInfo:
  """Paging metadata repeated on every page."""

  page_index: int
  page_size: int
  total: int


@dataclass(frozen=True)
class LoadedActiveRule:
  """A rule activated in a quality profile, merged from catalog and activation."""

  rule_key: RuleKey
  severity: Severity
  params: Mapping[str, str] = field(default_factory=dict)
  name: str | None = None
  language: str | None = None
  internal_key: str | None = None
  template_rule_key: str | None = None
  deprecated_keys: frozenset[RuleKey] = frozenset()
  created_at: datetime | None = None
  updated_at: datetime | None = None
