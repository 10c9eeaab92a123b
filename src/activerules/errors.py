"""Errors raised while loading active rules."""

TROUBLESHOOTING_URL = "https://docs.sonarqube.org/latest/setup/troubleshooting"

INDEX_INCONSISTENCY_MESSAGE = (
  "Elasticsearch indices have become inconsistent. Consider re-indexing. "
  f"Check documentation for more information {TROUBLESHOOTING_URL}"
)


class ActiveRulesError(Exception):
  """Base error for a failed load."""


class TransportError(ActiveRulesError):
  """The server could not be reached or answered with an error status."""

  def __init__(self, message: str, status_code: int | None = None):
    super().__init__(message)
    self.status_code = status_code


class DecodeError(ActiveRulesError):
  """A page payload could not be decoded."""


class IndexInconsistencyError(ActiveRulesError):
  """Rule catalog and activation records of a page disagree.

  Points at corrupted search indices on the server, not at the client.
  """

  documentation_url = TROUBLESHOOTING_URL

  def __init__(self, rule_key: str | None = None):
    super().__init__(INDEX_INCONSISTENCY_MESSAGE)
    self.rule_key = rule_key
