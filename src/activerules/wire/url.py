"""Rule search request targets."""

from urllib.parse import quote_plus

SEARCH_PATH = "/api/rules/search.json"
PAGE_SIZE = 500
RULE_FIELDS = (
  "repo",
  "name",
  "severity",
  "lang",
  "internalKey",
  "templateKey",
  "params",
  "actives",
  "createdAt",
  "updatedAt",
  "deprecatedKeys",
)


def build_search_url(profile_key: str, page: int) -> str:
  """Build the request target for one page of a profile's active rules.

  Args:
    profile_key: Quality profile key, query-encoded into the URL.
    page: 1-based page index.

  Returns:
    Path and query string, relative to the server base URL.
  """
  if page < 1:
    raise ValueError(f"Page index must be >= 1, got {page}")

  return (
    f"{SEARCH_PATH}?f={','.join(RULE_FIELDS)}&activation=true"
    f"&qprofile={quote_plus(profile_key)}&ps={PAGE_SIZE}&p={page}"
  )
