"""Pytest fixtures."""

import json
from typing import Callable

import pytest
from helpers import EXAMPLE_KEY, FORMAT_KEY, FORMAT_VALUE, TIMESTAMP, FakeTransport

PageFactory = Callable[..., bytes]


def _page(rules: list[dict], actives: dict[str, list[dict]], page_size: int, total: int) -> bytes:
  return json.dumps({
    "total": total,
    "p": 1,
    "ps": page_size,
    "paging": {"pageIndex": 1, "pageSize": page_size, "total": total},
    "rules": rules,
    "actives": actives,
  }).encode()


@pytest.fixture
def fake_transport() -> FakeTransport:
  return FakeTransport()


@pytest.fixture
def response_of_size() -> PageFactory:
  """Build a page of active rules java:S<start>..java:S<start+n-1>.

  The rule java:S108, when present, carries a format parameter and MINOR
  severity; all others have neither.
  """
  def factory(number_of_rules: int, total: int, start: int = 1) -> bytes:
    rules = []
    actives = {}
    for i in range(start, start + number_of_rules):
      key = f"java:S{i}"
      rules.append({"key": key, "lang": "java", "name": f"Rule {i}"})
      active = {"qProfile": "c+-test_c+-values-17445", "createdAt": TIMESTAMP, "updatedAt": TIMESTAMP}
      if key == EXAMPLE_KEY:
        active["params"] = [{"key": FORMAT_KEY, "value": FORMAT_VALUE}]
        active["severity"] = "MINOR"
      actives[key] = [active]
    return _page(rules, actives, number_of_rules, total)

  return factory


@pytest.fixture
def corrupted_response() -> bytes:
  """A page declaring three rules but no activations at all."""
  rules = [{"key": f"java:S{i}"} for i in range(1, 4)]
  return _page(rules, {}, page_size=3, total=3)
