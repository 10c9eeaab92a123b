"""Tests for rule search page decoding."""

import json
from datetime import timedelta

import pytest
from activerules.errors import DecodeError
from activerules.models import PagingInfo, Severity
from activerules.wire.decoder import decode_page


def _encode(data: dict) -> bytes:
  return json.dumps(data).encode()


class TestDecodePage:
  def test_decodes_rules_actives_and_paging(self) -> None:
    raw = _encode({
      "rules": [
        {
          "key": "java:S108",
          "name": "Nested blocks of code should not be left empty",
          "lang": "java",
          "internalKey": "S108",
          "params": [{"key": "format", "defaultValue": "^.*$", "htmlDesc": "Regex"}],
          "deprecatedKeys": {"deprecatedKey": ["squid:S00108"]},
        },
      ],
      "actives": {
        "java:S108": [{
          "qProfile": "java-sonar-way",
          "inherit": "NONE",
          "severity": "MINOR",
          "params": [{"key": "format", "value": "^[a-z]*$"}],
          "createdAt": "2014-05-27T15:50:45+0100",
          "updatedAt": "2014-05-28T10:00:00+0000",
        }],
      },
      "paging": {"pageIndex": 2, "pageSize": 500, "total": 501},
    })

    page = decode_page(raw)

    assert page.paging == PagingInfo(page_index=2, page_size=500, total=501)
    rule = page.rules[0]
    assert rule.key == "java:S108"
    assert rule.internal_key == "S108"
    assert rule.params[0].default_value == "^.*$"
    assert rule.deprecated_keys.deprecated_key == ["squid:S00108"]
    active = page.actives["java:S108"][0]
    assert active.severity == Severity.MINOR
    assert active.params[0].value == "^[a-z]*$"
    assert active.created_at.utcoffset() == timedelta(hours=1)
    assert active.created_at.hour == 15

  def test_missing_actives_decode_as_empty(self) -> None:
    page = decode_page(_encode({
      "rules": [{"key": "java:S1"}],
      "paging": {"pageIndex": 1, "pageSize": 1, "total": 1},
    }))

    assert page.actives == {}
    assert [r.key for r in page.rules] == ["java:S1"]

  def test_accepts_top_level_paging(self) -> None:
    page = decode_page(_encode({"total": 3, "p": 1, "ps": 500, "rules": []}))
    assert page.paging == PagingInfo(page_index=1, page_size=500, total=3)

  def test_missing_severity_and_timestamps_are_none(self) -> None:
    page = decode_page(_encode({
      "rules": [{"key": "java:S1"}],
      "actives": {"java:S1": [{}]},
      "paging": {"pageSize": 1, "total": 1},
    }))

    active = page.actives["java:S1"][0]
    assert active.severity is None
    assert active.created_at is None
    assert active.params == []

  @pytest.mark.parametrize("raw", [
    b"",
    b"not json",
    b"[]",
    b'{"rules": [{"name": "no key"}], "paging": {"pageSize": 1, "total": 1}}',
    b'{"rules": [], "paging": {"pageSize": "many", "total": 1}}',
  ])
  def test_malformed_payload(self, raw) -> None:
    with pytest.raises(DecodeError, match="Malformed"):
      decode_page(raw)

  def test_unknown_severity_is_malformed(self) -> None:
    raw = _encode({
      "actives": {"java:S1": [{"severity": "SEVERE"}]},
      "paging": {"pageSize": 1, "total": 1},
    })
    with pytest.raises(DecodeError):
      decode_page(raw)

  def test_bad_timestamp_is_malformed(self) -> None:
    raw = _encode({
      "actives": {"java:S1": [{"createdAt": "yesterday"}]},
      "paging": {"pageSize": 1, "total": 1},
    })
    with pytest.raises(DecodeError):
      decode_page(raw)

  def test_catalog_severity_is_not_restricted(self) -> None:
    page = decode_page(_encode({
      "rules": [{"key": "java:S1", "severity": "HIGH"}],
      "actives": {"java:S1": [{"severity": "MAJOR"}]},
      "paging": {"pageSize": 1, "total": 1},
    }))

    assert page.rules[0].severity == "HIGH"
    assert page.actives["java:S1"][0].severity == Severity.MAJOR

  def test_profile_reference_on_activation_is_ignored(self) -> None:
    page = decode_page(_encode({
      "actives": {"java:S1": [{"qProfile": "java-sonar-way", "inherit": "NONE"}]},
      "paging": {"pageSize": 1, "total": 1},
    }))

    assert not hasattr(page.actives["java:S1"][0], "q_profile")

  def test_missing_paging(self) -> None:
    with pytest.raises(DecodeError, match="no paging"):
      decode_page(_encode({"rules": []}))

  def test_negative_total(self) -> None:
    with pytest.raises(DecodeError, match="negative total"):
      decode_page(_encode({"paging": {"pageSize": 1, "total": -1}}))
