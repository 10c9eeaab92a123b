"""Merge of a page's rule catalog with its activation records."""

import logging
from typing import Mapping, Sequence

from activerules.errors import DecodeError, IndexInconsistencyError
from activerules.models import LoadedActiveRule, RuleKey, Severity
from activerules.wire.decoder import ActiveEntry, RuleEntry

logger = logging.getLogger("activerules.merge")


def merge_page(
  rules: Sequence[RuleEntry],
  actives: Mapping[str, Sequence[ActiveEntry]],
  default_severity: Severity,
) -> list[LoadedActiveRule]:
  """Join catalog entries with their activations, in catalog order.

  Every catalog entry must have at least one activation under its key. The
  first activation is authoritative.

  Args:
    rules: Catalog entries of one page, in server order.
    actives: Activation records of the same page, keyed by rule key string.
    default_severity: Used when an activation carries no severity.

  Returns:
    One LoadedActiveRule per catalog entry.

  Raises:
    IndexInconsistencyError: A catalog entry has no activation.
    DecodeError: A rule key in the page cannot be parsed.
  """
  loaded: list[LoadedActiveRule] = []

  for rule in rules:
    activations = actives.get(rule.key)
    if not activations:
      logger.error("No activation for rule %s in page", rule.key)
      raise IndexInconsistencyError(rule.key)

    if len(activations) > 1:
      logger.warning(
        "Rule %s has %d activations, using the first", rule.key, len(activations)
      )

    loaded.append(_merge_rule(rule, activations[0], default_severity))

  return loaded


def _merge_rule(
  rule: RuleEntry, active: ActiveEntry, default_severity: Severity
) -> LoadedActiveRule:
  params = {p.key: p.default_value for p in rule.params if p.default_value is not None}
  # Activation values override rule defaults of the same key
  params.update({p.key: p.value for p in active.params})

  template_rule_key = None
  if rule.template_key:
    template_rule_key = _parse_key(rule.template_key).rule

  deprecated: frozenset[RuleKey] = frozenset()
  if rule.deprecated_keys:
    deprecated = frozenset(_parse_key(k) for k in rule.deprecated_keys.deprecated_key)

  return LoadedActiveRule(
    rule_key=_parse_key(rule.key),
    severity=active.severity or default_severity,
    params=params,
    name=rule.name,
    language=rule.lang,
    internal_key=rule.internal_key,
    template_rule_key=template_rule_key,
    deprecated_keys=deprecated,
    created_at=active.created_at,
    updated_at=active.updated_at,
  )


def _parse_key(value: str) -> RuleKey:
  try:
    return RuleKey.parse(value)
  except ValueError as e:
    raise DecodeError(str(e)) from e
