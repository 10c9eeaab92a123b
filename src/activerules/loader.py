"""Paginated loading of a quality profile's active rules."""

import logging
from dataclasses import dataclass

from activerules.config import Settings
from activerules.errors import ActiveRulesError, DecodeError
from activerules.merge import merge_page
from activerules.models import LoadedActiveRule, Severity
from activerules.transport import HttpTransport, Transport
from activerules.wire import build_search_url, decode_page

logger = logging.getLogger("activerules.loader")


@dataclass(frozen=True)
class _Step:
  """Loader state: FETCHING a page until done, DONE once the total is met.

  FAILED is not a value here; any error raised out of a step ends the load.
  """

  page: int
  accumulated: int
  done: bool = False


class ActiveRulesLoader:
  """Loads every active rule of a quality profile, page by page.

  Pages are requested sequentially until the running count reaches the total
  the server declares. A load either returns the complete, ordered rule set
  or raises; partial results never escape.

  Example:
    with HttpTransport("https://sonar.example.com") as transport:
      rules = ActiveRulesLoader(transport).load("java-sonar-way-12345")
  """

  def __init__(self, transport: Transport, default_severity: Severity = Severity.MAJOR):
    self._transport = transport
    self._default_severity = default_severity

  def load(self, profile_key: str) -> list[LoadedActiveRule]:
    """Load the active rules of a quality profile.

    Raises:
      TransportError: A page could not be fetched.
      DecodeError: A page payload was malformed.
      IndexInconsistencyError: A rule on a page has no activation.
    """
    # Owned by this call only; dropped on failure
    loaded: list[LoadedActiveRule] = []
    step = _Step(page=1, accumulated=0)

    try:
      while not step.done:
        url = build_search_url(profile_key, step.page)
        logger.debug("Fetching active rules page %d for %s", step.page, profile_key)

        page = decode_page(self._transport.fetch(url))
        page_rules = merge_page(page.rules, page.actives, self._default_severity)
        loaded.extend(page_rules)
        accumulated = step.accumulated + len(page_rules)

        if accumulated > page.paging.total:
          raise DecodeError(
            f"Server returned {accumulated} rules, more than the declared "
            f"total of {page.paging.total}"
          )
        if accumulated == page.paging.total:
          step = _Step(page=step.page, accumulated=accumulated, done=True)
        elif not page_rules:
          raise DecodeError(
            f"Server returned an empty page {step.page} before the declared "
            f"total of {page.paging.total} rules ({accumulated} loaded)"
          )
        else:
          step = _Step(page=step.page + 1, accumulated=accumulated)
    except ActiveRulesError as e:
      logger.debug("Load of %s failed on page %d: %s", profile_key, step.page, e)
      raise

    logger.info("Loaded %d active rules for %s", len(loaded), profile_key)
    return loaded


def load_active_rules(
  profile_key: str,
  settings: Settings | None = None,
  transport: Transport | None = None,
) -> list[LoadedActiveRule]:
  """Load a profile's active rules using configured settings.

  A transport built from settings is closed afterwards; a given one is not.
  """
  settings = settings or Settings()

  if transport is not None:
    loader = ActiveRulesLoader(transport, settings.default_severity)
    return loader.load(profile_key)

  with HttpTransport(settings.server_url, settings.timeout) as http:
    loader = ActiveRulesLoader(http, settings.default_severity)
    return loader.load(profile_key)
