"""Wire-level request and response handling for rule search."""

from activerules.wire.decoder import Page, decode_page
from activerules.wire.url import PAGE_SIZE, RULE_FIELDS, build_search_url

__all__ = ["PAGE_SIZE", "RULE_FIELDS", "Page", "build_search_url", "decode_page"]
