"""Shared test doubles and constants."""

from activerules.errors import TransportError
from activerules.transport.base import Transport

EXAMPLE_KEY = "java:S108"
FORMAT_KEY = "format"
FORMAT_VALUE = "^[a-z][a-zA-Z0-9]*$"
TIMESTAMP = "2014-05-27T15:50:45+0100"


class FakeTransport(Transport):
  """Serves canned pages by URL and records every request."""

  def __init__(self, pages: dict[str, bytes] | None = None):
    self.pages = dict(pages or {})
    self.requests: list[str] = []
    self.closed = False

  def fetch(self, url: str) -> bytes:
    self.requests.append(url)
    if url not in self.pages:
      raise TransportError(f"Unexpected request: {url}")
    return self.pages[url]

  def close(self) -> None:
    self.closed = True
