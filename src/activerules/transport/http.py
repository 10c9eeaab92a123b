"""HTTP transport backed by httpx."""

import logging

import httpx

from activerules.errors import TransportError
from activerules.transport.base import Transport

logger = logging.getLogger("activerules.transport.http")


class HttpTransport(Transport):
  """Fetches pages from an analysis server over HTTP."""

  DEFAULT_TIMEOUT = 30.0

  def __init__(
    self,
    server_url: str,
    timeout: float = DEFAULT_TIMEOUT,
    client: httpx.Client | None = None,
  ):
    self._server_url = server_url.rstrip("/")
    self._client = client or httpx.Client(base_url=self._server_url, timeout=timeout)

  @property
  def server_url(self) -> str:
    return self._server_url

  def fetch(self, url: str) -> bytes:
    logger.debug("GET %s%s", self._server_url, url)
    try:
      response = self._client.get(url)
      response.raise_for_status()
    except httpx.HTTPStatusError as e:
      status = e.response.status_code
      raise TransportError(
        f"Server returned HTTP {status} for {url}", status_code=status
      ) from e
    except httpx.HTTPError as e:
      raise TransportError(f"Failed to reach {self._server_url}: {e}") from e
    return response.content

  def close(self) -> None:
    self._client.close()
