"""Base transport protocol."""

from abc import ABC, abstractmethod


class Transport(ABC):
  """Abstract source of raw page bytes."""

  @abstractmethod
  def fetch(self, url: str) -> bytes:
    """Fetch the body of a request target.

    Raises:
      TransportError: If the server cannot be reached or answers with an
        error status.
    """
    ...

  def close(self) -> None:
    """Release any held resources."""

  def __enter__(self) -> "Transport":
    return self

  def __exit__(self, *exc_info: object) -> None:
    self.close()
