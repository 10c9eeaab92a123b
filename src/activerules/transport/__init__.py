"""Transports that fetch raw rule search pages."""

from activerules.transport.base import Transport
from activerules.transport.http import HttpTransport

__all__ = ["HttpTransport", "Transport"]
