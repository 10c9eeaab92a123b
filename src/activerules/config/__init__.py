"""Configuration management."""

from activerules.config.loader import load_config
from activerules.config.settings import Settings

__all__ = ["Settings", "load_config"]
