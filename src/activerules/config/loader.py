"""Configuration file loading."""

import os
from pathlib import Path

import yaml

from activerules.config.settings import Settings
from activerules.models import Severity

CONFIG_FILENAMES = [
  ".activerules.yaml",
  ".activerules.yml",
  "activerules.yaml",
  "activerules.yml",
]
SERVER_URL_ENV = "SONAR_HOST_URL"


def _find_config_file(config_path: Path | None = None) -> Path | None:
  """Find config file path, or None if no config exists."""
  if config_path:
    return config_path

  for filename in CONFIG_FILENAMES:
    path = Path.cwd() / filename
    if path.exists():
      return path

  return None


def load_config(config_path: Path | None = None) -> Settings:
  """Load configuration from file or defaults, then apply environment."""
  path = _find_config_file(config_path)
  data = _read_file(path) if path else {}

  if os.environ.get(SERVER_URL_ENV):
    data["server_url"] = os.environ[SERVER_URL_ENV]

  return _parse_config(data)


def _read_file(path: Path) -> dict:
  """Read raw settings from a YAML file."""
  if not path.exists():
    raise FileNotFoundError(f"Config file not found: {path}")

  with open(path) as f:
    return yaml.safe_load(f) or {}


def _parse_config(data: dict) -> Settings:
  """Parse config dict into Settings."""
  if "default_severity" in data:
    data["default_severity"] = Severity(str(data["default_severity"]).upper())

  return Settings(**data)
