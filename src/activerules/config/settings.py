"""Application settings."""

from pydantic import BaseModel, ConfigDict

from activerules.models import Severity


class Settings(BaseModel):
  """Application configuration."""

  model_config = ConfigDict(use_enum_values=False)

  server_url: str = "http://localhost:9000"
  timeout: float = 30.0
  # Applied when an activation carries no severity of its own
  default_severity: Severity = Severity.MAJOR
  format: str = "terminal"
