"""Rule search page decoding."""

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from activerules.errors import DecodeError
from activerules.models import PagingInfo, Severity

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


class _WireModel(BaseModel):
  model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class RuleParam(_WireModel):
  """A rule parameter declared in the catalog."""

  key: str
  default_value: str | None = Field(None, alias="defaultValue")


class DeprecatedKeys(_WireModel):
  deprecated_key: list[str] = Field(default_factory=list, alias="deprecatedKey")


class RuleEntry(_WireModel):
  """One rule of the catalog, as returned by the rule search."""

  key: str
  name: str | None = None
  lang: str | None = None
  internal_key: str | None = Field(None, alias="internalKey")
  template_key: str | None = Field(None, alias="templateKey")
  # Catalog default severity; never merged
  severity: str | None = None
  params: list[RuleParam] = Field(default_factory=list)
  deprecated_keys: DeprecatedKeys | None = Field(None, alias="deprecatedKeys")


class ActiveParam(_WireModel):
  key: str
  value: str = ""


class ActiveEntry(_WireModel):
  """Activation of a rule in the requested quality profile."""

  severity: Severity | None = None
  params: list[ActiveParam] = Field(default_factory=list)
  created_at: datetime | None = Field(None, alias="createdAt")
  updated_at: datetime | None = Field(None, alias="updatedAt")

  @field_validator("created_at", "updated_at", mode="before")
  @classmethod
  def _parse_timestamp(cls, value: object) -> object:
    # Server timestamps carry offsets without a colon, e.g. +0100
    if isinstance(value, str):
      return datetime.strptime(value, TIMESTAMP_FORMAT)
    return value


class Paging(_WireModel):
  page_index: int = Field(1, alias="pageIndex")
  page_size: int = Field(alias="pageSize")
  total: int


class SearchResponse(_WireModel):
  """Top-level rule search payload."""

  rules: list[RuleEntry] = Field(default_factory=list)
  actives: dict[str, list[ActiveEntry]] = Field(default_factory=dict)
  paging: Paging | None = None
  # Older servers report paging at the top level
  total: int | None = None
  p: int | None = None
  ps: int | None = None

  def paging_info(self) -> PagingInfo | None:
    if self.paging is not None:
      return PagingInfo(self.paging.page_index, self.paging.page_size, self.paging.total)
    if self.total is not None and self.ps is not None:
      return PagingInfo(self.p or 1, self.ps, self.total)
    return None


@dataclass(frozen=True)
class Page:
  """One decoded page: catalog entries, activation index and paging."""

  rules: list[RuleEntry]
  actives: dict[str, list[ActiveEntry]]
  paging: PagingInfo


def decode_page(raw: bytes) -> Page:
  """Decode one page of a rule search response.

  Does not check that catalog entries and activations agree.

  Raises:
    DecodeError: If the payload is not valid JSON, does not match the
      rule search schema, or carries no paging information.
  """
  try:
    response = SearchResponse.model_validate_json(raw)
  except ValidationError as e:
    raise DecodeError(f"Malformed rule search page: {e}") from e

  paging = response.paging_info()
  if paging is None:
    raise DecodeError("Rule search page carries no paging information")
  if paging.total < 0:
    raise DecodeError(f"Rule search page declares a negative total: {paging.total}")

  return Page(rules=response.rules, actives=response.actives, paging=paging)
