from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

NO_SUMMARY = "No summary found"


class TimeRange(str, Enum):
    day = "day"
    week = "week"
    month = "month"
    year = "year"


class SearchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str = Field(min_length=1)
    summary: str = NO_SUMMARY


class QueryRequest(BaseModel):
    """One logical search call. Frozen for the duration of the call."""

    model_config = ConfigDict(frozen=True)

    query: str
    time_range: Optional[TimeRange] = None
    language: Optional[str] = None
    page: int = Field(default=1, ge=1)
    detailed: bool = False

    @field_validator("time_range", "language", mode="before")
    @classmethod
    def _blank_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class FetchStatus(str, Enum):
    html = "html"
    transport_error = "transport_error"
    bot_redirect = "bot_redirect"


@dataclass
class FetchOutcome:
    """Classification of one page fetch against one endpoint."""

    status: FetchStatus
    endpoint: str
    page: int = 1
    html: str = ""
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.status == FetchStatus.html
