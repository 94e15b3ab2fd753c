from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict


class Duration(str, Enum):
    """Lookback window for the repository creation date."""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]


class TrendingQuery(BaseModel):
    """
    Validated parameters for a single trending lookup.
    Build it through `validate_query` so callers get the domain error messages.
    """
    model_config = ConfigDict(frozen=True)

    duration: Duration = Field(..., description="Creation-date lookback window")
    limit: int = Field(..., ge=1, le=100, description="Page size of the single search request")


class RepositorySummary(BaseModel):
    """
    Immutable view of a GitHub repository as exposed to CLI and HTTP callers.
    Field names mirror the upstream REST keys; any other upstream field is dropped.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    full_name: str = Field(..., description="owner/name of the repository")
    html_url: str = Field(..., description="Browser URL of the repository")
    stargazers_count: int = Field(0, ge=0, description="Total number of stargazers")
    forks_count: int = Field(0, ge=0, description="Total number of forks")
    language: Optional[str] = Field(None, description="Primary language, if GitHub detected one")
    description: Optional[str] = Field(None, description="Repository description")
