"""Pydantic configuration models for search coach components."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

# ============================================================
# Filter Config
# ============================================================


class FilterConfig(BaseModel):
    """Allow-lists used to validate search filter values."""

    markets: tuple[str, ...] = ("en-US", "ja-JP", "fr-FR", "de-DE", "it-IT", "ru-RU", "ko-KR")
    domains: tuple[str, ...] = (".com", ".org", ".mil", ".gov", ".edu", ".net")
    no_filter_market: str = "nf"
    domain_delimiter: str = ";"

    model_config = {"frozen": True}

    @field_validator("domain_delimiter")
    @classmethod
    def delimiter_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("domain_delimiter must not be empty")
        return v


# ============================================================
# Search Provider Config
# ============================================================


class BingSearchConfig(BaseModel):
    """Configuration for the Bing Web Search provider."""

    type: Literal["bing"] = "bing"
    api_url: str = "https://api.bing.microsoft.com/v7.0/search"
    api_key: str | None = None
    safe_search: str = "Strict"
    default_market: str = "en-US"
    page_size: int = Field(default=20, ge=1, le=50)
    offset: int = Field(default=0, ge=0)
    timeout_seconds: float = 30.0
    retries: int = Field(default=2, ge=0)

    model_config = {"frozen": True}


# ============================================================
# Identity Service Config
# ============================================================


class GraphConfig(BaseModel):
    """Configuration for display name lookups against Microsoft Graph."""

    base_url: str = "https://graph.microsoft.com/v1.0"
    timeout_seconds: float = 30.0

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for application logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "%(message)s"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class SearchCoachConfig(BaseModel):
    """Root configuration for the search coach."""

    search: BingSearchConfig = Field(default_factory=BingSearchConfig)
    filters: FilterConfig = Field(default_factory=FilterConfig)
    graph: GraphConfig = Field(default_factory=GraphConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
