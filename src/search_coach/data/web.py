"""Pydantic model for provider web page results."""

from pydantic import BaseModel, ConfigDict, Field


class WebPageResult(BaseModel):
    """A single ``webPages.value`` item from the Bing Web Search response.

    Only the commonly used fields are declared. Anything else the provider
    sends is kept as an extra attribute and survives ``model_dump``.
    """

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    id: str | None = None
    name: str | None = None
    url: str | None = None
    display_url: str | None = Field(default=None, alias="displayUrl")
    snippet: str | None = None
    date_last_crawled: str | None = Field(default=None, alias="dateLastCrawled")
    language: str | None = None
    is_family_friendly: bool | None = Field(default=None, alias="isFamilyFriendly")
    is_navigational: bool | None = Field(default=None, alias="isNavigational")

    @property
    def title(self) -> str:
        return self.name or ""
