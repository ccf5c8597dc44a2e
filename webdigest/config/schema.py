"""Configuration schema using Pydantic."""

from pydantic import BaseModel, Field

from webdigest.tools.websearch.client import (
    DEFAULT_NEWS_URL,
    DEFAULT_SEARCH_URL,
    DEFAULT_USER_AGENT,
)


class WebSearchConfig(BaseModel):
    """HTML results-page search configuration."""

    base_url: str = DEFAULT_SEARCH_URL
    max_results: int = 5
    allowed_domains: list[str] = Field(default_factory=list)


class NewsSearchConfig(BaseModel):
    """News feed search configuration."""

    base_url: str = DEFAULT_NEWS_URL
    max_results: int = 5
    language: str = "en-US"
    region: str = "US"


class WebFetchConfig(BaseModel):
    """Page fetch configuration."""

    max_chars: int = 8000
    allow_private_network: bool = False


class HttpConfig(BaseModel):
    """Shared HTTP client configuration."""

    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = 10.0


class WebToolsConfig(BaseModel):
    """Web tools configuration."""

    search: WebSearchConfig = Field(default_factory=WebSearchConfig)
    news: NewsSearchConfig = Field(default_factory=NewsSearchConfig)
    fetch: WebFetchConfig = Field(default_factory=WebFetchConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)


class ToolsConfig(BaseModel):
    """Tools configuration."""

    web: WebToolsConfig = Field(default_factory=WebToolsConfig)


class Config(BaseModel):
    """Root configuration for webdigest."""

    tools: ToolsConfig = Field(default_factory=ToolsConfig)
