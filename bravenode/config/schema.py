"""Configuration schema using Pydantic."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

BRAVE_SEARCH_URL = "https://api.search.brave.com/res/v1/web/search"


class Base(BaseModel):
    """Base model that accepts both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BraveSearchConfig(Base):
    """Brave Search API credentials and endpoint."""

    api_key: str = ""
    base_url: str = BRAVE_SEARCH_URL


class NodeConfig(Base):
    """Execution behaviour of the search node."""

    continue_on_fail: bool = False


class Config(Base):
    """Root configuration for bravenode."""

    brave: BraveSearchConfig = Field(default_factory=BraveSearchConfig)
    node: NodeConfig = Field(default_factory=NodeConfig)
