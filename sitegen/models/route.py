from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AlternateLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    lang: str


class RouteContext(BaseModel):
    """Data handed to the page component when it is rendered."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    lang: str
    namespaces: List[str]
    alternate_links: List[AlternateLink] = Field(alias="alternateLinks")
    meta_robots: Optional[str] = Field(default=None, alias="metaRobots")


class RouteDescriptor(BaseModel):
    """One concrete, routable page: a (language, tree node) pair."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    path: str
    component: str
    context: RouteContext
    match_path: Optional[str] = Field(default=None, alias="matchPath")

    def to_page(self) -> Dict[str, Any]:
        """Serialize for the rendering framework, omitting unset properties."""
        return self.model_dump(by_alias=True, exclude_none=True)
