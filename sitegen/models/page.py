from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Identifiers with special handling in path building and rule synthesis
HOME_PAGE = "home"
NOT_FOUND_PAGE = "404"


class PageDefinition(BaseModel):
    """One logical page of the site, optionally with nested children."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = Field(min_length=1)
    component: str
    namespaces: List[str] = Field(default_factory=list)
    meta_robots: Optional[str] = Field(default=None, alias="metaRobots")
    children: Optional[List["PageDefinition"]] = None

    @field_validator("children")
    @classmethod
    def _unique_child_names(cls, children: Optional[List["PageDefinition"]]):
        if children:
            _check_unique_names(children)
        return children


class SiteConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    languages: List[str] = Field(min_length=1)
    pages: List[PageDefinition]
    generate_hosting_rules: bool = Field(
        default=False,
        alias="generateFirebaseHostingRules",
        description="Rewrite the hosting rules file after generating the pages.",
    )

    @field_validator("languages")
    @classmethod
    def _unique_languages(cls, languages: List[str]) -> List[str]:
        if len(set(languages)) != len(languages):
            raise ValueError("languages must not contain duplicates")
        return languages

    @field_validator("pages")
    @classmethod
    def _unique_page_names(cls, pages: List[PageDefinition]) -> List[PageDefinition]:
        _check_unique_names(pages)
        return pages


def _check_unique_names(pages: List[PageDefinition]) -> None:
    seen: set = set()
    for page in pages:
        if page.name in seen:
            raise ValueError(f"duplicate page name '{page.name}' in the same scope")
        seen.add(page.name)
