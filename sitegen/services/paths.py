"""URL path building and cross-language alternate links."""

from typing import List, Optional

from sitegen.models.page import HOME_PAGE
from sitegen.models.route import AlternateLink
from sitegen.models.translation import SlugTable
from sitegen.services.slugs import lookup_slug


def language_root(lang: str) -> str:
    return f"/{lang}"


def build_path(
    table: SlugTable,
    lang: str,
    page_name: str,
    parent_path: Optional[str] = None,
) -> str:
    """Return the URL path of *page_name* in *lang*.

    The root home page maps to the language root.  Every other page appends
    its localized slug to *parent_path*, or to the language root for root
    pages.
    """
    if parent_path is None:
        if page_name == HOME_PAGE:
            return language_root(lang)
        parent_path = language_root(lang)
    return f"{parent_path}/{lookup_slug(table, lang, page_name)}"


def build_alternate_links(
    table: SlugTable,
    languages: List[str],
    page_name: str,
    parent_links: Optional[List[AlternateLink]] = None,
) -> List[AlternateLink]:
    """Return the path of *page_name* in every configured language.

    Root pages compute each language's path on its own.  Child pages extend
    the parent's alternate links, looking the child slug up in each link's
    own language so that every path stays fully localized at any depth.
    """
    if parent_links is None:
        return [
            AlternateLink(path=build_path(table, lang, page_name), lang=lang)
            for lang in languages
        ]
    return [
        AlternateLink(
            path=f"{link.path}/{lookup_slug(table, link.lang, page_name)}",
            lang=link.lang,
        )
        for link in parent_links
    ]
