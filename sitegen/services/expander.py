"""Page tree expansion: one route per (language, page) with alternate links.

The walk is a pure recursive function.  Each subtree returns its own
:class:`Expansion`, which the caller folds into its result, so any subtree
can be expanded and inspected on its own.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from sitegen.models.build_mode import BuildMode
from sitegen.models.hosting import RedirectRule, RewriteRule
from sitegen.models.page import HOME_PAGE, NOT_FOUND_PAGE, PageDefinition
from sitegen.models.route import AlternateLink, RouteContext, RouteDescriptor
from sitegen.models.translation import SlugTable
from sitegen.services.errors import PageTreeError
from sitegen.services.hosting import redirect_rule, rewrite_rule
from sitegen.services.paths import build_alternate_links, build_path

logger = logging.getLogger(__name__)

# Deeper trees are almost certainly a config mistake
MAX_TREE_DEPTH = 32

# Pages that never get an un-prefixed redirect
_NO_REDIRECT_PAGES = frozenset({HOME_PAGE, NOT_FOUND_PAGE})

_LANGUAGE_404_PATH = re.compile(r"^/[a-z]{2}/404$")


@dataclass
class Expansion:
    routes: List[RouteDescriptor] = field(default_factory=list)
    redirects: List[RedirectRule] = field(default_factory=list)
    rewrites: List[RewriteRule] = field(default_factory=list)

    def extend(self, other: "Expansion") -> None:
        self.routes.extend(other.routes)
        self.redirects.extend(other.redirects)
        self.rewrites.extend(other.rewrites)


@dataclass(frozen=True)
class SiteSnapshot:
    """Inputs shared by every node of one expansion pass."""

    table: SlugTable
    languages: List[str]
    mode: BuildMode = BuildMode.PRODUCTION
    component_root: Optional[Path] = None

    @property
    def default_language(self) -> str:
        return self.languages[0]


def expand_site(site: SiteSnapshot, pages: List[PageDefinition]) -> Expansion:
    """Expand every root page in every language.

    Rules come out in language order; each language's rewrite follows the
    redirects of its pages.
    """
    result = Expansion()
    for lang in site.languages:
        for page in pages:
            result.extend(expand_page(site, lang, page))
        result.rewrites.append(rewrite_rule(lang))
    logger.info(
        "Expanded page tree",
        extra={
            "languages": len(site.languages),
            "routes": len(result.routes),
            "redirects": len(result.redirects),
        },
    )
    return result


def expand_page(
    site: SiteSnapshot,
    lang: str,
    page: PageDefinition,
    parent_path: Optional[str] = None,
    parent_links: Optional[List[AlternateLink]] = None,
    depth: int = 0,
) -> Expansion:
    """Expand *page* and its descendants for *lang*.

    Raises:
        MissingSlugError: if a page in the subtree lacks a slug in any language.
        PageTreeError: if the subtree is deeper than :data:`MAX_TREE_DEPTH`.
    """
    if depth >= MAX_TREE_DEPTH:
        raise PageTreeError(
            f"Page '{page.name}' is nested deeper than {MAX_TREE_DEPTH} levels."
        )

    path = build_path(site.table, lang, page.name, parent_path)

    redirects: List[RedirectRule] = []
    if lang == site.default_language and page.name not in _NO_REDIRECT_PAGES:
        redirects.append(redirect_rule(site.default_language, path))

    links = build_alternate_links(site.table, site.languages, page.name, parent_links)

    route = RouteDescriptor(
        path=path,
        component=_resolve_component(page.component, site.component_root),
        context=RouteContext(
            lang=lang,
            namespaces=list(page.namespaces),
            alternate_links=links,
            meta_robots=page.meta_robots or None,
        ),
        match_path=_match_path(site, lang, path),
    )

    result = Expansion(routes=[route], redirects=redirects)
    for child in page.children or []:
        result.extend(expand_page(site, lang, child, path, links, depth + 1))
    return result


def _match_path(site: SiteSnapshot, lang: str, path: str) -> Optional[str]:
    """Wildcard match path for 404 pages in local preview, else *None*."""
    if site.mode is not BuildMode.LOCAL_PREVIEW:
        return None
    default_404 = f"/{site.default_language}/{NOT_FOUND_PAGE}"
    if path == default_404:
        return "/*"
    if _LANGUAGE_404_PATH.match(path):
        return f"/{lang}/*"
    return None


def _resolve_component(component: str, root: Optional[Path]) -> str:
    if root is None:
        return component
    return str((Path(root) / component).resolve())
