"""Hosting redirect/rewrite rules that mirror the generated routes.

Redirects send un-prefixed URLs of the default language to their prefixed
path; rewrites route every unknown URL below a language root to that
language's 404 page.  Generated rules are appended to a static baseline and
the merged document replaces the hosting rules file wholesale.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from sitegen.models.hosting import RedirectRule, RewriteRule
from sitegen.services.errors import HostingRulesError

logger = logging.getLogger(__name__)

_RULE_SECTIONS = ("redirects", "rewrites")


def redirect_rule(default_lang: str, path: str) -> RedirectRule:
    """Redirect *path* without its default-language prefix to *path*."""
    return RedirectRule(source=path[len(default_lang) + 1 :], destination=path)


def rewrite_rule(lang: str) -> RewriteRule:
    """Serve the 404 page of *lang* for any unmatched URL below its root."""
    return RewriteRule(source=f"/{lang}/**", destination=f"/{lang}/404/index.html")


def load_baseline(path: Path) -> Dict[str, Any]:
    """Read and validate the baseline hosting document at *path*.

    Raises:
        HostingRulesError: if the file is missing, is not valid JSON, or has
            no ``hosting`` object.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise HostingRulesError(f"Cannot read baseline hosting rules {path}: {exc}") from exc

    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise HostingRulesError(f"Baseline hosting rules {path} are not valid JSON: {exc}") from exc

    validate_baseline(document)
    return document


def validate_baseline(document: Any) -> None:
    """Raise :class:`HostingRulesError` unless *document* can be merged into."""
    if not isinstance(document, dict) or not isinstance(document.get("hosting"), dict):
        raise HostingRulesError("Baseline hosting rules must contain a 'hosting' object.")
    for section in _RULE_SECTIONS:
        rules = document["hosting"].get(section, [])
        if not isinstance(rules, list):
            raise HostingRulesError(f"Baseline 'hosting.{section}' must be a list.")


def merge_hosting_rules(
    baseline: Dict[str, Any],
    redirects: List[RedirectRule],
    rewrites: List[RewriteRule],
) -> Dict[str, Any]:
    """Return a copy of *baseline* with the generated rules appended.

    Baseline rules keep their order at the front of each list; every other
    key of the baseline document is preserved untouched.
    """
    validate_baseline(baseline)
    document = copy.deepcopy(baseline)
    hosting = document["hosting"]
    hosting["redirects"] = list(hosting.get("redirects", [])) + [
        rule.model_dump() for rule in redirects
    ]
    hosting["rewrites"] = list(hosting.get("rewrites", [])) + [
        rule.model_dump() for rule in rewrites
    ]
    return document


def render_hosting_rules(document: Dict[str, Any]) -> str:
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def write_hosting_rules(path: Path, document: Dict[str, Any]) -> None:
    """Overwrite *path* with *document*.

    Raises:
        HostingRulesError: if the file cannot be written.
    """
    try:
        Path(path).write_text(render_hosting_rules(document), encoding="utf-8")
    except OSError as exc:
        raise HostingRulesError(f"Cannot write hosting rules {path}: {exc}") from exc
    logger.info(
        "Hosting rules written to %s",
        path,
        extra={
            "redirects": len(document["hosting"]["redirects"]),
            "rewrites": len(document["hosting"]["rewrites"]),
        },
    )
