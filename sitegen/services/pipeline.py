"""One generation pass: translations → routes + hosting rules."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from sitegen.models.hosting import RedirectRule, RewriteRule
from sitegen.models.page import SiteConfig
from sitegen.models.route import RouteDescriptor
from sitegen.models.translation import TranslationRecord
from sitegen.services.errors import HostingRulesError
from sitegen.models.build_mode import BuildMode
from sitegen.services.expander import SiteSnapshot, expand_site
from sitegen.services.hosting import load_baseline, merge_hosting_rules, write_hosting_rules
from sitegen.services.sink import RouteSink
from sitegen.services.slugs import build_slug_table, translations_ready

logger = logging.getLogger(__name__)

Baseline = Union[Dict[str, Any], Path, None]


@dataclass
class GenerationResult:
    ready: bool
    routes: List[RouteDescriptor] = field(default_factory=list)
    redirects: List[RedirectRule] = field(default_factory=list)
    rewrites: List[RewriteRule] = field(default_factory=list)
    hosting: Optional[Dict[str, Any]] = None


def generate(
    config: SiteConfig,
    records: Iterable[TranslationRecord],
    mode: BuildMode = BuildMode.PRODUCTION,
    baseline: Baseline = None,
    component_root: Optional[Path] = None,
) -> GenerationResult:
    """Compute routes and hosting rules without side effects.

    *baseline* is the baseline hosting document, or a path it is read from
    once the translations are known to be ready.  It is required when the
    config enables hosting rule generation.

    Returns a result with ``ready=False`` and nothing else when any language
    has no translations yet.

    Raises:
        MissingSlugError: if a page lacks a slug in some language.
        PageTreeError: if the page tree is too deep.
        HostingRulesError: if hosting rules are enabled and the baseline is
            missing or malformed.
    """
    table = build_slug_table(config.languages, records)
    if not translations_ready(table):
        logger.warning("Translations are not ready – skipping page generation")
        return GenerationResult(ready=False)

    site = SiteSnapshot(
        table=table,
        languages=list(config.languages),
        mode=mode,
        component_root=component_root,
    )
    expansion = expand_site(site, list(config.pages))

    hosting = None
    if config.generate_hosting_rules:
        hosting = merge_hosting_rules(
            _baseline_document(baseline), expansion.redirects, expansion.rewrites
        )

    return GenerationResult(
        ready=True,
        routes=expansion.routes,
        redirects=expansion.redirects,
        rewrites=expansion.rewrites,
        hosting=hosting,
    )


def run_build(
    config: SiteConfig,
    records: Iterable[TranslationRecord],
    sink: RouteSink,
    mode: BuildMode = BuildMode.PRODUCTION,
    baseline_path: Optional[Path] = None,
    output_path: Optional[Path] = None,
    component_root: Optional[Path] = None,
) -> GenerationResult:
    """Run a full pass: register every route with *sink* and persist the rules.

    Nothing is registered or written unless the whole expansion succeeds.
    The sink is closed before the hosting rules are written, so a failed
    route hand-off leaves the rules file untouched.

    Raises:
        RouteSinkError: if the sink cannot store the routes.
        HostingRulesError: if the rules file cannot be read or written.
    """
    if config.generate_hosting_rules and output_path is None:
        raise HostingRulesError("Hosting rule generation is enabled but no output file is set.")

    result = generate(config, records, mode, baseline_path, component_root)
    if not result.ready:
        return result

    for route in result.routes:
        sink.create_page(route)
    sink.close()
    logger.info("Registered %d pages", len(result.routes))

    if result.hosting is not None:
        write_hosting_rules(output_path, result.hosting)
    return result


def _baseline_document(baseline: Baseline) -> Dict[str, Any]:
    if baseline is None:
        raise HostingRulesError("Hosting rule generation is enabled but no baseline was given.")
    if isinstance(baseline, dict):
        return baseline
    return load_baseline(Path(baseline))
