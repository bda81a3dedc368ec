"""``sitegen-build``: one on-disk generation pass for the static site build."""

import argparse
import asyncio
import logging
import os
from pathlib import Path
from typing import List, Optional

from sitegen.logging_config import configure_logging
from sitegen.models.build_mode import BuildMode
from sitegen.services.errors import GenerationError
from sitegen.services.pipeline import run_build
from sitegen.services.sink import JsonManifestSink
from sitegen.services.site_config import load_site_config
from sitegen.services.translations import fetch_translation_records, load_translation_records

logger = logging.getLogger(__name__)

# Environment switch for the build mode when --mode is not given
ENV_VAR = "SITEGEN_ENV"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate localized pages and sync the hosting redirect/rewrite rules",
    )
    parser.add_argument("--config", default="config/site-config.json", help="Site config JSON file")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--translations", help="JSON export of the translation namespaces")
    source.add_argument("--endpoint", help="GraphQL endpoint of the content store")
    parser.add_argument(
        "--baseline",
        default="config/firebase-defaults.json",
        help="Baseline hosting rules the generated rules are appended to",
    )
    parser.add_argument("--output", default="firebase.json", help="Hosting rules file to overwrite")
    parser.add_argument("--manifest", default="pages.json", help="Where to write the generated pages")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in BuildMode],
        default=None,
        help=f"Build mode (default: local_preview when {ENV_VAR}=development, else production)",
    )
    parser.add_argument(
        "--component-root",
        default=None,
        help="Directory page components are resolved against",
    )
    return parser


def resolve_mode(value: Optional[str]) -> BuildMode:
    if value:
        return BuildMode(value)
    return BuildMode.from_environment(os.environ.get(ENV_VAR))


def run(args: argparse.Namespace) -> int:
    try:
        config = load_site_config(Path(args.config))
    except ValueError as exc:
        logger.error("%s", exc)
        return 2

    try:
        if args.endpoint:
            records = asyncio.run(fetch_translation_records(args.endpoint))
        else:
            records = load_translation_records(Path(args.translations))

        sink = JsonManifestSink(Path(args.manifest))
        run_build(
            config,
            records,
            sink,
            mode=resolve_mode(args.mode),
            baseline_path=Path(args.baseline),
            output_path=Path(args.output),
            component_root=Path(args.component_root) if args.component_root else None,
        )
    except GenerationError as exc:
        logger.error("Page generation failed: %s", exc)
        return 1

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
