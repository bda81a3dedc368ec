import logging
from pathlib import Path

from pydantic import ValidationError

from sitegen.models.page import SiteConfig

logger = logging.getLogger(__name__)


def load_site_config(path: Path) -> SiteConfig:
    """Read and validate ``site-config.json``.

    Raises:
        ValueError: if the file cannot be read or does not describe a site.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ValueError(f"Cannot read site config {path}: {exc}") from exc

    try:
        config = SiteConfig.model_validate_json(text)
    except ValidationError as exc:
        raise ValueError(f"Invalid site config {path}: {exc}") from exc

    logger.info(
        "Loaded site config %s",
        path,
        extra={"languages": config.languages, "root_pages": len(config.pages)},
    )
    return config
