"""Destinations for generated routes."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Protocol

from sitegen.models.route import RouteDescriptor
from sitegen.services.errors import RouteSinkError

logger = logging.getLogger(__name__)


class RouteSink(Protocol):
    def create_page(self, route: RouteDescriptor) -> None:
        ...

    def close(self) -> None:
        """Called once after every route of a pass has been registered."""


class CollectingSink:
    """Keeps every registered route in memory, in registration order."""

    def __init__(self) -> None:
        self.pages: List[Dict[str, Any]] = []

    def create_page(self, route: RouteDescriptor) -> None:
        self.pages.append(route.to_page())

    def close(self) -> None:
        pass


class JsonManifestSink(CollectingSink):
    """Collects routes and writes them as a JSON manifest on :meth:`close`.

    The manifest is the hand-off point to the rendering step: one object per
    page with ``path``, ``component``, ``context`` and, in local preview,
    ``matchPath``.
    """

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = Path(path)

    def close(self) -> None:
        try:
            self.path.write_text(
                json.dumps(self.pages, indent=2, ensure_ascii=False) + "\n",
                encoding="utf-8",
            )
        except OSError as exc:
            raise RouteSinkError(f"Cannot write page manifest {self.path}: {exc}") from exc
        logger.info("Wrote %d pages to %s", len(self.pages), self.path)
