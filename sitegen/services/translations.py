"""Translation records from the content store or from a JSON export."""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from sitegen.models.translation import TranslationRecord
from sitegen.services.errors import TranslationFetchError

logger = logging.getLogger(__name__)

TIMEOUT = 10  # seconds

NAMESPACES_QUERY = """
query {
  allI18NNamespaces {
    nodes {
      namespace
      lang
      singleTranslations {
        slug
      }
    }
  }
}
"""


def parse_namespace_nodes(payload: Any) -> List[TranslationRecord]:
    """Turn a content-store payload into translation records.

    *payload* is either the GraphQL response
    (``{"data": {"allI18NNamespaces": {"nodes": [...]}}}``) or a bare list
    of nodes.

    Raises:
        TranslationFetchError: if the payload has neither shape or a node is
            malformed.
    """
    if isinstance(payload, dict):
        if payload.get("errors"):
            raise TranslationFetchError(f"Content store returned errors: {payload['errors']}")
        try:
            nodes = payload["data"]["allI18NNamespaces"]["nodes"]
        except (KeyError, TypeError) as exc:
            raise TranslationFetchError("Unexpected content store response shape.") from exc
    else:
        nodes = payload

    if not isinstance(nodes, list):
        raise TranslationFetchError("Translation nodes must be a list.")

    try:
        return [TranslationRecord.model_validate(node) for node in nodes]
    except ValidationError as exc:
        raise TranslationFetchError(f"Malformed translation node: {exc}") from exc


async def fetch_translation_records(
    endpoint: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[TranslationRecord]:
    """Query the GraphQL *endpoint* for every namespace in every language.

    Raises:
        TranslationFetchError: on network, HTTP, or payload errors.
    """
    logger.info("Fetching translation records", extra={"endpoint": endpoint})
    try:
        async with httpx.AsyncClient(timeout=TIMEOUT, transport=transport) as client:
            response = await client.post(endpoint, json={"query": NAMESPACES_QUERY})
            response.raise_for_status()
            payload = response.json()
    except httpx.TimeoutException as exc:
        logger.error("Timeout fetching translations from %s", endpoint)
        raise TranslationFetchError("The content store timed out.") from exc
    except httpx.HTTPStatusError as exc:
        logger.error("HTTP error fetching translations from %s: %s", endpoint, exc)
        raise TranslationFetchError(
            f"Content store returned HTTP {exc.response.status_code}."
        ) from exc
    except httpx.RequestError as exc:
        logger.error("Error fetching translations from %s: %s", endpoint, exc)
        raise TranslationFetchError(str(exc)) from exc
    except ValueError as exc:
        raise TranslationFetchError("Content store did not return JSON.") from exc

    records = parse_namespace_nodes(payload)
    logger.info("Fetched %d translation records", len(records))
    return records


def load_translation_records(path: Path) -> List[TranslationRecord]:
    """Read translation records from a JSON file exported from the content store."""
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise TranslationFetchError(f"Cannot read translations from {path}: {exc}") from exc
    return parse_namespace_nodes(payload)
