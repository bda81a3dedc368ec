"""Page generation endpoint: computes routes and hosting rules in one pass."""

import logging

from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from sitegen.models.generate_request import GenerateRequest
from sitegen.models.generate_response import GenerateResponse
from sitegen.services.errors import HostingRulesError, MissingSlugError, PageTreeError
from sitegen.services.pipeline import generate

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter()


@router.post(
    "/generate",
    response_model=GenerateResponse,
    summary="Generate localized pages and hosting rules",
    description=(
        "Expands the page tree into one route per language and page, with "
        "alternate links to every other language, and synthesizes the "
        "matching hosting redirects and rewrites.\n\n"
        "Nothing is written to disk; the merged hosting document is returned "
        "when the config enables hosting rule generation."
    ),
)
@limiter.limit("30/minute")
async def generate_pages(request: Request, body: GenerateRequest) -> GenerateResponse:
    logger.info(
        "Generate request received",
        extra={
            "languages": body.config.languages,
            "records": len(body.records),
            "build_mode": body.build_mode.value,
        },
    )

    try:
        result = generate(
            body.config,
            body.records,
            mode=body.build_mode,
            baseline=body.baseline,
        )
    except (MissingSlugError, PageTreeError) as exc:
        logger.warning("Invalid page configuration: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc))
    except HostingRulesError as exc:
        logger.warning("Invalid hosting baseline: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc))

    return GenerateResponse(
        ready=result.ready,
        pages_generated=len(result.routes),
        routes=[route.to_page() for route in result.routes],
        redirects=result.redirects,
        rewrites=result.rewrites,
        hosting=result.hosting,
    )
