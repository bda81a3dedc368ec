import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from sitegen.logging_config import configure_logging
from sitegen.routers.generate import limiter, router as generate_router

configure_logging()

logger = logging.getLogger(__name__)

app = FastAPI(
    title="sitegen – Localized Page Generator",
    description=(
        "Expands a page tree into one route per language with alternate links "
        "and keeps the hosting redirect/rewrite rules in sync."
    ),
    version="1.0.0",
)

# Rate-limiting state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception for %s", request.url)
    return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred."})


app.include_router(generate_router)


@app.get("/", summary="Health check")
async def root() -> dict:
    return {"message": "Hello from sitegen"}
