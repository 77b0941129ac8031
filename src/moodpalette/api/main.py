"""Mood Palette — FastAPI Application.

This module defines the application factory, the REST API routes, and the
``main()`` CLI function that launches the uvicorn server.

Architecture
------------
The application is a stateless request/response adapter:

- **Configuration** is loaded from the environment by
  :class:`~moodpalette.core.config.MoodPaletteConfig`.
- **Palette generation** is delegated to a
  :class:`~moodpalette.core.model_client.PaletteModelClient` that is
  constructed outside the app and injected into :func:`create_app`.  Routes
  obtain it through the :func:`get_model_client` dependency, so tests can
  pass in a fake.
- **Reply handling** is pure: :func:`build_prompt` →
  model → :func:`extract_json` → :func:`shape_palette`.  Extraction and
  shaping report failure as values, which the route maps to a 502.
- **Errors** are :class:`~moodpalette.api.errors.PaletteAPIError`
  subclasses rendered by exception handlers registered on the app.

Endpoints
---------
========  ==========================  ====================================
Method    Path                        Purpose
========  ==========================  ====================================
POST      ``/api/generate-palette``   Generate a palette for a mood seed
GET       ``/health``                 Liveness probe
========  ==========================  ====================================

Usage
-----
CLI (installed entry point)::

    moodpalette

Direct invocation::

    python -m moodpalette.api.main
"""

from __future__ import annotations

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from moodpalette import __version__
from moodpalette.api.errors import (
    InvalidInputError,
    PaletteAPIError,
    UnexpectedFaultError,
    UpstreamParseError,
)
from moodpalette.api.extraction import extract_json
from moodpalette.api.models import ErrorResponse, PaletteRequest, PaletteResult
from moodpalette.api.prompt_builder import build_prompt
from moodpalette.api.shaping import shape_palette
from moodpalette.core.config import MoodPaletteConfig
from moodpalette.core.model_client import GeminiModelClient, PaletteModelClient

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"

router = APIRouter()


# ---------------------------------------------------------------------------
# Dependencies.
# ---------------------------------------------------------------------------


def get_model_client(request: Request) -> PaletteModelClient:
    """Return the model client injected into the running application."""
    return request.app.state.model_client


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@router.post(
    "/api/generate-palette",
    response_model=PaletteResult,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def generate_palette(
    req: PaletteRequest,
    model_client: PaletteModelClient = Depends(get_model_client),
) -> PaletteResult:
    """Generate a colour palette for a mood seed.

    This endpoint:

    1. Builds the instruction prompt for ``req.count`` colours.
    2. Awaits the model client for the raw reply text.
    3. Extracts the JSON object from the reply.
    4. Shapes it into the response contract.

    Args:
        req: Validated :class:`PaletteRequest` payload.  ``count`` has
            already been clamped.
        model_client: Injected text model backend.

    Returns:
        The shaped :class:`PaletteResult`.

    Raises:
        UnexpectedFaultError: 500 when the model call fails.
        UpstreamParseError: 502 when the reply holds no JSON object or the
            object has no ``palette`` array.
    """
    prompt = build_prompt(req.seed, req.count)

    try:
        raw = await model_client.generate_text(prompt)
    except Exception as exc:
        logger.exception("Model call to %s failed", model_client.model_name)
        raise UnexpectedFaultError() from exc

    outcome = extract_json(raw)
    if not outcome.ok:
        logger.warning("Model reply is not JSON: %r", raw)
        raise UpstreamParseError(raw)

    shaped = shape_palette(outcome.value, req.count)
    if not shaped.ok:
        logger.warning("Model reply has no palette array: %r", raw)
        raise UpstreamParseError(raw)

    return shaped.result


@router.get("/health")
async def health_check(
    model_client: PaletteModelClient = Depends(get_model_client),
) -> dict:
    """Liveness probe for load balancers and monitoring."""
    return {
        "status": "healthy",
        "version": __version__,
        "model": model_client.model_name,
    }


# ---------------------------------------------------------------------------
# Exception handlers.
# ---------------------------------------------------------------------------


async def _handle_api_error(request: Request, exc: PaletteAPIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Only the seed can fail validation; count is clamped instead.
    logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
    return await _handle_api_error(request, InvalidInputError())


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler.  Never exposes internal details to clients."""
    logger.error(
        "Unhandled exception: %s",
        type(exc).__name__,
        extra={"path": request.url.path, "method": request.method},
        exc_info=exc,
    )
    return await _handle_api_error(request, UnexpectedFaultError())


# ---------------------------------------------------------------------------
# Application factory.
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log service startup and shutdown."""
    logger.info("Mood Palette %s started (model: %s).", __version__, app.state.model_client.model_name)

    yield  # Application runs here.

    logger.info("Mood Palette shutting down.")


def create_app(
    config: MoodPaletteConfig | None = None,
    model_client: PaletteModelClient | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        config: Application settings.  Loaded from the environment when
            omitted and no *model_client* is given.  Without a config, CORS
            allows any origin.
        model_client: Text model backend.  A :class:`GeminiModelClient` is
            built from *config* when omitted.

    Returns:
        A ready-to-serve FastAPI application.

    Raises:
        pydantic.ValidationError: If *config* has to be loaded and the
            environment lacks ``GEMINI_API_KEY``.
    """
    if model_client is None:
        if config is None:
            config = MoodPaletteConfig()
        model_client = GeminiModelClient.from_config(config)

    app = FastAPI(
        title="Mood Palette",
        description="Colour palette generation from a mood phrase.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.model_client = model_client

    # Any origin is allowed unless the deployment restricts it.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins_list if config is not None else ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PaletteAPIError, _handle_api_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)

    app.include_router(router)
    return app


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Loads :class:`MoodPaletteConfig` from the environment and ``.env``.  If
    ``GEMINI_API_KEY`` is missing or empty, or any setting is invalid, the
    error is logged and the process exits with status 1 without binding a port.

    This function is registered as the ``moodpalette`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    try:
        config = MoodPaletteConfig()
    except ValidationError as exc:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
        logger.error("Invalid configuration (is GEMINI_API_KEY set?); refusing to start.\n%s", exc)
        sys.exit(1)

    logging.basicConfig(
        level=config.log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )

    app = create_app(config, GeminiModelClient.from_config(config))
    uvicorn.run(
        app,
        host=config.server_host,
        port=config.server_port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
