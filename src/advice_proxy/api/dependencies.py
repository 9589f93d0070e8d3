"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from advice_proxy.config import Settings, get_settings
from advice_proxy.handlers import AdviceHandler
from advice_proxy.repositories import AdviceSlipProvider, InMemoryAdviceRepository
from advice_proxy.services import AdviceService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> AdviceHandler:
    """Dependency injection for AdviceHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The AdviceHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "advice_handler", None)
    if handler is None:
        raise RuntimeError("AdviceHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Store (empty, in-memory) and provider - created explicitly
    2. Service (business logic) - owned by the handler
    3. Handler (HTTP endpoints) - stored in app.state.advice_handler

    A provider placed on app.state.advice_provider beforehand (see
    create_app) is used instead of the Advice Slip API.

    Cleanup:
        Closes the provider and removes the handler from app.state
    """
    settings: Settings = getattr(app.state, "settings", None) or get_settings()

    provider = getattr(app.state, "advice_provider", None)
    if provider is None:
        provider = AdviceSlipProvider.create(
            url=settings.advice_api_url,
            timeout=settings.upstream_timeout,
        )

    store = InMemoryAdviceRepository.create()
    advice_service = AdviceService.create(store=store, provider=provider)
    advice_handler = AdviceHandler(advice_service=advice_service)

    app.state.advice_handler = advice_handler

    logger.info("Advice service initialized (upstream: %s)", settings.advice_api_url)
    logger.info("Request timeout: %ss", settings.request_timeout)

    try:
        yield
    finally:
        await advice_service.close()
        del app.state.advice_handler
        logger.info("Advice service shut down")


# Type alias for cleaner dependency injection
HandlerDep = Annotated[AdviceHandler, Depends(get_handler)]