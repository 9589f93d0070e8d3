"""FastAPI application for the advice proxy.

``create_app`` wires logging, middleware, exception handlers and routes.
The module-level ``app`` is what uvicorn serves::

    uvicorn advice_proxy.api.app:app
"""

import logging

import uvicorn
from fastapi import FastAPI

from advice_proxy.api.dependencies import lifespan
from advice_proxy.api.exception_handlers import register_exception_handlers
from advice_proxy.api.middleware import RequestTimeoutMiddleware, log_requests
from advice_proxy.api.routes import router
from advice_proxy.config import Settings, get_settings
from advice_proxy.logging_config import setup_logging
from advice_proxy.protocols import AdviceProvider
from advice_proxy.version import __version__

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    advice_provider: AdviceProvider | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Explicit settings. Defaults to the environment-derived ones.
        advice_provider: Upstream source to use instead of the Advice Slip API.

    Returns:
        A configured FastAPI instance. Services are built by the lifespan.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title="Advice Proxy",
        description="Generates advice via the Advice Slip API and keeps it in memory",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    if advice_provider is not None:
        app.state.advice_provider = advice_provider

    # Added first so the access log (added after) wraps it and sees 408s
    app.add_middleware(RequestTimeoutMiddleware, timeout=settings.request_timeout)
    app.middleware("http")(log_requests)

    register_exception_handlers(app)
    app.include_router(router)

    return app


app = create_app()


def main() -> None:
    settings = get_settings()
    logger.debug("listening on %s:%d", settings.api_host, settings.api_port)
    uvicorn.run(
        "advice_proxy.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
