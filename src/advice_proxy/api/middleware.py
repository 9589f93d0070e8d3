"""Request-level middleware: time budget and access log."""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from advice_proxy.api.exception_handlers import error_response
from advice_proxy.errors import RequestTimeoutError

logger = logging.getLogger(__name__)


class RequestTimeoutMiddleware:
    """Cancel requests that run longer than ``timeout`` seconds.

    Implemented as a plain ASGI middleware that runs the downstream app as
    its own task. Only the budget running out yields a 408; a TimeoutError
    raised by the app itself propagates like any other error. A request that
    times out before it started responding gets a 408; one that already sent
    its headers is cut short, since the status can no longer change.
    """

    def __init__(self, app: ASGIApp, timeout: float) -> None:
        self.app = app
        self.timeout = timeout

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        task = asyncio.ensure_future(self.app(scope, receive, send_wrapper))
        try:
            done, _ = await asyncio.wait({task}, timeout=self.timeout)
        except BaseException:
            task.cancel()
            raise

        if task in done:
            # Re-raises whatever the app raised
            task.result()
            return

        task.cancel()
        await asyncio.gather(task, return_exceptions=True)

        logger.warning(
            "%s %s exceeded %ss budget",
            scope.get("method", ""),
            scope.get("path", ""),
            self.timeout,
        )
        if response_started:
            return
        response = error_response(
            RequestTimeoutError(f"Request exceeded the {self.timeout}s time budget")
        )
        await response(scope, receive, send)


async def log_requests(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Log every request with its status and duration."""
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.exception(
            "%s %s raised after %.1fms", request.method, request.url.path, elapsed_ms
        )
        raise

    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "%s %s -> %d (%.1fms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response
