"""HTTP handlers for advice operations.

Handlers convert between entities and DTOs (API contracts) and service
calls. They raise AdviceProxyError subclasses; the app's exception
handlers turn those into status codes.
"""

import re

from advice_proxy.dto import INT64_MAX, INT64_MIN, AdviceResponse
from advice_proxy.errors import (
    AdviceNotFoundError,
    AdviceProxyError,
    InternalError,
    InvalidIdentifierError,
)
from advice_proxy.services import AdviceService
from advice_proxy.version import __version__

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_advice_id(raw_id: str) -> int:
    """Parse a path segment into a signed 64-bit advice id.

    Only an optional sign followed by ASCII digits is accepted; whitespace,
    underscores and other forms ``int()`` would tolerate are rejected.

    Raises:
        InvalidIdentifierError: If the segment is not such an integer
    """
    if not _ID_PATTERN.fullmatch(raw_id):
        raise InvalidIdentifierError(f"Invalid advice id: {raw_id!r}")
    value = int(raw_id)
    if not INT64_MIN <= value <= INT64_MAX:
        raise InvalidIdentifierError(f"Advice id out of range: {raw_id!r}")
    return value


class AdviceHandler:
    """HTTP handlers for advice operations.

    This handler delegates business logic to AdviceService
    and handles HTTP-specific concerns like:
    - Converting entities to DTOs
    - Parsing path parameters
    - Mapping unexpected failures to InternalError

    Example:
        ```python
        from advice_proxy.services import AdviceService
        from advice_proxy.handlers import AdviceHandler

        handler = AdviceHandler(advice_service=AdviceService.create())

        @app.get("/advices", response_model=list[AdviceResponse])
        async def list_advices():
            return await handler.list_advices()
        ```
    """

    def __init__(self, advice_service: AdviceService) -> None:
        """Initialize the advice handler.

        Args:
            advice_service: The advice service for business logic (required).
        """
        self._advices = advice_service

    async def get_version(self) -> str:
        """Handle GET / requests."""
        return __version__

    async def list_advices(self) -> list[AdviceResponse]:
        """Handle GET /advices requests.

        Returns:
            All stored advices

        Raises:
            InternalError: If listing fails unexpectedly
        """
        try:
            advices = await self._advices.list_advices()
            return [AdviceResponse.from_entity(advice) for advice in advices]

        except AdviceProxyError:
            raise
        except Exception as e:
            raise InternalError(f"Unhandled internal error: {e}") from e

    async def create_advice(self) -> AdviceResponse:
        """Handle POST /advices requests.

        Returns:
            The newly stored advice

        Raises:
            UpstreamError: If the advice provider fails (nothing is stored)
            InternalError: If anything else fails unexpectedly
        """
        try:
            advice = await self._advices.create_advice()
            return AdviceResponse.from_entity(advice)

        except AdviceProxyError:
            raise
        except Exception as e:
            raise InternalError(f"Unhandled internal error: {e}") from e

    async def delete_advice(self, raw_id: str) -> None:
        """Handle DELETE /advices/{id} requests.

        Args:
            raw_id: The unparsed path segment

        Raises:
            InvalidIdentifierError: If raw_id is not an integer
            AdviceNotFoundError: If no advice has that id
            InternalError: If anything else fails unexpectedly
        """
        advice_id = parse_advice_id(raw_id)

        try:
            removed = await self._advices.delete_advice(advice_id)
        except AdviceProxyError:
            raise
        except Exception as e:
            raise InternalError(f"Unhandled internal error: {e}") from e

        if not removed:
            raise AdviceNotFoundError(f"Advice {advice_id} not found")
