"""Advice Proxy - in-memory advice store backed by the Advice Slip API.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (AdviceStore, AdviceProvider)
    - repositories: In-memory store and upstream provider
    - services: Business logic
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts, upstream payload)
    - entities: Domain models (internal)

Usage:
    ```python
    from advice_proxy.services import AdviceService

    service = AdviceService.create()
    advice = await service.create_advice()
    ```

For HTTP API:
    ```python
    from advice_proxy.api.app import app
    ```
"""

from advice_proxy.config import get_settings, settings
from advice_proxy.dto import AdviceResponse, AdviceSlipPayload, ErrorResponse
from advice_proxy.entities import AdviceEntity
from advice_proxy.errors import (
    AdviceNotFoundError,
    AdviceProxyError,
    InternalError,
    InvalidIdentifierError,
    RequestTimeoutError,
    UpstreamError,
)
from advice_proxy.handlers import AdviceHandler
from advice_proxy.protocols import AdviceProvider, AdviceStore
from advice_proxy.repositories import AdviceSlipProvider, InMemoryAdviceRepository
from advice_proxy.services import AdviceService
from advice_proxy.version import __version__

__all__ = [
    "__version__",
    # Configuration
    "settings",
    "get_settings",
    # Protocols (interfaces)
    "AdviceStore",
    "AdviceProvider",
    # Services (business logic)
    "AdviceService",
    # Handlers (HTTP)
    "AdviceHandler",
    # Repositories (data access)
    "InMemoryAdviceRepository",
    "AdviceSlipProvider",
    # Entities (domain models)
    "AdviceEntity",
    # DTOs (API contracts)
    "AdviceResponse",
    "AdviceSlipPayload",
    "ErrorResponse",
    # Errors
    "AdviceProxyError",
    "UpstreamError",
    "InvalidIdentifierError",
    "AdviceNotFoundError",
    "RequestTimeoutError",
    "InternalError",
]
