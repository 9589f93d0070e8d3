"""Service layer for business logic.

This layer contains the core business logic and orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from advice_proxy.services import AdviceService

    # Using factory method (recommended)
    service = AdviceService.create()

    # Or manual creation
    service = AdviceService(store=store, provider=provider)
    ```
"""

from .advice_service import AdviceService

__all__ = [
    "AdviceService",
]
