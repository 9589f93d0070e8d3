"""Repository layer for data access.

This layer hides the advice store and the upstream advice API behind
protocol-based interfaces. This enables:
- Swapping implementations (in-memory -> Redis, Advice Slip -> another API)
- Unit testing with fake implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from advice_proxy.protocols import AdviceProvider, AdviceStore

from .adviceslip_provider import AdviceSlipProvider
from .memory_repository import InMemoryAdviceRepository

__all__ = [
    "AdviceStore",
    "AdviceProvider",
    "InMemoryAdviceRepository",
    "AdviceSlipProvider",
]
