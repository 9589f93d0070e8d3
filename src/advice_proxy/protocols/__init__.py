"""Protocol interfaces for swappable implementations.

Protocols enable:
- Swapping the in-memory store or the upstream provider without touching services
- Unit testing with fake implementations
- Clear separation of concerns
"""

from .advice_provider import AdviceProvider
from .advice_store import AdviceStore

__all__ = [
    "AdviceProvider",
    "AdviceStore",
]
