"""Advice storage protocol.

Defines the interface for any backend that holds advice records keyed by
their identifier.
"""

from typing import Protocol, runtime_checkable

from advice_proxy.entities import AdviceEntity


@runtime_checkable
class AdviceStore(Protocol):
    """Protocol for advice storage backends.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.
    """

    async def list_all(self) -> list[AdviceEntity]:
        """Return a snapshot of all stored records.

        Returns:
            A new list; order is unspecified
        """
        ...

    async def insert(self, advice: AdviceEntity) -> None:
        """Store a record, replacing any existing record with the same id.

        Args:
            advice: The record to store
        """
        ...

    async def remove(self, advice_id: int) -> bool:
        """Remove a record by id.

        Args:
            advice_id: The identifier to remove

        Returns:
            True if a record existed and was removed, False otherwise
        """
        ...

    async def count(self) -> int:
        """Return the number of stored records."""
        ...
