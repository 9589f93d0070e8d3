"""Advice service for core business logic.

This service orchestrates advice operations by coordinating the store
(data access) and the provider (upstream advice generation).
"""

import logging

from advice_proxy.entities import AdviceEntity
from advice_proxy.protocols import AdviceProvider, AdviceStore
from advice_proxy.repositories import AdviceSlipProvider, InMemoryAdviceRepository

logger = logging.getLogger(__name__)


class AdviceService:
    """Core advice orchestration service.

    This service depends on PROTOCOLS, not concrete implementations:
    - AdviceStore: in-memory by default
    - AdviceProvider: Advice Slip API by default

    Example:
        ```python
        from advice_proxy.services import AdviceService

        service = AdviceService.create()
        advice = await service.create_advice()
        ```
    """

    def __init__(self, store: AdviceStore, provider: AdviceProvider) -> None:
        """Initialize the advice service.

        Args:
            store: Advice storage backend (required).
            provider: Upstream advice source (required).
        """
        self._store = store
        self._provider = provider

    @classmethod
    def create(
        cls,
        store: AdviceStore | None = None,
        provider: AdviceProvider | None = None,
    ) -> "AdviceService":
        """Factory method to create AdviceService with sensible defaults.

        Args:
            store: Storage backend. If None, an empty in-memory store.
            provider: Upstream source. If None, the Advice Slip API.

        Returns:
            Configured AdviceService instance
        """
        return cls(
            store=store or InMemoryAdviceRepository.create(),
            provider=provider or AdviceSlipProvider.create(),
        )

    async def list_advices(self) -> list[AdviceEntity]:
        """Return every stored advice record.

        Returns:
            Snapshot of the store, order unspecified
        """
        return await self._store.list_all()

    async def create_advice(self) -> AdviceEntity:
        """Fetch a new advice from the provider and store it.

        The fetch completes before the store's write lock is taken, so
        readers are never blocked on upstream latency and a failed or
        cancelled fetch leaves the store untouched.

        Returns:
            The stored advice

        Raises:
            UpstreamError: If the provider fails
        """
        advice = await self._provider.fetch()
        await self._store.insert(advice)
        logger.info("Stored advice %d (%d total)", advice.id, await self.count())
        return advice

    async def delete_advice(self, advice_id: int) -> bool:
        """Delete an advice by id.

        Args:
            advice_id: The identifier to delete

        Returns:
            True if deleted, False if no such advice
        """
        removed = await self._store.remove(advice_id)
        if removed:
            logger.info("Deleted advice %d (%d total)", advice_id, await self.count())
        return removed

    async def count(self) -> int:
        """Number of stored advices."""
        return await self._store.count()

    async def close(self) -> None:
        """Release provider resources."""
        await self._provider.close()
