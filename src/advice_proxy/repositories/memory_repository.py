"""In-memory implementation of AdviceStore.

Records live in a plain dict for the lifetime of the process and are lost
on restart. All access goes through an AsyncRWLock: list and count take
the shared side, insert and remove take the exclusive side.
"""

import logging

from advice_proxy.entities import AdviceEntity
from advice_proxy.utils import AsyncRWLock

logger = logging.getLogger(__name__)


class InMemoryAdviceRepository:
    """Dict-backed advice store guarded by a reader/writer lock.

    This class satisfies the AdviceStore protocol through structural
    typing - no explicit inheritance needed.

    Inserting a record whose id is already present replaces it
    (last write wins).
    """

    def __init__(self, lock: AsyncRWLock | None = None) -> None:
        """Initialize an empty repository.

        Args:
            lock: Lock guarding the records. A new one is created if omitted.
        """
        self._records: dict[int, AdviceEntity] = {}
        self._lock = lock or AsyncRWLock()

    @classmethod
    def create(cls) -> "InMemoryAdviceRepository":
        """Factory method to create an empty repository."""
        return cls()

    async def list_all(self) -> list[AdviceEntity]:
        async with self._lock.read():
            return list(self._records.values())

    async def insert(self, advice: AdviceEntity) -> None:
        async with self._lock.write():
            replaced = advice.id in self._records
            self._records[advice.id] = advice
        if replaced:
            logger.debug("Replaced advice %d", advice.id)

    async def remove(self, advice_id: int) -> bool:
        async with self._lock.write():
            return self._records.pop(advice_id, None) is not None

    async def count(self) -> int:
        async with self._lock.read():
            return len(self._records)
