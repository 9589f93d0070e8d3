"""Advice provider protocol.

Defines the interface for any service that can generate a new advice
record.
"""

from typing import Protocol, runtime_checkable

from advice_proxy.entities import AdviceEntity


@runtime_checkable
class AdviceProvider(Protocol):
    """Protocol for upstream advice sources."""

    async def fetch(self) -> AdviceEntity:
        """Fetch exactly one new advice record.

        Returns:
            The record supplied by the provider

        Raises:
            UpstreamError: If the provider fails or returns a malformed payload
        """
        ...

    async def close(self) -> None:
        """Release any resources held by the provider."""
        ...
