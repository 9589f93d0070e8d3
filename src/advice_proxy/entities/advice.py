"""Advice domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AdviceEntity:
    """A single advice record held in the store.

    Attributes:
        id: Identifier assigned by the upstream provider
        text: The advice content
    """

    id: int
    text: str
