"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .advice_handler import AdviceHandler, parse_advice_id

__all__ = [
    "AdviceHandler",
    "parse_advice_id",
]
