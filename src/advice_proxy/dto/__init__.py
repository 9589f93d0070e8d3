"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract and validate the
upstream provider's payload.

Internal domain logic should use entities from the entities package.
"""

from .responses import AdviceResponse, ErrorResponse
from .upstream import INT64_MAX, INT64_MIN, AdviceSlip, AdviceSlipPayload

__all__ = [
    "AdviceResponse",
    "ErrorResponse",
    "AdviceSlip",
    "AdviceSlipPayload",
    "INT64_MIN",
    "INT64_MAX",
]
