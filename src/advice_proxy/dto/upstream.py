"""Validation models for the upstream advice payload.

The provider returns ``{"slip": {"id": 42, "advice": "..."}}``. The body is
untyped external input, so it is validated here before anything reaches
the store.
"""

from pydantic import BaseModel, ConfigDict, Field

from advice_proxy.entities import AdviceEntity

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class AdviceSlip(BaseModel):
    """The nested record under the ``slip`` key."""

    # No coercion: "42", true and 5.0 are not ids
    model_config = ConfigDict(strict=True)

    id: int = Field(..., ge=INT64_MIN, le=INT64_MAX)
    advice: str

    def to_entity(self) -> AdviceEntity:
        return AdviceEntity(id=self.id, text=self.advice)


class AdviceSlipPayload(BaseModel):
    """Top-level upstream response."""

    slip: AdviceSlip
