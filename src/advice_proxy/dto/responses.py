"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field

from advice_proxy.entities import AdviceEntity


class AdviceResponse(BaseModel):
    """A single advice record as returned by the API."""

    id: int = Field(..., description="Identifier assigned by the upstream provider")
    advice: str = Field(..., description="The advice text")

    @classmethod
    def from_entity(cls, entity: AdviceEntity) -> "AdviceResponse":
        return cls(id=entity.id, advice=entity.text)


class ErrorResponse(BaseModel):
    """Body of every error response produced by the service."""

    detail: str = Field(..., description="Human-readable error message")
