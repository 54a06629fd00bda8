"""Notification relay schemas."""

from pydantic import BaseModel, Field


class RelayRequest(BaseModel):
    """Optional bound on one relay pass."""

    limit: int | None = Field(
        None, ge=1, description="Maximum entries to send (defaults to the batch size)"
    )


class RelayResponse(BaseModel):
    """Outcome of one relay pass."""

    dispatched: int = Field(..., description="Entries accepted by the transport")
