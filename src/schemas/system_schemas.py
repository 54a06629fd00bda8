"""Service banner and health schemas."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str


class ServiceInfoResponse(BaseModel):
    message: str
    status: str
    version: str
