"""Shared response schemas."""

from pydantic import BaseModel

# Signed 64-bit range accepted by every supported store
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    error: str
