"""
Error response schema for the public API.

Every failure is a single ``error`` string so the website forms can show it
as-is. Internal details (SMTP errors, tracebacks) are never included.
"""
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    error: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Missing fields: name, email", "Failed to send message"],
    )
