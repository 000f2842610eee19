"""
Generic response envelope plus the error envelope emitted for decode failures.
"""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class EnvelopeKeys(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: str = "status"
    message: str = "message"
    details: str = "details"


class Envelope(BaseModel, Generic[T]):
    """Status/message wrapper around one caller-typed `details` payload.

    `details` is None exactly when the source JSON had no `details` or a null one.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status: Optional[str] = None
    message: Optional[str] = None
    details: Optional[T] = None

    @property
    def has_details(self) -> bool:
        return self.details is not None


class ErrorDetail(BaseModel):
    code: str
    message: str


class ErrorEnvelope(BaseModel):
    error: ErrorDetail

    @classmethod
    def from_error(cls, code: str, message: str) -> "ErrorEnvelope":
        return cls(error=ErrorDetail(code=code, message=message))
