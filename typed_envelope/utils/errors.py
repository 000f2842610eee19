"""
Exception types raised while decoding envelopes and their payloads.

- MalformedEnvelope: the outer structure is wrong (non-object input,
  non-string `status`/`message`, unparseable JSON text).
- MalformedPayload: a payload could not be decoded, optionally at a list index.
"""

from __future__ import annotations

from typing import Optional

from typed_envelope.models.envelope import ErrorEnvelope


class EnvelopeError(Exception):
    """Base exception for all decode failures."""

    code = "ENVELOPE_ERROR"

    def __init__(self, message: str = "Envelope decoding failed"):
        self.message = message
        super().__init__(self.message)

    def to_envelope(self) -> ErrorEnvelope:
        return ErrorEnvelope.from_error(code=self.code, message=self.message)


class MalformedEnvelope(EnvelopeError):
    code = "MALFORMED_ENVELOPE"

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class MalformedPayload(EnvelopeError):
    code = "MALFORMED_PAYLOAD"

    def __init__(self, message: str, index: Optional[int] = None):
        self.index = index
        super().__init__(message)

    @classmethod
    def at_index(cls, index: int, exc: BaseException) -> "MalformedPayload":
        """Annotate an element failure with its position in the source list."""
        detail = exc.message if isinstance(exc, EnvelopeError) else f"{type(exc).__name__}: {exc}"
        return cls(f"item {index}: {detail}", index=index)
