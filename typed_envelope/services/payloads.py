"""
Ready-made payload decoders/encoders for pydantic models and JSON arrays.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from typed_envelope.models.common import Decoder, Encoder, T
from typed_envelope.utils.errors import MalformedPayload

from .decoder import decode_envelope_list

logger = logging.getLogger("typed_envelope.payloads")

M = TypeVar("M", bound=BaseModel)


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {err.get('msg', 'validation error')}")
    return "; ".join(parts)


def model_decoder(model_cls: Type[M]) -> Decoder[M]:
    """
    Build a decoder that validates a JSON object into `model_cls`.

    Missing fields follow the model's own contract: a required field fails with
    MalformedPayload, an `Optional[...] = None` field is left absent.
    """

    def _decode(raw: Any) -> M:
        if not isinstance(raw, Mapping):
            raise MalformedPayload(
                f"{model_cls.__name__} expects a JSON object, got {type(raw).__name__}"
            )
        try:
            return model_cls.model_validate(raw)
        except ValidationError as exc:
            message = f"{model_cls.__name__}: {_describe_validation_error(exc)}"
            logger.debug("Payload validation failed: %s", message)
            raise MalformedPayload(message) from exc

    _decode.__name__ = f"decode_{model_cls.__name__}"
    return _decode


def model_encoder(model_cls: Type[M]) -> Encoder[M]:
    def _encode(value: M) -> Any:
        return value.model_dump(mode="json")

    _encode.__name__ = f"encode_{model_cls.__name__}"
    return _encode


def list_decoder(item_decoder: Decoder[T]) -> Decoder[List[T]]:
    """Lift an element decoder to one for a JSON array of such elements."""

    def _decode(raw: Any) -> List[T]:
        return decode_envelope_list(raw, item_decoder)

    return _decode
