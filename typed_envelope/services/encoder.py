"""
Serialisation of envelopes back to their JSON wire shape.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from typed_envelope.core.config import settings
from typed_envelope.models.common import Encoder, JSONObject, T
from typed_envelope.models.envelope import Envelope, EnvelopeKeys

logger = logging.getLogger("typed_envelope.encoder")


def encode_envelope(
    envelope: Envelope[T],
    encoder: Encoder[T],
    *,
    keys: Optional[EnvelopeKeys] = None,
) -> JSONObject:
    """Return the JSON object for `envelope`; `encoder` only sees present details."""

    keys = keys or settings.envelope_keys()
    details: Any = None
    if envelope.details is not None:
        details = encoder(envelope.details)
    payload: Dict[str, Any] = {
        keys.status: envelope.status,
        keys.message: envelope.message,
        keys.details: details,
    }
    logger.debug("Encoded envelope status=%r", envelope.status)
    return payload


def encode_envelope_json(
    envelope: Envelope[T],
    encoder: Encoder[T],
    *,
    keys: Optional[EnvelopeKeys] = None,
) -> str:
    return json.dumps(encode_envelope(envelope, encoder, keys=keys), ensure_ascii=False)
