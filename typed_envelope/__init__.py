"""
Decode status/message/details JSON envelopes with caller-supplied payload decoders.
"""

from typed_envelope.core.logging import configure_logging
from typed_envelope.models.common import Decoder, Encoder, JSONObject, JSONValue
from typed_envelope.models.envelope import Envelope, EnvelopeKeys, ErrorDetail, ErrorEnvelope
from typed_envelope.services.decoder import decode_envelope, decode_envelope_json, decode_envelope_list
from typed_envelope.services.encoder import encode_envelope, encode_envelope_json
from typed_envelope.services.payloads import list_decoder, model_decoder, model_encoder
from typed_envelope.utils.errors import EnvelopeError, MalformedEnvelope, MalformedPayload

__version__ = "0.1.0"

__all__ = [
    "Decoder",
    "configure_logging",
    "Encoder",
    "Envelope",
    "EnvelopeError",
    "EnvelopeKeys",
    "ErrorDetail",
    "ErrorEnvelope",
    "JSONObject",
    "JSONValue",
    "MalformedEnvelope",
    "MalformedPayload",
    "decode_envelope",
    "decode_envelope_json",
    "decode_envelope_list",
    "encode_envelope",
    "encode_envelope_json",
    "list_decoder",
    "model_decoder",
    "model_encoder",
]
