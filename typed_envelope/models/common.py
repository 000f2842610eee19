"""
JSON value aliases and the decoder/encoder capability types.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, TypeVar, Union

JSONScalar = Union[str, int, float, bool, None]
JSONValue = Union[JSONScalar, Dict[str, Any], List[Any]]
JSONObject = Dict[str, Any]

T = TypeVar("T")

# A decoder maps a raw JSON value to a typed payload; an encoder goes back.
Decoder = Callable[[JSONValue], T]
Encoder = Callable[[T], JSONValue]
