# SPDX-License-Identifier: MIT
# Copyright (c) 2026 identity-backends contributors

"""JSON wire codec for provider request and response bodies.

User records are handled specially: their ``attributes`` member is raw JSON
that must reach the other side exactly as it was received. Encoding splices
the stored text into the document, and decoding scans the top-level object so
the member's source text can be captured without a parse/serialize cycle.
"""

import json
import re
from typing import Any

from .models import User

_WHITESPACE = re.compile(r"[ \t\n\r]*")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


_decoder = json.JSONDecoder(parse_constant=_reject_constant)


def encode_json(payload: Any) -> bytes:
    """Serialize a request payload.

    Raises:
        TypeError: If the payload holds values JSON cannot represent
        ValueError: If the payload is circular or holds NaN/Infinity
    """
    return json.dumps(payload, allow_nan=False).encode("utf-8")


def encode_raw(payload: str | bytes | Any) -> bytes:
    """Encode an opaque payload, forwarding pre-serialized JSON untouched."""
    if isinstance(payload, bytes):
        return payload
    if isinstance(payload, str):
        return payload.encode("utf-8")
    return encode_json(payload)


def decode_json_object(content: bytes) -> dict[str, Any]:
    """Decode a response body that must be a JSON object.

    Raises:
        ValueError: If the body is not valid UTF-8 JSON or not an object
    """
    data = json.loads(content.decode("utf-8"), parse_constant=_reject_constant)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _skip(text: str, idx: int) -> int:
    return _WHITESPACE.match(text, idx).end()


def split_object(text: str) -> dict[str, str]:
    """Split a JSON object into member name -> raw member value text.

    Raises:
        ValueError: If ``text`` is not exactly one well-formed JSON object
    """
    idx = _skip(text, 0)
    if text[idx:idx + 1] != "{":
        raise ValueError("expected a JSON object")
    idx = _skip(text, idx + 1)

    members: dict[str, str] = {}
    if text[idx:idx + 1] == "}":
        end = idx + 1
    else:
        while True:
            if text[idx:idx + 1] != '"':
                raise ValueError(f"expected member name at position {idx}")
            name, idx = _decoder.raw_decode(text, idx)
            idx = _skip(text, idx)
            if text[idx:idx + 1] != ":":
                raise ValueError(f"expected ':' at position {idx}")
            start = _skip(text, idx + 1)
            _, idx = _decoder.raw_decode(text, start)
            members[name] = text[start:idx]
            idx = _skip(text, idx)
            separator = text[idx:idx + 1]
            if separator == ",":
                idx = _skip(text, idx + 1)
            elif separator == "}":
                end = idx + 1
                break
            else:
                raise ValueError(f"expected ',' or '}}' at position {idx}")

    if _skip(text, end) != len(text):
        raise ValueError("unexpected data after JSON object")
    return members


def _string_member(members: dict[str, str], name: str) -> str:
    raw = members.get(name)
    if raw is None:
        return ""
    value = _decoder.decode(raw)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"'{name}' must be a string")
    return value


def decode_user(content: bytes) -> User:
    """Decode a user record, keeping ``attributes`` as its original text.

    Raises:
        ValueError: If the body is not a JSON object or has mistyped fields
    """
    members = split_object(content.decode("utf-8"))
    attributes = members.get("attributes")
    return User(
        user_id=_string_member(members, "userId"),
        user_type=_string_member(members, "userType"),
        ou_id=_string_member(members, "ouId"),
        attributes=None if attributes in (None, "null") else attributes,
    )


def encode_user(user: User) -> bytes:
    """Serialize a user record with ``attributes`` spliced in verbatim.

    An empty ``user_id`` is omitted so the same encoding serves creation.

    Raises:
        ValueError: If ``attributes`` is not well-formed JSON, including the
            NaN and Infinity literals Python would otherwise accept
    """
    parts = []
    if user.user_id:
        parts.append(f'"userId": {json.dumps(user.user_id)}')
    parts.append(f'"userType": {json.dumps(user.user_type)}')
    parts.append(f'"ouId": {json.dumps(user.ou_id)}')
    if user.attributes is not None:
        # Reject text that would corrupt the enclosing document
        _decoder.decode(user.attributes)
        parts.append(f'"attributes": {user.attributes}')
    return ("{" + ", ".join(parts) + "}").encode("utf-8")
