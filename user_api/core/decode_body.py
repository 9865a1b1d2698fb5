"""Body Decoding — raw request bytes to an explicit Ok(payload) | ParseFailure.

Invariants:
    - Never raises: every decoding error becomes a ParseFailure value
    - Non-JSON content types decode to an empty dict (validation decides what happens next)
    - Empty body with a JSON content type decodes to an empty dict
    - Strict JSON: top level must be an object or an array; NaN/Infinity rejected
    - Bodies larger than max_bytes are parse failures, not truncated

Design Decisions:
    - Pure function taking bytes + header value: no Request object, testable without ASGI
    - Only UTF-8 bodies accepted; any other declared charset is a parse failure
"""

import json

from user_api.core.errors import Ok, ParseFailure

JSON_MEDIA_TYPE = "application/json"
JSON_SUFFIX = "+json"


def is_json_content_type(content_type: str | None) -> bool:
    """True for application/json and application/*+json media types."""
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == JSON_MEDIA_TYPE or (
        media_type.startswith("application/") and media_type.endswith(JSON_SUFFIX)
    )


def _declared_charset(content_type: str) -> str:
    for param in content_type.split(";")[1:]:
        key, _, value = param.partition("=")
        if key.strip().lower() == "charset":
            return value.strip().strip('"').lower()
    return "utf-8"


def _reject_constant(name: str):
    raise ValueError(f"invalid JSON constant {name}")


def decode_body(
    content_type: str | None, raw: bytes, max_bytes: int,
) -> Ok[object] | ParseFailure:
    """Decode a request body into a JSON value."""
    if len(raw) > max_bytes:
        return ParseFailure(
            reason=f"body of {len(raw)} bytes exceeds limit of {max_bytes}",
        )
    if not is_json_content_type(content_type):
        return Ok({})
    if not raw:
        return Ok({})

    charset = _declared_charset(content_type)
    if charset not in ("utf-8", "utf8"):
        return ParseFailure(reason=f"unsupported charset {charset}")

    try:
        text = raw.decode("utf-8")
        payload = json.loads(text, parse_constant=_reject_constant)
    except (UnicodeDecodeError, ValueError) as e:
        return ParseFailure(reason=str(e))

    if not isinstance(payload, (dict, list)):
        return ParseFailure(reason="top-level JSON value must be an object or array")
    return Ok(payload)
