"""Response decoding for breach-notification payloads.

Bodies are first parsed into a generic JSON tree, then each record is
projected field by field into a domain model. Decoding is all-or-nothing:
the first bad field aborts the whole response with a SchemaError naming
the field and the offending value.
"""

import json
from collections.abc import Callable
from typing import Any, TypeVar

from pwnquery.exceptions import ParseError, SchemaError, ShapeError
from pwnquery.models import Breach, DataClass, Paste

T = TypeVar("T")

_MISSING = object()


def _reject_constant(token: str) -> Any:
    # NaN and Infinity are accepted by the json module but are not JSON
    raise ValueError(f"Invalid JSON constant {token}")


def parse_json(body: str) -> Any:
    """Parse a response body into a generic JSON tree."""
    try:
        return json.loads(body, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise ParseError("Response body is not valid JSON", body=body[:200], detail=str(e)) from e


def as_objects(data: Any) -> list[dict[str, Any]]:
    """Normalize a single object or an array of objects into a list.

    Raises:
        ShapeError: If the value is neither, or an array element is not an object
    """
    if isinstance(data, dict):
        return [data]
    if isinstance(data, list):
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise ShapeError("Expected an array of objects", index=index, value=item)
        return list(data)
    raise ShapeError("Expected a JSON object or array", value=data)


# Field readers


def _string(key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise SchemaError(f"Field {key} is not a string", field=key, value=value)
    return value


def _count(key: str, value: Any) -> int:
    # bool is an int subclass in Python, but never a count in JSON
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaError(f"Field {key} is not an integer", field=key, value=value)
    if value < 0:
        raise SchemaError(f"Field {key} is negative", field=key, value=value)
    return value


def _boolean(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise SchemaError(f"Field {key} is not a boolean", field=key, value=value)
    return value


def _strings(key: str, value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise SchemaError(f"Field {key} is not an array", field=key, value=value)
    return tuple(_string(f"{key}[{i}]", item) for i, item in enumerate(value))


def _required(obj: dict[str, Any], key: str, reader: Callable[[str, Any], T]) -> T:
    value = obj.get(key, _MISSING)
    if value is _MISSING or value is None:
        raise SchemaError(f"Missing required field {key}", field=key, value=obj)
    return reader(key, value)


def _optional(obj: dict[str, Any], key: str, reader: Callable[[str, Any], T]) -> T | None:
    value = obj.get(key)
    if value is None:
        return None
    return reader(key, value)


# Record projections


def decode_breach(obj: dict[str, Any]) -> Breach:
    """Project one JSON object into a Breach."""
    name = _required(obj, "Name", _string)
    if not name:
        raise SchemaError("Field Name is empty", field="Name", value=name)

    return Breach(
        name=name,
        title=_optional(obj, "Title", _string),
        domain=_optional(obj, "Domain", _string),
        breach_date=_optional(obj, "BreachDate", _string),
        added_date=_optional(obj, "AddedDate", _string),
        pwn_count=_optional(obj, "PwnCount", _count),
        description=_optional(obj, "Description", _string),
        data_classes=_optional(obj, "DataClasses", _strings),
        is_verified=_optional(obj, "IsVerified", _boolean),
        is_sensitive=_optional(obj, "IsSensitive", _boolean),
        is_retired=_optional(obj, "IsRetired", _boolean),
    )


def decode_paste(obj: dict[str, Any]) -> Paste:
    """Project one JSON object into a Paste."""
    return Paste(
        source=_required(obj, "Source", _string),
        id=_required(obj, "Id", _string),
        title=_optional(obj, "Title", _string),
        date=_optional(obj, "Date", _string),
        email_count=_required(obj, "EmailCount", _count),
    )


# Whole-response decoders


def breaches_from_json(data: Any) -> list[Breach]:
    """Decode an already-parsed tree into breaches."""
    return [decode_breach(obj) for obj in as_objects(data)]


def pastes_from_json(data: Any) -> list[Paste]:
    """Decode an already-parsed tree into pastes."""
    return [decode_paste(obj) for obj in as_objects(data)]


def data_classes_from_json(data: Any) -> list[DataClass]:
    """Decode an already-parsed tree into data class names."""
    if not isinstance(data, list):
        raise ShapeError("Expected a JSON array of data classes", value=data)
    return [_string(f"[{i}]", item) for i, item in enumerate(data)]


def decode_breaches(body: str) -> list[Breach]:
    """Decode a breach response body (single object or array)."""
    return breaches_from_json(parse_json(body))


def decode_pastes(body: str) -> list[Paste]:
    """Decode a paste response body.

    The service answers with an empty body when no pastes exist, which
    decodes to an empty list without touching the JSON parser.
    """
    if len(body) == 0:
        return []
    return pastes_from_json(parse_json(body))


def decode_data_classes(body: str) -> list[DataClass]:
    """Decode the data class listing (a flat array of strings)."""
    return data_classes_from_json(parse_json(body))
