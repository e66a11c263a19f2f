"""Decoding of Firestore "document created" trigger payloads.

Firestore delivers document fields as typed values, e.g.
``{"title": {"stringValue": "Flood"}, "requiredSkills": {"arrayValue": {"values": [...]}}}``.
"""

from typing import Any

from core.errors import InvalidEventError

_SCALAR_KINDS = ("stringValue", "booleanValue", "timestampValue", "referenceValue", "bytesValue")


def decode_value(typed: dict[str, Any]) -> Any:
    """Convert one Firestore typed value to a plain Python value."""
    if "nullValue" in typed:
        return None
    for kind in _SCALAR_KINDS:
        if kind in typed:
            return typed[kind]
    if "integerValue" in typed:
        # int64 values arrive as strings
        return int(typed["integerValue"])
    if "doubleValue" in typed:
        return float(typed["doubleValue"])
    if "geoPointValue" in typed:
        return dict(typed["geoPointValue"])
    if "arrayValue" in typed:
        return [decode_value(v) for v in typed["arrayValue"].get("values", [])]
    if "mapValue" in typed:
        return decode_fields(typed["mapValue"].get("fields", {}))

    raise InvalidEventError(f"Unsupported Firestore value: {sorted(typed)}")


def decode_fields(fields: dict[str, Any]) -> dict[str, Any]:
    return {name: decode_value(typed) for name, typed in fields.items()}


def parse_document_created(event: dict[str, Any], collection: str) -> tuple[str, dict[str, Any]]:
    """Return ``(document_id, fields)`` for a document-created event in ``collection``.

    Update and delete events are rejected so the dispatcher only fires on create.
    """
    old_value = event.get("oldValue") or {}
    if old_value.get("name"):
        raise InvalidEventError(f"Event for {old_value['name']} is not a create")

    value = event.get("value") or {}
    name = value.get("name")
    if not name:
        raise InvalidEventError("Event has no document name")

    # projects/{project}/databases/{db}/documents/{collection}/{id}
    _, _, path = name.partition("/documents/")
    parent, _, document_id = path.rpartition("/")
    if parent != collection or not document_id:
        raise InvalidEventError(f"Document {name} is not in collection {collection}")

    return document_id, decode_fields(value.get("fields", {}))
