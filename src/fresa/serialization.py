"""Line serialization: JSON round-trip for Fresa lines.

Converts typed lines to/from JSON-compatible dicts. Useful for:
- Caching parsed programs to disk
- Sending parsed lines to another process
- Debugging and inspection

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from fresa import parse
    from fresa.serialization import to_json, from_json

    lines = parse("N10 G1 X1.5 F300")
    assert from_json(to_json(lines)) == lines

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from fresa.location import Span
from fresa.nodes import Argument, ArgumentKind, Command, CommandType, Line, ProgramNumber

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "Command": Command,
    "ProgramNumber": ProgramNumber,
}


def to_dict(line: Line) -> dict[str, Any]:
    """Convert a line to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    Args:
        line: A Command or ProgramNumber.

    Returns:
        Dict with ``_type`` and all node fields.

    """
    result: dict[str, Any] = {"_type": type(line).__name__}

    for f in fields(line):
        result[f.name] = _serialize_value(getattr(line, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, Span):
        return {
            "_type": "Span",
            "lineno": value.lineno,
            "col_offset": value.col_offset,
            "offset": value.offset,
            "source_file": value.source_file,
        }
    if isinstance(value, Argument):
        return {"_type": "Argument", "kind": value.kind.value, "value": value.value}
    if isinstance(value, CommandType):
        return value.value
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: int, float, None
    return value


def from_dict(data: dict[str, Any]) -> Line:
    """Reconstruct a typed line from a dict.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Command or ProgramNumber.

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized line"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown line type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _deserialize_value(data[f.name], f.name)

    return node_cls(**kwargs)


def _deserialize_value(value: Any, field_name: str) -> Any:
    """Deserialize a single field value."""
    if field_name == "span":
        return Span(
            lineno=value["lineno"],
            col_offset=value["col_offset"],
            offset=value.get("offset", 0),
            source_file=value.get("source_file"),
        )
    if field_name == "command_type":
        return CommandType(value)
    if field_name == "args":
        return tuple(
            Argument(kind=ArgumentKind(item["kind"]), value=float(item["value"]))
            for item in value
        )
    return value


def to_json(lines: list[Line], *, indent: int | None = None) -> str:
    """Serialize lines to a JSON array string.

    Args:
        lines: Lines to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps([to_dict(line) for line in lines], sort_keys=True, indent=indent)


def from_json(data: str) -> list[Line]:
    """Deserialize lines from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Raises:
        ValueError: If the JSON is not an array of serialized lines.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a JSON array, got {type(raw).__name__}"
        raise ValueError(msg)
    return [from_dict(item) for item in raw]
