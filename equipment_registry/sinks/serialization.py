"""Shared serialization utilities for sinks."""

from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any


def to_dict(obj: Any) -> dict:
    """Convert a record to a JSON-ready dictionary."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}
    elif isinstance(obj, dict):
        return {k: serialize_value(v) for k, v in obj.items()}
    else:
        return {"value": str(obj)}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Enum):
        return value.value
    elif isinstance(value, tuple):
        return [serialize_value(v) for v in value]
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value
