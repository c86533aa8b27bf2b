"""JSON helpers: encode plain objects, rebuild objects from a template type."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = ["to_json", "from_json"]


def _encode_object(obj: Any) -> Any:
    """``json.dumps`` fallback for dataclasses and plain attribute objects."""
    if hasattr(obj, "__dict__"):
        return dict(vars(obj))
    # slotted dataclasses have no instance dict
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any) -> str:
    """Return the compact JSON text for *obj*.

    Keys keep insertion order (field order for dataclasses).
    """
    return json.dumps(obj, default=_encode_object, separators=(",", ":"))


def from_json(template: type[T] | T, text: str) -> T:
    """Create an object of *template*'s type carrying the fields in *text*.

    *template* is either a class or an instance whose class is used.  The
    new object is created without running ``__init__``; every top-level key
    of the decoded JSON object becomes an instance attribute, unchanged.

    Raises:
        json.JSONDecodeError: if *text* is not valid JSON.
        TypeError: if the decoded value is not a JSON object.
    """
    cls = template if isinstance(template, type) else type(template)
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
    result = cls.__new__(cls)
    vars(result).update(data)
    return result
