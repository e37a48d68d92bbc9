"""Shallow projection of mappings onto an allow-list of keys."""

from collections.abc import Mapping, Sequence
from typing import Any


def filter_fields(fields: Sequence[str], obj: Mapping[str, Any]) -> dict[str, Any] | Mapping[str, Any]:
    """Return a copy of ``obj`` containing only the keys in ``fields``.

    An empty ``fields`` returns ``obj`` unchanged. Keys are compared
    case-insensitively against the lower-cased allow-list.

    Example:
        >>> filter_fields(["id", "username"], {"id": 1, "username": "ana", "password_hash": "x"})
        {'id': 1, 'username': 'ana'}
    """
    if isinstance(fields, str) or not isinstance(fields, Sequence):
        raise TypeError(f"fields must be a sequence of keys, got {type(fields).__name__}")
    if not isinstance(obj, Mapping):
        raise TypeError(f"obj must be a mapping, got {type(obj).__name__}")

    if not fields:
        return obj
    allowed = {field.lower() for field in fields}
    return {key: value for key, value in obj.items() if str(key).lower() in allowed}


def project(fields: Sequence[str]):
    """Pipe stage that applies ``filter_fields`` to every item of a list."""

    def stage(items: list[Mapping[str, Any]]) -> list[dict[str, Any] | Mapping[str, Any]]:
        return [filter_fields(fields, item) for item in items]

    return stage
