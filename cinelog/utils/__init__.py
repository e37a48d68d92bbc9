"""Utility functions and helpers."""

from .exceptions import (
    raise_bad_request,
    raise_conflict,
    raise_for_error,
    raise_internal_error,
    raise_not_found,
    raise_unauthorized,
)
from .fields import filter_fields, project
from .pipe import Pipe, PipeResult

__all__ = [
    "Pipe",
    "PipeResult",
    "filter_fields",
    "project",
    "raise_bad_request",
    "raise_conflict",
    "raise_for_error",
    "raise_internal_error",
    "raise_not_found",
    "raise_unauthorized",
]
