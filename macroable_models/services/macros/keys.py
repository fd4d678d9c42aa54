"""
Model identifiers.

Macros are keyed by a stable string per model class: its fully-qualified
name.  Strings are passed through unchanged so callers can also register
against an identifier directly.
"""

from __future__ import annotations

from typing import Union

ModelRef = Union[type, str]


def model_key(model: ModelRef) -> str:
    """Return the registry key for *model* (a class or an existing key)."""
    if isinstance(model, str):
        return model
    return f"{model.__module__}.{model.__qualname__}"
