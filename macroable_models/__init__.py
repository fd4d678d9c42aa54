"""
Macroable models: attach named runtime macros to SQLAlchemy model classes.
"""

from macroable_models.services.macros import (
    MacroRegistry,
    MacroableMixin,
    UnresolvedMacroError,
    model_key,
)

__version__ = "0.1.0"

__all__ = [
    "MacroRegistry",
    "MacroableMixin",
    "UnresolvedMacroError",
    "model_key",
]
