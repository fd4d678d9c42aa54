"""
Macro subsystem — public API.
"""

from .registry import Macro, MacroRegistry, MacroSet
from .mixin import MacroableMixin
from .errors import UnresolvedMacroError
from .keys import model_key

__all__ = [
    "Macro",
    "MacroRegistry",
    "MacroSet",
    "MacroableMixin",
    "UnresolvedMacroError",
    "model_key",
]
