"""
Macro dispatch errors.
"""

from __future__ import annotations


class UnresolvedMacroError(AttributeError):
    """
    Raised when a model instance is asked for a member that is neither
    defined on its class nor registered as a macro for it.

    Subclasses ``AttributeError`` so ``hasattr()`` and three-argument
    ``getattr()`` keep their usual meaning on macroable models.
    """

    def __init__(self, model: str, name: str) -> None:
        super().__init__(f"{model!r} has no macro or attribute {name!r}")
        self.model = model
        self.name = name
