"""
MacroableMixin
==============
Makes registered macros callable as methods on model instances.

Bind a registry to a class (usually the declarative ``Base``) and any
member that is not defined on the instance's class is looked up in it::

    Base.use_macro_registry(registry)
    registry.add_macro(Invoice, "greet", lambda self, name: f"Hi {name}")
    Invoice().greet("Ann")          # -> "Hi Ann"
    Invoice().nope()                # -> UnresolvedMacroError

Real attributes always win: ``__getattr__`` only runs after normal lookup
has failed.  Lookups use the exact runtime class, so subclasses do not see
macros registered for their parents.
"""

from __future__ import annotations

import types
from typing import TYPE_CHECKING, Any, Optional

from .errors import UnresolvedMacroError
from .keys import model_key

if TYPE_CHECKING:
    from .registry import Macro, MacroRegistry


class MacroableMixin:

    # Left unannotated so declarative scanning treats it as a plain attribute.
    __macro_registry__ = None

    @classmethod
    def use_macro_registry(cls, registry: Optional["MacroRegistry"]) -> None:
        """Bind *registry* to this class and its subclasses (None unbinds)."""
        cls.__macro_registry__ = registry

    # ------------------------------------------------------------------ lookup

    def _resolve_macro(self, name: str) -> Optional["Macro"]:
        registry = type(self).__macro_registry__
        if registry is None:
            return None
        return registry.resolve(type(self), name)

    def has_macro(self, name: str) -> bool:
        return self._resolve_macro(name) is not None

    # ---------------------------------------------------------------- dispatch

    def call_macro(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Invoke macro *name* with this instance as its receiver."""
        fn = self._resolve_macro(name)
        if fn is None:
            raise UnresolvedMacroError(model_key(type(self)), name)
        return fn(self, *args, **kwargs)

    def __getattr__(self, name: str) -> Any:
        # Dunder probes (pickle, copy, protocols) never hit the registry.
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            )

        fn = self._resolve_macro(name)
        if fn is None:
            raise UnresolvedMacroError(model_key(type(self)), name)
        return types.MethodType(fn, self)
