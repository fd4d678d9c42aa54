"""
MacroRegistry — central store of macros attached to model classes.

A macro is any callable.  When invoked through a model instance it receives
the instance first, like a method's ``self``:

    registry.add_macro(Invoice, "total_with_tax", lambda self, rate: self.total * (1 + rate))
    invoice.total_with_tax(0.2)

Register with the decorator:
    @registry.macro(Invoice)
    def total_with_tax(self, rate):
        return self.total * (1 + rate)

The registry only stores class identifiers (see ``keys.model_key``), never
instances, and a macro registered on a base class is not visible on its
subclasses.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from .keys import ModelRef, model_key

logger = logging.getLogger(__name__)


Macro = Callable[..., object]
MacroSet = dict[str, Macro]


class MacroRegistry:
    def __init__(self) -> None:
        self._macros: dict[str, MacroSet] = {}
        self._lock = threading.RLock()

    # ---------------------------------------------------------------- register

    def add_macro(self, model: ModelRef, name: str, fn: Macro) -> None:
        """Attach *fn* to *model* as *name*, replacing any previous macro."""
        key = model_key(model)
        with self._lock:
            macros = self._macros.setdefault(key, {})
            replaced = name in macros
            macros[name] = fn
        logger.debug("Registered macro: %s.%s (replaced=%s)", key, name, replaced)

    def macro(self, model: ModelRef, name: Optional[str] = None):
        """
        Decorator that registers a function as a macro for *model*.

        Usage::

            @registry.macro(Invoice)
            def overdue(self):
                return self.due_date < date.today()

            @registry.macro(Invoice, "isLate")
            def is_late(self):
                ...
        """
        def decorator(fn: Macro) -> Macro:
            self.add_macro(model, name if name is not None else fn.__name__, fn)
            return fn
        return decorator

    def remove_macro(self, model: ModelRef, name: str) -> None:
        """Detach *name* from *model*; a missing macro is ignored."""
        key = model_key(model)
        with self._lock:
            macros = self._macros.get(key)
            if macros is None or name not in macros:
                return
            del macros[name]
            if not macros:
                del self._macros[key]
        logger.debug("Removed macro: %s.%s", key, name)

    def clear(self) -> None:
        with self._lock:
            self._macros.clear()

    # ------------------------------------------------------------------ lookup

    def model_has_macro(self, model: ModelRef, name: str) -> bool:
        with self._lock:
            return name in self._macros.get(model_key(model), {})

    def resolve(self, model: ModelRef, name: str) -> Optional[Macro]:
        """Return the macro registered as *name* for *model*, or None."""
        with self._lock:
            return self._macros.get(model_key(model), {}).get(name)

    # ---------------------------------------------------------- introspection

    def macros_for_model(self, model: ModelRef) -> MacroSet:
        """Snapshot of name -> macro for *model* (empty if it has none)."""
        with self._lock:
            return dict(self._macros.get(model_key(model), {}))

    def models_that_implement(self, name: str) -> set[str]:
        with self._lock:
            return {key for key, macros in self._macros.items() if name in macros}

    def get_all_macros(self) -> dict[str, MacroSet]:
        with self._lock:
            return {key: dict(macros) for key, macros in self._macros.items()}

    def registered_models(self) -> list[str]:
        with self._lock:
            return sorted(self._macros.keys())

    def __len__(self) -> int:
        with self._lock:
            return sum(len(macros) for macros in self._macros.values())

    def __contains__(self, item: tuple[ModelRef, str]) -> bool:
        model, name = item
        return self.model_has_macro(model, name)
