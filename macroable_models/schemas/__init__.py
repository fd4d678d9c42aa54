"""
Pydantic v2 schemas for the macro diagnostics API.

Only macro names are exposed; the callables themselves never leave the
process.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from macroable_models.services.macros import MacroSet


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Shared
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def macro_names(macros: MacroSet) -> list[str]:
    return sorted(macros.keys())


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Macros
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class MacroRegistryOut(BaseModel):
    models: dict[str, list[str]] = Field(default_factory=dict)
    total: int = 0

    @classmethod
    def from_state(cls, state: dict[str, MacroSet]) -> "MacroRegistryOut":
        models = {key: macro_names(macros) for key, macros in sorted(state.items())}
        return cls(models=models, total=sum(len(names) for names in models.values()))


# -----------------------------------------------------------------------------

class ModelMacrosOut(BaseModel):
    model: str
    macros: list[str] = Field(default_factory=list)


# -----------------------------------------------------------------------------

class ImplementersOut(BaseModel):
    macro: str
    models: list[str] = Field(default_factory=list)
