#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Macros router
=============
GET /api/v1/macros                          — every model and its macro names
GET /api/v1/macros/models/{model_id}        — macro names for one model
GET /api/v1/macros/implementers/{name}      — models that have macro {name}

Read-only diagnostics over the application's registry.  Model ids are the
fully-qualified class names produced by ``model_key()``.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from fastapi import APIRouter, Depends

from macroable_models.core.deps import get_macro_registry
from macroable_models.schemas import (
    ImplementersOut,
    MacroRegistryOut,
    ModelMacrosOut,
    macro_names,
)
from macroable_models.services.macros import MacroRegistry

# -----------------------------------------------------------------------------

router = APIRouter(prefix="/macros", tags=["Macros"])


# -----------------------------------------------------------------------------

@router.get("", response_model=MacroRegistryOut)
async def list_macros(registry: MacroRegistry = Depends(get_macro_registry)):
    return MacroRegistryOut.from_state(registry.get_all_macros())


# -----------------------------------------------------------------------------

@router.get("/models/{model_id}", response_model=ModelMacrosOut)
async def macros_for_model(
    model_id: str,
    registry: MacroRegistry = Depends(get_macro_registry),
):
    """Unknown models simply have no macros."""
    return ModelMacrosOut(
        model=model_id,
        macros=macro_names(registry.macros_for_model(model_id)),
    )


# -----------------------------------------------------------------------------

@router.get("/implementers/{name}", response_model=ImplementersOut)
async def models_that_implement(
    name: str,
    registry: MacroRegistry = Depends(get_macro_registry),
):
    return ImplementersOut(
        macro=name,
        models=sorted(registry.models_that_implement(name)),
    )
