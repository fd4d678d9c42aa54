"""
FastAPI dependencies.
"""

from __future__ import annotations

from fastapi import Request

from macroable_models.services.macros import MacroRegistry


def get_macro_registry(request: Request) -> MacroRegistry:
    """The application's registry, as installed by ``create_app()``."""
    return request.app.state.macro_registry
