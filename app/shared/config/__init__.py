# -*- coding: utf-8 -*-
"""
backend/app/shared/config/__init__.py

Punto único de acceso a la configuración:
    from app.shared.config import settings

`settings` es un proxy perezoso: la instancia real (según PYTHON_ENV)
se construye en el primer acceso a un atributo, no al importar. Así los
tests pueden fijar variables de entorno antes de que se validen.
"""

from __future__ import annotations

from typing import Any

from .config_loader import get_settings
from .settings_base import BaseAppSettings


class _SettingsProxy:
    __slots__ = ()

    def __getattr__(self, name: str) -> Any:
        return getattr(get_settings(), name)

    def __repr__(self) -> str:
        return f"<SettingsProxy env={get_settings().python_env!r}>"


# Singleton accesible como `settings` (lazy-load via get_settings)
settings = _SettingsProxy()

__all__ = ["settings", "get_settings", "BaseAppSettings"]
