# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/base_models.py

Modelo base para esquemas Pydantic de Tintero.

Incluye:
- Eliminación automática de espacios en campos de texto (`str_strip_whitespace = True`)
- Modo de atributos activado para construir respuestas desde ORM (`from_attributes = True`)
- Reexportación de utilidades comunes: `EmailStr` y `Field`

Autor: Equipo Tintero
Fecha: 2026-09-16
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UTF8SafeModel(BaseModel):
    """
    Modelo base para requests y responses de la API.
    Las respuestas se serializan en UTF-8 (ver UTF8JSONResponse).
    """
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,            # para que funcionen los aliases
        str_strip_whitespace=True,        # elimina espacios de strings
    )


class PartialUpdateModel(UTF8SafeModel):
    """
    Base para payloads de actualización parcial (PUT con campos opcionales).

    Solo los campos enviados por el cliente cuentan como cambios:
    usar `changes()` en lugar de model_dump() directo.
    """
    model_config = ConfigDict(extra="forbid")

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


__all__ = ["UTF8SafeModel", "PartialUpdateModel", "EmailStr", "Field"]
# Fin del archivo backend/app/shared/utils/base_models.py
