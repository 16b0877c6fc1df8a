# -*- coding: utf-8 -*-
"""
backend/app/modules/blog/facades/errors.py

Excepciones de dominio para el módulo de blog.
Las rutas las traducen a http_exceptions.

Autor: Equipo Tintero
Fecha: 2026-09-23
"""


class BlogError(Exception):
    """Base de errores de dominio del blog."""


class PostNotFound(BlogError):
    """Se lanza cuando no se encuentra un post visible por slug."""
    def __init__(self, slug):
        self.slug = slug
        super().__init__(f"Post no encontrado: {slug}")


class CategoryNotFound(BlogError):
    def __init__(self, category_id):
        self.category_id = category_id
        super().__init__(f"Categoría no encontrada: {category_id}")


class TagNotFound(BlogError):
    def __init__(self, tag_id):
        self.tag_id = tag_id
        super().__init__(f"Tag no encontrado: {tag_id}")


class NameAlreadyExists(BlogError):
    """Nombre de categoría/tag duplicado."""
    def __init__(self, entity: str, name: str):
        self.entity = entity
        self.name = name
        super().__init__(f"Ya existe {entity} con el nombre '{name}'")


class CategoryInUse(BlogError):
    """La categoría tiene posts asociados y no puede eliminarse."""
    def __init__(self, category_id, post_count: int):
        self.category_id = category_id
        self.post_count = post_count
        super().__init__(
            f"La categoría tiene {post_count} post(s) asociados y no puede eliminarse"
        )


class InvalidReference(BlogError):
    """El payload referencia una categoría o tags inexistentes."""
    def __init__(self, message: str):
        super().__init__(message)


class PermissionDenied(BlogError):
    """Se lanza cuando un usuario no tiene permisos para una operación."""
    def __init__(self, message: str):
        super().__init__(message)


class SlugConflict(BlogError):
    """
    El slug resuelto siguió chocando con el UNIQUE de la tabla tras
    agotar los reintentos de escritura.
    """
    def __init__(self, entity: str, attempts: int):
        self.entity = entity
        self.attempts = attempts
        super().__init__(
            f"No se pudo guardar {entity}: el slug entró en conflicto {attempts} veces"
        )


__all__ = [
    "BlogError",
    "PostNotFound",
    "CategoryNotFound",
    "TagNotFound",
    "NameAlreadyExists",
    "CategoryInUse",
    "InvalidReference",
    "PermissionDenied",
    "SlugConflict",
]

# Fin del archivo backend/app/modules/blog/facades/errors.py
