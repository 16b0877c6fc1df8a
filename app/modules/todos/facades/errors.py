# -*- coding: utf-8 -*-
"""
backend/app/modules/todos/facades/errors.py
"""


class TodoError(Exception):
    """Base de errores del módulo todos."""


class TodoNotFound(TodoError):
    """El todo no existe o no pertenece al usuario."""

    def __init__(self, todo_id):
        self.todo_id = todo_id
        super().__init__(f"Todo no encontrado: {todo_id}")


__all__ = ["TodoError", "TodoNotFound"]
