# -*- coding: utf-8 -*-
"""
backend/app/modules/todos/__init__.py

Módulo de tareas personales (todos) por usuario.
"""
