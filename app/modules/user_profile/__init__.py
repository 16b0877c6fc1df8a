# -*- coding: utf-8 -*-
"""
backend/app/modules/user_profile/__init__.py

Módulo de perfil: consulta/edición de datos del usuario y cambio de contraseña.
"""
