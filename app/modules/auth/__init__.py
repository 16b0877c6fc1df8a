# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/__init__.py

Módulo Auth: cuentas de usuario, registro, login y dependencias JWT.

Autor: Equipo Tintero
Fecha: 2026-09-19
"""
