# -*- coding: utf-8 -*-
"""
backend/app/__init__.py

Inicializador del paquete principal 'app' del backend Tintero.

Autor: Equipo Tintero
Fecha: 2026-09-14
"""

# Fin del archivo backend/app/__init__.py
