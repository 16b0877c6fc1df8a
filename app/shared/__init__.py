# -*- coding: utf-8 -*-
"""
backend/app/shared/__init__.py

Infraestructura compartida por los módulos de Tintero
(config, base de datos, middlewares y utilidades).
"""
