# -*- coding: utf-8 -*-
"""
backend/app/modules/blog/__init__.py

Módulo Blog: posts, categorías y tags direccionables por slug.
"""
