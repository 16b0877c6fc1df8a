# -*- coding: utf-8 -*-
"""
backend/app/observability/__init__.py

Observabilidad Prometheus de Tintero (HTTP + slugs).
"""

from .prom import setup_observability

__all__ = ["setup_observability"]
