# File: tricheck/utils/errors.py
# Project: TriCheck (TCK)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Errores tipados del proyecto.
# Notes: La geometría no lanza errores con una configuración válida.
from __future__ import annotations


class TriCheckError(Exception):
    """Error base del proyecto."""


class TriCheckValidationError(TriCheckError):
    """Configuración fuera de rango (tamaños, radios, ángulos)."""


class TriCheckConfigError(TriCheckValidationError):
    """Valor de settings/JSON no utilizable (tipo o enum inválido)."""


class TriCheckIOError(TriCheckError):
    """Error de E/S (export de SVG)."""
