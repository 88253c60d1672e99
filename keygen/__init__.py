# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de los módulos del generador de claves AES.
# --------------------------------------------------------------
"""Inicializa el paquete `keygen` y documenta sus módulos principales."""

__all__ = [
    "capabilities",
    "clipboard",
    "config",
    "engine",
    "errors",
    "logs",
    "models",
    "selector",
    "session",
]
