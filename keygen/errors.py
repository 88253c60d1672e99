# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de errores del generador de claves e IV.
# --------------------------------------------------------------
"""Excepciones propias del paquete `keygen`."""


class KeygenError(Exception):
    """Base de todos los errores del generador."""


class CapabilityError(KeygenError):
    """La capacidad criptográfica rechazó la petición (parámetros o plataforma)."""


class GenerationFailure(KeygenError):
    """Fallo al generar la clave o el IV con la capacidad disponible."""


class ClipboardFailure(KeygenError):
    """No se pudo escribir en el portapapeles del sistema."""


class InvalidSelection(KeygenError, ValueError):
    """Valor de algoritmo o tamaño de clave no soportado."""
