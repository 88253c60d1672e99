# --------------------------------------------------------------
# File: logs.py
# Description: Configuración del canal de diagnóstico basado en logging.
# --------------------------------------------------------------
"""Preparación del logging de la aplicación."""

from __future__ import annotations

import logging
from typing import Optional

from keygen import config


def configure_logging(level: Optional[str] = None) -> None:
    """Configura el logger raíz con el nivel y formato de `keygen.config`.

    Args:
        level (Optional[str]): Nivel a aplicar; por defecto `KEYGEN_LOG_LEVEL`.

    """

    logging.basicConfig(level=(level or config.LOG_LEVEL).upper(), format=config.LOG_FORMAT)
