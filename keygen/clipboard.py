# --------------------------------------------------------------
# File: clipboard.py
# Description: Capacidad de escritura en el portapapeles del sistema.
# --------------------------------------------------------------
"""Adaptador asíncrono sobre `pyperclip`."""

from __future__ import annotations

import asyncio
from typing import Protocol

import pyperclip

from keygen.errors import ClipboardFailure


class Clipboard(Protocol):
    """Contrato mínimo de escritura en el portapapeles."""

    async def write_text(self, text: str) -> None: ...


class SystemClipboard:
    """Escribe en el portapapeles del sistema sin bloquear el bucle de eventos."""

    async def write_text(self, text: str) -> None:
        """Copia `text` al portapapeles.

        Raises:
            ClipboardFailure: Si no hay mecanismo de portapapeles disponible.

        """

        try:
            await asyncio.to_thread(pyperclip.copy, text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardFailure(str(exc)) from exc
