# --------------------------------------------------------------
# File: engine.py
# Description: Motor de generación de claves AES e IV con estado observable.
# --------------------------------------------------------------
"""Orquesta la capacidad criptográfica y el portapapeles sobre `GenerationState`.

Todas las operaciones se ejecutan en un único bucle `asyncio`. Cada llamada a
`generate()` recibe un número de secuencia creciente y solo la invocación más
reciente puede publicar resultado, error o liberar `is_generating`.
"""

from __future__ import annotations

import asyncio
import base64
import logging
from typing import Dict, Optional

from keygen.capabilities import KeyCapability
from keygen.clipboard import Clipboard
from keygen.errors import GenerationFailure
from keygen.models import GenerationParameters, GenerationResult, GenerationState, iv_size_for
from keygen.selector import ParameterSelector

logger = logging.getLogger(__name__)

COPY_RESET_DELAY = 2.0

CAPABILITY_UNAVAILABLE_MESSAGE = (
    "No hay un generador aleatorio seguro disponible en este entorno. "
    "Usa un sistema que proporcione un CSPRNG."
)
GENERATION_FAILED_MESSAGE = (
    "Se ha producido un error al generar la clave. Consulta el log para más detalles."
)

_COPY_FLAGS = {"key": "key_copied", "iv": "iv_copied"}


def _b64(data: bytes) -> str:
    """Codifica bytes en Base64 estándar con relleno y sin saltos de línea."""

    return base64.b64encode(data).decode("ascii")


class GenerationEngine:
    """Genera clave e IV para la selección actual y gestiona el estado asociado."""

    def __init__(
        self,
        selector: ParameterSelector,
        capability: KeyCapability,
        clipboard: Clipboard,
        *,
        state: Optional[GenerationState] = None,
        copy_reset_delay: float = COPY_RESET_DELAY,
    ) -> None:
        self._selector = selector
        self._capability = capability
        self._clipboard = clipboard
        self._copy_reset_delay = copy_reset_delay
        self._issued = 0
        self._resets: Dict[str, asyncio.TimerHandle] = {}
        self.state = state if state is not None else GenerationState()

    async def _produce(self, params: GenerationParameters) -> GenerationResult:
        """Obtiene clave e IV; no publica nada hasta tener ambos.

        Raises:
            GenerationFailure: Si la capacidad falla en cualquiera de los pasos.

        """

        try:
            handle = await self._capability.generate_symmetric_key(
                params.mode, params.key_bits, extractable=True, usages=("encrypt", "decrypt")
            )
            key = await self._capability.export_raw_key_bytes(handle)
            iv = await self._capability.random_bytes(iv_size_for(params.mode))
        except Exception as exc:
            raise GenerationFailure(f"{params.mode}/{params.key_bits}") from exc
        return GenerationResult(key_encoded=_b64(key), iv_encoded=_b64(iv))

    async def generate(self) -> None:
        """Ejecuta un intento de generación y refleja el resultado en `state`.

        Nunca propaga errores: los fallos quedan en `state.last_error` y el
        detalle se envía al log.
        """

        if not self._capability.is_available():
            logger.error("Key generation skipped: secure random capability unavailable")
            self.state.last_error = CAPABILITY_UNAVAILABLE_MESSAGE
            self.state.result = None
            return

        self._issued += 1
        token = self._issued
        self.state.is_generating = True
        self.state.last_error = None
        self.state.result = None
        params = self._selector.snapshot()
        logger.debug("Generation #%d started (%s, %d bits)", token, params.mode, params.key_bits)

        try:
            result = await self._produce(params)
        except GenerationFailure:
            logger.exception("Key generation failed (%s, %d bits)", params.mode, params.key_bits)
            if token == self._issued:
                self.state.result = None
                self.state.last_error = GENERATION_FAILED_MESSAGE
        else:
            if token == self._issued:
                # Resultado y error se fijan juntos: nunca coexisten.
                self.state.last_error = None
                self.state.result = result
            else:
                logger.debug("Discarding result of superseded generation #%d", token)
        finally:
            if token == self._issued:
                self.state.is_generating = False

    async def copy_to_clipboard(self, text: Optional[str], which: str) -> None:
        """Copia `text` y activa el indicador de `which` durante unos segundos.

        Args:
            text (Optional[str]): Valor a copiar; vacío o `None` no hace nada.
            which (str): `key` o `iv`.

        Raises:
            ValueError: Si `which` no es `key` ni `iv`.

        """

        if which not in _COPY_FLAGS:
            raise ValueError(f"Unknown copy target: {which!r}")
        if not text:
            return

        try:
            await self._clipboard.write_text(text)
        except Exception:
            logger.warning("Clipboard write failed for %s", which, exc_info=True)
            return

        setattr(self.state, _COPY_FLAGS[which], True)
        pending = self._resets.pop(which, None)
        if pending is not None:
            pending.cancel()
        loop = asyncio.get_running_loop()
        self._resets[which] = loop.call_later(self._copy_reset_delay, self._reset_copied, which)

    def _reset_copied(self, which: str) -> None:
        self._resets.pop(which, None)
        setattr(self.state, _COPY_FLAGS[which], False)

    def close(self) -> None:
        """Cancela los reinicios pendientes de los indicadores de copia."""

        for handle in self._resets.values():
            handle.cancel()
        self._resets.clear()
