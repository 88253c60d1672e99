# --------------------------------------------------------------
# File: session.py
# Description: Composición del selector y el motor durante una sesión de interfaz.
# --------------------------------------------------------------
"""Punto de entrada que consume la capa de presentación."""

from __future__ import annotations

import logging
from typing import Optional, Tuple, Union

from keygen.capabilities import CryptographyKeyCapability, KeyCapability
from keygen.clipboard import Clipboard, SystemClipboard
from keygen.engine import COPY_RESET_DELAY, GenerationEngine
from keygen.models import AlgorithmDescriptor, GenerationParameters, GenerationResult, GenerationState
from keygen.selector import ParameterSelector

logger = logging.getLogger(__name__)


class KeyGeneratorSession:
    """Agrupa selector, motor y estado con la vida de una sesión de usuario.

    Args:
        capability (Optional[KeyCapability]): Fuente aleatoria; `cryptography` por defecto.
        clipboard (Optional[Clipboard]): Portapapeles; el del sistema por defecto.
        copy_reset_delay (float): Segundos que permanece activo un indicador de copia.

    """

    def __init__(
        self,
        capability: Optional[KeyCapability] = None,
        clipboard: Optional[Clipboard] = None,
        *,
        copy_reset_delay: float = COPY_RESET_DELAY,
    ) -> None:
        self.selector = ParameterSelector()
        self.engine = GenerationEngine(
            self.selector,
            capability if capability is not None else CryptographyKeyCapability(),
            clipboard if clipboard is not None else SystemClipboard(),
            copy_reset_delay=copy_reset_delay,
        )
        self._initialized = False

    async def initialize(self) -> None:
        """Lanza la primera generación; las llamadas posteriores no hacen nada."""

        if self._initialized:
            return
        self._initialized = True
        logger.debug("Session initialized with %s", self.params)
        await self.engine.generate()

    @property
    def algorithms(self) -> Tuple[AlgorithmDescriptor, ...]:
        return self.selector.list_algorithms()

    @property
    def key_sizes(self) -> Tuple[int, ...]:
        return self.selector.list_key_sizes()

    @property
    def params(self) -> GenerationParameters:
        return self.selector.params

    @property
    def state(self) -> GenerationState:
        return self.engine.state

    @property
    def result(self) -> Optional[GenerationResult]:
        return self.engine.state.result

    def set_algorithm(self, raw: str) -> None:
        self.selector.set_algorithm(raw)

    def set_key_size(self, raw: Union[str, int]) -> None:
        self.selector.set_key_size(raw)

    async def generate(self) -> None:
        await self.engine.generate()

    async def copy_to_clipboard(self, text: Optional[str], which: str) -> None:
        await self.engine.copy_to_clipboard(text, which)

    def close(self) -> None:
        self.engine.close()
