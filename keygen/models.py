# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos compartidos por el selector y el motor de generación.
# --------------------------------------------------------------
"""Modelos Pydantic que describen parámetros, resultados y estado observable."""

from __future__ import annotations

from typing import Dict, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict

Mode = Literal["AES-CBC", "AES-GCM"]
KeyBits = Literal[128, 256]

# Tamaño del IV por modo: 96 bits recomendados en GCM, bloque completo en CBC.
IV_SIZES: Dict[str, int] = {"AES-GCM": 12, "AES-CBC": 16}


class AlgorithmDescriptor(BaseModel):
    """Describe un algoritmo seleccionable en la interfaz.

    Attributes:
        name (str): Nombre mostrado al usuario.
        mode (Mode): Identificador del modo AES.

    """

    model_config = ConfigDict(frozen=True)

    name: str
    mode: Mode


class GenerationParameters(BaseModel):
    """Selección actual de modo y longitud de clave.

    Attributes:
        mode (Mode): Modo AES elegido.
        key_bits (KeyBits): Longitud de la clave en bits.

    """

    model_config = ConfigDict(validate_assignment=True)

    mode: Mode = "AES-GCM"
    key_bits: KeyBits = 256


class GenerationResult(BaseModel):
    """Clave e IV codificados en Base64 estándar; se publican juntos."""

    model_config = ConfigDict(frozen=True)

    key_encoded: str
    iv_encoded: str


class GenerationState(BaseModel):
    """Estado observable por la capa de presentación.

    Attributes:
        is_generating (bool): Hay una generación en curso.
        last_error (Optional[str]): Mensaje para el usuario del último fallo.
        key_copied (bool): Indicador temporal de clave copiada.
        iv_copied (bool): Indicador temporal de IV copiado.
        result (Optional[GenerationResult]): Último resultado correcto.

    """

    is_generating: bool = False
    last_error: Optional[str] = None
    key_copied: bool = False
    iv_copied: bool = False
    result: Optional[GenerationResult] = None

    @property
    def key_encoded(self) -> Optional[str]:
        return self.result.key_encoded if self.result else None

    @property
    def iv_encoded(self) -> Optional[str]:
        return self.result.iv_encoded if self.result else None


ALGORITHMS: Tuple[AlgorithmDescriptor, ...] = (
    AlgorithmDescriptor(name="AES-CBC", mode="AES-CBC"),
    AlgorithmDescriptor(name="AES-GCM", mode="AES-GCM"),
)

KEY_SIZES: Tuple[int, ...] = (128, 256)


def iv_size_for(mode: str) -> int:
    """Devuelve la longitud del IV en bytes para el modo indicado."""

    return IV_SIZES["AES-GCM"] if mode == "AES-GCM" else IV_SIZES["AES-CBC"]
