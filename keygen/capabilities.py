# --------------------------------------------------------------
# File: capabilities.py
# Description: Capacidad de aleatoriedad segura y generación de claves AES.
# --------------------------------------------------------------
"""Interfaz y backend `cryptography` para generar claves simétricas e IV."""

from __future__ import annotations

import os
from typing import Iterable, Protocol, Tuple

from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from pydantic import BaseModel, ConfigDict, Field

from keygen.errors import CapabilityError

SUPPORTED_MODES = ("AES-CBC", "AES-GCM")
SUPPORTED_USAGES = frozenset({"encrypt", "decrypt"})
AES_KEY_BITS = (128, 192, 256)


class KeyHandle(BaseModel):
    """Referencia a una clave generada por la capacidad.

    Attributes:
        mode (str): Modo AES para el que se generó la clave.
        key_bits (int): Longitud de la clave en bits.
        extractable (bool): Permite exportar el material en bruto.
        usages (Tuple[str, ...]): Usos declarados de la clave.
        material (bytes): Bytes de la clave; nunca aparece en `repr`.

    """

    model_config = ConfigDict(frozen=True)

    mode: str
    key_bits: int
    extractable: bool
    usages: Tuple[str, ...]
    material: bytes = Field(repr=False)


class KeyCapability(Protocol):
    """Contrato que el motor espera de la fuente de aleatoriedad segura."""

    def is_available(self) -> bool: ...

    async def generate_symmetric_key(
        self,
        mode: str,
        key_bits: int,
        extractable: bool = True,
        usages: Iterable[str] = ("encrypt", "decrypt"),
    ) -> KeyHandle: ...

    async def export_raw_key_bytes(self, handle: KeyHandle) -> bytes: ...

    async def random_bytes(self, n: int) -> bytes: ...


class CryptographyKeyCapability:
    """Implementación basada en `cryptography` y el CSPRNG del sistema."""

    def is_available(self) -> bool:
        """Comprueba que el sistema operativo ofrezca una fuente aleatoria segura."""

        try:
            os.urandom(1)
        except NotImplementedError:
            return False
        return True

    async def generate_symmetric_key(
        self,
        mode: str,
        key_bits: int,
        extractable: bool = True,
        usages: Iterable[str] = ("encrypt", "decrypt"),
    ) -> KeyHandle:
        """Genera una clave AES para el modo y longitud indicados.

        Args:
            mode (str): `AES-CBC` o `AES-GCM`.
            key_bits (int): Longitud en bits (128, 192 o 256).
            extractable (bool): Si la clave podrá exportarse en bruto.
            usages (Iterable[str]): Subconjunto de `encrypt` y `decrypt`.

        Returns:
            KeyHandle: Clave generada junto con sus metadatos.

        Raises:
            CapabilityError: Si el modo, la longitud o los usos no son válidos.

        """

        usages = tuple(usages)
        if mode not in SUPPORTED_MODES:
            raise CapabilityError(f"Modo no soportado: {mode!r}")
        if not usages or not SUPPORTED_USAGES.issuperset(usages):
            raise CapabilityError(f"Usos de clave no válidos: {usages!r}")

        if mode == "AES-GCM":
            try:
                material = AESGCM.generate_key(bit_length=key_bits)
            except (TypeError, ValueError) as exc:
                raise CapabilityError(f"Longitud de clave no soportada para {mode}: {key_bits}") from exc
        else:
            if key_bits not in AES_KEY_BITS:
                raise CapabilityError(f"Longitud de clave no soportada para {mode}: {key_bits}")
            material = os.urandom(key_bits // 8)

        return KeyHandle(
            mode=mode,
            key_bits=key_bits,
            extractable=extractable,
            usages=usages,
            material=material,
        )

    async def export_raw_key_bytes(self, handle: KeyHandle) -> bytes:
        """Exporta el material de una clave extraíble.

        Raises:
            CapabilityError: Si la clave se generó como no extraíble.

        """

        if not handle.extractable:
            raise CapabilityError("La clave no es extraíble.")
        return bytes(handle.material)

    async def random_bytes(self, n: int) -> bytes:
        """Devuelve `n` bytes del CSPRNG del sistema."""

        if n < 0:
            raise CapabilityError(f"Número de bytes aleatorios no válido: {n}")
        return os.urandom(n)
