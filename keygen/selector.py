# --------------------------------------------------------------
# File: selector.py
# Description: Selección y normalización de modo AES y longitud de clave.
# --------------------------------------------------------------
"""Selector de parámetros de generación."""

from __future__ import annotations

from typing import Optional, Tuple, Union

from pydantic import ValidationError

from keygen.errors import InvalidSelection
from keygen.models import ALGORITHMS, KEY_SIZES, AlgorithmDescriptor, GenerationParameters


class ParameterSelector:
    """Mantiene la selección actual y rechaza valores fuera de los enumerados.

    Un valor rechazado deja intacta la selección previa. Cambiar la selección
    no dispara ninguna generación.
    """

    def __init__(self, params: Optional[GenerationParameters] = None) -> None:
        self._params = params if params is not None else GenerationParameters()

    @property
    def params(self) -> GenerationParameters:
        return self._params

    def list_algorithms(self) -> Tuple[AlgorithmDescriptor, ...]:
        return ALGORITHMS

    def list_key_sizes(self) -> Tuple[int, ...]:
        return KEY_SIZES

    def set_algorithm(self, raw: str) -> None:
        """Fija el modo AES a partir de un identificador de `list_algorithms`.

        Raises:
            InvalidSelection: Si `raw` no es un modo soportado.

        """

        if not isinstance(raw, str) or raw not in {algo.mode for algo in ALGORITHMS}:
            raise InvalidSelection(f"Algoritmo no soportado: {raw!r}")
        self._params.mode = raw

    def set_key_size(self, raw: Union[str, int]) -> None:
        """Fija la longitud de clave a partir de texto o entero.

        Args:
            raw (Union[str, int]): Valor procedente del control de la interfaz.

        Raises:
            InvalidSelection: Si el valor no es un entero de `list_key_sizes`.

        """

        if isinstance(raw, bool):
            raise InvalidSelection(f"Longitud de clave no válida: {raw!r}")
        try:
            bits = int(raw.strip()) if isinstance(raw, str) else int(raw)
        except (TypeError, ValueError) as exc:
            raise InvalidSelection(f"Longitud de clave no válida: {raw!r}") from exc
        if bits != raw and not isinstance(raw, str):
            # Rechaza floats con parte decimal como 128.5.
            raise InvalidSelection(f"Longitud de clave no válida: {raw!r}")
        if bits not in KEY_SIZES:
            raise InvalidSelection(f"Longitud de clave no soportada: {bits}")
        try:
            self._params.key_bits = bits
        except ValidationError as exc:
            raise InvalidSelection(str(exc)) from exc

    def snapshot(self) -> GenerationParameters:
        """Copia independiente de la selección para trabajo asíncrono."""

        return self._params.model_copy()
