# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas con dobles de capacidad y portapapeles.
# --------------------------------------------------------------

import pytest

from fakes import FakeCapability, FakeClipboard


@pytest.fixture
def capability() -> FakeCapability:
    """Capacidad disponible y sin fallos simulados.

    Returns:
        FakeCapability: Doble configurable de la capacidad criptográfica.
    """
    return FakeCapability()


@pytest.fixture
def clipboard() -> FakeClipboard:
    """Portapapeles en memoria para cada prueba.

    Returns:
        FakeClipboard: Doble que registra los textos copiados.
    """
    return FakeClipboard()
