# --------------------------------------------------------------
# File: test_logs.py
# Description: Pruebas de la configuración de logging desde el entorno.
# --------------------------------------------------------------

import importlib
import logging

from keygen import config, logs


def test_configure_logging_uses_env_level(monkeypatch):
    """Comprueba que KEYGEN_LOG_LEVEL determine el nivel del logger raíz.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        None: La aserción revisa el nivel configurado.
    """
    monkeypatch.setenv("KEYGEN_LOG_LEVEL", "debug")
    importlib.reload(config)
    root = logging.getLogger()
    previous = root.level
    monkeypatch.setattr(root, "handlers", [])
    try:
        logs.configure_logging()
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)
        monkeypatch.delenv("KEYGEN_LOG_LEVEL")
        importlib.reload(config)


def test_configure_logging_explicit_level_wins(monkeypatch):
    """Un nivel explícito tiene prioridad sobre la configuración.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para aislar los handlers del logger raíz.

    Returns:
        None: La aserción revisa el nivel configurado.
    """
    root = logging.getLogger()
    previous = root.level
    monkeypatch.setattr(root, "handlers", [])
    try:
        logs.configure_logging("warning")
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)
