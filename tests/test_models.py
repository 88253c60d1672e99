# --------------------------------------------------------------
# File: test_models.py
# Description: Pruebas de los modelos de parámetros, resultado y estado.
# --------------------------------------------------------------

import pytest
from pydantic import ValidationError

from keygen.models import ALGORITHMS, GenerationParameters, GenerationResult, GenerationState, iv_size_for


def test_default_parameters_are_gcm_256():
    """Comprueba los valores por defecto de la selección.

    Returns:
        None: Las aserciones validan modo y longitud iniciales.
    """
    params = GenerationParameters()
    assert params.mode == "AES-GCM"
    assert params.key_bits == 256


def test_parameters_reject_invalid_assignment():
    """Verifica que una asignación inválida no modifique los parámetros.

    Returns:
        None: Se espera un ValidationError y el valor previo intacto.
    """
    params = GenerationParameters()
    with pytest.raises(ValidationError):
        params.key_bits = 192
    with pytest.raises(ValidationError):
        params.mode = "AES-CTR"
    assert params.key_bits == 256 and params.mode == "AES-GCM"


def test_result_and_descriptors_are_frozen():
    """Garantiza que descriptores y resultados sean inmutables.

    Returns:
        None: Las asignaciones deben fallar.
    """
    result = GenerationResult(key_encoded="a2V5", iv_encoded="aXY=")
    with pytest.raises(ValidationError):
        result.key_encoded = "otro"
    with pytest.raises(ValidationError):
        ALGORITHMS[0].mode = "AES-GCM"


def test_state_exposes_result_fields():
    """Comprueba los accesos de lectura a la clave e IV publicados.

    Returns:
        None: Las aserciones cubren estado vacío y con resultado.
    """
    state = GenerationState()
    assert state.key_encoded is None and state.iv_encoded is None
    state.result = GenerationResult(key_encoded="a2V5", iv_encoded="aXY=")
    assert state.key_encoded == "a2V5"
    assert state.iv_encoded == "aXY="


@pytest.mark.parametrize("mode, size", [("AES-GCM", 12), ("AES-CBC", 16)])
def test_iv_size_for_mode(mode, size):
    """Valida la política fija de tamaño de IV por modo.

    Args:
        mode (str): Modo AES evaluado.
        size (int): Longitud esperada en bytes.

    Returns:
        None: La aserción compara la longitud devuelta.
    """
    assert iv_size_for(mode) == size
