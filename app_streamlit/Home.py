# --------------------------------------------------------------
# File: Home.py
# Description: Página de Streamlit para generar clave AES e IV y copiarlos.
# --------------------------------------------------------------

import asyncio
import threading

import streamlit as st

from keygen.errors import InvalidSelection
from keygen.logs import configure_logging
from keygen.models import iv_size_for
from keygen.session import KeyGeneratorSession


def _start_loop() -> asyncio.AbstractEventLoop:
    """Arranca un bucle asyncio en segundo plano para la sesión del navegador.

    Returns:
        asyncio.AbstractEventLoop: Bucle que mantiene vivos los temporizadores de copia.
    """
    loop = asyncio.new_event_loop()
    threading.Thread(target=loop.run_forever, daemon=True).start()
    return loop


def _run(coro):
    """Ejecuta una corrutina en el bucle de la sesión y espera su resultado."""
    return asyncio.run_coroutine_threadsafe(coro, st.session_state["keygen_loop"]).result()


configure_logging()

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="AES Key Generator", page_icon="🔑", layout="centered")
st.title("🔑 Generador de clave AES e IV")
st.write("Genera una clave simétrica y un IV aleatorios adecuados al modo AES elegido.")

# Crea la sesión una sola vez por navegador y lanza la primera generación.
if "keygen_session" not in st.session_state:
    st.session_state["keygen_loop"] = _start_loop()
    st.session_state["keygen_session"] = KeyGeneratorSession()
    _run(st.session_state["keygen_session"].initialize())

session: KeyGeneratorSession = st.session_state["keygen_session"]

col_alg, col_size = st.columns(2)
modes = [algo.mode for algo in session.algorithms]
with col_alg:
    mode = st.selectbox(
        "Algoritmo",
        modes,
        index=modes.index(session.params.mode),
        format_func=lambda value: next(a.name for a in session.algorithms if a.mode == value),
    )
with col_size:
    sizes = list(session.key_sizes)
    key_bits = st.selectbox(
        "Longitud de clave (bits)", sizes, index=sizes.index(session.params.key_bits)
    )

try:
    session.set_algorithm(mode)
    session.set_key_size(key_bits)
except InvalidSelection as exc:
    st.error(str(exc))

if st.button("Generar", disabled=session.state.is_generating, type="primary"):
    _run(session.generate())

state = session.state
if state.last_error:
    st.error(state.last_error)

# Muestra la clave y el IV junto a sus botones de copia.
for label, which, value, copied in (
    ("Clave", "key", state.key_encoded, state.key_copied),
    ("IV", "iv", state.iv_encoded, state.iv_copied),
):
    st.markdown(f"### {label} (Base64)")
    st.code(value or "—")
    if st.button(f"Copiar {label.lower()}", key=f"copy_{which}", disabled=not value):
        _run(session.copy_to_clipboard(value, which))
        copied = session.state.key_copied if which == "key" else session.state.iv_copied
    if copied:
        st.success(f"{label} copiada ✅" if which == "key" else f"{label} copiado ✅")

st.caption(
    f"{session.params.mode} | clave={session.params.key_bits} bits | "
    f"IV={iv_size_for(session.params.mode) * 8} bits"
)
