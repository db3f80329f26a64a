# pages/2_Derivatives.py
# Derivative playground: tangent, secants, f'(x) and an auto-sweep of the point.
#
# In the web UI:
# Pick a function, drag x, or switch on Auto mode to let the point bounce.
# Scroll to the bottom and click Generate GIF animation.

import os
import time

import streamlit as st

from vizcore import config
from vizcore.animation import ManualFrameScheduler
from vizcore.export import create_sweep_gif
from vizcore.figures import fig_derivative
from vizcore.functions import FUNCTIONS
from vizcore.session import DerivativeSession

config.configure_logging()

FRAMES_PER_RUN = 90   # frames drawn before handing control back to Streamlit

st.set_page_config(page_title="Derivatives", layout="wide")
st.title("Derivative Visualizer")

if "derivative_session" not in st.session_state:
    scheduler = ManualFrameScheduler()
    st.session_state.derivative_scheduler = scheduler
    st.session_state.derivative_session = DerivativeSession(scheduler=scheduler)
session: DerivativeSession = st.session_state.derivative_session
scheduler: ManualFrameScheduler = st.session_state.derivative_scheduler

x_lo, x_hi = session.viewport.x_range


def _on_point_x():
    session.set_point_x(st.session_state.d_point_x)
    st.session_state.d_auto = False


def _on_auto():
    if st.session_state.d_auto:
        session.start_animation()
    else:
        session.stop_animation()


# keep the slider in sync with wherever the animation left the point
st.session_state.d_point_x = round(min(max(session.point_x, x_lo + 0.1), x_hi - 0.1), 1)

# Sidebar
st.sidebar.header("Function")
idx = st.sidebar.selectbox(
    "f(x)",
    options=list(range(len(FUNCTIONS))),
    index=session.function_index,
    format_func=lambda i: FUNCTIONS[i].name,
)
session.select_function(idx)

st.sidebar.slider("Point x", x_lo + 0.1, x_hi - 0.1, step=0.1, key="d_point_x", on_change=_on_point_x)
delta_x = st.sidebar.slider("Δx (secants)", 0.05, 2.0, session.delta_x, 0.05)
session.set_delta_x(delta_x)

st.sidebar.markdown("---")
show_tangent = st.sidebar.toggle("Show tangent line", value=True)
show_value = st.sidebar.toggle("Show derivative value", value=True)
show_secants = st.sidebar.toggle("Show secant lines", value=False)
show_derivative = st.sidebar.toggle("Show f'(x)", value=session.show_derivative)
session.set_show_derivative(show_derivative)
st.sidebar.toggle("Auto mode", key="d_auto", on_change=_on_auto)

left, right = st.columns([2, 1], gap="large")

with left:
    chart = st.empty()
    chart.plotly_chart(fig_derivative(session, show_tangent=show_tangent, show_secants=show_secants),
                       use_container_width=True)

with right:
    fn = session.function
    st.subheader("At the selected point")
    st.latex(fn.latex)
    st.write(f"**x** = {session.point_x:.3f}")
    st.write(f"**f(x)** = {session.current_value():.4f}")
    if show_value:
        res = session.result()
        st.write(f"**f'(x)** = {res.derivative:.4f}")
        st.write(f"**Central difference** (Δx = {session.delta_x:.2f}): {res.numerical_derivative:.4f}")
        fwd, bwd = res.secants
        st.write(f"Secant slope to x + Δx: {fwd.slope:.4f}")
        st.write(f"Secant slope to x − Δx: {bwd.slope:.4f}")
    with st.expander("Why the secants matter"):
        st.markdown(
            r"""
As $\Delta x \to 0$ both secant slopes approach the tangent slope:

$$
f'(x) = \lim_{\Delta x \to 0} \frac{f(x+\Delta x) - f(x)}{\Delta x}
$$
            """.strip()
        )

# ---------- Auto mode: the page is the host frame loop ----------
if session.driver.running:
    for _ in range(FRAMES_PER_RUN):
        scheduler.advance()
        chart.plotly_chart(fig_derivative(session, show_tangent=show_tangent, show_secants=show_secants),
                           use_container_width=True)
        time.sleep(1.0 / config.GIF_FPS)
    st.rerun()

# ---------- GIF generation section ----------
st.markdown("## GIF animation of the sweep")

if st.button(f"Generate GIF animation ({config.GIF_FILENAME})"):
    with st.spinner("Generating GIF animation (this may take a bit)..."):
        try:
            create_sweep_gif(
                filename=config.GIF_FILENAME,
                function_index=session.function_index,
                start_x=session.point_x,
                show_tangent=show_tangent,
            )
            st.success(f"Animation saved as {config.GIF_FILENAME}")
        except Exception as e:
            st.error(f"Failed to create animation. Error: {e}")

if os.path.exists(config.GIF_FILENAME):
    c1, c2, c3 = st.columns([1, 2, 1])
    with c2:
        st.image(config.GIF_FILENAME)
