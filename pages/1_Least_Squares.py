# pages/1_Least_Squares.py
# Least squares playground: move a line by hand, compare with the optimum.
#
# Dependencies:
#   streamlit
#   plotly
#   vizcore (this repo)

import streamlit as st

from vizcore import config
from vizcore.figures import fig_regression
from vizcore.session import RegressionSession

config.configure_logging()

st.set_page_config(page_title="Least Squares", layout="wide")
st.title("Least Squares Visualizer")

if "regression_session" not in st.session_state:
    st.session_state.regression_session = RegressionSession()
session: RegressionSession = st.session_state.regression_session


def _sync_sliders():
    st.session_state.ls_slope = float(session.current_model().slope)
    st.session_state.ls_intercept = float(session.current_model().intercept)


def _on_slope():
    session.set_slope(st.session_state.ls_slope)


def _on_intercept():
    session.set_intercept(st.session_state.ls_intercept)


def _on_optimize():
    session.optimize()
    _sync_sliders()


def _on_reset():
    session.reset()
    _sync_sliders()


if "ls_slope" not in st.session_state:
    _sync_sliders()

# Sidebar setup
st.sidebar.header("Your line")
st.sidebar.slider("Slope", -2.0, 2.0, step=0.01, key="ls_slope", on_change=_on_slope)
st.sidebar.slider("Intercept", -20.0, 40.0, step=0.5, key="ls_intercept", on_change=_on_intercept)

c1, c2 = st.sidebar.columns(2)
c1.button("Best fit", on_click=_on_optimize)
c2.button("Reset", on_click=_on_reset)

st.sidebar.markdown("---")
show_residuals = st.sidebar.toggle("Show residuals", value=True)
show_squares = st.sidebar.toggle("Show squared errors", value=True)
show_optimal = st.sidebar.toggle("Show least-squares line", value=False)
show_table = st.sidebar.toggle("Show error values", value=True)

report = session.report()

left, right = st.columns([2, 1], gap="large")

with left:
    st.plotly_chart(
        fig_regression(session, show_residuals=show_residuals,
                       show_squares=show_squares, show_optimal=show_optimal),
        use_container_width=True,
    )

with right:
    st.subheader("Numerical Analysis")
    st.latex(rf"\hat y = {report.current.slope:.3f}\,x + {report.current.intercept:.3f}")
    st.metric("SSE (your line)", f"{report.sse:.2f}",
              delta=f"{report.sse - report.optimal_sse:.2f} above optimum", delta_color="inverse")
    st.metric("MSE (your line)", f"{report.mse:.2f}")

    st.markdown("**Least-squares line**")
    st.latex(rf"\hat y = {report.optimal.slope:.3f}\,x + {report.optimal.intercept:.3f}")
    st.metric("SSE (optimal)", f"{report.optimal_sse:.2f}")

    if report.is_optimal:
        st.success("Your line is the least-squares line.")
    else:
        st.info("Keep adjusting, or press **Best fit**.")

if show_table:
    with st.expander("Residuals Detail", expanded=False):
        st.dataframe(
            [
                {
                    "x": r.x,
                    "y": r.y,
                    "ŷ": round(r.predicted_y, 3),
                    "error": round(r.error, 3),
                    "error²": round(r.squared_error, 3),
                }
                for r in report.residuals
            ],
            use_container_width=True,
        )

st.markdown("---")
st.markdown("#### Learn the Math")
st.latex(
    r"m = \frac{\sum_i (x_i-\bar x)(y_i-\bar y)}{\sum_i (x_i-\bar x)^2},\qquad b = \bar y - m\,\bar x"
)
st.latex(r"\mathrm{SSE} = \sum_i \bigl(y_i - (m x_i + b)\bigr)^2,\qquad \mathrm{MSE} = \mathrm{SSE}/n")
