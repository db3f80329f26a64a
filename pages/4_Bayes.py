# pages/4_Bayes.py
# Bayes playground: P(A|B) from prior, likelihood and false-positive rate.

import streamlit as st

from vizcore import config
from vizcore.datasets import BAYES_EXAMPLES
from vizcore.figures import fig_bayes_population, fig_posterior_donut
from vizcore.session import BayesSession

config.configure_logging()

st.set_page_config(page_title="Bayes Playground", layout="wide")
st.title("Bayes' Theorem Playground")

if "bayes_session" not in st.session_state:
    st.session_state.bayes_session = BayesSession()
session: BayesSession = st.session_state.bayes_session


def _sync_sliders():
    e = session.evidence
    st.session_state.b_prior = float(e.prior)
    st.session_state.b_likelihood = float(e.likelihood)
    st.session_state.b_false_pos = float(e.false_positive_rate)


def _on_slider():
    session.set_evidence(
        prior=st.session_state.b_prior,
        likelihood=st.session_state.b_likelihood,
        false_positive_rate=st.session_state.b_false_pos,
    )


def _load(name):
    session.load_example(name)
    _sync_sliders()


if "b_prior" not in st.session_state:
    _sync_sliders()

st.sidebar.header("Examples")
for name, example in BAYES_EXAMPLES.items():
    st.sidebar.button(example.title, key=f"example_{name}", on_click=_load, args=(name,))

st.sidebar.markdown("---")
st.sidebar.header("Probabilities")
st.sidebar.slider("P(A) prior", 0.0, 1.0, step=0.01, key="b_prior", on_change=_on_slider)
st.sidebar.slider("P(B|A) likelihood", 0.0, 1.0, step=0.01, key="b_likelihood", on_change=_on_slider)
st.sidebar.slider("P(B|¬A) false positives", 0.0, 1.0, step=0.01, key="b_false_pos", on_change=_on_slider)

result = session.bayes_result()
e = session.evidence


def fmt(v):
    return f"{v * 100:.1f}%"


if session.example is not None:
    st.info(BAYES_EXAMPLES[session.example].statement)

left, right = st.columns([1, 2], gap="large")

with left:
    st.subheader("Posterior")
    st.plotly_chart(fig_posterior_donut(session), use_container_width=True)
    st.metric("P(A|B)", fmt(result.posterior))
    st.metric("P(B) marginal", fmt(result.marginal))

with right:
    st.subheader("Population of 100")
    st.plotly_chart(fig_bayes_population(session), use_container_width=True)

st.markdown("---")
st.latex(r"P(A\mid B) = \frac{P(B\mid A)\,P(A)}{P(B\mid A)\,P(A) + P(B\mid\neg A)\,(1-P(A))}")
st.latex(
    r"= \frac{%.2f \cdot %.2f}{%.2f \cdot %.2f + %.2f \cdot %.2f} = %.4f"
    % (e.likelihood, e.prior, e.likelihood, e.prior, e.false_positive_rate, 1 - e.prior, result.posterior)
)
