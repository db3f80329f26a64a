# -*- coding: utf-8 -*-
"""
Home page for the Statistics & Calculus Playground

Run with:
    streamlit run Home.py
"""

import streamlit as st

from vizcore import config

config.validate_config()
config.configure_logging()


st.set_page_config(
    page_title="Statistics & Calculus Playground",
    layout="wide"
)

st.title("Statistics & Calculus Playground")

st.write(
    """
    Choose a visualization mode:

    - **Least Squares**: drag a line through 8 points and watch the squared errors shrink.
    - **Derivatives**: tangent and secant lines on x², x³, sin, cos, eˣ and ln, with an auto-sweep.
    - **PCA**: a 2-variable point cloud, its covariance matrix, eigenvectors and explained variance.
    - **Bayes**: prior, likelihood and false positives combined into a posterior.
    - **Coin Flip**: which two-coin bet is really the best one?
    """
)


# (title, blurb, page path)
PAGES = [
    ("Least Squares",
     "Tune slope and intercept by hand, compare against the least-squares line "
     "and read off SSE / MSE for both.",
     "pages/1_Least_Squares.py"),
    ("Derivatives",
     "Move a point along a curve and see the tangent slope, the secants for ±Δx "
     "and the numerical derivative converge.",
     "pages/2_Derivatives.py"),
    ("PCA",
     "Step through centering, the covariance matrix and the rotation onto the "
     "principal axes.",
     "pages/3_PCA_Demo.py"),
    ("Bayes",
     "Medical test, spam filter and court case examples of P(A|B).",
     "pages/4_Bayes.py"),
    ("Coin Flip",
     "Exact probabilities from the outcome table versus a simulation.",
     "pages/5_Coin_Flip.py"),
]

# First row: regression & derivatives, second row: the rest
rows = [PAGES[:2], PAGES[2:]]
for row in rows:
    cols = st.columns(len(row))
    for col, (title, blurb, path) in zip(cols, row):
        with col:
            st.subheader(title)
            st.write(blurb)
            if st.button(f"Go to {title}"):
                st.switch_page(path)
    st.markdown("---")
