# pages/3_PCA_Demo.py
# Streamlit PCA demo page: 2 variables, closed-form 2x2 eigendecomposition
#
# Dependencies:
#   streamlit
#   numpy
#   plotly

import streamlit as st

from vizcore import config
from vizcore.datasets import DatasetShape
from vizcore.figures import fig_explained_variance, fig_pca_scene
from vizcore.session import PCASession

config.configure_logging()

STEPS = {
    1: "1. Original data",
    2: "2. Center the data",
    3: "3. Principal axes",
    4: "4. Rotate onto the PCs",
}

SHAPE_LABELS = {
    DatasetShape.CORRELATED: "Correlated",
    DatasetShape.ANTI_CORRELATED: "Anti-correlated",
    DatasetShape.UNCORRELATED: "Uncorrelated (ring)",
}

st.set_page_config(page_title="PCA Demo", layout="wide")

st.title("PCA Demo")
st.caption("Center → covariance → eigenvectors → projection. Two variables, closed-form eigenvalues.")

if "pca_session" not in st.session_state:
    st.session_state.pca_session = PCASession()
session: PCASession = st.session_state.pca_session

left, right = st.columns([1, 2], gap="large")

with left:
    st.subheader("2D data")
    shape = st.radio(
        "Dataset",
        list(SHAPE_LABELS),
        index=list(SHAPE_LABELS).index(session.params.shape),
        format_func=lambda s: SHAPE_LABELS[s],
    )
    n = st.slider("Number of points", 10, 200, session.params.n_points, 10)
    noise = st.slider("Noise (%)", 0, 100, int(session.params.noise), 5)
    rotation = st.slider("Rotation (degrees)", 0, 180, int(session.params.rotation_deg), 15)
    seed = st.number_input("Seed", value=session.params.seed, step=1)

    session.update(shape=shape, n_points=n, noise=noise, rotation_deg=rotation, seed=seed)

    st.divider()
    step = st.select_slider("Step", options=list(STEPS), value=3, format_func=lambda s: STEPS[s])
    show_original_axes = st.checkbox("Show x / y axes", value=True)
    show_pca_axes = st.checkbox("Show principal axes", value=True)

res = session.pca_result()
cov = res.covariance
(l1, l2) = res.eigenvalues
(v1, v2) = res.eigenvectors

with right:
    st.subheader("Visualization")
    st.plotly_chart(
        fig_pca_scene(session, step=step, show_original_axes=show_original_axes, show_pca_axes=show_pca_axes),
        use_container_width=True,
    )
    st.write(f"**Mean:** ({res.mean[0]:.3f}, {res.mean[1]:.3f})")
    st.write(
        f"**Explained variance ratio:** PC1 {res.explained_variance[0]:.3f}, "
        f"PC2 {res.explained_variance[1]:.3f}"
    )

st.divider()

c1, c2, c3 = st.columns([1, 1, 1], gap="large")

with c1:
    st.markdown("**Covariance matrix** (divisor $n-1$)")
    st.latex(
        r"""
        C =
        \begin{bmatrix}
        %.3f & %.3f \\
        %.3f & %.3f
        \end{bmatrix}
        """ % (cov.xx, cov.xy, cov.yx, cov.yy)
    )

with c2:
    st.markdown("**Eigenvalues**")
    st.latex(r"\lambda = \frac{\operatorname{tr} C \pm \sqrt{(\operatorname{tr} C)^2 - 4\det C}}{2}")
    st.latex(r"\lambda_1 = %.3f,\quad \lambda_2 = %.3f" % (l1, l2))
    st.latex(
        r"v_1 = (%.3f,\ %.3f),\quad v_2 = (%.3f,\ %.3f)" % (v1[0], v1[1], v2[0], v2[1])
    )

with c3:
    st.plotly_chart(fig_explained_variance(session), use_container_width=True)

with st.expander("What to say (tight narration)"):
    st.markdown(
        """
- Centering moves the mean of the cloud to the origin.
- The covariance matrix measures how x and y vary together.
- Its eigenvectors are the principal axes; eigenvalues are the variance along each.
- Rotating onto the axes gives uncorrelated coordinates, PC1 carrying the most variance.
        """.strip()
    )
