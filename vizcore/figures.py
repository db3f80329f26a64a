# vizcore/figures.py
# Plotly figures for the Streamlit pages. Figures are drawn in domain
# coordinates; axis ranges come from each session's viewport.

from __future__ import annotations

from typing import Tuple

import numpy as np
import plotly.graph_objects as go

from vizcore.probability import OPTIONS
from vizcore.session import (
    BayesSession,
    CoinFlipSession,
    DerivativeSession,
    PCASession,
    RegressionSession,
)

LINE_COLOR = "#3B82F6"
OPTIMAL_COLOR = "#10B981"
ERROR_COLOR = "#EF4444"


def _layout(fig: go.Figure, height: int, x_range, y_range, x_title="x", y_title="y") -> go.Figure:
    fig.update_layout(
        height=height,
        margin=dict(l=10, r=10, t=10, b=10),
        xaxis_title=x_title,
        yaxis_title=y_title,
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="left", x=0),
    )
    fig.update_xaxes(range=list(x_range))
    fig.update_yaxes(range=list(y_range))
    return fig


# -----------------------------
# Least squares
# -----------------------------
def fig_regression(
    session: RegressionSession,
    show_residuals: bool = True,
    show_squares: bool = True,
    show_optimal: bool = False,
) -> go.Figure:
    vp = session.viewport
    report = session.report()
    xs = np.array([p.x for p in session.points])
    ys = np.array([p.y for p in session.points])
    x_line = np.array(vp.x_range)

    fig = go.Figure()
    fig.add_trace(go.Scatter(x=xs, y=ys, mode="markers", name="Data",
                             marker=dict(size=9, color="#1F2937")))

    fig.add_trace(go.Scatter(
        x=x_line, y=report.current.slope * x_line + report.current.intercept,
        mode="lines", name="Your line", line=dict(width=3, color=LINE_COLOR),
    ))

    if show_optimal:
        fig.add_trace(go.Scatter(
            x=x_line, y=report.optimal.slope * x_line + report.optimal.intercept,
            mode="lines", name="Least squares", line=dict(width=2, dash="dash", color=OPTIMAL_COLOR),
        ))

    if show_residuals:
        for r in report.residuals:
            fig.add_trace(go.Scatter(
                x=[r.x, r.x], y=[r.y, r.predicted_y],
                mode="lines", showlegend=False,
                line=dict(width=1.5, color=ERROR_COLOR),
            ))

    # squared errors drawn as actual squares with side |error|
    if show_squares:
        for r in report.residuals:
            side = abs(r.error)
            y0, y1 = sorted((r.y, r.predicted_y))
            fig.add_shape(
                type="rect", x0=r.x, x1=r.x + side, y0=y0, y1=y1,
                line=dict(width=1, color=ERROR_COLOR),
                fillcolor=ERROR_COLOR, opacity=0.15,
            )

    return _layout(fig, 520, vp.x_range, vp.y_range)


# -----------------------------
# Derivative
# -----------------------------
def fig_derivative(
    session: DerivativeSession,
    show_tangent: bool = True,
    show_secants: bool = False,
) -> go.Figure:
    vp = session.viewport
    res = session.result()
    fig = go.Figure()

    cx, cy = zip(*res.curve) if res.curve else ((), ())
    fig.add_trace(go.Scatter(x=cx, y=cy, mode="lines", name=session.function.name,
                             line=dict(width=3, color=LINE_COLOR)))

    if res.derivative_curve:
        dx, dy = zip(*res.derivative_curve)
        fig.add_trace(go.Scatter(x=dx, y=dy, mode="lines", name="f'(x)",
                                 line=dict(width=2, dash="dot", color=OPTIMAL_COLOR)))

    if show_tangent:
        t = res.tangent
        fig.add_trace(go.Scatter(x=[t.x1, t.x2], y=[t.y1, t.y2], mode="lines",
                                 name=f"tangent (slope {res.derivative:.3f})",
                                 line=dict(width=2, color=ERROR_COLOR)))

    if show_secants:
        for seg, color, label in zip(res.secants, ("#FF8C00", "#9932CC"), ("x + Δx", "x − Δx")):
            fig.add_trace(go.Scatter(x=[seg.x1, seg.x2], y=[seg.y1, seg.y2],
                                     mode="lines+markers", name=f"secant {label}",
                                     line=dict(width=2, color=color)))

    fig.add_trace(go.Scatter(
        x=[session.point_x], y=[res.value], mode="markers+text", name="point",
        text=[f"({session.point_x:.2f}, {res.value:.2f})"], textposition="top center",
        marker=dict(size=11, color=ERROR_COLOR),
    ))

    return _layout(fig, 520, vp.x_range, vp.y_range, y_title="f(x)")


# -----------------------------
# PCA
# -----------------------------
def fig_pca_scene(
    session: PCASession,
    step: int = 3,
    show_original_axes: bool = True,
    show_pca_axes: bool = True,
) -> go.Figure:
    """
    step 1: raw data, step 2: centered data, step 3: + principal axes,
    step 4: data expressed in PC coordinates.
    """
    vp = session.viewport
    res = session.pca_result()
    fig = go.Figure()

    if step >= 4:
        data = res.projected
        name = "PC coordinates"
    elif step >= 2:
        data = res.centered
        name = "Centered"
    else:
        data = np.array([[p.x, p.y] for p in session.points])
        name = "Original"

    fig.add_trace(go.Scatter(x=data[:, 0], y=data[:, 1], mode="markers", name=name,
                             marker=dict(size=7, opacity=0.7, color=LINE_COLOR)))

    if show_original_axes:
        (x0, x1), (y0, y1) = vp.x_range, vp.y_range
        fig.add_trace(go.Scatter(x=[x0, x1, None, 0, 0], y=[0, 0, None, y0, y1],
                                 mode="lines", name="x / y axes",
                                 line=dict(width=1, color="#94A3B8",
                                           dash="dash" if step >= 3 else "solid")))

    if show_pca_axes and 3 <= step < 4:
        # axes through the origin of the centered data
        mx, my = float(res.mean[0]), float(res.mean[1])
        for i, (seg, color) in enumerate(zip(session.axis_segments(), ("#DC2626", "#059669"))):
            fig.add_trace(go.Scatter(
                x=[seg.x1 - mx, seg.x2 - mx], y=[seg.y1 - my, seg.y2 - my],
                mode="lines", name=f"PC{i + 1} ({res.explained_variance[i]:.1%})",
                line=dict(width=3, color=color),
            ))

    fig = _layout(fig, 560, vp.x_range, vp.y_range)
    fig.update_yaxes(scaleanchor="x", scaleratio=1)  # equal aspect
    return fig


def fig_explained_variance(session: PCASession) -> go.Figure:
    res = session.pca_result()
    f = go.Figure()
    f.add_trace(go.Bar(x=["PC1", "PC2"], y=list(res.explained_variance), name="explained variance ratio"))
    f.update_layout(
        height=320, margin=dict(l=10, r=10, t=10, b=10),
        xaxis_title="component",
        yaxis_title="explained variance ratio",
    )
    f.update_yaxes(range=[0, 1])
    return f


# -----------------------------
# Bayes
# -----------------------------
def fig_bayes_population(session: BayesSession) -> go.Figure:
    pop = session.population()
    f = go.Figure()
    f.add_trace(go.Bar(x=["A", "not A"], y=[pop.size_a_and_b, pop.size_not_a_and_b],
                       name="B (positive)", marker_color=ERROR_COLOR))
    f.add_trace(go.Bar(x=["A", "not A"],
                       y=[pop.size_a - pop.size_a_and_b, pop.size_not_a - pop.size_not_a_and_b],
                       name="not B", marker_color="#CBD5E1"))
    f.update_layout(
        barmode="stack", height=360, margin=dict(l=10, r=10, t=10, b=10),
        yaxis_title=f"people out of {pop.total:.0f}",
    )
    return f


def fig_posterior_donut(session: BayesSession) -> go.Figure:
    p = session.bayes_result().posterior
    f = go.Figure(go.Pie(values=[p, 1 - p], labels=["P(A|B)", "rest"], hole=0.7,
                         sort=False, textinfo="none", marker=dict(colors=[LINE_COLOR, "#E5E7EB"])))
    f.update_layout(
        height=280, margin=dict(l=10, r=10, t=10, b=10), showlegend=False,
        annotations=[dict(text=f"{p:.1%}", x=0.5, y=0.5, font_size=26, showarrow=False)],
    )
    return f


# -----------------------------
# Coin flip
# -----------------------------
def fig_coin_outcomes(session: CoinFlipSession) -> Tuple[go.Figure, go.Figure]:
    probs = session.exact_probabilities()
    titles = [OPTIONS[k].title for k in probs]

    f1 = go.Figure()
    f1.add_trace(go.Bar(x=titles, y=list(probs.values()), name="exact"))
    f1.update_layout(height=320, margin=dict(l=10, r=10, t=10, b=10),
                     yaxis_title="probability")
    f1.update_yaxes(range=[0, 1])

    f2 = go.Figure()
    outcome = session.outcome()
    if outcome is not None and outcome.flips:
        counts = {k: 0 for k in probs}
        for flip in outcome.flips:
            counts[flip.winning_option] += 1
        n = len(outcome.flips)
        f2.add_trace(go.Bar(x=titles, y=[counts[k] / n for k in probs], name="simulated"))
    f2.update_layout(height=320, margin=dict(l=10, r=10, t=10, b=10),
                     yaxis_title="relative frequency")
    f2.update_yaxes(range=[0, 1])
    return f1, f2
