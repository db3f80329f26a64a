# vizcore/export.py
# GIF export of the derivative sweep: the animation driver bounces the point
# across the domain while each frame is drawn in viewport pixel space.

from __future__ import annotations

import logging

import matplotlib.pyplot as plt
from matplotlib.animation import PillowWriter

from vizcore import config
from vizcore.animation import ManualFrameScheduler
from vizcore.session import DerivativeSession

logger = logging.getLogger(__name__)


def draw_frame(ax, session: DerivativeSession, show_tangent: bool = True, title_suffix: str = "") -> None:
    """
    Draw one frame on an existing Axes, in pixel coordinates
    (origin top-left, y growing downward, like the browser canvas).
    """
    vp = session.viewport
    ax.clear()

    curve = session.curve_pixels()
    if curve:
        xs, ys = zip(*curve)
        ax.plot(xs, ys, linewidth=2.5, color="#3B82F6", label=session.function.name)

    # chart frame
    left, right = vp.padding, vp.pixel_width - vp.padding
    top, bottom = vp.padding, vp.pixel_height - vp.padding
    ax.plot([left, right, right, left, left], [top, top, bottom, bottom, top],
            "k-", linewidth=0.8, alpha=0.4)

    # x axis where y = 0 is visible
    y_lo, y_hi = vp.y_range
    if y_lo <= 0 <= y_hi:
        y0 = vp.to_pixel_y(0.0)
        ax.axhline(y0, color="black", linewidth=1, alpha=0.5)

    if show_tangent:
        x1, y1, x2, y2 = session.segment_pixels(session.tangent_line())
        ax.plot([x1, x2], [y1, y2], color="#EF4444", linewidth=1.8,
                label=f"tangent (slope {session.current_derivative():.2f})")

    px, py = session.point_pixel()
    ax.scatter([px], [py], s=70, color="#EF4444", zorder=3)

    ax.set_xlim(0, vp.pixel_width)
    ax.set_ylim(vp.pixel_height, 0)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_title(f"{session.function.name}  x = {session.point_x:.2f}{title_suffix}")
    ax.legend(loc="upper left", fontsize=8)


def create_sweep_gif(
    filename: str,
    function_index: int = 0,
    start_x: float = config.DEFAULT_POINT_X,
    show_tangent: bool = True,
    n_frames: int = config.GIF_FRAMES,
    fps: int = config.GIF_FPS,
) -> int:
    """
    Generate a GIF of the point sweeping along f with its tangent.
    Saves to 'filename' using PillowWriter (no ffmpeg needed).
    Returns the number of frames written.
    """
    scheduler = ManualFrameScheduler()
    session = DerivativeSession(function_index=function_index, point_x=start_x, scheduler=scheduler)

    fig, ax = plt.subplots(figsize=(6, 4))
    writer = PillowWriter(fps=fps)

    written = 0
    session.start_animation()
    try:
        with writer.saving(fig, filename, dpi=100):
            for _ in range(n_frames):
                draw_frame(ax, session, show_tangent=show_tangent)
                writer.grab_frame()
                written += 1
                scheduler.advance()
    finally:
        session.stop_animation()
        plt.close(fig)

    logger.info("wrote %d frames to %s", written, filename)
    return written
