from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from vizcore.export import create_sweep_gif, draw_frame  # noqa: E402
from vizcore.session import DerivativeSession  # noqa: E402


def test_sweep_gif_is_written(tmp_path) -> None:
    out = tmp_path / "sweep.gif"
    written = create_sweep_gif(str(out), function_index=2, n_frames=5, fps=10)

    assert written == 5
    assert out.read_bytes()[:4] == b"GIF8"


def test_draw_frame_uses_pixel_space() -> None:
    session = DerivativeSession()
    fig, ax = plt.subplots()
    try:
        draw_frame(ax, session)
        assert ax.get_xlim() == (0, 600)
        assert ax.get_ylim() == (400, 0)
        assert "x = 1.00" in ax.get_title()
    finally:
        plt.close(fig)
