# vizcore/animation.py
# Bouncing scalar for the "auto" mode of the derivative page.
#
# The driver never owns a loop. The host hands it a FrameScheduler; the driver
# asks for one frame at a time while running and cancels the pending frame on
# stop().

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Protocol, Tuple

from vizcore import config

logger = logging.getLogger(__name__)

FrameCallback = Callable[[float], None]


class FrameScheduler(Protocol):
    def request_frame(self, callback: FrameCallback) -> int: ...

    def cancel_frame(self, handle: int) -> None: ...


class ManualFrameScheduler:
    """
    Scheduler whose frames fire only when the host calls advance().
    Used by the Streamlit loop, the GIF exporter and the tests.
    """

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self._pending: Dict[int, FrameCallback] = {}

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request_frame(self, callback: FrameCallback) -> int:
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> None:
        self._pending.pop(handle, None)

    def advance(self, dt: float = 1.0) -> int:
        """Fire every frame pending right now; frames requested meanwhile wait for the next call."""
        due, self._pending = self._pending, {}
        for callback in due.values():
            callback(dt)
        return len(due)


@dataclass
class AnimationState:
    position: float
    direction: int = 1
    running: bool = False


class AnimationDriver:
    def __init__(
        self,
        domain: Tuple[float, float] = config.DERIVATIVE_X_RANGE,
        position: float = config.DEFAULT_POINT_X,
        speed: float = config.ANIMATION_SPEED,
        margin: float = config.BOUNDARY_MARGIN,
        scheduler: Optional[FrameScheduler] = None,
    ) -> None:
        self.domain = (float(domain[0]), float(domain[1]))
        self.speed = float(speed)
        self.margin = float(margin)
        self.scheduler = scheduler
        self._state = AnimationState(position=float(position))
        self._handle: Optional[int] = None

    # ---------- read-only views ----------

    @property
    def state(self) -> AnimationState:
        """Snapshot; mutating it does not touch the driver."""
        s = self._state
        return AnimationState(s.position, s.direction, s.running)

    @property
    def position(self) -> float:
        return self._state.position

    @property
    def running(self) -> bool:
        return self._state.running

    @property
    def bounds(self) -> Tuple[float, float]:
        return self.domain[0] + self.margin, self.domain[1] - self.margin

    # ---------- transitions ----------

    def start(self) -> None:
        if self._state.running:
            return
        self._state.running = True
        logger.debug("animation started at x=%.3f", self._state.position)
        self._schedule()

    def stop(self) -> None:
        if not self._state.running:
            return
        self._state.running = False
        if self._handle is not None and self.scheduler is not None:
            self.scheduler.cancel_frame(self._handle)
        self._handle = None
        logger.debug("animation stopped at x=%.3f", self._state.position)

    def set_position(self, x: float) -> None:
        """Manual change: stops the animation first so the two never fight."""
        self.stop()
        self._state.position = float(x)

    def step(self, dt: float = 1.0) -> AnimationState:
        """Advance one frame (dt in frames); a no-op while stopped."""
        s = self._state
        if not s.running:
            return self.state

        lo, hi = self.bounds
        x = s.position + s.direction * self.speed * dt
        if x > hi:
            x = hi
            s.direction = -1
        elif x < lo:
            x = lo
            s.direction = 1
        s.position = x
        return self.state

    # ---------- scheduling ----------

    def _schedule(self) -> None:
        if self.scheduler is None or self._handle is not None:
            return
        self._handle = self.scheduler.request_frame(self._on_frame)

    def _on_frame(self, dt: float) -> None:
        self._handle = None
        if not self._state.running:
            return
        self.step(dt)
        self._schedule()
