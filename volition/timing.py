"""Frame timing: delta time, fixed-step accounting, FPS averaging and frame limiting."""

import collections
import time

MAX_CACHED_DELTA_TIMES = 10


def _default_clock():
    start = time.monotonic()

    def clock():
        return int((time.monotonic() - start) * 1000)

    return clock


class FrameTimer:
    """Tracks frame times in milliseconds.

    ``clock`` returns the current time in whole milliseconds and ``sleep``
    waits for a number of seconds; both default to the real ones.
    """

    def __init__(
        self,
        target_fps=60,
        target_fixed_fps=60,
        limit_fps=False,
        clock=None,
        sleep=None,
    ):
        if target_fps <= 0:
            raise ValueError("target_fps must be positive")
        if target_fixed_fps <= 0:
            raise ValueError("target_fixed_fps must be positive")

        self.limit_fps = bool(limit_fps)
        self.ms_frame_limit = 1000 // int(target_fps)
        self.fixed_delta_time = 1000.0 / target_fixed_fps

        self._clock = clock if clock is not None else _default_clock()
        self._sleep = sleep if sleep is not None else time.sleep

        self.last_tick = 0
        self.delta_time = 0.0
        self.num_fixed_updates = 0
        self.accumulated_fixed_time = 0.0

        self._delta_cache = collections.deque(
            [0.0] * MAX_CACHED_DELTA_TIMES, maxlen=MAX_CACHED_DELTA_TIMES
        )
        self.fps = 0.0

    def ticks(self):
        """Current time in milliseconds."""
        return int(self._clock())

    def tick_frame(self):
        """Measure the frame that just ended and update all derived values."""
        current = self.ticks()
        self.delta_time = float(current - self.last_tick)
        self.last_tick = current

        self.accumulated_fixed_time += self.delta_time
        self.num_fixed_updates = int(self.accumulated_fixed_time / self.fixed_delta_time)
        self.accumulated_fixed_time -= self.num_fixed_updates * self.fixed_delta_time

        self._delta_cache.append(self.delta_time)
        average = sum(self._delta_cache) / MAX_CACHED_DELTA_TIMES
        self.fps = 1000.0 / average if average else float("inf")

    def sync_frame(self):
        """Wait until the frame has lasted its limit, when limiting is on."""
        if not self.limit_fps:
            return
        while (remaining := self.ms_frame_limit - (self.ticks() - self.last_tick)) > 0:
            self._sleep(remaining / 1000.0)