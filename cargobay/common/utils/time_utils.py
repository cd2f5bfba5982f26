import time
from datetime import timedelta
from typing import Optional, Union


def format_duration(duration: Union[timedelta, float, int]) -> str:
    """Render a build duration, e.g. ``850ms``, ``12.30s`` or ``2m 05s``."""
    if isinstance(duration, timedelta):
        seconds = duration.total_seconds()
    else:
        seconds = float(duration)

    if seconds <= 0:
        return "0ms"
    if seconds < 1:
        return f"{int(seconds * 1000)}ms"
    if seconds < 60:
        return f"{seconds:.2f}s"

    minutes, secs = divmod(int(seconds), 60)
    if minutes < 60:
        return f"{minutes}m {secs:02d}s"
    hours, minutes = divmod(minutes, 60)
    return f"{hours}h {minutes:02d}m {secs:02d}s"


class Timer:
    """Monotonic stopwatch, usable as a context manager around a build step."""

    def __init__(self):
        self.started_at: Optional[float] = None
        self.stopped_at: Optional[float] = None

    def start(self) -> "Timer":
        self.started_at = time.monotonic()
        self.stopped_at = None
        return self

    def stop(self) -> float:
        if self.started_at is None:
            raise RuntimeError("Timer.stop() called before start()")
        self.stopped_at = time.monotonic()
        return self.elapsed

    @property
    def running(self) -> bool:
        return self.started_at is not None and self.stopped_at is None

    @property
    def elapsed(self) -> float:
        if self.started_at is None:
            return 0.0
        end = self.stopped_at if self.stopped_at is not None else time.monotonic()
        return end - self.started_at

    @property
    def elapsed_formatted(self) -> str:
        return format_duration(self.elapsed)

    def __enter__(self) -> "Timer":
        return self.start()

    def __exit__(self, *exc_info) -> None:
        self.stop()
