import time
from threading import Lock


class RequestThrottle:
    """Serialize outbound calls and keep a minimum interval between their starts."""

    def __init__(self, min_interval: float = 1.0, clock=time.monotonic, sleep=time.sleep):
        self.min_interval = min_interval
        self._clock = clock
        self._sleep = sleep
        self._lock = Lock()
        self._last_call = None

    def wait(self) -> float:
        """Block until the next call may start; returns the seconds slept."""
        with self._lock:
            waited = 0.0
            if self._last_call is not None:
                waited = max(0.0, self.min_interval - (self._clock() - self._last_call))
                if waited > 0:
                    self._sleep(waited)
            self._last_call = self._clock()
            return waited

    def schedule(self, func, *args, **kwargs):
        """Run func once the interval has elapsed"""
        self.wait()
        return func(*args, **kwargs)
