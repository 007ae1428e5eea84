import time
from typing import Optional

from gcd_engine.utils.logger import Logger


class Stopwatch:
    """
    Scoped monotonic timer.

    The clock starts when the ``with`` block is entered and stops when it is left. ``elapsed`` is only set
    when the block finishes without an exception, so a failed computation never yields a duration.
    """

    def __init__(self, label: Optional[str] = None):
        """
        :param label: If given, the measurement is reported to the Logger under this label
        """
        self.label = label
        self.elapsed: Optional[float] = None
        self._start: Optional[float] = None

    def __enter__(self) -> 'Stopwatch':
        self.elapsed = None
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        end = time.perf_counter()
        if exc_type is None:
            self.elapsed = end - self._start
            if self.label:
                Logger.record_time(self.label, self.elapsed)
        return False
