from __future__ import annotations

import logging
import threading
import time
from typing import Callable

logger = logging.getLogger(__name__)


class Throttle:
    """Keeps at least ``min_interval_s`` between consecutive dispatches.

    The wait and the timestamp update happen under one lock, so callers
    sharing a client across threads are still spaced out.
    """

    def __init__(
            self,
            min_interval_s: float = 0.5,
            *,
            clock: Callable[[], float] = time.monotonic,
            sleep: Callable[[float], None] = time.sleep,
    ):
        self.min_interval_s = float(min_interval_s)
        self._clock = clock
        self._sleep = sleep
        self._lock = threading.Lock()
        self._last: float | None = None

    @property
    def last_dispatch(self) -> float | None:
        return self._last

    def wait(self) -> float:
        """Block until the next dispatch is allowed and mark it as started.

        Returns the number of seconds slept.
        """
        with self._lock:
            slept = 0.0
            if self._last is not None:
                remaining = self.min_interval_s - (self._clock() - self._last)
                if remaining > 0:
                    logger.debug("throttling request for %.3fs", remaining)
                    self._sleep(remaining)
                    slept = remaining
            self._last = self._clock()
            return slept
