"""
Debounced callback scheduling.
"""

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Debouncer:
    """
    Runs a callback once after a quiet period.

    Each trigger() cancels the pending timer and starts a new one, so a burst
    of triggers inside the window results in a single call.
    """

    def __init__(
        self,
        delay_seconds: float,
        callback: Callable[[], None],
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
    ):
        if delay_seconds < 0:
            raise ValueError("delay_seconds must not be negative")
        self._delay = delay_seconds
        self._callback = callback
        self._timer_factory = timer_factory
        self._timer: Optional[threading.Timer] = None
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def pending(self) -> bool:
        """True while a call is scheduled but has not run yet."""
        with self._lock:
            return self._timer is not None

    def trigger(self):
        """Schedule the callback, replacing any pending one."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            timer = self._timer_factory(
                self._delay, self._fire, args=(self._generation,)
            )
            timer.daemon = True
            self._timer = timer
            timer.start()
        logger.debug("Debounce timer (re)started for %.2fs", self._delay)

    def cancel(self) -> bool:
        """Cancel the pending call. Returns True if one was pending."""
        with self._lock:
            timer = self._timer
            self._timer = None
            self._generation += 1
        if timer is None:
            return False
        timer.cancel()
        return True

    def _fire(self, generation: int):
        with self._lock:
            # A later trigger() or cancel() superseded this timer
            if generation != self._generation:
                return
            self._timer = None
        try:
            self._callback()
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Debounced callback failed: %s", e, exc_info=True)
