"""Планировщик на threading.Timer.

Классы:
    ThreadingScheduler
        call_later() через daemon-таймеры.
"""

import threading
from typing import Callable

from brain_garden.interfaces.scheduler import BaseScheduler, TimerHandle


class ThreadingScheduler(BaseScheduler):
    """Планирует вызовы в фоновых daemon-потоках."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer
