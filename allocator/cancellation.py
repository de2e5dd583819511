from __future__ import annotations

import threading

from allocator.errors import OptimizationCancelled


class CancellationToken:
    """
    Thread-safe cancel flag polled by the DP fill loop.

    One thread calls :meth:`cancel`; the optimizing thread calls
    :meth:`raise_if_cancelled` between chunks of work.
    """

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise OptimizationCancelled("Optimization was cancelled.")
