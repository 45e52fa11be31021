"""
Single-Flight Call Collapsing.

Collapses concurrent calls for the same key into one execution: the first
caller (the leader) runs the function, every caller that arrives while it is
running waits for and shares the leader's result or exception.

Nothing is cached after the leader finishes; the next call for the key runs
again. Scope is one process: callers in other processes are not coordinated.

Usage:
    flights = SingleFlight()

    insight = flights.do("software engineering", lambda: refresh("software engineering"))
"""

import logging
import threading
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Callable, Dict, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class SingleFlightStats:
    """Counters for collapsed calls."""
    executions: int = 0
    shared: int = 0


class SingleFlight(Generic[T]):
    """Thread-safe per-key in-flight call table."""

    def __init__(self):
        self._lock = threading.Lock()
        self._in_flight: Dict[str, Future] = {}
        self._stats = SingleFlightStats()

    def do(self, key: str, fn: Callable[[], T]) -> T:
        """
        Run fn once per concurrent burst of calls for key.

        Args:
            key: Collapse key
            fn: Zero-argument callable producing the result

        Returns:
            The leader's result

        Raises:
            Whatever fn raised, re-raised in every waiting caller
        """
        with self._lock:
            future = self._in_flight.get(key)
            leader = future is None
            if leader:
                future = Future()
                self._in_flight[key] = future
                self._stats.executions += 1
            else:
                self._stats.shared += 1

        if not leader:
            logger.debug(f"Joining in-flight call for key={key!r}")
            return future.result()

        try:
            result = fn()
        except BaseException as e:
            future.set_exception(e)
            raise
        else:
            future.set_result(result)
            return result
        finally:
            with self._lock:
                self._in_flight.pop(key, None)

    def in_flight(self, key: str) -> bool:
        """Check whether a call for key is currently running."""
        with self._lock:
            return key in self._in_flight

    def get_stats(self) -> SingleFlightStats:
        """Get a snapshot of the counters."""
        with self._lock:
            return SingleFlightStats(self._stats.executions, self._stats.shared)
