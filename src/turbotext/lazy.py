"""Compute-once values for lookup tables that are expensive to build."""

import threading


class Once:
    """Zero-argument callable that runs ``factory`` on first call only.

    Concurrent first calls block on a lock, so the factory runs exactly once
    per process. Later calls return the cached value without locking.
    """

    __slots__ = ("_factory", "_lock", "_ready", "_value")

    def __init__(self, factory):
        self._factory = factory
        self._lock = threading.Lock()
        self._ready = False
        self._value = None

    def __call__(self):
        if not self._ready:
            with self._lock:
                if not self._ready:
                    self._value = self._factory()
                    self._ready = True
        return self._value


def once(factory):
    """Decorator form of :class:`Once`."""
    return Once(factory)
