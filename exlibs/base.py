"""Shared configuration values and a thread-safe singleton base class."""

from __future__ import annotations

import threading
from typing import Any, ClassVar

DEFAULT_TIME_STRING = "yyyy-MM-dd HH:mm:ss"
PORT_RANGE_MAX = 65535


class Singleton:
    """Base class giving each subclass one lazily created, shared instance.

    The instance is built with no arguments the first time
    :meth:`get_instance` is called, and creation is guarded so that
    concurrent callers all receive the same object.
    """

    _instances: ClassVar[dict[type, Any]] = {}
    _lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def get_instance(cls):
        """Return the shared instance of this class, creating it if needed."""
        instance = Singleton._instances.get(cls)
        if instance is None:
            with Singleton._lock:
                instance = Singleton._instances.get(cls)
                if instance is None:
                    instance = cls()
                    Singleton._instances[cls] = instance
        return instance

    @classmethod
    def destroy_instance(cls):
        """Drop the shared instance; the next lookup creates a fresh one."""
        with Singleton._lock:
            Singleton._instances.pop(cls, None)