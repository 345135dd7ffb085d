"""Process-wide busy flags shared by every API-driven control.

A control that finds the context busy drops its request instead of queueing it.
"""

import threading
from contextlib import contextmanager
from typing import Iterator, Optional


class ApiContext:
    """Holds the "calling API" and "updating model" flags."""

    _default_instance: Optional["ApiContext"] = None
    _instance_lock = threading.RLock()

    @classmethod
    def get_default(cls) -> "ApiContext":
        """Get the process-wide context instance.

        Returns:
            The singleton :class:`ApiContext`
        """
        with cls._instance_lock:
            if cls._default_instance is None:
                cls._default_instance = cls()
            return cls._default_instance

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.is_calling_api = False
        self.is_updating_model = False

    @property
    def busy(self) -> bool:
        return self.is_calling_api or self.is_updating_model

    @contextmanager
    def calling_api(self) -> Iterator[bool]:
        """Hold the calling-API flag for the duration of the block.

        Yields:
            True if this scope set the flag, False if the context was already busy.
            The flag is cleared on exit only by the scope that set it.
        """
        with self._lock:
            acquired = not self.busy
            if acquired:
                self.is_calling_api = True
        try:
            yield acquired
        finally:
            if acquired:
                with self._lock:
                    self.is_calling_api = False

    @contextmanager
    def updating_model(self) -> Iterator[bool]:
        """Hold the updating-model flag for the duration of the block.

        Yields:
            True if this scope set the flag, False if a model update was already running
        """
        with self._lock:
            acquired = not self.is_updating_model
            if acquired:
                self.is_updating_model = True
        try:
            yield acquired
        finally:
            if acquired:
                with self._lock:
                    self.is_updating_model = False
