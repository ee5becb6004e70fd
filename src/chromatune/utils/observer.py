"""Generic observer pattern manager.

Thread-safe registration, unregistration and notification of observers.
"""

import logging
from threading import Lock
from typing import Any, Optional

logger = logging.getLogger(__name__)


class ObserverManager[T: object]:
    """
    Observer list with thread-safe registration and notification.

    Type Parameters:
        T: The observer protocol type (e.g., CoordinationObserver)

    Thread Safety:
        All operations are thread-safe. The lock is released before calling
        observer callbacks to prevent potential deadlocks.
    """

    def __init__(self, lock: Optional[Lock] = None, observer_type_name: str = "observer"):
        """
        Initialize the observer manager.

        Args:
            lock: Optional threading lock to use. If None, creates a new lock.
            observer_type_name: Name of the observer type for logging
        """
        self._observers: list[T] = []
        self._lock = lock or Lock()
        self._observer_type_name = observer_type_name

    def register(self, observer: T) -> None:
        """Register an observer (idempotent - won't add duplicates)."""
        with self._lock:
            if observer not in self._observers:
                self._observers.append(observer)
                logger.info(f"Registered {self._observer_type_name} observer: {observer}")
            else:
                logger.debug(f"{self._observer_type_name} observer already registered: {observer}")

    def unregister(self, observer: T) -> None:
        """Unregister an observer."""
        with self._lock:
            if observer in self._observers:
                self._observers.remove(observer)
                logger.debug(f"Unregistered {self._observer_type_name} observer: {observer}")
            else:
                logger.warning(
                    f"Attempted to unregister unknown {self._observer_type_name} observer: {observer}"
                )

    def notify(self, callback_name: str, *args: Any, **kwargs: Any) -> None:
        """
        Call `callback_name` on every observer.

        The observer list is copied under the lock and callbacks run without
        it. Exceptions raised by an observer are logged and do not reach the
        caller or the remaining observers.
        """
        with self._lock:
            observers = list(self._observers)

        for observer in observers:
            try:
                callback = getattr(observer, callback_name)
                callback(*args, **kwargs)
            except AttributeError:
                logger.error(
                    f"{self._observer_type_name} observer {observer} has no method '{callback_name}'",
                    exc_info=True,
                )
            except Exception as e:
                logger.error(
                    f"Error notifying {self._observer_type_name} observer {observer} via {callback_name}: {e}",
                    exc_info=True,
                )

    def __len__(self) -> int:
        with self._lock:
            return len(self._observers)
