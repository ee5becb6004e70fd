"""Tests for ObserverManager."""

from threading import Lock
from unittest.mock import Mock

import pytest

from chromatune.utils import ObserverManager


@pytest.mark.unit
class TestObserverManager:
    """Test registration and notification."""

    def test_register_is_idempotent(self):
        manager = ObserverManager()
        observer = Mock()
        manager.register(observer)
        manager.register(observer)
        assert len(manager) == 1

    def test_shared_lock_released_during_callbacks(self):
        shared = Lock()
        manager = ObserverManager(lock=shared, observer_type_name="coordination")
        acquired = []

        class Observer:
            def on_event(self, value):
                got = shared.acquire(blocking=False)
                acquired.append(got)
                if got:
                    shared.release()

        manager.register(Observer())
        manager.notify("on_event", 1)

        assert acquired == [True]

    def test_failing_observer_does_not_stop_others(self):
        manager = ObserverManager()
        broken = Mock()
        broken.on_event.side_effect = RuntimeError("ui crashed")
        healthy = Mock()
        manager.register(broken)
        manager.register(healthy)

        manager.notify("on_event", "payload")

        healthy.on_event.assert_called_once_with("payload")
