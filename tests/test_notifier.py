"""Tests for the single-slot duration observer."""
from dialtimer.services.notifier import ChangeNotifier

from conftest import RecordingObserver


class TestChangeNotifier:
    def test_notify_without_observer_is_noop(self):
        ChangeNotifier().notify(900)

    def test_observer_receives_duration(self):
        obs = RecordingObserver()
        notifier = ChangeNotifier(obs)
        notifier.notify(900)
        notifier.notify(960)
        assert obs.calls == [900, 960]

    def test_last_writer_wins(self):
        first, second = RecordingObserver(), RecordingObserver()
        notifier = ChangeNotifier()
        notifier.set_observer(first)
        notifier.set_observer(second)
        notifier.notify(60)
        assert first.calls == []
        assert second.calls == [60]

    def test_clear_observer(self):
        obs = RecordingObserver()
        notifier = ChangeNotifier(obs)
        notifier.clear_observer()
        notifier.notify(60)
        assert obs.calls == []
        assert notifier.observer is None
