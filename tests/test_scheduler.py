import threading
import time

import pytest

from xdrgtk.scheduler import Scheduler, SchedulerEntry, SchedulerError


class Recorder:
    def __init__(self):
        self.freqs = []
        self.lock = threading.Lock()

    def __call__(self, freq):
        with self.lock:
            self.freqs.append(freq)

    def snapshot(self):
        with self.lock:
            return list(self.freqs)


def _wait_for(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()


def test_start_without_entries_raises():
    recorder = Recorder()
    scheduler = Scheduler(recorder, [])
    with pytest.raises(SchedulerError):
        scheduler.start()
    assert scheduler.is_running() is False
    assert recorder.snapshot() == []


def test_start_tunes_first_entry_immediately():
    recorder = Recorder()
    scheduler = Scheduler(recorder, [SchedulerEntry(87600, 60), SchedulerEntry(89400, 60)])
    scheduler.start()
    try:
        assert recorder.snapshot() == [87600]
        assert scheduler.is_running() is True
    finally:
        scheduler.stop()
    assert scheduler.is_running() is False


def test_cycles_through_entries_in_order():
    recorder = Recorder()
    entries = [SchedulerEntry(f, 0.01) for f in (87600, 89400, 91300)]
    scheduler = Scheduler(recorder, entries)
    scheduler.start()
    try:
        assert _wait_for(lambda: len(recorder.snapshot()) >= 5)
    finally:
        scheduler.stop()
    assert recorder.snapshot()[:5] == [87600, 89400, 91300, 87600, 89400]


def test_stop_halts_tuning():
    recorder = Recorder()
    scheduler = Scheduler(recorder, [SchedulerEntry(87600, 0.01), SchedulerEntry(89400, 0.01)])
    scheduler.start()
    assert _wait_for(lambda: len(recorder.snapshot()) >= 2)
    scheduler.stop()
    count = len(recorder.snapshot())
    time.sleep(0.1)
    assert len(recorder.snapshot()) == count


def test_stop_when_not_running_is_harmless():
    recorder = Recorder()
    scheduler = Scheduler(recorder, [SchedulerEntry(87600, 60)])
    scheduler.stop()
    assert scheduler.is_running() is False
    assert recorder.snapshot() == []


def test_toggle_switches_state():
    recorder = Recorder()
    scheduler = Scheduler(recorder, [SchedulerEntry(95000, 60)])
    assert scheduler.toggle() is True
    assert scheduler.is_running() is True
    assert scheduler.toggle() is False
    assert scheduler.is_running() is False
    assert recorder.snapshot() == [95000]


def test_restart_begins_from_first_entry():
    recorder = Recorder()
    scheduler = Scheduler(recorder, [SchedulerEntry(87600, 0.01), SchedulerEntry(89400, 60)])
    scheduler.start()
    assert _wait_for(lambda: len(recorder.snapshot()) >= 2)
    scheduler.stop()
    scheduler.start()
    try:
        assert recorder.snapshot()[-1] == 87600
    finally:
        scheduler.stop()


def test_negative_timeout_rejected():
    with pytest.raises(ValueError):
        SchedulerEntry(87600, -1)