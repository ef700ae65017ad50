import threading
import time

import pytest

from minobjects.beat_pattern import BeatPattern, Metro


def test_metro_fires_action():
    fired = threading.Event()
    metro = Metro(fired.set)
    metro.delay(0)
    assert fired.wait(2.0)
    assert metro.running is False


def test_metro_stop_cancels_pending_call():
    fired = threading.Event()
    metro = Metro(fired.set)
    metro.delay(200)
    assert metro.running is True
    metro.stop()
    assert fired.wait(0.4) is False
    assert metro.running is False


def test_metro_reschedule_replaces_pending_call():
    calls = []
    metro = Metro(lambda: calls.append(1))
    metro.delay(5000)
    metro.delay(0)
    time.sleep(0.3)
    metro.stop()
    assert calls == [1]
    assert metro.interval == 0.0


def test_default_pattern_is_used_in_order():
    intervals = []
    bangs = []
    beat = BeatPattern(lambda: bangs.append(1), intervals.append)
    try:
        for _ in range(9):
            beat.tick()
    finally:
        beat.metro.stop()
    assert intervals == [250.0, 250.0, 250.0, 250.0, 500.0, 500.0, 500.0, 500.0, 250.0]
    assert len(bangs) == 9


def test_tick_schedules_next_interval():
    beat = BeatPattern()
    beat.set_pattern([3000, 4000])
    try:
        beat.tick()
        assert beat.metro.interval == 3000.0
        beat.tick()
        assert beat.metro.interval == 4000.0
    finally:
        beat.metro.stop()


def test_set_pattern_wraps_and_replaces():
    intervals = []
    beat = BeatPattern(on_interval=intervals.append)
    beat.set_pattern([3000, 4000])
    try:
        for _ in range(3):
            beat.tick()
    finally:
        beat.metro.stop()
    assert intervals == [3000.0, 4000.0, 3000.0]
    assert beat.pattern == [3000.0, 4000.0]


def test_empty_pattern_rejected():
    beat = BeatPattern()
    with pytest.raises(ValueError):
        beat.set_pattern([])


def test_toggle_on_produces_bangs_and_off_stops():
    bangs = []
    enough = threading.Event()

    def bang():
        bangs.append(1)
        if len(bangs) >= 3:
            enough.set()

    beat = BeatPattern(on_bang=bang)
    beat.set_pattern([10])
    beat.toggle(1)
    assert beat.on is True
    assert enough.wait(2.0)
    beat.toggle(0)
    assert beat.on is False
    count = len(bangs)
    time.sleep(0.1)
    assert len(bangs) <= count + 1