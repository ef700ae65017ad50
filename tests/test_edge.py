import pytest

from minobjects.edge import EdgeDetector, Priority


def _recorder():
    events = []
    return events, (lambda: events.append("rise")), (lambda: events.append("fall"))


@pytest.mark.parametrize("priority", [Priority.HIGH, Priority.LOW])
def test_transitions_reported_in_order(priority):
    events, rise, fall = _recorder()
    detector = EdgeDetector(rise, fall, priority)
    detector.process([0.0, 1.0, 1.0, 0.0, 0.0, 2.0])
    assert events == ["rise", "fall", "rise"]
    assert detector.priority is priority


def test_constant_signal_produces_nothing():
    events, rise, fall = _recorder()
    detector = EdgeDetector(rise, fall, Priority.HIGH)
    detector.process([0.0] * 10)
    assert events == []
    assert detector.priority is Priority.HIGH


def test_change_between_nonzero_values_is_not_an_edge():
    events, rise, fall = _recorder()
    detector = EdgeDetector(rise, fall, Priority.LOW)
    detector.process([0.5, -0.5, 3.0])
    assert events == ["rise"]
    assert detector.priority is Priority.LOW


def test_state_persists_between_calls():
    events, rise, fall = _recorder()
    detector = EdgeDetector(rise, fall, Priority.HIGH)
    detector(1.0)
    detector(1.0)
    assert events == ["rise"]
    detector(0.0)
    assert events == ["rise", "fall"]
    assert detector.priority is Priority.HIGH


def test_priority_accepts_value():
    detector = EdgeDetector(priority="main")
    assert detector.priority is Priority.LOW