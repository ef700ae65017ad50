import pytest

from minobjects.buffer_index import SampleBuffer
from minobjects.buffer_loop import BufferLoop

VALUES = [0.25, 0.5, 0.75, 1.0]


def _buffer(values, samplerate):
    buf = SampleBuffer(len(values), 1, samplerate)
    for frame, value in enumerate(values):
        buf.store(frame, 0, value)
    return buf


def _loop():
    loop = BufferLoop(_buffer(VALUES, 4.0))
    loop.dsp_setup(4.0)
    return loop


def test_playback_steps_through_buffer():
    out, sync = _loop().process([0.0] * 4)
    assert out == VALUES[1:] + VALUES[:1]
    assert all(0.0 <= s < 1.0 for s in sync)
    assert sync[0] < sync[1] < sync[2]
    assert sync[3] < sync[2]


def test_playback_position_carries_over_blocks():
    loop = _loop()
    first, _ = loop.process([0.0] * 4)
    second, _ = loop.process([0.0] * 4)
    assert first == second


def test_speed_scales_step():
    loop = _loop()
    loop.speed = 2.0
    out, _ = loop.process([0.0] * 4)
    assert out == [VALUES[2], VALUES[0], VALUES[2], VALUES[0]]


def test_record_writes_input_and_wraps():
    buf = SampleBuffer(4, 1, 4.0)
    loop = BufferLoop(buf)
    loop.number(1)
    assert loop.record is True
    loop.process([0.5, 0.25, 0.125])
    loop.process([0.75, 1.0, 2.0])
    assert [buf.lookup(f, 0) for f in range(4)] == [1.0, 2.0, 0.125, 0.75]


def test_record_marks_buffer_modified():
    events = []
    buf = SampleBuffer(4, 1, 4.0)
    buf.add_listener(events.append)
    loop = BufferLoop(buf)
    loop.process([0.5])
    assert events == []
    loop.record = True
    loop.process([0.5])
    assert events == ["modified"]


def test_length_and_frames_attributes():
    buf = SampleBuffer(10, 1, 1000.0)
    loop = BufferLoop(buf)
    assert loop.length == pytest.approx(10.0)
    loop.frames = 20
    assert buf.frame_count == 20
    assert loop.frames == 20
    loop.length = 5.0
    assert buf.frame_count == 5
    loop.length = -3.0
    assert loop.length == pytest.approx(1.0)
    loop.frames = 0
    assert loop.frames == 1


def test_channel_is_at_least_one():
    assert BufferLoop(channel=-2).channel == 1


def test_without_buffer_outputs_silence():
    out, sync = BufferLoop().process([0.5, 0.5])
    assert out == [0.0, 0.0]
    assert sync == [0.0, 0.0]


def test_dsp_setup_rejects_nonpositive_rate():
    with pytest.raises(ValueError):
        BufferLoop().dsp_setup(0)