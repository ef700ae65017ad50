"""Loop playback of a buffer with optional recording into it."""

from __future__ import annotations

import math
from typing import Iterable, Optional

from minobjects.buffer_index import SampleBuffer


class BufferLoop:
    """Play a buffer as a loop, giving the sample and the loop phase for each input sample."""

    def __init__(self, buffer: Optional[SampleBuffer] = None, channel: int = 1):
        self.buffer = buffer
        self._channel = 1
        self.channel = channel
        self.speed = 1.0
        self.record = False
        self._playback_position = 0.0  # normalized range
        self._record_position = 0  # in frames
        self._one_over_samplerate = 1.0

    @property
    def channel(self) -> int:
        """The channel to use, counted from 1."""
        return self._channel

    @channel.setter
    def channel(self, value: int) -> None:
        self._channel = max(int(value), 1)

    @property
    def length(self) -> float:
        """Length of the buffer in milliseconds."""
        if self.buffer is None:
            return 0.0
        return self.buffer.length_in_seconds * 1000.0

    @length.setter
    def length(self, milliseconds: float) -> None:
        milliseconds = float(milliseconds)
        if milliseconds <= 0.0:
            milliseconds = 1.0
        if self.buffer is not None:
            self.buffer.resize_ms(milliseconds)

    @property
    def frames(self) -> int:
        """Length of the buffer in samples."""
        if self.buffer is None:
            return 0
        return self.buffer.frame_count

    @frames.setter
    def frames(self, count: int) -> None:
        count = int(count)
        if count < 1:
            count = 1
        if self.buffer is not None:
            self.buffer.resize_frames(count)

    def dsp_setup(self, samplerate: float) -> None:
        """Prepare for processing at the given sample rate."""
        samplerate = float(samplerate)
        if samplerate <= 0.0:
            raise ValueError("sample rate must be positive")
        self._one_over_samplerate = 1.0 / samplerate

    def number(self, value) -> None:
        """Turn recording on or off."""
        self.record = bool(value)

    def process(self, samples: Iterable[float]) -> tuple[list[float], list[float]]:
        """Return the played samples and the loop phase for one block of input."""
        samples = [float(s) for s in samples]
        buffer = self.buffer
        if buffer is None or buffer.frame_count == 0:
            silence = [0.0] * len(samples)
            return silence, list(silence)

        chan = min(self._channel - 1, buffer.channel_count - 1)
        frames = buffer.frame_count
        frequency = (1.0 / buffer.length_in_seconds) * float(self.speed)
        stepsize = frequency * self._one_over_samplerate

        out: list[float] = []
        sync: list[float] = []
        position = self._playback_position
        for _ in samples:
            position = math.fmod(position + stepsize, 1.0)
            sync.append(position)
            out.append(buffer.lookup(int(position * frames), chan))
        self._playback_position = position

        if self.record:
            record_position = self._record_position
            for sample in samples:
                if record_position >= frames:
                    record_position = 0
                buffer.store(record_position, chan, sample)
                record_position += 1
            self._record_position = record_position
            buffer.dirty()

        return out, sync