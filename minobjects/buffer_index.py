"""Read from a sample buffer at signal-rate indices."""

from __future__ import annotations

import threading
from array import array
from typing import Callable, Iterable, Optional

MAX_CHANNELS = 64


class SampleBuffer:
    """A block of single-precision samples, one array per channel."""

    def __init__(self, frames: int = 0, channels: int = 1, samplerate: float = 44100.0):
        frames = int(frames)
        channels = int(channels)
        samplerate = float(samplerate)
        if frames < 0:
            raise ValueError("frame count cannot be negative")
        if not 1 <= channels <= MAX_CHANNELS:
            raise ValueError(f"channel count must lie between 1 and {MAX_CHANNELS}")
        if samplerate <= 0.0:
            raise ValueError("sample rate must be positive")
        self._samplerate = samplerate
        self._data = [array("f", [0.0]) * frames for _ in range(channels)]
        self._listeners: list[Callable[[str], None]] = []
        self._lock = threading.RLock()

    @property
    def frame_count(self) -> int:
        return len(self._data[0])

    @property
    def channel_count(self) -> int:
        return len(self._data)

    @property
    def samplerate(self) -> float:
        return self._samplerate

    @property
    def length_in_seconds(self) -> float:
        return self.frame_count / self._samplerate

    def add_listener(self, callback: Callable[[str], None]) -> None:
        """Call callback with an event name whenever the content changes."""
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[str], None]) -> None:
        self._listeners.remove(callback)

    def dirty(self) -> None:
        """Tell every listener that the content was modified."""
        for listener in list(self._listeners):
            listener("modified")

    def lookup(self, frame: int, channel: int = 0) -> float:
        """Return the sample at frame and channel, both clamped to the buffer's extent."""
        with self._lock:
            frames = self.frame_count
            if frames == 0:
                raise IndexError("buffer is empty")
            frame = min(max(int(frame), 0), frames - 1)
            channel = min(max(int(channel), 0), self.channel_count - 1)
            return float(self._data[channel][frame])

    def store(self, frame: int, channel: int, value: float) -> None:
        """Write one sample; the value is kept at single precision."""
        with self._lock:
            if not 0 <= channel < self.channel_count:
                raise IndexError(f"no channel {channel}")
            if not 0 <= frame < self.frame_count:
                raise IndexError(f"no frame {frame}")
            self._data[channel][frame] = float(value)

    def resize_frames(self, frames: int) -> None:
        """Change the length in samples, keeping the content that still fits."""
        frames = int(frames)
        if frames < 0:
            raise ValueError("frame count cannot be negative")
        with self._lock:
            for channel, samples in enumerate(self._data):
                if frames <= len(samples):
                    self._data[channel] = samples[:frames]
                else:
                    samples.extend(array("f", [0.0]) * (frames - len(samples)))
        self.dirty()

    def resize_ms(self, milliseconds: float) -> None:
        """Change the length to the given number of milliseconds."""
        self.resize_frames(round(float(milliseconds) * self._samplerate / 1000.0))


class BufferIndex:
    """Output the buffer's sample at each incoming index, read from one channel."""

    def __init__(
        self,
        buffer: Optional[SampleBuffer] = None,
        channel: int = 1,
        on_change: Optional[Callable[[str], None]] = None,
    ):
        self._on_change = on_change
        self._buffer: Optional[SampleBuffer] = None
        self._channel = 1
        self.channel = channel
        if buffer is not None:
            self.set_buffer(buffer)

    @property
    def buffer(self) -> Optional[SampleBuffer]:
        return self._buffer

    @property
    def channel(self) -> int:
        """The channel to read, counted from 1."""
        return self._channel

    @channel.setter
    def channel(self, value: int) -> None:
        self._channel = min(max(int(value), 1), MAX_CHANNELS)

    def _notify(self, event: str) -> None:
        if self._on_change is not None:
            self._on_change(event)

    def set_buffer(self, buffer: Optional[SampleBuffer]) -> None:
        """Bind to a buffer, or unbind with None."""
        if self._buffer is not None:
            self._buffer.remove_listener(self._notify)
            self._buffer = None
            self._notify("unbinding")
        if buffer is not None:
            self._buffer = buffer
            buffer.add_listener(self._notify)
            self._notify("binding")

    def number(self, value: float, inlet: int = 1) -> None:
        """A number at the right inlet selects the channel."""
        if inlet == 1:
            self.channel = value

    def process(self, indices: Iterable[float]) -> list[float]:
        """Return the sample at each index, rounded to the nearest frame."""
        indices = list(indices)
        buffer = self._buffer
        if buffer is None or buffer.frame_count == 0:
            return [0.0] * len(indices)
        chan = min(self._channel - 1, buffer.channel_count - 1)
        return [buffer.lookup(int(index + 0.5), chan) for index in indices]