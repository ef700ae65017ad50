# minobjects

Small processing objects for timing, lists, signals and matrices, plus a few
building blocks for a markdown toolchain. Each object takes its output
callbacks when you create it and delivers results through them. Most methods
also return the result, so the objects work on their own or inside an event
loop or processing chain.

The package uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Timing

`minobjects.beat_pattern`
- `Metro(action)` is a one-shot timer backed by `threading.Timer`.
  `delay(milliseconds)` schedules `action` and replaces any pending call.
  `stop()` cancels the pending call. `running` tells whether a call is pending.
- `BeatPattern(on_bang, on_interval)` emits bangs spaced by a repeating list
  of intervals in milliseconds. The default is four 250 ms steps followed by
  four 500 ms steps. Setting `on` (or calling `toggle(value)`) to true fires
  the first bang at once; setting it to false stops the timer.
  `set_pattern(pattern)` replaces the intervals and raises `ValueError` for an
  empty pattern. `tick()` sends the current interval and a bang, then
  schedules the next step.

`minobjects.beat_random`
- `BeatRandom(minimum=250.0, maximum=1500.0, on_bang, on_interval)` emits
  bangs at intervals drawn uniformly between `min` and `max`. Both bounds are
  raised to 1 ms if set lower. `on`, `toggle()` and `tick()` behave as in
  `BeatPattern`.

## Lists and messages

- `minobjects.hello_world.HelloWorld(greeting="hello world", on_output)`:
  `bang()` prints the greeting, sends it to `on_output` and returns it.
- `minobjects.convolve`: `convolve(values, kernel)` returns the causal
  convolution of `values` with `kernel`, with the same length as `values`.
  `Convolve(kernel=(1.0, 0.0), on_output)` applies it in `list(values)`.
- `minobjects.list_process`: `ListProcess(operation, on_output)` with the
  `Operation` values `COLLECT`, `AVERAGE` and `PRODUCT`. You can give the
  operation by name, such as `"average"`. `process(*args)` works as follows:
  - `COLLECT` adds the items to a collection, which `bang()` sends out and
    clears.
  - `AVERAGE` sends `[mean, population standard deviation]`.
  - `PRODUCT` sends `[product]`.
- `minobjects.dict_join.DictJoin(initial, on_output)`:
  `dictionary(incoming, inlet=1)` stores a dictionary.
  `dictionary(incoming, inlet=0)` merges `incoming` with the stored one and
  sends the result; keys already stored win. `bang()` resends the last merged
  dictionary.

## Signals

- `minobjects.edge`: `EdgeDetector(on_rise, on_fall, priority)` calls
  `on_rise` when the signal leaves zero and `on_fall` when it returns to zero.
  Call it with one sample or use `process(samples)`. The `Priority` value
  (`HIGH` or `LOW`) is kept on the `priority` attribute. The detector itself
  calls its callbacks at once in either case.
- `minobjects.buffer_index`:
  - `SampleBuffer(frames, channels, samplerate)` holds single-precision
    samples. It provides `lookup()` (indices clamped), `store()`,
    `resize_frames()`, `resize_ms()`, and change listeners.
  - `BufferIndex(buffer, channel=1, on_change)` returns, for each incoming
    index, the sample at the nearest frame. The channel is counted from 1. The
    object reports `"binding"`, `"unbinding"` and `"modified"` events to
    `on_change`.
- `minobjects.buffer_loop.BufferLoop(buffer, channel=1)` plays a buffer as a
  loop. `process(samples)` returns the played samples and the loop phase.
  `speed` scales the playback rate. When `record` is set (for example through
  `number(value)`), the input is written into the buffer. Call
  `dsp_setup(samplerate)` before processing. `length` (ms) and `frames` read
  or resize the buffer.

## Matrices

A matrix is a list of rows of cells. A cell is a tuple of planes, or a
`bytes` object for 8-bit cells.

- `minobjects.jit_clamp.JitClamp(minimum=0.0, maximum=1.0)` clips every plane
  to `[min, max]`. The limits are stored as 8-bit values, so they read back in
  steps of 1/255. Four-plane `bytes` cells go through `calc_pixel`; other
  cells go through `calc_cell`.
- `minobjects.jit_stencil.JitStencil(x=0, y=0)` averages each cell with four
  neighbours at distance `x` horizontally and `y` vertically. Neighbours
  outside the edge repeat the edge cell. Negative distances become 0.

## Environment

`minobjects.environment.query_environment()` returns an `EnvironmentInfo`
with these fields:
- `unique_id`: the machine GUID on Windows, or the machine id file elsewhere.
- `mac_address`.
- `os_version`.
- `architecture`: `x86_64` or `i386`.
- `platform`: `mac`, `win`, or `sys.platform`.

Any field that cannot be found is an empty string. `Environment(on_output)`
sends each field as `(outlet, value)` on `bang()`.

## Markdown helpers (`minobjects.markdown`)

- `buffer`: `Buffer(unit)` is a growable byte buffer. Its reserved size grows
  in multiples of `unit`. It provides `put`, `puts`, `putc`, `put_utf8`,
  `read_from`, `set`, `reset`, `prefix`, `slurp` and `printf`.
  `encode_utf8(codepoint)` turns surrogates and out-of-range values into
  U+FFFD.
- `autolink`: `is_safe(data)` checks for a safe URL scheme. `autolink_www`,
  `autolink_email` and `autolink_url` look for a link at an offset in some
  text. They return an `Autolink(link, rewind, length)` or `None`.
  `AutolinkFlags.SHORT_DOMAINS` accepts domains without a dot.
- `options`: the helpers `parse_options(argv, short_option, long_option,
  argument)`, `parse_int`, `strip_prefix`, `format_option` and `OptionError`,
  for building command-line tools.

## What is not included

The package does not render markdown to HTML and installs no command-line
program. The markdown modules are only the buffer, link detection and option
parsing pieces.

## Example

```python
from minobjects.convolve import Convolve

results = []
conv = Convolve([0.5, 0.5], results.append)
conv.list([1.0, 2.0, 3.0])
print(results[-1])  # [0.5, 1.5, 2.5]
```