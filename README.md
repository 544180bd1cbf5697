# tonomaly

Small, modular building blocks for sound synthesis in pure Python, with no
third-party dependencies. Each component produces one floating-point value
per call. You can collect those values into lists, feed them to an audio
library of your choice, or write them to a file.

## Components

### `tonomaly.oscillators`

- `WaveformType` is an enum with the members `SINE`, `SQUARE`, `SAWTOOTH`
  and `TRIANGLE`.
- `Oscillator` is the base class. It stores `frequency`, `sample_rate` and
  `phase`. Its `phase_increment` property is `frequency / sample_rate`.
  - `next_sample()` returns the value at the current phase and then advances
    the phase. When the phase reaches 1.0 or more, it is set back to 0.0.
  - Iterating over an oscillator yields `next_sample()` values without end.
- `Sine(frequency, sample_rate)` returns `sin(2 * pi * phase)`.
- `Square(frequency, sample_rate, duty)` returns `1.0` while the phase is
  below `duty` and `-1.0` otherwise.
- `create_oscillator(waveform, frequency, sample_rate)` builds the oscillator
  for a waveform:
  - `SINE` gives a `Sine`.
  - `SQUARE` gives a `Square` with a duty of 0.5.
  - Any other waveform raises `ValueError`.

### `tonomaly.adsr`

`ADSR(attack, decay, sustain, release, sample_rate)` is a per-sample
envelope. Attack, decay and release are times in seconds. Sustain is a level.
The stage it is in is held in `state`, which is an `ADSRState` member:
`INACTIVE`, `ATTACK`, `DECAY`, `SUSTAIN` or `RELEASE`.

- `note_on()` starts the attack stage.
- `note_off()` starts the release stage from the current amplitude.
- `next_sample()` advances time by one sample and returns the amplitude,
  clamped to the range [0, 1]. The stages behave as follows:
  - Attack rises linearly.
  - Decay falls exponentially towards the sustain level.
  - Sustain holds that level.
  - Release falls exponentially and then returns to `INACTIVE`.
- `is_finished()` is true while the envelope is `INACTIVE`.

### `tonomaly.voices`

- `EffectsChain` is an empty placeholder for effects and holds none.
- `Voice(waveform, effects, envelope, frequency, sample_rate)`:
  - When it is created, it builds an oscillator with `create_oscillator` and
    calls `envelope.note_on()`.
  - `next_sample()` returns the next oscillator value.
  - It returns `0.0` only when `is_active` has been set to `False` and the
    envelope is finished. A new voice has `is_active` set to `True`.

## Example

```python
from tonomaly.adsr import ADSR
from tonomaly.oscillators import WaveformType, create_oscillator
from tonomaly.voices import EffectsChain, Voice

sample_rate = 44100.0

osc = create_oscillator(WaveformType.SQUARE, 440.0, sample_rate)
block = [osc.next_sample() for _ in range(512)]

# Apply an envelope by multiplying its levels with the oscillator output.
env = ADSR(0.01, 0.1, 0.5, 0.2, sample_rate)
env.note_on()
sine = create_oscillator(WaveformType.SINE, 220.0, sample_rate)
shaped = [sine.next_sample() * env.next_sample() for _ in range(1000)]
env.note_off()
while not env.is_finished():
    env.next_sample()

voice = Voice(WaveformType.SINE, EffectsChain(), ADSR(0.2, 0.2, 0.2, 0.2, sample_rate), 440.0, sample_rate)
samples = [voice.next_sample() for _ in range(44100)]
```

## What this package does not do

- It does not play sound or open an audio device. It only computes sample
  values.
- It has no sawtooth or triangle oscillator. `create_oscillator` rejects
  those waveforms.
- It applies no effects. `EffectsChain` is empty.
- `Voice.next_sample()` does not apply the envelope's amplitude to its output.
  To shape a voice, multiply by `ADSR.next_sample()` yourself.
- It has no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```