"""Periodic waveform generators driven by a normalised phase in [0, 1)."""

from __future__ import annotations

import enum
import math


class WaveformType(enum.Enum):
    """Waveform shapes a voice can be built with."""

    SINE = enum.auto()
    SQUARE = enum.auto()
    SAWTOOTH = enum.auto()
    TRIANGLE = enum.auto()


class Oscillator:
    """Base oscillator: advances phase by ``frequency / sample_rate`` per sample."""

    def __init__(self, frequency, sample_rate):
        self.frequency = float(frequency)
        self.sample_rate = float(sample_rate)
        self.phase = 0.0

    @property
    def phase_increment(self) -> float:
        """Fraction of a cycle covered by one sample."""
        return self.frequency / self.sample_rate

    def _value(self) -> float:
        raise NotImplementedError

    def next_sample(self) -> float:
        """Return the sample at the current phase, then advance the phase."""
        sample = self._value()
        self.phase += self.phase_increment
        if self.phase >= 1.0:
            self.phase = 0.0
        return sample

    def __iter__(self):
        while True:
            yield self.next_sample()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(frequency={self.frequency}, "
            f"sample_rate={self.sample_rate}, phase={self.phase})"
        )


class Sine(Oscillator):
    """Sine wave; one cycle is 2*pi radians."""

    def _value(self) -> float:
        return math.sin(2.0 * math.pi * self.phase)


class Square(Oscillator):
    """Square wave, high while the phase is below ``duty``."""

    def __init__(self, frequency, sample_rate, duty):
        super().__init__(frequency, sample_rate)
        self.duty = float(duty)

    def _value(self) -> float:
        return 1.0 if self.phase < self.duty else -1.0


def create_oscillator(waveform, frequency, sample_rate) -> Oscillator:
    """Build the oscillator for ``waveform``; squares use a 50% duty cycle."""
    if waveform is WaveformType.SINE:
        return Sine(frequency, sample_rate)
    if waveform is WaveformType.SQUARE:
        return Square(frequency, sample_rate, 0.5)
    raise ValueError(f"unsupported waveform: {waveform}")