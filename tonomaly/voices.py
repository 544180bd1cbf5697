"""A voice: one sounding note with its own oscillator, effects and envelope."""

from __future__ import annotations

from dataclasses import dataclass

from tonomaly.adsr import ADSR
from tonomaly.oscillators import Oscillator, WaveformType, create_oscillator


@dataclass
class EffectsChain:
    """Chain of effects applied to a voice; currently holds none."""


class Voice:
    """A single note, triggered on creation."""

    def __init__(self, waveform, effects, envelope, frequency, sample_rate):
        self.waveform: WaveformType = waveform
        self.oscillator: Oscillator = create_oscillator(waveform, frequency, sample_rate)
        self.effects: EffectsChain = effects
        self.envelope: ADSR = envelope
        self.frequency = float(frequency)
        self.sample_rate = float(sample_rate)
        self.is_active = True
        self.envelope.note_on()

    def next_sample(self) -> float:
        """Return the next oscillator sample, or silence once the voice is done."""
        if not self.is_active and self.envelope.is_finished():
            return 0.0
        return self.oscillator.next_sample()

    def __repr__(self) -> str:
        return (
            f"Voice(waveform={self.waveform.name}, frequency={self.frequency}, "
            f"sample_rate={self.sample_rate}, is_active={self.is_active})"
        )