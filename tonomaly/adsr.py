"""Attack/decay/sustain/release amplitude envelope."""

from __future__ import annotations

import enum
import math


class ADSRState(enum.Enum):
    """Stage an envelope is currently in."""

    INACTIVE = enum.auto()
    ATTACK = enum.auto()
    DECAY = enum.auto()
    SUSTAIN = enum.auto()
    RELEASE = enum.auto()


class ADSR:
    """Per-sample envelope generator.

    ``attack``, ``decay`` and ``release`` are durations in seconds,
    ``sustain`` is the level held after the decay stage.
    """

    def __init__(self, attack, decay, sustain, release, sample_rate):
        self.attack = float(attack)
        self.decay = float(decay)
        self.sustain = float(sustain)
        self.release = float(release)
        self.sample_rate = float(sample_rate)

        self.state = ADSRState.INACTIVE
        self.current_amplitude = 0.0
        self.release_start_amplitude = 0.0
        self.time_in_state = 0.0

    def __repr__(self) -> str:
        return (
            f"ADSR(attack={self.attack}, decay={self.decay}, "
            f"sustain={self.sustain}, release={self.release}, "
            f"sample_rate={self.sample_rate}, state={self.state.name})"
        )

    def note_on(self) -> None:
        """Start the attack stage."""
        self.state = ADSRState.ATTACK
        self.time_in_state = 0.0

    def note_off(self) -> None:
        """Start the release stage from the current amplitude."""
        self.release_start_amplitude = self.current_amplitude
        self.state = ADSRState.RELEASE
        self.time_in_state = 0.0

    def next_sample(self) -> float:
        """Advance one sample and return the amplitude, clamped to [0, 1]."""
        self.time_in_state += 1.0 / self.sample_rate
        t = self.time_in_state

        if self.state is ADSRState.INACTIVE:
            self.current_amplitude = 0.0

        elif self.state is ADSRState.ATTACK:
            self.current_amplitude = t / self.attack if self.attack else math.inf
            if t >= self.attack:
                self.state = ADSRState.DECAY
                self.time_in_state = 0.0

        elif self.state is ADSRState.DECAY:
            if t >= self.decay:
                self.current_amplitude = self.sustain
                self.state = ADSRState.SUSTAIN
            else:
                progress = t / self.decay
                self.current_amplitude = self.sustain + (1.0 - self.sustain) * math.exp(
                    -3.0 * progress
                )

        elif self.state is ADSRState.SUSTAIN:
            self.current_amplitude = self.sustain

        elif self.state is ADSRState.RELEASE:
            if t >= self.release:
                self.current_amplitude = 0.0
                self.state = ADSRState.INACTIVE
            else:
                progress = t / self.release
                self.current_amplitude = self.release_start_amplitude * math.exp(
                    -3.0 * progress
                )

        return min(max(self.current_amplitude, 0.0), 1.0)

    def is_finished(self) -> bool:
        """True once the envelope has gone back to the inactive stage."""
        return self.state is ADSRState.INACTIVE