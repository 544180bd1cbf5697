import pytest

from tonomaly.adsr import ADSR, ADSRState


def _run_until(env, state, limit=10_000):
    samples = []
    for _ in range(limit):
        samples.append(env.next_sample())
        if env.state is state:
            return samples
    raise AssertionError(f"never reached {state}")


def test_new_envelope_is_inactive_and_silent():
    env = ADSR(0.2, 0.2, 0.5, 0.2, 100.0)
    assert env.state is ADSRState.INACTIVE
    assert env.is_finished()
    assert [env.next_sample() for _ in range(10)] == [0.0] * 10


def test_note_on_enters_attack():
    env = ADSR(0.2, 0.2, 0.5, 0.2, 100.0)
    env.note_on()
    assert env.state is ADSRState.ATTACK
    assert env.time_in_state == 0.0
    assert not env.is_finished()


def test_attack_rises_monotonically_to_decay():
    env = ADSR(0.1, 0.2, 0.5, 0.2, 100.0)
    env.note_on()
    samples = _run_until(env, ADSRState.DECAY)
    assert samples == sorted(samples)
    assert samples[-1] == pytest.approx(1.0)
    assert env.time_in_state == 0.0


def test_decay_falls_to_sustain_level():
    env = ADSR(0.05, 0.1, 0.4, 0.2, 100.0)
    env.note_on()
    _run_until(env, ADSRState.DECAY)
    decay = _run_until(env, ADSRState.SUSTAIN)
    assert decay == sorted(decay, reverse=True)
    assert all(0.4 <= s <= 1.0 for s in decay)
    assert decay[-1] == 0.4
    assert env.next_sample() == 0.4
    assert env.state is ADSRState.SUSTAIN


def test_release_decays_to_inactive():
    env = ADSR(0.05, 0.05, 0.6, 0.1, 100.0)
    env.note_on()
    _run_until(env, ADSRState.SUSTAIN)
    env.next_sample()
    env.note_off()
    assert env.state is ADSRState.RELEASE
    assert env.release_start_amplitude == 0.6
    release = _run_until(env, ADSRState.INACTIVE)
    assert release == sorted(release, reverse=True)
    assert all(s < 0.6 for s in release)
    assert release[-1] == 0.0
    assert env.is_finished()


def test_amplitude_always_within_unit_range():
    env = ADSR(0.01, 0.02, 1.5, 0.03, 1000.0)
    env.note_on()
    values = [env.next_sample() for _ in range(100)]
    env.note_off()
    values += [env.next_sample() for _ in range(100)]
    assert all(0.0 <= v <= 1.0 for v in values)


def test_zero_attack_jumps_straight_to_full_level():
    env = ADSR(0.0, 0.2, 0.5, 0.2, 100.0)
    env.note_on()
    assert env.next_sample() == 1.0
    assert env.state is ADSRState.DECAY


def test_note_off_during_attack_starts_from_current_level():
    env = ADSR(1.0, 0.2, 0.5, 0.2, 100.0)
    env.note_on()
    for _ in range(10):
        env.next_sample()
    level = env.current_amplitude
    env.note_off()
    assert env.release_start_amplitude == level
    assert env.next_sample() < level