"""Sound synthesis building blocks: sine and square oscillators, ADSR envelopes and voices."""

__version__ = "0.1.0"
__all__ = ["adsr", "oscillators", "voices"]