from __future__ import annotations

"""Abstract-ish audio synthesis interface.

Concrete implementations only need single-note playback; the note
player treats them as opaque sinks.
"""

import time


class Synth:
    """Abstract-like synth interface for playback engines."""

    def __init__(self, sample_rate: int, gain: float) -> None:
        self.sample_rate = sample_rate
        self.gain = gain

    def note_on(self, midi: int, velocity: int = 100, dur_ms: int = 500) -> None:
        """Play a single note for a duration in milliseconds."""
        raise NotImplementedError

    def sleep_ms(self, ms: int) -> None:
        time.sleep(ms / 1000.0)

    def close(self) -> None:
        """Release resources."""
        pass


class SilentSynth(Synth):
    """Synth that accepts notes and produces nothing (headless runs)."""

    def __init__(self, sample_rate: int = 44100, gain: float = 0.0) -> None:
        super().__init__(sample_rate=sample_rate, gain=gain)

    def note_on(self, midi: int, velocity: int = 100, dur_ms: int = 500) -> None:
        pass
