from __future__ import annotations

"""NotePlayer: fire-and-forget pitch-class playback.

The synth is acquired once at startup. Playback never raises into the
caller: a player whose synth failed to load, or a synth that errors
mid-note, is logged and otherwise ignored.
"""

import logging
import threading
from typing import Callable, Optional, Set

from ..config.config import AudioConfig
from ..theory.note_utils import note_name_to_midi
from .playback import make_synth_from_config
from .synthesis import Synth

logger = logging.getLogger(__name__)

DEFAULT_OCTAVE = 4
CLOSE_JOIN_TIMEOUT_S = 2.0


class NotePlayer:
    def __init__(
        self,
        synth: Optional[Synth],
        velocity: int = 100,
        dur_ms: int = 500,
        runner: Optional[Callable[[Callable[[], None]], None]] = None,
    ) -> None:
        self.synth = synth
        self.velocity = velocity
        self.dur_ms = dur_ms
        self._runner = runner or self._run_in_daemon_thread
        self._lock = threading.Lock()
        self._threads: Set[threading.Thread] = set()

    @classmethod
    def from_config(cls, audio: AudioConfig) -> "NotePlayer":
        """Acquire the synth described by ``audio``; fall back to a not-ready player."""
        try:
            synth = make_synth_from_config(audio)
        except Exception as e:
            logger.warning("Audio init failed (%s); notes will not sound.", e)
            synth = None
        return cls(synth, velocity=audio.velocity, dur_ms=audio.duration_ms)

    @property
    def ready(self) -> bool:
        return self.synth is not None

    def play(self, pitch_class: str, octave: int = DEFAULT_OCTAVE) -> None:
        """Trigger ``pitch_class`` at ``octave`` without waiting for it to finish."""
        if self.synth is None:
            logger.warning("Note player not ready; dropping %s%d", pitch_class, octave)
            return
        try:
            midi = note_name_to_midi(pitch_class, octave)
        except ValueError as e:
            logger.warning("Cannot play %r at octave %s: %s", pitch_class, octave, e)
            return
        synth = self.synth
        self._runner(lambda: self._sound(synth, midi))

    def _sound(self, synth: Synth, midi: int) -> None:
        try:
            synth.note_on(midi, velocity=self.velocity, dur_ms=self.dur_ms)
        except Exception:
            logger.exception("Playback failed for MIDI note %d", midi)

    def _run_in_daemon_thread(self, fn: Callable[[], None]) -> None:
        def target() -> None:
            try:
                fn()
            finally:
                with self._lock:
                    self._threads.discard(threading.current_thread())

        t = threading.Thread(target=target, daemon=True)
        with self._lock:
            self._threads.add(t)
        t.start()

    def close(self, timeout: float = CLOSE_JOIN_TIMEOUT_S) -> None:
        """Release the synth once notes already sounding have finished."""
        with self._lock:
            synth, self.synth = self.synth, None
            pending = list(self._threads)
        if synth is None:
            return
        for t in pending:
            t.join(timeout)
        try:
            synth.close()
        except Exception:
            logger.exception("Error while closing synth")
