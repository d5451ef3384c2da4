from __future__ import annotations

"""FluidSynth-based audio playback implementation."""

import sys

from ..config.config import AudioConfig
from .synthesis import SilentSynth, Synth


class FluidSynthSynth(Synth):
    """Concrete Synth using pyfluidsynth."""

    def __init__(self, soundfont_path: str, sample_rate: int = 44100, gain: float = 0.5, program: int = 0) -> None:
        super().__init__(sample_rate=sample_rate, gain=gain)
        try:
            import fluidsynth  # type: ignore
        except Exception as e:  # pragma: no cover - runtime dependency
            raise RuntimeError("pyfluidsynth is not installed") from e

        self._fs = fluidsynth.Synth(samplerate=sample_rate, gain=gain)
        # Prefer CoreAudio on macOS to avoid SDL warnings
        driver = None
        if sys.platform == "darwin":
            driver = "coreaudio"
        try:
            if driver:
                self._fs.start(driver=driver)
            else:
                self._fs.start()
        except Exception:
            # Fallback to default driver if preferred one fails
            self._fs.start()
        sfid = self._fs.sfload(soundfont_path)
        if sfid == -1:
            self._fs.delete()
            raise RuntimeError(f"Could not load SoundFont: {soundfont_path}")
        self._sfid = sfid
        self._fs.program_select(0, sfid, 0, int(program))  # GM program 0 = Acoustic Grand

    def note_on(self, midi: int, velocity: int = 100, dur_ms: int = 500) -> None:
        self._fs.noteon(0, midi, max(0, min(127, int(velocity))))
        self.sleep_ms(dur_ms)
        self._fs.noteoff(0, midi)

    def close(self) -> None:
        self._fs.delete()


def make_synth_from_config(audio: AudioConfig) -> Synth:
    """Factory for Synth from the audio config section."""
    if audio.backend == "none":
        return SilentSynth(sample_rate=audio.sample_rate)
    if audio.backend == "fluidsynth":
        return FluidSynthSynth(
            soundfont_path=str(audio.soundfont_path),
            sample_rate=audio.sample_rate,
            gain=audio.gain,
            program=audio.program,
        )
    raise ValueError(f"Unsupported backend: {audio.backend}")
