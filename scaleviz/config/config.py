from __future__ import annotations

"""Configuration loading and validation for scaleviz.

This module loads YAML configuration, applies defaults through Pydantic
models, and downgrades audio settings that cannot work on this machine
instead of refusing to start.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from ..diagrams.fretboard import DROP_D, NUM_FRETS, STANDARD, Tuning
from ..diagrams.keyboard import NUM_KEYS
from ..theory.modes import get_mode
from ..theory.note_utils import validate_pitch_class

logger = logging.getLogger(__name__)

ALLOWED_BACKENDS = {"fluidsynth", "none"}
DEFAULT_CONFIG_PATH = Path(__file__).with_name("defaults.yml")


class AudioConfig(BaseModel):
    """Synth backend and note playback parameters."""

    backend: str = "fluidsynth"
    soundfont_path: str = "./soundfonts/GrandPiano.sf2"
    sample_rate: int = Field(44100, gt=0)
    gain: float = Field(0.5, ge=0)
    program: int = Field(0, ge=0, le=127)
    velocity: int = Field(100, ge=1, le=127)
    duration_ms: int = Field(500, gt=0)


class SelectionConfig(BaseModel):
    root: str = "C"
    mode: str = "ionian"

    @field_validator("root")
    @classmethod
    def _known_root(cls, v: str) -> str:
        return validate_pitch_class(v)

    @field_validator("mode")
    @classmethod
    def _known_mode(cls, v: str) -> str:
        return get_mode(v).name


class TuningConfig(BaseModel):
    name: str
    strings: List[str]

    @field_validator("strings")
    @classmethod
    def _six_strings(cls, v: List[str]) -> List[str]:
        Tuning.of("tuning", v)
        return v

    def to_tuning(self) -> Tuning:
        return Tuning.of(self.name, self.strings)


def _default_tunings() -> List[TuningConfig]:
    return [TuningConfig(name=t.name, strings=list(t.strings)) for t in (STANDARD, DROP_D)]


class FretboardConfig(BaseModel):
    num_frets: int = Field(NUM_FRETS, ge=1, le=24)
    tunings: List[TuningConfig] = Field(default_factory=_default_tunings)

    @field_validator("tunings")
    @classmethod
    def _unique_names(cls, v: List[TuningConfig]) -> List[TuningConfig]:
        names = [t.name for t in v]
        if len(set(names)) != len(names):
            raise ValueError("tuning names must be unique")
        return v


class KeyboardConfig(BaseModel):
    num_keys: int = Field(NUM_KEYS, ge=1, le=88)


class AppConfig(BaseModel):
    audio: AudioConfig = Field(default_factory=AudioConfig)
    selection: SelectionConfig = Field(default_factory=SelectionConfig)
    fretboard: FretboardConfig = Field(default_factory=FretboardConfig)
    keyboard: KeyboardConfig = Field(default_factory=KeyboardConfig)

    def tunings(self) -> List[Tuning]:
        return [t.to_tuning() for t in self.fretboard.tunings]


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"ERROR: Config file not found: {path}", file=sys.stderr)
        sys.exit(1)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with raw configuration values.
    """
    if path:
        return _load_yaml(Path(path))
    return _load_yaml(DEFAULT_CONFIG_PATH)


def validate_config(cfg: Dict[str, Any], check_audio: bool = True) -> AppConfig:
    """Apply defaults and validate configuration values.

    An unknown audio backend falls back to 'fluidsynth'; a missing
    SoundFont switches playback off rather than aborting. Pass
    ``check_audio=False`` when no sound will be played.

    Raises:
        pydantic.ValidationError: on malformed selection, tunings or ranges.
    """
    cfg = dict(cfg or {})
    audio = dict(cfg.get("audio") or {})

    backend = audio.get("backend", "fluidsynth")
    if backend not in ALLOWED_BACKENDS:
        logger.warning("Unsupported audio backend '%s', falling back to 'fluidsynth'.", backend)
        audio["backend"] = "fluidsynth"
    cfg["audio"] = audio

    app_cfg = AppConfig.model_validate(cfg)

    if check_audio and app_cfg.audio.backend == "fluidsynth":
        sf_path = Path(app_cfg.audio.soundfont_path)
        if not sf_path.exists():
            logger.warning("SoundFont not found at '%s'; note playback is disabled.", sf_path)
            app_cfg.audio.backend = "none"

    return app_cfg
