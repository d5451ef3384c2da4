# scaleviz/theory/note_utils.py
from __future__ import annotations

"""Pitch-class alphabet and modular arithmetic over it.

Spelling is fixed to sharps; flats and double accidentals are rejected
rather than respelled.
"""

from typing import Dict, Tuple


PITCH_CLASS_NAMES: Tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
NAME_TO_PC: Dict[str, int] = {name: pc for pc, name in enumerate(PITCH_CLASS_NAMES)}

SHARP = "#"


class InvalidInput(ValueError):
    """Raised when a root, mode, tuning or position is outside its alphabet."""


def pc_index(name: str) -> int:
    """Return the 0..11 index of a canonical pitch-class name."""
    try:
        return NAME_TO_PC[name]
    except (KeyError, TypeError):
        raise InvalidInput(f"Unknown pitch class: {name!r}") from None


def validate_pitch_class(name: str) -> str:
    pc_index(name)
    return name


def shift_note(name: str, semitones: int) -> str:
    """Move a pitch class up (or down) by semitones, wrapping mod 12."""
    return PITCH_CLASS_NAMES[(pc_index(name) + semitones) % 12]


def is_accidental(name: str) -> bool:
    """True for the five black-key pitch classes."""
    return SHARP in name


def note_name_to_midi(name: str, octave: int) -> int:
    """Middle C (C4) -> 60."""
    midi = 12 * (octave + 1) + pc_index(name)
    if midi < 0 or midi > 127:
        raise InvalidInput(f"MIDI out of range for {name}{octave}")
    return midi
