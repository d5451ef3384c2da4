from __future__ import annotations

"""Diatonic mode table.

Each mode maps to its 7 whole/half step sizes and the Roman-numeral
triad quality of every degree (upper case major, lower case minor,
trailing ``°`` diminished).
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Tuple

from .note_utils import InvalidInput


@dataclass(frozen=True)
class Mode:
    name: str
    steps: Tuple[int, ...]
    degree_labels: Tuple[str, ...]


_RAW_MODES = {
    "ionian": ([2, 2, 1, 2, 2, 2, 1], ["I", "ii", "iii", "IV", "V", "vi", "vii°"]),
    "dorian": ([2, 1, 2, 2, 2, 1, 2], ["i", "ii", "III", "IV", "v", "vi°", "VII"]),
    "phrygian": ([1, 2, 2, 2, 1, 2, 2], ["i", "II", "III", "iv", "v°", "VI", "vii"]),
    "lydian": ([2, 2, 2, 1, 2, 2, 1], ["I", "II", "iii", "#iv°", "V", "vi", "vii"]),
    "mixolydian": ([2, 2, 1, 2, 2, 1, 2], ["I", "ii", "iii°", "IV", "v", "vi", "VII"]),
    "aeolian": ([2, 1, 2, 2, 1, 2, 2], ["i", "ii°", "III", "iv", "v", "VI", "VII"]),
    "locrian": ([1, 2, 2, 1, 2, 2, 2], ["i°", "II", "iii", "iv", "V", "VI", "vii"]),
}


def _check_mode(mode: Mode) -> Mode:
    if len(mode.steps) != 7 or len(mode.degree_labels) != 7:
        raise ValueError(f"Mode {mode.name} must define 7 steps and 7 degree labels")
    if any(s not in (1, 2) for s in mode.steps):
        raise ValueError(f"Mode {mode.name} has a step other than a half or whole step")
    if sum(mode.steps) != 12:
        raise ValueError(f"Mode {mode.name} steps must sum to 12")
    return mode


MODES: Mapping[str, Mode] = MappingProxyType({
    name: _check_mode(Mode(name=name, steps=tuple(steps), degree_labels=tuple(labels)))
    for name, (steps, labels) in _RAW_MODES.items()
})

MODE_NAMES: Tuple[str, ...] = tuple(MODES.keys())


def normalize_mode_name(name: str) -> str:
    if not isinstance(name, str):
        raise InvalidInput(f"Unknown mode: {name!r}")
    return name.strip().lower()


def get_mode(name: str) -> Mode:
    """Look up a mode by name (case-insensitive).

    Raises:
        InvalidInput: if the name is not in the mode table.
    """
    mode = MODES.get(normalize_mode_name(name))
    if mode is None:
        raise InvalidInput(f"Unknown mode: {name!r}. Expected one of: {', '.join(MODE_NAMES)}")
    return mode


def list_modes() -> List[Mode]:
    return list(MODES.values())
