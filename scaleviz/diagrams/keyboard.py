from __future__ import annotations

"""Linear keyboard strip: three repeated octaves of the 12-tone alphabet."""

from dataclasses import dataclass
from typing import Sequence, Tuple

from ..theory.note_utils import PITCH_CLASS_NAMES, InvalidInput, is_accidental, validate_pitch_class
from ..theory.scale import note_roles


NUM_KEYS = 36


@dataclass(frozen=True)
class KeyCell:
    position: int
    pitch_class: str
    octave_offset: int
    is_black: bool
    in_scale: bool
    is_root: bool
    is_third: bool
    is_fifth: bool


def map_keyboard(scale: Sequence[str], root: str, num_keys: int = NUM_KEYS) -> Tuple[KeyCell, ...]:
    """Annotate ``num_keys`` keys starting from C."""
    validate_pitch_class(root)
    if num_keys < 1:
        raise InvalidInput("num_keys must be positive")
    cells = []
    for i in range(num_keys):
        note = PITCH_CLASS_NAMES[i % 12]
        roles = note_roles(note, scale, root)
        cells.append(
            KeyCell(
                position=i,
                pitch_class=note,
                octave_offset=i // 12,
                is_black=is_accidental(note),
                in_scale=roles.in_scale,
                is_root=roles.is_root,
                is_third=roles.is_third,
                is_fifth=roles.is_fifth,
            )
        )
    return tuple(cells)
