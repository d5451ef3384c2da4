# fretboard.py
from __future__ import annotations

"""Six-string fretboard mapping.

Tunings are stored low string first and rendered high string first, so
row 0 of a mapped grid is the highest-pitched string.
"""

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from ..theory.note_utils import InvalidInput, shift_note, validate_pitch_class
from ..theory.scale import note_roles


NUM_STRINGS = 6
NUM_FRETS = 12


@dataclass(frozen=True)
class Tuning:
    name: str
    strings: Tuple[str, ...]  # low -> high

    @classmethod
    def of(cls, name: str, strings: Iterable[str]) -> "Tuning":
        notes = tuple(strings)
        if len(notes) != NUM_STRINGS:
            raise InvalidInput(f"Tuning {name!r} needs {NUM_STRINGS} strings, got {len(notes)}")
        for n in notes:
            validate_pitch_class(n)
        return cls(name=name, strings=notes)

    def rendered(self) -> Tuple[str, ...]:
        """Open notes in display order (high -> low)."""
        return self.strings[::-1]


STANDARD = Tuning.of("Standard", ["E", "A", "D", "G", "B", "E"])
DROP_D = Tuning.of("Drop D", ["D", "A", "D", "G", "B", "E"])


@dataclass(frozen=True)
class FretCell:
    string_index: int  # display row, 0 = highest string
    open_note: str
    fret: int
    pitch_class: str
    in_scale: bool
    is_root: bool
    is_third: bool
    is_fifth: bool


def map_fretboard(
    scale: Sequence[str],
    root: str,
    tuning: Tuning | Sequence[str],
    num_frets: int = NUM_FRETS,
) -> Tuple[Tuple[FretCell, ...], ...]:
    """Annotate every string/fret position with scale membership and triad roles.

    Args:
        scale: Scale (or any sequence of at least 5 note names).
        root: Root pitch class.
        tuning: Tuning, or 6 open-string names low -> high.
        num_frets: Frets per string starting at the open string (fret 0).

    Returns:
        ``NUM_STRINGS`` rows of ``num_frets`` cells, highest string first.
    """
    if not isinstance(tuning, Tuning):
        tuning = Tuning.of("custom", tuning)
    validate_pitch_class(root)
    if num_frets < 1:
        raise InvalidInput("num_frets must be positive")

    rows = []
    for s_idx, open_note in enumerate(tuning.rendered()):
        row = []
        for fret in range(num_frets):
            note = shift_note(open_note, fret)
            roles = note_roles(note, scale, root)
            row.append(
                FretCell(
                    string_index=s_idx,
                    open_note=open_note,
                    fret=fret,
                    pitch_class=note,
                    in_scale=roles.in_scale,
                    is_root=roles.is_root,
                    is_third=roles.is_third,
                    is_fifth=roles.is_fifth,
                )
            )
        rows.append(tuple(row))
    return tuple(rows)
