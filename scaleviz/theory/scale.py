from __future__ import annotations

"""Scale construction and the note-role rule shared by every view."""

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

from .modes import Mode, get_mode
from .note_utils import PITCH_CLASS_NAMES, InvalidInput, pc_index


@dataclass(frozen=True)
class Scale:
    """A root + mode rendered as 8 pitch classes (tonic repeated at the octave).

    Behaves like a read-only sequence of note names so views can index and
    test membership directly.
    """

    root: str
    mode: Mode
    notes: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.notes)

    def __getitem__(self, index: int) -> str:
        return self.notes[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.notes)

    def __contains__(self, note: object) -> bool:
        return note in self.notes

    @property
    def steps(self) -> Tuple[int, ...]:
        return self.mode.steps

    @property
    def degree_labels(self) -> Tuple[str, ...]:
        return self.mode.degree_labels

    # Triad roles are the 3rd and 5th scale tones of the active mode,
    # not intervals recomputed from the root.
    @property
    def third(self) -> str:
        return self.notes[2]

    @property
    def fifth(self) -> str:
        return self.notes[4]


@dataclass(frozen=True)
class NoteRoles:
    in_scale: bool
    is_root: bool
    is_third: bool
    is_fifth: bool


def build_scale(root: str, mode: str) -> Scale:
    """Walk the mode's step pattern up from ``root``.

    Args:
        root: Canonical pitch-class name (sharps only).
        mode: Mode name, e.g. "dorian". Matched case-insensitively with
            surrounding whitespace ignored; the Scale keeps the table key.

    Returns:
        Scale with exactly 8 notes; the first and last equal ``root``.

    Raises:
        InvalidInput: for an unknown root or mode.
    """
    idx = pc_index(root)
    m = get_mode(mode)
    notes = [PITCH_CLASS_NAMES[idx]]
    for step in m.steps:
        idx = (idx + step) % 12
        notes.append(PITCH_CLASS_NAMES[idx])
    return Scale(root=root, mode=m, notes=tuple(notes))


def note_roles(note: str, scale: Sequence[str], root: str) -> NoteRoles:
    """Membership and triad-role flags for one pitch class."""
    if len(scale) < 5:
        raise InvalidInput("scale needs at least 5 notes to expose a third and a fifth")
    return NoteRoles(
        in_scale=note in scale,
        is_root=note == root,
        is_third=note == scale[2],
        is_fifth=note == scale[4],
    )
