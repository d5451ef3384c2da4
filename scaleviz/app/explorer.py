from __future__ import annotations

"""ScaleExplorer: the two selectable inputs and the click rules.

Every view is recomputed from (root, mode) on demand; the explorer keeps
no derived state between calls.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Protocol, Sequence, Tuple

from ..diagrams.fretboard import DROP_D, NUM_FRETS, STANDARD, FretCell, Tuning, map_fretboard
from ..diagrams.keyboard import NUM_KEYS, KeyCell, map_keyboard
from ..diagrams.linear import LinearScaleView, build_linear_view
from ..theory.modes import get_mode
from ..theory.note_utils import InvalidInput, validate_pitch_class
from ..theory.scale import Scale, build_scale
from . import explain
from .events import NOTE_CLICKED, SELECTION_CHANGED, EventBus

PLAY_OCTAVE = 4

FretGrid = Tuple[Tuple[FretCell, ...], ...]


class Player(Protocol):
    def play(self, pitch_class: str, octave: int = PLAY_OCTAVE) -> None: ...


@dataclass(frozen=True)
class Snapshot:
    scale: Scale
    linear: LinearScaleView
    fretboards: Dict[str, FretGrid]
    keyboard: Tuple[KeyCell, ...]

    @property
    def root(self) -> str:
        return self.scale.root

    @property
    def mode(self) -> str:
        return self.scale.mode.name


@dataclass(frozen=True)
class NoteClick:
    source: str  # "scale" | "fretboard" | "keyboard"
    pitch_class: str
    octave: int


class ScaleExplorer:
    def __init__(
        self,
        player: Optional[Player] = None,
        tunings: Iterable[Tuning] = (STANDARD, DROP_D),
        num_frets: int = NUM_FRETS,
        num_keys: int = NUM_KEYS,
        events: Optional[EventBus] = None,
        root: str = "C",
        mode: str = "ionian",
    ) -> None:
        self.player = player
        self.tunings: Dict[str, Tuning] = {t.name: t for t in tunings}
        self.num_frets = num_frets
        self.num_keys = num_keys
        self.events = events or EventBus()
        self.root = validate_pitch_class(root)
        self.mode = get_mode(mode).name

    @property
    def tuning_names(self) -> Sequence[str]:
        return list(self.tunings.keys())

    def select(self, root: Optional[str] = None, mode: Optional[str] = None) -> Snapshot:
        """Change root and/or mode, then recompute every view.

        Raises:
            InvalidInput: for an unknown root or mode; the selection is unchanged.
        """
        new_root = validate_pitch_class(root) if root is not None else self.root
        new_mode = get_mode(mode).name if mode is not None else self.mode
        self.root, self.mode = new_root, new_mode
        snap = self.snapshot()
        explain.trace("selection", {"root": self.root, "mode": self.mode, "scale": list(snap.scale)})
        self.events.emit(SELECTION_CHANGED, snap)
        return snap

    def scale(self) -> Scale:
        return build_scale(self.root, self.mode)

    def snapshot(self) -> Snapshot:
        scale = self.scale()
        return Snapshot(
            scale=scale,
            linear=build_linear_view(scale),
            fretboards={
                name: map_fretboard(scale, self.root, t, num_frets=self.num_frets)
                for name, t in self.tunings.items()
            },
            keyboard=map_keyboard(scale, self.root, num_keys=self.num_keys),
        )

    # ------------------------------------------------------------ clicks ---
    def click_scale_label(self, index: int) -> bool:
        scale = self.scale()
        if not 0 <= index < len(scale):
            raise InvalidInput(f"Scale label index out of range: {index}")
        return self._play("scale", scale[index], True)

    def click_fret(self, tuning_name: str, string_index: int, fret: int) -> bool:
        tuning = self.tunings.get(tuning_name)
        if tuning is None:
            raise InvalidInput(f"Unknown tuning: {tuning_name!r}")
        if not 0 <= string_index < len(tuning.strings) or not 0 <= fret < self.num_frets:
            raise InvalidInput(f"No fret at string {string_index}, fret {fret}")
        grid = map_fretboard(self.scale(), self.root, tuning, num_frets=self.num_frets)
        cell = grid[string_index][fret]
        return self._play("fretboard", cell.pitch_class, cell.in_scale)

    def click_key(self, position: int) -> bool:
        if not 0 <= position < self.num_keys:
            raise InvalidInput(f"Key position out of range: {position}")
        cell = map_keyboard(self.scale(), self.root, num_keys=self.num_keys)[position]
        return self._play("keyboard", cell.pitch_class, cell.in_scale)

    def _play(self, source: str, pitch_class: str, in_scale: bool) -> bool:
        # Out-of-scale cells are inert
        if not in_scale:
            return False
        if self.player is not None:
            self.player.play(pitch_class, PLAY_OCTAVE)
        click = NoteClick(source=source, pitch_class=pitch_class, octave=PLAY_OCTAVE)
        explain.trace("click", {"source": source, "note": pitch_class, "octave": PLAY_OCTAVE})
        self.events.emit(NOTE_CLICKED, click)
        return True
