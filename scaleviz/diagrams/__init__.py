"""Per-surface mappings of a scale onto cells: linear strip, fretboard, keyboard."""

from .linear import IntervalMarker, LinearScaleView, ScaleLabel, build_linear_view  # noqa: F401
from .fretboard import DROP_D, STANDARD, FretCell, Tuning, map_fretboard  # noqa: F401
from .keyboard import KeyCell, map_keyboard  # noqa: F401
