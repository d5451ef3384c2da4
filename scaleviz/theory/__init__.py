"""Pitch classes, the diatonic mode table and scale construction."""

from .note_utils import PITCH_CLASS_NAMES, InvalidInput  # noqa: F401
from .modes import MODES, MODE_NAMES, Mode, get_mode  # noqa: F401
from .scale import NoteRoles, Scale, build_scale, note_roles  # noqa: F401
