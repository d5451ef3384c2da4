from __future__ import annotations

"""Linear scale strip: one label per scale tone plus step markers between them."""

from dataclasses import dataclass
from typing import Tuple

from ..theory.scale import Scale, note_roles


STEP_LABELS = {1: "1/2", 2: "1"}
STEP_KINDS = {1: "half", 2: "whole"}


@dataclass(frozen=True)
class ScaleLabel:
    index: int
    pitch_class: str
    degree_label: str
    is_root: bool
    is_third: bool
    is_fifth: bool


@dataclass(frozen=True)
class IntervalMarker:
    semitones: int
    label: str
    kind: str


@dataclass(frozen=True)
class LinearScaleView:
    labels: Tuple[ScaleLabel, ...]
    markers: Tuple[IntervalMarker, ...]


def build_linear_view(scale: Scale) -> LinearScaleView:
    """Build labels for all 8 tones and the 7 markers between neighbours.

    The octave tone reuses the first degree label.
    """
    degrees = scale.degree_labels
    labels = []
    for i, note in enumerate(scale):
        roles = note_roles(note, scale, scale.root)
        labels.append(
            ScaleLabel(
                index=i,
                pitch_class=note,
                degree_label=degrees[i % len(degrees)],
                is_root=roles.is_root,
                is_third=roles.is_third,
                is_fifth=roles.is_fifth,
            )
        )
    markers = tuple(
        IntervalMarker(semitones=s, label=STEP_LABELS[s], kind=STEP_KINDS[s]) for s in scale.steps
    )
    return LinearScaleView(labels=tuple(labels), markers=markers)
