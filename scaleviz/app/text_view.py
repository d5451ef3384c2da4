from __future__ import annotations

"""Plain-text rendering of a Snapshot for terminals."""

from typing import List

from .explorer import FretGrid, Snapshot

CELL_WIDTH = 5
LEGEND = "[x] root   (x) 3rd   <x> 5th   - not in scale"


def mark(note: str, is_root: bool, is_third: bool, is_fifth: bool, in_scale: bool = True) -> str:
    if not in_scale:
        return "-"
    if is_root:
        return f"[{note}]"
    if is_third:
        return f"({note})"
    if is_fifth:
        return f"<{note}>"
    return note


def render_linear(snap: Snapshot) -> List[str]:
    notes = []
    degrees = []
    for label in snap.linear.labels:
        token = mark(label.pitch_class, label.is_root, label.is_third, label.is_fifth)
        width = max(len(token), len(label.degree_label))
        notes.append(token.ljust(width))
        degrees.append(label.degree_label.ljust(width))
    note_line = notes[0]
    degree_line = degrees[0]
    for marker, note, degree in zip(snap.linear.markers, notes[1:], degrees[1:]):
        sep = f" -{marker.label}- "
        note_line += sep + note
        degree_line += " " * len(sep) + degree
    return [degree_line.rstrip(), note_line.rstrip()]


def render_fretboard(name: str, grid: FretGrid) -> List[str]:
    if not grid:
        return [name]
    num_frets = len(grid[0])
    lines = [name]
    lines.append("    " + "".join(str(f).center(CELL_WIDTH) for f in range(num_frets)))
    for row in grid:
        cells = "".join(
            mark(c.pitch_class, c.is_root, c.is_third, c.is_fifth, c.in_scale).center(CELL_WIDTH) for c in row
        )
        lines.append(f"{row[0].open_note:<3}|{cells}")
    return lines


def render_keyboard(snap: Snapshot) -> List[str]:
    octaves: List[str] = []
    current: List[str] = []
    for cell in snap.keyboard:
        if cell.position and cell.position % 12 == 0:
            octaves.append(" ".join(current))
            current = []
        current.append(mark(cell.pitch_class, cell.is_root, cell.is_third, cell.is_fifth, cell.in_scale))
    if current:
        octaves.append(" ".join(current))
    return ["Keyboard"] + [f"  {line}" for line in octaves]


def render_text(snap: Snapshot) -> str:
    lines = [f"{snap.root} {snap.mode}", ""]
    lines += render_linear(snap)
    for name, grid in snap.fretboards.items():
        lines.append("")
        lines += render_fretboard(name, grid)
    lines.append("")
    lines += render_keyboard(snap)
    lines += ["", LEGEND]
    return "\n".join(lines)
