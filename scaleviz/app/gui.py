from __future__ import annotations

"""Tkinter GUI: root/mode pickers, linear scale strip, fretboards, keyboard.

All drawing is driven by ScaleExplorer snapshots; clicking a highlighted
cell plays it, other cells do nothing.
"""

import tkinter as tk
from tkinter import ttk
from typing import Dict

from ..theory.modes import MODE_NAMES
from ..theory.note_utils import PITCH_CLASS_NAMES
from .events import SELECTION_CHANGED
from .explorer import ScaleExplorer, Snapshot


COLORS = {
    "bg": "#111111",
    "fg": "#eeeeee",
    "muted": "#444444",
    "in_scale": "#3c6e71",
    "root": "#d12c2c",
    "third": "#e4a400",
    "fifth": "#2f5bff",
    "white_key": "#f4f4f4",
    "black_key": "#222222",
}
FONT = ("Arial", 11, "bold")


def cell_colors(in_scale: bool, is_root: bool, is_third: bool, is_fifth: bool) -> tuple[str, str]:
    """(background, foreground) for a highlighted or inert cell."""
    if not in_scale:
        return COLORS["bg"], COLORS["muted"]
    if is_root:
        return COLORS["root"], "#ffffff"
    if is_third:
        return COLORS["third"], "#000000"
    if is_fifth:
        return COLORS["fifth"], "#ffffff"
    return COLORS["in_scale"], "#ffffff"


class App(tk.Tk):
    def __init__(self, explorer: ScaleExplorer) -> None:
        super().__init__()
        self.title("Scale Visualizer")
        self.configure(bg=COLORS["bg"])
        self.explorer = explorer

        self.root_var = tk.StringVar(value=explorer.root)
        self.mode_var = tk.StringVar(value=explorer.mode)

        self._build_controls()
        self._scale_frame = tk.Frame(self, bg=COLORS["bg"])
        self._scale_frame.pack(side=tk.TOP, pady=10)
        self._fret_frames: Dict[str, tk.Frame] = {}
        for name in explorer.tuning_names:
            tk.Label(self, text=f"Guitar ({name})", font=FONT, bg=COLORS["bg"], fg=COLORS["fg"]).pack(side=tk.TOP)
            frame = tk.Frame(self, bg=COLORS["bg"])
            frame.pack(side=tk.TOP, padx=10, pady=(2, 10))
            self._fret_frames[name] = frame
        tk.Label(self, text="Keyboard", font=FONT, bg=COLORS["bg"], fg=COLORS["fg"]).pack(side=tk.TOP)
        self._key_frame = tk.Frame(self, bg=COLORS["bg"])
        self._key_frame.pack(side=tk.TOP, padx=10, pady=(2, 12))

        explorer.events.subscribe(SELECTION_CHANGED, self.render)
        self.render(explorer.snapshot())

    def _build_controls(self) -> None:
        frm = ttk.Frame(self)
        frm.pack(side=tk.TOP, fill=tk.X, padx=10, pady=10)
        ttk.Label(frm, text="Root:").grid(row=0, column=0, sticky=tk.W, padx=4)
        ttk.OptionMenu(frm, self.root_var, self.root_var.get(), *PITCH_CLASS_NAMES,
                       command=lambda v: self.explorer.select(root=v)).grid(row=0, column=1, sticky=tk.W)
        ttk.Label(frm, text="Mode:").grid(row=0, column=2, sticky=tk.W, padx=12)
        ttk.OptionMenu(frm, self.mode_var, self.mode_var.get(), *MODE_NAMES,
                       command=lambda v: self.explorer.select(mode=v)).grid(row=0, column=3, sticky=tk.W)

    @staticmethod
    def _clear(frame: tk.Frame) -> None:
        for w in frame.winfo_children():
            w.destroy()

    def render(self, snap: Snapshot) -> None:
        self._render_scale(snap)
        for name, frame in self._fret_frames.items():
            self._render_fretboard(frame, name, snap)
        self._render_keyboard(snap)

    def _render_scale(self, snap: Snapshot) -> None:
        self._clear(self._scale_frame)
        labels = snap.linear.labels
        for i, label in enumerate(labels):
            col = i * 2
            tk.Label(self._scale_frame, text=label.degree_label, font=FONT,
                     bg=COLORS["bg"], fg=COLORS["fg"]).grid(row=0, column=col)
            bg, fg = cell_colors(True, label.is_root, label.is_third, label.is_fifth)
            box = tk.Label(self._scale_frame, text=label.pitch_class, width=4, height=2, font=FONT,
                           bg=bg, fg=fg, relief="ridge", bd=1)
            box.grid(row=1, column=col, padx=2)
            box.bind("<Button-1>", lambda _e, idx=label.index: self.explorer.click_scale_label(idx))
            if i < len(snap.linear.markers):
                marker = snap.linear.markers[i]
                tk.Label(self._scale_frame, text=marker.label, font=("Arial", 9),
                         bg=COLORS["bg"], fg=COLORS["third"] if marker.kind == "half" else COLORS["fg"]
                         ).grid(row=1, column=col + 1, padx=2)

    def _render_fretboard(self, frame: tk.Frame, name: str, snap: Snapshot) -> None:
        self._clear(frame)
        grid = snap.fretboards[name]
        for fret in range(len(grid[0]) if grid else 0):
            tk.Label(frame, text=str(fret), width=4, font=("Arial", 9), bg=COLORS["bg"],
                     fg=COLORS["muted"]).grid(row=0, column=fret, padx=1)
        for row in grid:
            for cell in row:
                bg, fg = cell_colors(cell.in_scale, cell.is_root, cell.is_third, cell.is_fifth)
                lbl = tk.Label(frame, text=cell.pitch_class, width=4, height=1, font=FONT,
                               bg=bg, fg=fg, relief="ridge", bd=1)
                lbl.grid(row=cell.string_index + 1, column=cell.fret, padx=1, pady=1)
                if cell.in_scale:
                    lbl.bind("<Button-1>", lambda _e, s=cell.string_index, f=cell.fret:
                             self.explorer.click_fret(name, s, f))

    def _render_keyboard(self, snap: Snapshot) -> None:
        self._clear(self._key_frame)
        for cell in snap.keyboard:
            if cell.in_scale:
                bg, fg = cell_colors(True, cell.is_root, cell.is_third, cell.is_fifth)
            elif cell.is_black:
                bg, fg = COLORS["black_key"], COLORS["muted"]
            else:
                bg, fg = COLORS["white_key"], "#888888"
            key = tk.Label(self._key_frame, text=cell.pitch_class, width=3,
                           height=3 if cell.is_black else 5, anchor=tk.S, font=("Arial", 9, "bold"),
                           bg=bg, fg=fg, relief="raised", bd=1)
            key.grid(row=0, column=cell.position, sticky=tk.N, padx=0)
            if cell.in_scale:
                key.bind("<Button-1>", lambda _e, p=cell.position: self.explorer.click_key(p))


def run_gui(explorer: ScaleExplorer) -> None:
    app = App(explorer)
    app.mainloop()
