from __future__ import annotations

"""CLI for scaleviz: list modes, print a scale, or launch the GUI."""

import argparse
import logging
import sys
from typing import Optional

from pydantic import ValidationError

from .. import __version__
from ..audio.player import NotePlayer
from ..config.config import AppConfig, load_config, validate_config
from ..theory.modes import MODE_NAMES, list_modes
from ..theory.note_utils import PITCH_CLASS_NAMES, InvalidInput
from .explorer import ScaleExplorer
from .text_view import render_text


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="scaleviz", description="Diatonic mode scale visualizer")
    p.add_argument("--version", action="version", version=f"scaleviz {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list-modes", help="Print every mode with its steps and degrees")

    sp = sub.add_parser("show", help="Print the scale, fretboards and keyboard as text")
    sp.add_argument("--config", default=None)
    sp.add_argument("--root", default=None, help=f"One of: {' '.join(PITCH_CLASS_NAMES)}")
    sp.add_argument("--mode", default=None, help=f"One of: {' '.join(MODE_NAMES)}")

    gp = sub.add_parser("gui", help="Launch the interactive window")
    gp.add_argument("--config", default=None)
    gp.add_argument("--root", default=None)
    gp.add_argument("--mode", default=None)
    gp.add_argument("--explain", action="store_true", help="Trace selections and clicks")
    return p


def _make_explorer(cfg: AppConfig, args: argparse.Namespace, player: Optional[NotePlayer]) -> ScaleExplorer:
    return ScaleExplorer(
        player=player,
        tunings=cfg.tunings(),
        num_frets=cfg.fretboard.num_frets,
        num_keys=cfg.keyboard.num_keys,
        root=args.root or cfg.selection.root,
        mode=args.mode or cfg.selection.mode,
    )


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "list-modes":
        for m in list_modes():
            steps = " ".join(str(s) for s in m.steps)
            print(f"{m.name:<11} steps: {steps}  degrees: {' '.join(m.degree_labels)}")
        return 0

    try:
        cfg = validate_config(load_config(args.config), check_audio=(args.cmd == "gui"))
    except ValidationError as e:
        print(f"ERROR: invalid config: {e}", file=sys.stderr)
        return 2

    if args.cmd == "show":
        try:
            explorer = _make_explorer(cfg, args, player=None)
        except InvalidInput as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 2
        print(render_text(explorer.snapshot()))
        return 0

    if args.cmd == "gui":
        if args.explain:
            from .explain import enable as explain_enable
            explain_enable(True)
        player = NotePlayer.from_config(cfg.audio)
        try:
            explorer = _make_explorer(cfg, args, player=player)
        except InvalidInput as e:
            print(f"ERROR: {e}", file=sys.stderr)
            player.close()
            return 2
        from .gui import run_gui
        try:
            run_gui(explorer)
        finally:
            player.close()
        return 0

    return 1


if __name__ == "__main__":
    sys.exit(main())
