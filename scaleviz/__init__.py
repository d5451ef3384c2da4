"""scaleviz package initialization.

Scale, fretboard and keyboard views for the seven diatonic modes.
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
