"""Axis-aligned integer rectangles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rect:
    """A rectangle given by its top-left corner and its size."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    def __str__(self) -> str:
        return f"({self.x},{self.y},{self.w},{self.h})"