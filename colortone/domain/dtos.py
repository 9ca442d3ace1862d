from __future__ import annotations
from dataclasses import dataclass, field
from typing import Sequence, Tuple

PALETTE_SLOTS = 5

@dataclass(frozen=True)
class Color:
    """Normalized RGB color. Equality and hashing are exact on the channels."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @staticmethod
    def from_rgb8(r: int, g: int, b: int) -> "Color":
        return Color(r / 255.0, g / 255.0, b / 255.0)

    def to_rgb8(self) -> Tuple[int, int, int]:
        return tuple(int(round(max(0.0, min(1.0, c)) * 255)) for c in (self.red, self.green, self.blue))

    @property
    def hex(self) -> str:
        return "#%02X%02X%02X" % self.to_rgb8()


WHITE = Color(1.0, 1.0, 1.0)
EMPTY = Color(0.0, 0.0, 0.0, alpha=0.0)  # unused slot ("clear")


@dataclass(frozen=True)
class PaletteSnapshot:
    dominant_colors: Tuple[Color, ...] = ()
    slots: Tuple[Color, ...] = field(default=(EMPTY,) * PALETTE_SLOTS)
    vibrant: Color = EMPTY

    @property
    def colors(self) -> Tuple[Color, ...]:
        return self.slots

    @staticmethod
    def from_clusters(clusters: Sequence[Color], vibrant: Color) -> "PaletteSnapshot":
        slots = [EMPTY] * PALETTE_SLOTS
        for i, color in enumerate(clusters):
            # more clusters than slots: the overflow lands in the last slot
            slots[min(i, PALETTE_SLOTS - 1)] = color
        return PaletteSnapshot(dominant_colors=tuple(clusters), slots=tuple(slots), vibrant=vibrant)
