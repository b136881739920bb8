"""
Hex <-> HSL conversions used by every other part of the palette pipeline.
"""

import math
import re
from dataclasses import dataclass
from typing import Tuple


HEX_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")
_SHORT_HEX = re.compile(r"^[0-9A-Fa-f]{3}$")
_LONG_HEX = re.compile(r"^[0-9A-Fa-f]{6}$")


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass(frozen=True)
class HSL:
    h: int
    s: int
    l: int

    @classmethod
    def of(cls, h: float, s: float, l: float) -> "HSL":
        return cls(
            h=round_half_up(h) % 360,
            s=int(clamp(round_half_up(s), 0, 100)),
            l=int(clamp(round_half_up(l), 0, 100)),
        )

    def __str__(self) -> str:
        return f"{self.h} {self.s}% {self.l}%"


def is_hex(value: str) -> bool:
    return bool(value) and bool(HEX_PATTERN.match(value.strip()))


def normalize_hex(value: str) -> str:
    """Return ``value`` as uppercase ``#RRGGBB``.

    Accepts an optional leading ``#`` and 3-digit shorthand. Raises
    ``ValueError`` for anything else.
    """
    if not isinstance(value, str):
        raise ValueError(f"Invalid hex color: {value!r}")
    raw = value.strip()
    if raw.startswith("#"):
        raw = raw[1:]
    if _SHORT_HEX.match(raw):
        raw = "".join(ch * 2 for ch in raw)
    if not _LONG_HEX.match(raw):
        raise ValueError(f"Invalid hex color: {value!r}")
    return f"#{raw.upper()}"


def hex_to_rgb(value: str) -> Tuple[int, int, int]:
    clean = normalize_hex(value)
    return int(clean[1:3], 16), int(clean[3:5], 16), int(clean[5:7], 16)


def hex_to_hsl(value: str) -> HSL:
    r, g, b = (c / 255.0 for c in hex_to_rgb(value))
    maxc = max(r, g, b)
    minc = min(r, g, b)
    h = 0.0
    s = 0.0
    l = (maxc + minc) / 2.0

    if maxc != minc:
        d = maxc - minc
        s = d / (2.0 - maxc - minc) if l > 0.5 else d / (maxc + minc)
        if maxc == r:
            h = (g - b) / d + (6.0 if g < b else 0.0)
        elif maxc == g:
            h = (b - r) / d + 2.0
        else:
            h = (r - g) / d + 4.0
        h /= 6.0

    return HSL.of(h * 360.0, s * 100.0, l * 100.0)


def hsl_to_hex(hsl: HSL) -> str:
    h = hsl.h % 360
    s = clamp(hsl.s, 0, 100) / 100.0
    l = clamp(hsl.l, 0, 100) / 100.0

    c = (1.0 - abs(2.0 * l - 1.0)) * s
    x = c * (1.0 - abs((h / 60.0) % 2 - 1.0))
    m = l - c / 2.0

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    channels = [int(clamp(round_half_up((v + m) * 255.0), 0, 255)) for v in (r, g, b)]
    return "#" + "".join(f"{v:02X}" for v in channels)


def hsl_string(value: str) -> str:
    # shadcn-style "H S% L%" triplet for CSS custom properties
    return str(hex_to_hsl(value))


def contrast_text(value: str) -> str:
    r, g, b = hex_to_rgb(value)
    yiq = (r * 299 + g * 587 + b * 114) / 1000
    return "#000000" if yiq >= 128 else "#FFFFFF"
