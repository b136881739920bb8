"""
Seed derivation: one brand color + a harmony scheme -> the four base colors
(accent, gray, light background, dark background) fed to the scale tool.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from .color import HSL, hex_to_hsl, hsl_to_hex, normalize_hex


class Scheme(str, Enum):
    MONOCHROMATIC = "monochromatic"
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"

    @classmethod
    def parse(cls, name: Optional[str]) -> "Scheme":
        if not name:
            return DEFAULT_SCHEME
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(s.value for s in cls)
            raise ValueError(f"Unknown scheme '{name}' (expected one of: {choices})") from None


DEFAULT_SCHEME = Scheme.ANALOGOUS

# Per role: (hue offset, saturation floor or fixed value, lightness).
# Accent saturation is max(floor, seed saturation); every other role uses a fixed saturation.
SCHEME_TABLE: Dict[Scheme, Dict[str, Tuple[int, int, int]]] = {
    Scheme.ANALOGOUS: {
        "accent": (0, 70, 55),
        "gray": (30, 8, 50),
        "light_background": (15, 20, 98),
        "dark_background": (15, 15, 8),
    },
    Scheme.COMPLEMENTARY: {
        "accent": (0, 80, 55),
        "gray": (180, 6, 50),
        "light_background": (0, 25, 98),
        "dark_background": (180, 20, 8),
    },
    Scheme.TRIADIC: {
        "accent": (0, 75, 55),
        "gray": (120, 10, 50),
        "light_background": (240, 15, 98),
        "dark_background": (240, 12, 8),
    },
    Scheme.MONOCHROMATIC: {
        "accent": (0, 85, 55),
        "gray": (0, 5, 50),
        "light_background": (0, 20, 98),
        "dark_background": (0, 15, 8),
    },
}

ROLES = ("accent", "gray", "light_background", "dark_background")


@dataclass(frozen=True)
class BasePalette:
    accent: str
    gray: str
    light_background: str
    dark_background: str

    def as_dict(self) -> Dict[str, str]:
        return {role: getattr(self, role) for role in ROLES}


def derive_base_hsl(seed: str, scheme: Scheme = DEFAULT_SCHEME) -> Dict[str, HSL]:
    scheme = Scheme.parse(scheme)
    base = hex_to_hsl(seed)
    table = SCHEME_TABLE[scheme]
    derived = {}
    for role in ROLES:
        offset, saturation, lightness = table[role]
        if role == "accent":
            saturation = max(saturation, base.s)
        derived[role] = HSL.of(base.h + offset, saturation, lightness)
    return derived


def derive_base_palette(seed: str, scheme: Scheme = DEFAULT_SCHEME) -> BasePalette:
    # The accent is always re-derived through the scheme table (seed hue,
    # boosted saturation, lightness 55) rather than copied verbatim from the seed.
    derived = derive_base_hsl(normalize_hex(seed), scheme)
    return BasePalette(**{role: hsl_to_hex(derived[role]) for role in ROLES})


def random_harmonious_color(rng: Optional[random.Random] = None) -> str:
    rng = rng or random.Random()
    return hsl_to_hex(
        HSL.of(
            rng.randrange(360),
            70 + rng.randrange(20),
            45 + rng.randrange(20),
        )
    )
