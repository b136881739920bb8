"""
Deterministic 12-step scales used whenever live extraction is unavailable
or incomplete.
"""

from typing import List

from .color import HSL, clamp, hsl_to_hex
from .scale import STEP_COUNT, ColorScale

ACCENT_SATURATION = 90
ACCENT_SATURATION_STEP = 5
ACCENT_SATURATION_FLOOR = 10
GRAY_SATURATION = 5

LIGHT_RAMP = {"lightness_start": 95, "lightness_step": -7}
DARK_RAMP = {"lightness_start": 8, "lightness_step": 7}


def fallback_scale(
    hue: int,
    saturation_start: int,
    saturation_step: int = 0,
    saturation_floor: int = 0,
    lightness_start: int = 95,
    lightness_step: int = -7,
    lightness_floor: int = 5,
) -> List[str]:
    steps = []
    for i in range(STEP_COUNT):
        saturation = max(saturation_floor, saturation_start - saturation_step * i)
        lightness = clamp(lightness_start + lightness_step * i, lightness_floor, 100)
        steps.append(hsl_to_hex(HSL.of(hue, saturation, lightness)))
    return steps


def accent_fallback(hue: int, dark: bool = False) -> List[str]:
    return fallback_scale(
        hue,
        ACCENT_SATURATION,
        saturation_step=ACCENT_SATURATION_STEP,
        saturation_floor=ACCENT_SATURATION_FLOOR,
        **(DARK_RAMP if dark else LIGHT_RAMP),
    )


def gray_fallback(hue: int, dark: bool = False) -> List[str]:
    return fallback_scale(hue, GRAY_SATURATION, **(DARK_RAMP if dark else LIGHT_RAMP))


def fallback_color_scale(name: str, hue: int) -> ColorScale:
    build = gray_fallback if name == "gray" else accent_fallback
    return ColorScale(
        name=name,
        light_steps=tuple(build(hue)),
        dark_steps=tuple(build(hue, dark=True)),
        source="fallback",
    )
