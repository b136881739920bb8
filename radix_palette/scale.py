"""
Output structures of the pipeline: two 12-step scales (accent, gray), each
with a light and a dark variant.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from .color import hsl_string, is_hex, normalize_hex
from .theory import BasePalette

STEP_COUNT = 12
FAMILIES = ("accent", "gray")
SOURCES = ("extracted", "fallback")


def _is_seed_color(value: str) -> bool:
    """Strict uppercase ``#RRGGBB``, exactly as ``normalize_hex`` would return it."""
    return isinstance(value, str) and is_hex(value) and value == normalize_hex(value)


@dataclass(frozen=True)
class ColorScale:
    name: str
    light_steps: Tuple[str, ...]
    dark_steps: Tuple[str, ...]
    source: str = "extracted"

    def __post_init__(self) -> None:
        for mode, steps in (("light", self.light_steps), ("dark", self.dark_steps)):
            if len(steps) != STEP_COUNT:
                raise ValueError(f"{self.name} {mode} scale has {len(steps)} steps, expected {STEP_COUNT}")
            bad = [s for s in steps if not _is_seed_color(s)]
            if bad:
                raise ValueError(f"{self.name} {mode} scale has invalid colors: {bad}")
        if self.source not in SOURCES:
            raise ValueError(f"Unknown scale source '{self.source}'")

    @property
    def light_hsl_steps(self) -> Tuple[str, ...]:
        return tuple(hsl_string(s) for s in self.light_steps)

    @property
    def dark_hsl_steps(self) -> Tuple[str, ...]:
        return tuple(hsl_string(s) for s in self.dark_steps)

    def steps(self, mode: str) -> Tuple[str, ...]:
        return self.dark_steps if mode == "dark" else self.light_steps

    def hsl_steps(self, mode: str) -> Tuple[str, ...]:
        return self.dark_hsl_steps if mode == "dark" else self.light_hsl_steps


@dataclass(frozen=True)
class GeneratedPalette:
    base: BasePalette
    accent: ColorScale
    gray: ColorScale
    notes: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "base": self.base.as_dict(),
            "accent": _scale_dict(self.accent),
            "gray": _scale_dict(self.gray),
            "notes": list(self.notes),
        }


def _scale_dict(scale: ColorScale) -> Dict[str, Any]:
    return {
        "source": scale.source,
        "light": list(scale.light_steps),
        "dark": list(scale.dark_steps),
    }
