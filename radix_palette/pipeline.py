"""
Turns extraction results into the final ``GeneratedPalette``.

A family (accent or gray) is only taken from the tool when both its light and
dark extractions are complete; otherwise the whole family, both modes, comes
from the fallback generator.
"""

from typing import Dict, Iterable, List, Optional

from .color import hex_to_hsl
from .config import ExtractorConfig
from .extractor import ModeExtraction, ScaleExtractor
from .fallback import fallback_color_scale
from .page import browser_session
from .scale import FAMILIES, ColorScale, GeneratedPalette
from .theory import BasePalette


def fallback_hues(base: BasePalette) -> Dict[str, int]:
    return {"accent": hex_to_hsl(base.accent).h, "gray": hex_to_hsl(base.gray).h}


def assemble_palette(
    base: BasePalette,
    light: Optional[ModeExtraction],
    dark: Optional[ModeExtraction],
    notes: Iterable[str] = (),
) -> GeneratedPalette:
    notes = list(notes)
    hues = fallback_hues(base)
    scales: Dict[str, ColorScale] = {}
    for family in FAMILIES:
        missing = [
            mode for mode, extraction in (("light", light), ("dark", dark))
            if extraction is None or not extraction.is_complete(family)
        ]
        if missing:
            notes.append(f"{family}: incomplete {'/'.join(missing)} extraction, using fallback scale")
            scales[family] = fallback_color_scale(family, hues[family])
        else:
            scales[family] = ColorScale(
                name=family,
                light_steps=light.colors(family),
                dark_steps=dark.colors(family),
                source="extracted",
            )
    return GeneratedPalette(base=base, accent=scales["accent"], gray=scales["gray"], notes=tuple(notes))


def fallback_palette(base: BasePalette, notes: Iterable[str] = ()) -> GeneratedPalette:
    hues = fallback_hues(base)
    return GeneratedPalette(
        base=base,
        accent=fallback_color_scale("accent", hues["accent"]),
        gray=fallback_color_scale("gray", hues["gray"]),
        notes=tuple(notes),
    )


async def extract_palette(extractor: ScaleExtractor, base: BasePalette) -> GeneratedPalette:
    state = await extractor.run(base)
    return assemble_palette(base, state.light, state.dark, state.notes)


async def generate_palette(base: BasePalette, config: Optional[ExtractorConfig] = None) -> GeneratedPalette:
    config = config or ExtractorConfig()
    if config.offline:
        return fallback_palette(base, ["extraction disabled, using fallback scales"])

    async with browser_session(config) as page:
        palette = await extract_palette(ScaleExtractor(page, config), base)

    if config.verbose:
        for family in FAMILIES:
            if getattr(palette, family).source == "fallback":
                print(f"⚠️ {family} scale incomplete, substituted with fallback scale")
    return palette


def sources(palette: GeneratedPalette) -> List[str]:
    return [f"{family}={getattr(palette, family).source}" for family in FAMILIES]
