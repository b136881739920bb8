from contextlib import asynccontextmanager

import pytest

from radix_palette import pipeline
from radix_palette.color import hex_to_hsl, is_hex
from radix_palette.errors import ExtractionError
from radix_palette.extractor import ModeExtraction
from radix_palette.fallback import fallback_color_scale
from radix_palette.pipeline import assemble_palette, fallback_palette, generate_palette
from radix_palette.theory import derive_base_palette

from .conftest import FakePage, tool_colors


def extraction(mode, accent_holes=(), gray_holes=(), swatch_count=24):
    colors = [c.upper() for c in tool_colors(mode)]
    accent = tuple(None if i in accent_holes else c for i, c in enumerate(colors[:12]))
    gray = tuple(None if i in gray_holes else c for i, c in enumerate(colors[12:]))
    return ModeExtraction(mode, swatch_count, accent=accent, gray=gray)


def assert_complete(palette):
    for family in ("accent", "gray"):
        scale = getattr(palette, family)
        for steps in (scale.light_steps, scale.dark_steps):
            assert len(steps) == 12
            assert all(is_hex(v) for v in steps)


def test_complete_extraction_is_used_verbatim(base_palette):
    palette = assemble_palette(base_palette, extraction("light"), extraction("dark"))
    assert palette.accent.source == "extracted"
    assert palette.gray.source == "extracted"
    assert palette.accent.light_steps == tuple(c.upper() for c in tool_colors("light")[:12])
    assert palette.gray.dark_steps == tuple(c.upper() for c in tool_colors("dark")[12:])
    assert palette.base == base_palette
    assert_complete(palette)


def test_incomplete_light_accent_replaces_whole_accent_family(base_palette):
    palette = assemble_palette(base_palette, extraction("light", accent_holes={7}), extraction("dark"))
    expected = fallback_color_scale("accent", hex_to_hsl(base_palette.accent).h)

    assert palette.accent == expected
    assert palette.accent.dark_steps == expected.dark_steps
    assert palette.gray.source == "extracted"
    assert any("accent: incomplete light extraction" in n for n in palette.notes)
    assert_complete(palette)


def test_incomplete_dark_gray_replaces_whole_gray_family(base_palette):
    palette = assemble_palette(base_palette, extraction("light"), extraction("dark", gray_holes={0}))
    assert palette.gray == fallback_color_scale("gray", hex_to_hsl(base_palette.gray).h)
    assert palette.accent.source == "extracted"


def test_missing_dark_mode_falls_back_for_both_families(base_palette):
    palette = assemble_palette(base_palette, extraction("light"), None)
    assert palette.accent.source == "fallback"
    assert palette.gray.source == "fallback"
    assert_complete(palette)


def test_short_page_falls_back(base_palette):
    light = extraction("light", gray_holes=set(range(12)), swatch_count=12)
    palette = assemble_palette(base_palette, light, extraction("dark"))
    assert palette.accent.source == "fallback"
    assert palette.gray.source == "fallback"


def test_forced_fallback_end_to_end():
    base = derive_base_palette("#3B82F6", "monochromatic")
    palette = fallback_palette(base)
    hue = hex_to_hsl(base.accent).h

    assert len(palette.accent.light_steps) == 12
    assert_complete(palette)
    hsls = [hex_to_hsl(v) for v in palette.accent.light_steps]
    lightness = [h.l for h in hsls]
    assert all(a >= b for a, b in zip(lightness, lightness[1:]))
    for hsl in hsls:
        assert min(abs(hsl.h - hue), 360 - abs(hsl.h - hue)) <= 4


async def test_generate_palette_offline_skips_browser(base_palette, monkeypatch):
    def no_browser(config):
        raise AssertionError("browser must not be launched offline")

    monkeypatch.setattr(pipeline, "browser_session", no_browser)
    config = pipeline.ExtractorConfig(offline=True, verbose=False)
    palette = await generate_palette(base_palette, config)
    assert palette.accent.source == "fallback"
    assert palette.notes


def fake_session(page, closed):
    @asynccontextmanager
    async def session(config):
        try:
            yield page
        finally:
            closed.append(True)

    return session


async def test_generate_palette_extracts_through_session(fast_config, base_palette, monkeypatch):
    closed = []
    monkeypatch.setattr(pipeline, "browser_session", fake_session(FakePage(fast_config), closed))
    palette = await generate_palette(base_palette, fast_config)

    assert closed == [True]
    assert palette.accent.source == "extracted"
    assert palette.gray.source == "extracted"


async def test_session_is_closed_on_fatal_error(fast_config, base_palette, monkeypatch):
    closed = []
    page = FakePage(fast_config, missing_inputs={"accent"})
    monkeypatch.setattr(pipeline, "browser_session", fake_session(page, closed))

    with pytest.raises(ExtractionError):
        await generate_palette(base_palette, fast_config)
    assert closed == [True]


async def test_partial_failures_still_yield_twelve_steps(fast_config, base_palette, monkeypatch):
    closed = []
    page = FakePage(fast_config, unreadable={1, 20})
    monkeypatch.setattr(pipeline, "browser_session", fake_session(page, closed))
    palette = await generate_palette(base_palette, fast_config)

    assert palette.accent.source == "fallback"
    assert palette.gray.source == "fallback"
    assert_complete(palette)
