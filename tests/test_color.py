import pytest

from radix_palette.color import (
    HSL,
    contrast_text,
    hex_to_hsl,
    hex_to_rgb,
    hsl_string,
    hsl_to_hex,
    is_hex,
    normalize_hex,
)

# Round-trip stays within 1 per channel only for these colors. Integer HSL
# drifts further on many saturated colors (up to 4 per channel).
SAMPLE_COLORS = [
    "#3B82F6",
    "#336699",
    "#FF0000",
    "#00FF00",
    "#0000FF",
    "#FFFF00",
    "#000000",
    "#FFFFFF",
    "#808080",
]


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("#3b82f6", "#3B82F6"),
        ("3B82F6", "#3B82F6"),
        ("  #3B82F6 ", "#3B82F6"),
        ("#abc", "#AABBCC"),
        ("fff", "#FFFFFF"),
    ],
)
def test_normalize_hex(raw, expected):
    assert normalize_hex(raw) == expected


@pytest.mark.parametrize("raw", ["", "#12345", "#1234567", "#GGGGGG", "##abc", "rgb(0,0,0)", None])
def test_normalize_hex_rejects_invalid(raw):
    with pytest.raises(ValueError):
        normalize_hex(raw)


def test_is_hex():
    assert is_hex("#3B82F6")
    assert is_hex("#3b82f6")
    assert not is_hex("#abc")
    assert not is_hex("")


def test_hex_to_hsl_brand_blue():
    assert hex_to_hsl("#3B82F6") == HSL(217, 91, 60)


def test_hex_to_hsl_achromatic():
    assert hex_to_hsl("#808080") == HSL(0, 0, 50)
    assert hex_to_hsl("#FFFFFF") == HSL(0, 0, 100)
    assert hex_to_hsl("#000000") == HSL(0, 0, 0)


def test_hex_to_hsl_primaries():
    assert hex_to_hsl("#FF0000") == HSL(0, 100, 50)
    assert hex_to_hsl("#00FF00") == HSL(120, 100, 50)
    assert hex_to_hsl("#0000FF") == HSL(240, 100, 50)


def test_hsl_of_wraps_hue_and_clamps():
    assert HSL.of(370, 50, 50).h == 10
    assert HSL.of(-30, 50, 50).h == 330
    assert HSL.of(359.6, 50, 50).h == 0
    assert HSL.of(10, 120, -5) == HSL(10, 100, 0)


def test_hsl_to_hex_uppercase_and_sectors():
    assert hsl_to_hex(HSL(0, 100, 50)) == "#FF0000"
    assert hsl_to_hex(HSL(60, 100, 50)) == "#FFFF00"
    assert hsl_to_hex(HSL(210, 50, 40)) == "#336699"
    assert hsl_to_hex(HSL(300, 100, 50)) == "#FF00FF"


@pytest.mark.parametrize("value", SAMPLE_COLORS)
def test_round_trip_within_one_per_channel(value):
    back = hsl_to_hex(hex_to_hsl(value))
    for original, restored in zip(hex_to_rgb(value), hex_to_rgb(back)):
        assert abs(original - restored) <= 1


def test_saturated_color_drifts_past_one():
    assert hex_to_hsl("#F40484") == HSL(328, 97, 49)
    assert hsl_to_hex(HSL(328, 97, 49)) == "#F60485"


def test_hsl_string():
    assert hsl_string("#3B82F6") == "217 91% 60%"


def test_contrast_text():
    assert contrast_text("#FFFFFF") == "#000000"
    assert contrast_text("#111111") == "#FFFFFF"
