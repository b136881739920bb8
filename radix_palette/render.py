"""
Text renderings of a ``GeneratedPalette``: CSS custom properties, the HTML
preview, the JSON dump and terminal swatches.
"""

import html
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from rich.console import Console
from rich.style import Style
from rich.text import Text

from .color import contrast_text
from .scale import FAMILIES, ColorScale, GeneratedPalette

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

CSS_FILENAME = "generated-palette.css"
HTML_FILENAME = "color-palette-preview.html"
JSON_FILENAME = "palette.json"

DESTRUCTIVE = "0 62.8% 30.6%"
DESTRUCTIVE_FOREGROUND = "0 0% 100%"

# (variable, family, 1-based step)
LIGHT_ALIASES: List[Tuple[str, str, int]] = [
    ("background", "gray", 1),
    ("foreground", "gray", 12),
    ("foreground-subtle", "gray", 11),
    ("card", "gray", 2),
    ("card-foreground", "gray", 12),
    ("popover", "gray", 1),
    ("popover-foreground", "gray", 12),
    ("primary", "accent", 9),
    ("primary-foreground", "accent", 1),
    ("secondary", "accent", 3),
    ("secondary-foreground", "accent", 12),
    ("muted", "gray", 3),
    ("muted-foreground", "gray", 11),
    ("accent", "accent", 4),
    ("accent-foreground", "accent", 11),
    ("border", "gray", 7),
    ("input", "gray", 7),
    ("ring", "accent", 9),
]

DARK_ALIASES: List[Tuple[str, str, int]] = [
    ("background", "gray", 1),
    ("foreground", "gray", 12),
    ("foreground-subtle", "gray", 10),
    ("card", "gray", 2),
    ("card-foreground", "gray", 12),
    ("popover", "gray", 3),
    ("popover-foreground", "gray", 12),
    ("primary", "accent", 9),
    ("primary-foreground", "accent", 1),
    ("secondary", "accent", 3),
    ("secondary-foreground", "gray", 12),
    ("muted", "gray", 3),
    ("muted-foreground", "gray", 11),
    ("accent", "accent", 5),
    ("accent-foreground", "accent", 11),
    ("border", "gray", 6),
    ("input", "gray", 6),
    ("ring", "accent", 8),
]

# (variable, family, 1-based step) per mode
CONTRASTS = {
    "light": [("accent-contrast", "accent", 1), ("gray-contrast", "gray", 12)],
    "dark": [("accent-contrast", "accent", 12), ("gray-contrast", "gray", 1)],
}


def read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def write_text(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8")


def write_json(path: Path, data: Any) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)


def _mode_block(palette: GeneratedPalette, mode: str, indent: str) -> List[str]:
    hsl = {family: getattr(palette, family).hsl_steps(mode) for family in FAMILIES}
    aliases = DARK_ALIASES if mode == "dark" else LIGHT_ALIASES
    contrasts = dict((name, (family, step)) for name, family, step in CONTRASTS[mode])
    label = "Dark Mode" if mode == "dark" else "Light Mode"

    lines = []
    for name, family, step in aliases:
        lines.append(f"{indent}--{name}: {hsl[family][step - 1]};")
        if name == "accent-foreground":
            lines.append(f"{indent}--destructive: {DESTRUCTIVE};")
            lines.append(f"{indent}--destructive-foreground: {DESTRUCTIVE_FOREGROUND};")

    for family in FAMILIES:
        lines.append("")
        lines.append(f"{indent}/* {family.capitalize()} Colors - {label} */")
        for i, value in enumerate(hsl[family]):
            lines.append(f"{indent}--{family}-{i + 1}: {value};")
        contrast_family, step = contrasts[f"{family}-contrast"]
        lines.append(f"{indent}--{family}-contrast: {hsl[contrast_family][step - 1]};")
    return lines


def generate_css(palette: GeneratedPalette) -> Dict[str, str]:
    light = "\n".join([":root {"] + _mode_block(palette, "light", "  ") + ["}"])
    dark = "\n".join(
        ["@media (prefers-color-scheme: dark) {", "  :root {"]
        + _mode_block(palette, "dark", "    ")
        + ["  }", "}"]
    )
    return {
        "light": light,
        "dark": dark,
        "variables": light + "\n\n" + dark + "\n",
    }


def _base_color_card(title: str, value: str, caption: str) -> str:
    return (
        f'            <div class="base-color" style="background: {value}; color: {contrast_text(value)};">\n'
        f"                <h3>{title}</h3>\n"
        f"                <p>{value}</p>\n"
        f"                <small>{caption}</small>\n"
        f"            </div>"
    )


def _scale_grid(steps: Tuple[str, ...]) -> str:
    cells = []
    for i, value in enumerate(steps):
        cells.append(
            f'                <div class="color-step" style="background: {value}; color: {contrast_text(value)};">'
            f'{i + 1}<div class="color-info">{value}</div></div>'
        )
    return '            <div class="scale-grid">\n' + "\n".join(cells) + "\n            </div>"


def _scale_section(title: str, scale: ColorScale) -> str:
    return "\n".join([
        '        <div class="color-scale">',
        f"            <h2>{title} Scale (12 Steps, {scale.source})</h2>",
        '            <div class="mode-label">☀️ Light Mode</div>',
        _scale_grid(scale.light_steps),
        '            <div class="mode-label">🌙 Dark Mode</div>',
        _scale_grid(scale.dark_steps),
        "        </div>",
    ])


def generate_html_preview(palette: GeneratedPalette, css: Optional[str] = None) -> str:
    template = read_text(TEMPLATES_DIR / "preview.html")
    base = palette.base
    css = css if css is not None else generate_css(palette)["variables"]

    notes = ""
    if palette.notes:
        items = "\n".join(f"                <li>{html.escape(n)}</li>" for n in palette.notes)
        notes = f'        <div class="notes">\n            <h2>Notes</h2>\n            <ul>\n{items}\n            </ul>\n        </div>'

    replacements = {
        "sources": html.escape(f"accent: {palette.accent.source} · gray: {palette.gray.source}"),
        "base_colors": "\n".join([
            _base_color_card("Accent", base.accent, "Primary brand color"),
            _base_color_card("Gray", base.gray, "Neutral color"),
            _base_color_card("Light Background", base.light_background, "Light mode background"),
            _base_color_card("Dark Background", base.dark_background, "Dark mode background"),
        ]),
        "scales": "\n\n".join([
            _scale_section("Accent", palette.accent),
            _scale_section("Gray", palette.gray),
        ]),
        "notes": notes,
        "css": html.escape(css),
    }
    for key, value in replacements.items():
        template = template.replace("{{" + key + "}}", str(value))
    return template


def swatch_row(steps: Tuple[str, ...]) -> Text:
    row = Text()
    for value in steps:
        row.append("  ", style=Style(bgcolor=value))
    return row


def print_swatches(palette: GeneratedPalette, console: Optional[Console] = None) -> None:
    console = console or Console()
    for family in FAMILIES:
        scale = getattr(palette, family)
        for mode in ("light", "dark"):
            label = Text(f"{family:<6} {mode:<5} ")
            console.print(label + swatch_row(scale.steps(mode)) + Text(f"  ({scale.source})"))


def save_outputs(palette: GeneratedPalette, output_dir: Path, with_html: bool = True) -> Dict[str, Path]:
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    css = generate_css(palette)["variables"]

    paths = {"css": output_dir / CSS_FILENAME, "json": output_dir / JSON_FILENAME}
    write_text(paths["css"], css)
    write_json(paths["json"], palette.to_dict())
    if with_html:
        paths["html"] = output_dir / HTML_FILENAME
        write_text(paths["html"], generate_html_preview(palette, css))
    return paths
