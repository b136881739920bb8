"""
Runtime settings for the extraction run: target URL, the DOM contract of the
external scale tool, and timing.
"""

import dataclasses
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

RADIX_CUSTOM_URL = "https://www.radix-ui.com/colors/custom"

NAVIGATION_TIMEOUT_MS = 60000
NETWORK_IDLE_TIMEOUT_MS = 15000
DIALOG_TIMEOUT_MS = 5000
FILL_SETTLE_MS = 400
MODE_SETTLE_MS = 1500
DEBUG_SLOW_MO_MS = 250

SWATCHES_PER_MODE = 24

# Fields that make up the DOM contract and may be overridden from a JSON file.
DOM_CONTRACT_FIELDS = (
    "accent_input",
    "gray_input",
    "background_input",
    "mode_toggle_off",
    "swatch",
    "dialog_overlay",
    "dialog_hex_text",
)


@dataclass(frozen=True)
class ExtractorConfig:
    url: str = RADIX_CUSTOM_URL

    accent_input: str = "#accent"
    gray_input: str = "#gray"
    background_input: str = "#bg"
    # {label} is "Light" or "Dark"; only matches the toggle while it is unselected.
    mode_toggle_off: str = "button[data-state='off']:has-text('{label}')"
    swatch: str = "button[class*='ColorSwatch']"
    dialog_overlay: str = "[class*='DialogOverlay']"
    dialog_hex_text: str = "[role='dialog'] :is(button, code, span)"

    navigation_timeout_ms: int = NAVIGATION_TIMEOUT_MS
    network_idle_timeout_ms: int = NETWORK_IDLE_TIMEOUT_MS
    dialog_timeout_ms: int = DIALOG_TIMEOUT_MS
    fill_settle_ms: int = FILL_SETTLE_MS
    mode_settle_ms: int = MODE_SETTLE_MS

    debug: bool = False
    offline: bool = False
    verbose: bool = True

    @property
    def headless(self) -> bool:
        return not self.debug

    @property
    def slow_mo(self) -> int:
        return DEBUG_SLOW_MO_MS if self.debug else 0

    def toggle_selector(self, label: str) -> str:
        return self.mode_toggle_off.format(label=label)

    def with_overrides(self, **overrides: Any) -> "ExtractorConfig":
        values = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(self, **values)


def load_dom_contract(path: Path) -> Dict[str, str]:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"DOM contract in {path} must be a JSON object")
    unknown = sorted(set(data) - set(DOM_CONTRACT_FIELDS))
    if unknown:
        raise ValueError(f"Unknown DOM contract keys in {path}: {', '.join(unknown)}")
    for key, value in data.items():
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"DOM contract key '{key}' must be a non-empty selector string")
    return data


def build_config(
    url: Optional[str] = None,
    dom_contract: Optional[Path] = None,
    timeout_ms: Optional[int] = None,
    debug: bool = False,
    offline: bool = False,
    verbose: bool = True,
) -> ExtractorConfig:
    overrides: Dict[str, Any] = {"url": url, "debug": debug, "offline": offline, "verbose": verbose}
    if dom_contract:
        overrides.update(load_dom_contract(dom_contract))
    if timeout_ms is not None:
        if timeout_ms <= 0:
            raise ValueError("timeout must be positive")
        overrides["dialog_timeout_ms"] = timeout_ms
    return ExtractorConfig().with_overrides(**overrides)
