"""Shared fixtures: an in-memory stand-in for the Radix custom palette page."""

from typing import Dict, Iterable, List, Optional, Pattern

import pytest

from radix_palette.config import ExtractorConfig
from radix_palette.theory import derive_base_palette


class FakeTimeout(Exception):
    pass


def tool_colors(mode: str) -> List[str]:
    """24 distinct lowercase colors per mode: 12 accent followed by 12 gray."""
    tail = "80ab" if mode == "light" else "2b40"
    return [f"#{i + 16:02x}{tail}" for i in range(24)]


class FakePage:
    """Implements the ControllablePage protocol against a simulated tool.

    Failure knobs:
      unopenable   swatch indices whose dialog never appears
      unreadable   swatch indices whose dialog opens but shows no hex text
      stuck_dialog the dialog ignores Escape
    """

    def __init__(
        self,
        config: ExtractorConfig,
        swatch_count: int = 24,
        start_mode: str = "light",
        unopenable: Iterable[int] = (),
        unreadable: Iterable[int] = (),
        missing_inputs: Iterable[str] = (),
        has_dark_toggle: bool = True,
        fail_navigation: bool = False,
        stuck_dialog: bool = False,
    ):
        self.config = config
        self.swatch_count = swatch_count
        self.mode = start_mode
        self.unopenable = set(unopenable)
        self.unreadable = set(unreadable)
        self.missing_inputs = set(missing_inputs)
        self.has_dark_toggle = has_dark_toggle
        self.fail_navigation = fail_navigation
        self.stuck_dialog = stuck_dialog

        self.colors: Dict[str, List[str]] = {"light": tool_colors("light"), "dark": tool_colors("dark")}
        self.inputs: Dict[str, str] = {}
        self.fills: List[tuple] = []
        self.dialog_open = False
        self.current: Optional[int] = None
        self.dialog_open_at_click: List[bool] = []
        self.clicked_swatches: List[tuple] = []
        self.toggle_clicks: List[str] = []
        self.visited: List[str] = []

    @property
    def input_selectors(self) -> Dict[str, str]:
        return {
            self.config.accent_input: "accent",
            self.config.gray_input: "gray",
            self.config.background_input: "background",
        }

    async def goto(self, url: str, timeout_ms: int) -> None:
        if self.fail_navigation:
            raise FakeTimeout(f"net::ERR_NAME_NOT_RESOLVED at {url}")
        self.visited.append(url)

    async def wait_for_idle(self, timeout_ms: int) -> None:
        return None

    async def fill(self, selector: str, value: str, timeout_ms: int) -> None:
        name = self.input_selectors.get(selector)
        if name is None or name in self.missing_inputs:
            raise FakeTimeout(f"waiting for selector {selector}")
        self.inputs[name] = value
        self.fills.append((self.mode, name, value))

    async def click(self, selector: str, index: int, timeout_ms: int) -> None:
        if selector == self.config.toggle_selector("Light"):
            if self.mode == "light":
                raise FakeTimeout("light toggle already selected")
            self._switch("light")
            return
        if selector == self.config.toggle_selector("Dark"):
            if not self.has_dark_toggle or self.mode == "dark":
                raise FakeTimeout("dark toggle not found")
            self._switch("dark")
            return
        if selector == self.config.swatch:
            self.dialog_open_at_click.append(self.dialog_open)
            self.clicked_swatches.append((self.mode, index))
            if index >= self.swatch_count:
                raise FakeTimeout(f"swatch {index} not found")
            if index in self.unopenable:
                return
            self.dialog_open = True
            self.current = index
            return
        raise FakeTimeout(f"unknown selector {selector}")

    def _switch(self, mode: str) -> None:
        self.toggle_clicks.append(mode)
        self.mode = mode
        self.inputs.clear()

    async def count(self, selector: str) -> int:
        if selector == self.config.toggle_selector("Light"):
            return 0 if self.mode == "light" else 1
        if selector == self.config.toggle_selector("Dark"):
            return 1 if self.has_dark_toggle and self.mode == "light" else 0
        if selector == self.config.swatch:
            return self.swatch_count
        if selector == self.config.dialog_overlay:
            return 1 if self.dialog_open else 0
        return 0

    async def wait_for_visible(self, selector: str, timeout_ms: int) -> None:
        if selector == self.config.dialog_overlay and not self.dialog_open:
            raise FakeTimeout("dialog overlay never became visible")

    async def wait_for_detached(self, selector: str, timeout_ms: int) -> None:
        if selector == self.config.dialog_overlay and self.dialog_open:
            raise FakeTimeout("dialog overlay still attached")

    async def read_text(self, selector: str, pattern: Pattern[str], timeout_ms: int) -> str:
        if not self.dialog_open or self.current in self.unreadable:
            raise FakeTimeout(f"no element matching {pattern.pattern}")
        return self.colors[self.mode][self.current]

    async def press(self, key: str) -> None:
        if key == "Escape" and not self.stuck_dialog:
            self.dialog_open = False
            self.current = None

    async def sleep(self, ms: int) -> None:
        return None


@pytest.fixture
def fast_config() -> ExtractorConfig:
    return ExtractorConfig(
        verbose=False,
        fill_settle_ms=0,
        mode_settle_ms=0,
        dialog_timeout_ms=10,
    )


@pytest.fixture
def make_page(fast_config):
    def factory(**kwargs) -> FakePage:
        return FakePage(fast_config, **kwargs)

    return factory


@pytest.fixture
def base_palette():
    return derive_base_palette("#3B82F6", "analogous")
