"""
Scale extraction against the Radix custom palette tool.

The run is a linear state machine:

    OPEN -> FILL_LIGHT -> ENSURE_LIGHT_MODE -> EXTRACT_LIGHT
         -> SWITCH_DARK -> EXTRACT_DARK -> DONE

Each transition takes an immutable ``ExtractionState`` and returns the next
one, so the light results gathered before the mode switch travel with the
state instead of living on the extractor.

Per swatch, the tool only reveals the hex value inside a detail dialog. Every
attempt starts with the no-dialog-open precondition, clicks the swatch, reads
the ``#RRGGBB`` text and dismisses the dialog. A failed swatch becomes an
empty slot and a note; it never aborts the run.
"""

import dataclasses
import re
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Dict, List, NamedTuple, Optional, Sequence, Tuple

from .color import normalize_hex
from .config import SWATCHES_PER_MODE, ExtractorConfig
from .errors import DialogStillOpen, ExtractionError
from .page import ControllablePage
from .scale import STEP_COUNT
from .theory import BasePalette

HEX_TEXT_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")
HEX_SEARCH = re.compile(r"#[0-9A-Fa-f]{6}")


class Stage(str, Enum):
    OPEN = "open"
    FILL_LIGHT = "fill_light"
    ENSURE_LIGHT_MODE = "ensure_light_mode"
    EXTRACT_LIGHT = "extract_light"
    SWITCH_DARK = "switch_dark"
    EXTRACT_DARK = "extract_dark"
    DONE = "done"


@dataclass(frozen=True)
class ModeExtraction:
    mode: str
    swatch_count: int
    accent: Tuple[Optional[str], ...]
    gray: Tuple[Optional[str], ...]

    def family(self, name: str) -> Tuple[Optional[str], ...]:
        return self.gray if name == "gray" else self.accent

    def colors(self, name: str) -> Tuple[str, ...]:
        return tuple(c for c in self.family(name) if c)

    def is_complete(self, name: str) -> bool:
        if self.swatch_count < SWATCHES_PER_MODE:
            return False
        return len(self.colors(name)) == STEP_COUNT


@dataclass(frozen=True)
class ExtractionState:
    palette: BasePalette
    stage: Stage = Stage.OPEN
    light: Optional[ModeExtraction] = None
    dark: Optional[ModeExtraction] = None
    notes: Tuple[str, ...] = ()

    def advance(self, stage: Stage, notes: Sequence[str] = (), **changes) -> "ExtractionState":
        return dataclasses.replace(self, stage=stage, notes=self.notes + tuple(notes), **changes)


class SwatchReading(NamedTuple):
    index: int
    color: Optional[str]
    error: Optional[str]


Transition = Callable[[ExtractionState], Awaitable[ExtractionState]]


class ScaleExtractor:
    def __init__(self, page: ControllablePage, config: Optional[ExtractorConfig] = None):
        self.page = page
        self.config = config or ExtractorConfig()
        self._transitions: Dict[Stage, Transition] = {
            Stage.OPEN: self.open_tool,
            Stage.FILL_LIGHT: self.fill_light,
            Stage.ENSURE_LIGHT_MODE: self.ensure_light_mode,
            Stage.EXTRACT_LIGHT: self.extract_light,
            Stage.SWITCH_DARK: self.switch_dark,
            Stage.EXTRACT_DARK: self.extract_dark,
        }

    def log(self, message: str) -> None:
        if self.config.verbose:
            print(message)

    async def run(self, palette: BasePalette) -> ExtractionState:
        state = ExtractionState(palette=palette)
        while state.stage is not Stage.DONE:
            state = await self.step(state)
        self.log("✅ Extraction finished")
        return state

    async def step(self, state: ExtractionState) -> ExtractionState:
        if state.stage is Stage.DONE:
            return state
        return await self._transitions[state.stage](state)

    # -- transitions --------------------------------------------------------

    async def open_tool(self, state: ExtractionState) -> ExtractionState:
        self.log(f"📂 Navigating to {self.config.url}...")
        try:
            await self.page.goto(self.config.url, self.config.navigation_timeout_ms)
        except Exception as exc:
            raise ExtractionError(f"Navigation to {self.config.url} failed: {exc}", Stage.OPEN.value) from exc

        notes = []
        try:
            await self.page.wait_for_idle(self.config.network_idle_timeout_ms)
        except Exception as exc:
            notes.append(f"Network idle not reached, continuing: {exc}")
        return state.advance(Stage.FILL_LIGHT, notes)

    async def fill_light(self, state: ExtractionState) -> ExtractionState:
        self.log("🎨 Filling base colors (light background)...")
        await self.fill_inputs(state.palette, state.palette.light_background, Stage.FILL_LIGHT)
        return state.advance(Stage.ENSURE_LIGHT_MODE)

    async def ensure_light_mode(self, state: ExtractionState) -> ExtractionState:
        selector = self.config.toggle_selector("Light")
        try:
            if await self.page.count(selector) == 0:
                self.log("☀️ Tool already in light mode")
                return state.advance(Stage.EXTRACT_LIGHT)
            self.log("☀️ Switching tool to light mode...")
            await self.page.click(selector, 0, self.config.dialog_timeout_ms)
            await self.page.sleep(self.config.mode_settle_ms)
        except Exception as exc:
            note = f"Light mode toggle unavailable, assuming light mode: {exc}"
            self.log(f"⚠️ {note}")
            return state.advance(Stage.EXTRACT_LIGHT, [note])

        # Switching modes clears the inputs.
        await self.fill_inputs(state.palette, state.palette.light_background, Stage.ENSURE_LIGHT_MODE)
        return state.advance(Stage.EXTRACT_LIGHT)

    async def extract_light(self, state: ExtractionState) -> ExtractionState:
        light, notes = await self.extract_mode("light")
        return state.advance(Stage.SWITCH_DARK, notes, light=light)

    async def switch_dark(self, state: ExtractionState) -> ExtractionState:
        self.log("🌙 Switching tool to dark mode...")
        selector = self.config.toggle_selector("Dark")
        try:
            await self.page.click(selector, 0, self.config.dialog_timeout_ms)
            await self.page.sleep(self.config.mode_settle_ms)
        except Exception as exc:
            # Reading swatches without the switch would return light values as dark ones.
            note = f"Dark mode toggle unavailable, dark scales not extracted: {exc}"
            self.log(f"⚠️ {note}")
            return state.advance(Stage.DONE, [note])

        # The tool clears its inputs on mode switch.
        self.log("🎨 Re-filling base colors (dark background)...")
        await self.fill_inputs(state.palette, state.palette.dark_background, Stage.SWITCH_DARK)
        return state.advance(Stage.EXTRACT_DARK)

    async def extract_dark(self, state: ExtractionState) -> ExtractionState:
        dark, notes = await self.extract_mode("dark")
        return state.advance(Stage.DONE, notes, dark=dark)

    # -- helpers ------------------------------------------------------------

    async def fill_inputs(self, palette: BasePalette, background: str, stage: Stage) -> None:
        fields = (
            ("accent", self.config.accent_input, palette.accent),
            ("gray", self.config.gray_input, palette.gray),
            ("background", self.config.background_input, background),
        )
        for name, selector, value in fields:
            try:
                await self.page.fill(selector, value, self.config.dialog_timeout_ms)
            except Exception as exc:
                raise ExtractionError(f"Could not fill {name} input '{selector}': {exc}", stage.value) from exc
            await self.page.sleep(self.config.fill_settle_ms)

    async def extract_mode(self, mode: str) -> Tuple[ModeExtraction, List[str]]:
        notes: List[str] = []
        try:
            count = await self.page.count(self.config.swatch)
        except Exception as exc:
            count = 0
            notes.append(f"{mode}: swatches could not be counted: {exc}")

        self.log(f"🔍 Extracting {mode} mode swatches ({count} found)...")
        if count < SWATCHES_PER_MODE:
            note = f"{mode}: found {count} swatches, expected {SWATCHES_PER_MODE}"
            self.log(f"⚠️ {note}")
            notes.append(note)

        slots: List[Optional[str]] = []
        for index in range(min(count, SWATCHES_PER_MODE)):
            reading = await self.extract_swatch(index)
            if reading.error:
                note = f"{mode}: swatch {index + 1} failed: {reading.error}"
                self.log(f"⚠️ {note}")
                notes.append(note)
            slots.append(reading.color)
        slots.extend([None] * (SWATCHES_PER_MODE - len(slots)))

        try:
            await self.ensure_no_dialog_open()
        except Exception as exc:
            note = f"{mode}: detail dialog could not be closed: {exc}"
            self.log(f"⚠️ {note}")
            notes.append(note)

        extraction = ModeExtraction(
            mode=mode,
            swatch_count=count,
            accent=tuple(slots[:STEP_COUNT]),
            gray=tuple(slots[STEP_COUNT:SWATCHES_PER_MODE]),
        )
        for family in ("accent", "gray"):
            self.log(f"   {mode} {family}: {len(extraction.colors(family))}/{STEP_COUNT} colors")
        return extraction, notes

    async def extract_swatch(self, index: int) -> SwatchReading:
        timeout = self.config.dialog_timeout_ms
        try:
            await self.ensure_no_dialog_open()
            await self.page.click(self.config.swatch, index, timeout)
            await self.page.wait_for_visible(self.config.dialog_overlay, timeout)
            text = await self.page.read_text(self.config.dialog_hex_text, HEX_TEXT_PATTERN, timeout)
            await self.dismiss_dialog()
            match = HEX_SEARCH.search(text or "")
            if not match:
                raise ValueError(f"no hex color in dialog text {text!r}")
            return SwatchReading(index, normalize_hex(match.group(0)), None)
        except Exception as exc:
            return SwatchReading(index, None, str(exc) or type(exc).__name__)

    async def ensure_no_dialog_open(self) -> None:
        overlay = self.config.dialog_overlay
        if await self.page.count(overlay) == 0:
            return
        await self.dismiss_dialog()
        if await self.page.count(overlay) > 0:
            raise DialogStillOpen(f"Dialog overlay '{overlay}' still attached after dismissal")

    async def dismiss_dialog(self) -> None:
        await self.page.press("Escape")
        await self.page.wait_for_detached(self.config.dialog_overlay, self.config.dialog_timeout_ms)
