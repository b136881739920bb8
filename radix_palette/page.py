"""
The "controllable page" the extractor drives, and its Playwright-backed
implementation.

The extractor only talks to ``ControllablePage``; tests substitute an
in-memory page with the same methods.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Pattern, Protocol

from playwright.async_api import Page, async_playwright

from .config import ExtractorConfig

VIEWPORT = {"width": 1440, "height": 900}
USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class ControllablePage(Protocol):
    async def goto(self, url: str, timeout_ms: int) -> None: ...

    async def wait_for_idle(self, timeout_ms: int) -> None: ...

    async def fill(self, selector: str, value: str, timeout_ms: int) -> None: ...

    async def click(self, selector: str, index: int, timeout_ms: int) -> None: ...

    async def count(self, selector: str) -> int: ...

    async def wait_for_visible(self, selector: str, timeout_ms: int) -> None: ...

    async def wait_for_detached(self, selector: str, timeout_ms: int) -> None: ...

    async def read_text(self, selector: str, pattern: Pattern[str], timeout_ms: int) -> str: ...

    async def press(self, key: str) -> None: ...

    async def sleep(self, ms: int) -> None: ...


class PlaywrightPage:
    def __init__(self, page: Page):
        self._page = page

    async def goto(self, url: str, timeout_ms: int) -> None:
        await self._page.goto(url, wait_until="domcontentloaded", timeout=timeout_ms)
        await self._page.wait_for_selector("body", state="attached", timeout=timeout_ms)

    async def wait_for_idle(self, timeout_ms: int) -> None:
        await self._page.wait_for_load_state("networkidle", timeout=timeout_ms)

    async def fill(self, selector: str, value: str, timeout_ms: int) -> None:
        await self._page.fill(selector, value, timeout=timeout_ms)

    async def click(self, selector: str, index: int, timeout_ms: int) -> None:
        target = self._page.locator(selector).nth(index)
        await target.scroll_into_view_if_needed(timeout=timeout_ms)
        await target.click(timeout=timeout_ms)

    async def count(self, selector: str) -> int:
        return await self._page.locator(selector).count()

    async def wait_for_visible(self, selector: str, timeout_ms: int) -> None:
        await self._page.wait_for_selector(selector, state="visible", timeout=timeout_ms)

    async def wait_for_detached(self, selector: str, timeout_ms: int) -> None:
        await self._page.wait_for_selector(selector, state="detached", timeout=timeout_ms)

    async def read_text(self, selector: str, pattern: Pattern[str], timeout_ms: int) -> str:
        target = self._page.locator(selector).filter(has_text=pattern).first
        text = await target.inner_text(timeout=timeout_ms)
        return text.strip()

    async def press(self, key: str) -> None:
        await self._page.keyboard.press(key)

    async def sleep(self, ms: int) -> None:
        await self._page.wait_for_timeout(ms)


@asynccontextmanager
async def browser_session(config: ExtractorConfig) -> AsyncIterator[PlaywrightPage]:
    """One browser, one page, closed on every exit path."""
    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=config.headless, slow_mo=config.slow_mo)
        try:
            context = await browser.new_context(
                viewport=VIEWPORT,
                device_scale_factor=1,
                user_agent=USER_AGENT,
            )
            page = await context.new_page()
            yield PlaywrightPage(page)
        finally:
            await browser.close()
