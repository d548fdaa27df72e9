from playwright.async_api import async_playwright

from talent_intake.acquisition.base import BaseAcquisitionStrategy
from talent_intake.acquisition.exceptions import StrategyError
from talent_intake.acquisition.html_text import body_text, parse_html
from talent_intake.acquisition.models import RENDERED


class RenderedPageStrategy(BaseAcquisitionStrategy):
    """Renders the page in headless Chromium and reads the final DOM."""

    name = RENDERED

    def __init__(self, navigation_timeout_seconds: float = 10, user_agent: str | None = None) -> None:
        self._timeout_ms = navigation_timeout_seconds * 1000
        self._user_agent = user_agent

    async def attempt(self, url: str) -> str:
        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=True)
            try:
                context = await browser.new_context(user_agent=self._user_agent)
                page = await context.new_page()
                response = await page.goto(
                    url, wait_until="domcontentloaded", timeout=self._timeout_ms
                )
                if response is not None and not response.ok:
                    raise StrategyError(f"HTTP {response.status} while rendering page")
                html = await page.content()
            finally:
                await browser.close()

        return body_text(parse_html(html))
