import httpx

from talent_intake.acquisition.base import BaseAcquisitionStrategy
from talent_intake.acquisition.html_text import body_text, job_content_text, parse_html
from talent_intake.acquisition.models import SCRAPED_FALLBACK
from talent_intake.logging.logger import Log


class ScrapedPageStrategy(BaseAcquisitionStrategy):
    """Plain HTTP GET plus a selector heuristic for the job description block."""

    name = SCRAPED_FALLBACK

    def __init__(
        self,
        *,
        user_agent: str,
        timeout_seconds: float = 10,
        selector_min_length: int = 200,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._headers = {
            "User-Agent": user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
        }
        self._timeout = timeout_seconds
        self._selector_min_length = selector_min_length
        self._transport = transport

    async def attempt(self, url: str) -> str:
        async with httpx.AsyncClient(
            headers=self._headers,
            timeout=self._timeout,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            response = await client.get(url)
            response.raise_for_status()
            html = response.text

        soup = parse_html(html)
        job_text = job_content_text(soup, self._selector_min_length)
        if job_text is not None:
            Log.debug("Job content selector matched", url=url, chars=len(job_text))
            return job_text
        return body_text(soup)
