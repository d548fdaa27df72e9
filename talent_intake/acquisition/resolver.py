import httpx

from talent_intake.acquisition.base import BaseAcquisitionStrategy
from talent_intake.acquisition.models import PASTED, AcquiredContent
from talent_intake.exceptions import AcquisitionError, ValidationError
from talent_intake.logging.logger import Log
from talent_intake.utils.text import collapse_whitespace, truncate

MAX_CONTENT_LENGTH = 10_000


def validate_url(url: str) -> str:
    """Return the stripped URL or raise ValidationError if it is not absolute http(s).

    Parse failures, whitespace anywhere in the URL and out-of-range ports are
    rejected here so a malformed URL never reaches a strategy.
    """
    candidate = (url or "").strip()
    invalid = ValidationError(f"Invalid job URL: {url!r}")
    if not candidate or any(ch.isspace() for ch in candidate):
        raise invalid
    try:
        parsed = httpx.URL(candidate)
        port = parsed.port
    except (httpx.InvalidURL, ValueError) as exc:
        raise invalid from exc
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise invalid
    if port is not None and not 0 < port <= 65535:
        raise invalid
    return candidate


class ContentResolver:
    """Tries acquisition strategies in order and returns the first success."""

    def __init__(
        self,
        strategies: list[BaseAcquisitionStrategy],
        max_content_length: int = MAX_CONTENT_LENGTH,
    ) -> None:
        if not strategies:
            raise ValueError("ContentResolver needs at least one strategy")
        self._strategies = list(strategies)
        self._max_content_length = max_content_length

    async def acquire(self, url: str) -> AcquiredContent:
        """Acquire page text for ``url``.

        Raises:
            ValidationError: ``url`` is not an absolute http(s) URL.
            AcquisitionError: every strategy failed; chained to the last cause.
        """
        url = validate_url(url)
        last_error: Exception | None = None

        for strategy in self._strategies:
            try:
                text = collapse_whitespace(await strategy.attempt(url))
            except Exception as exc:
                Log.warning(
                    "Acquisition strategy failed",
                    strategy=strategy.name,
                    url=url,
                    error=exc,
                )
                last_error = exc
                continue
            if not text:
                Log.warning("Acquisition strategy returned no text", strategy=strategy.name, url=url)
                last_error = AcquisitionError(f"{strategy.name} returned no text")
                continue

            content = self._finish(text, strategy.name, url)
            Log.info(
                "Job content acquired",
                strategy=strategy.name,
                url=url,
                chars=len(content.text),
                truncated=content.truncated,
            )
            return content

        raise AcquisitionError(
            "Failed to extract content from the provided URL"
        ) from last_error

    def accept_text(self, text: str) -> AcquiredContent:
        """Wrap pasted posting text with the same cleanup as fetched content."""
        cleaned = collapse_whitespace(text or "")
        if not cleaned:
            raise ValidationError("Job text is empty")
        return self._finish(cleaned, PASTED, None)

    def _finish(self, text: str, strategy: str, url: str | None) -> AcquiredContent:
        return AcquiredContent(
            text=truncate(text, self._max_content_length),
            strategy=strategy,
            source_url=url,
            original_length=len(text),
        )
