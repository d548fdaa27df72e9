from dataclasses import dataclass

RENDERED = "rendered"
SCRAPED_FALLBACK = "scraped-fallback"
PASTED = "pasted"


@dataclass(frozen=True)
class AcquiredContent:
    """Text obtained for a job posting and the strategy that produced it."""

    text: str
    strategy: str
    source_url: str | None = None
    original_length: int = 0

    @property
    def truncated(self) -> bool:
        return self.original_length > len(self.text)
