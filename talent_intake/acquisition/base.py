from abc import ABC, abstractmethod


class BaseAcquisitionStrategy(ABC):
    """One way of turning a URL into page text."""

    name: str = ""

    @abstractmethod
    async def attempt(self, url: str) -> str:
        """Fetch ``url`` and return its text, whitespace already collapsed.

        Raises:
            Exception: any failure; the resolver treats every exception
                (other than cancellation) as this strategy failing.
        """
