from abc import ABC, abstractmethod

from talent_intake.normalization.models import StructuredRecord


class BaseNormalizer(ABC):
    """Contract for all normalization adapters."""

    @abstractmethod
    async def normalize(self, text: str) -> StructuredRecord:
        """Transform extracted document text into a structured record.

        Args:
            text: Whitespace-normalized text from the extractor.

        Returns:
            A StructuredRecord. Model or parse failures yield a degraded
            record (``structured=False``) instead of raising.
        """
