from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar

from talent_intake.logging.logger import Log
from talent_intake.pdf.exceptions import PdfExtractionError


class BasePdfExtractor(ABC):
    """Reads the text layer of a PDF on disk. One subclass per engine."""

    engine: ClassVar[str]

    def extract(self, pdf_path: Path) -> str:
        """Return the page texts joined by newlines, not yet whitespace-collapsed.

        Engine errors are logged and chained; the raised message never
        carries the engine's text, which may name the temp file.

        Raises:
            PdfExtractionError: the file has zero pages, yields no text, or
                the engine fails for any reason.
        """
        try:
            pages = self._read_pages(pdf_path)
        except Exception as exc:
            Log.warning("PDF engine failed", engine=self.engine, error=exc)
            raise PdfExtractionError("PDF could not be read") from exc

        if not pages:
            raise PdfExtractionError("PDF has no pages")
        text = "\n".join(pages).strip()
        if not text:
            raise PdfExtractionError("PDF contains no extractable text")
        Log.debug("PDF text layer read", engine=self.engine, pages=len(pages))
        return text

    @abstractmethod
    def _read_pages(self, pdf_path: Path) -> list[str]:
        """Text of every page in order, with an empty string for pages without text."""
