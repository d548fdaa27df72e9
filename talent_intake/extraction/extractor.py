from pathlib import PurePath

from talent_intake.config.settings import Settings
from talent_intake.exceptions import ExtractionError, InsufficientContentError, UnsupportedFormatError
from talent_intake.extraction.models import ExtractedText
from talent_intake.extraction.strategies import (
    BaseExtractionStrategy,
    PdfStrategy,
    PlainTextStrategy,
    WordStrategy,
)
from talent_intake.logging.logger import Log
from talent_intake.pdf.factory import PdfExtractorFactory
from talent_intake.utils.text import collapse_whitespace

MIN_CONTENT_LENGTH = 50


class DocumentTextExtractor:
    """Dispatches a stored document to the strategy for its file extension."""

    def __init__(
        self,
        strategies: dict[str, BaseExtractionStrategy],
        min_content_length: int = MIN_CONTENT_LENGTH,
    ) -> None:
        self._strategies = {ext.lower(): s for ext, s in strategies.items()}
        self._min_content_length = min_content_length

    @property
    def supported_extensions(self) -> list[str]:
        return sorted(self._strategies)

    def extract(self, data: bytes, filename: str) -> ExtractedText:
        """Extract normalized text from ``data``.

        Raises:
            UnsupportedFormatError: extension is not one of the supported ones.
            ExtractionError: the format library failed or produced nothing.
            InsufficientContentError: normalized text is below the minimum length.
        """
        extension = PurePath(filename).suffix.lower()
        strategy = self._strategies.get(extension)
        if strategy is None:
            raise UnsupportedFormatError(
                f"Unsupported file type '{extension or filename}'. "
                f"Supported: {', '.join(self.supported_extensions)}"
            )

        try:
            raw_text = strategy.extract(data)
        except ExtractionError:
            raise
        except Exception as exc:
            Log.warning(
                "Extraction library failed",
                format=strategy.source_format,
                filename=filename,
                error=exc,
            )
            raise ExtractionError(f"{strategy.source_format} extraction failed") from exc

        text = collapse_whitespace(raw_text)
        if len(text) < self._min_content_length:
            raise InsufficientContentError(
                f"Extracted text is too short ({len(text)} characters, "
                f"minimum {self._min_content_length})"
            )

        Log.info(
            "Extracted document text",
            format=strategy.source_format,
            chars=len(text),
            bytes=len(data),
        )
        return ExtractedText(
            text=text,
            source_format=strategy.source_format,
            source_bytes=len(data),
        )


def build_extractor(settings: Settings) -> DocumentTextExtractor:
    """Build an extractor with the configured PDF engine."""
    pdf_strategy = PdfStrategy(
        PdfExtractorFactory.create(settings),
        temp_dir=settings.temp_dir,
    )
    return DocumentTextExtractor(
        strategies={
            ".pdf": pdf_strategy,
            ".docx": WordStrategy("docx"),
            ".doc": WordStrategy("doc"),
            ".txt": PlainTextStrategy(),
        },
        min_content_length=settings.min_content_length,
    )
