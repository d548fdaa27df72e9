"""Format-specific text extraction strategies.

A strategy turns raw bytes into unnormalized text. Whitespace cleanup and the
minimum-length check happen once, in ``DocumentTextExtractor``.
"""

import io
from abc import ABC, abstractmethod

import docx

from talent_intake.exceptions import ExtractionError
from talent_intake.extraction.temp_files import scoped_temp_file
from talent_intake.logging.logger import Log
from talent_intake.pdf.base import BasePdfExtractor


class BaseExtractionStrategy(ABC):
    """Contract for one document format."""

    source_format: str = ""

    @abstractmethod
    def extract(self, data: bytes) -> str:
        """Return the document text.

        Raises:
            ExtractionError: if the underlying library fails or finds no text.
        """


class PdfStrategy(BaseExtractionStrategy):
    """Materializes the buffer to a temp file and reads its text layer."""

    source_format = "pdf"

    def __init__(self, pdf_extractor: BasePdfExtractor, temp_dir: str | None = None) -> None:
        self._pdf_extractor = pdf_extractor
        self._temp_dir = temp_dir

    def extract(self, data: bytes) -> str:
        with scoped_temp_file(data, suffix=".pdf", directory=self._temp_dir) as path:
            return self._pdf_extractor.extract(path)


class WordStrategy(BaseExtractionStrategy):
    """Reads paragraph and table text from a Word document held in memory.

    python-docx only understands the OOXML container, so a legacy binary
    `.doc` file fails with ExtractionError; `.doc` files saved as OOXML work.
    """

    source_format = "docx"

    def __init__(self, source_format: str = "docx") -> None:
        self.source_format = source_format

    def extract(self, data: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(data))
        except Exception as exc:
            Log.warning("Word document could not be opened", format=self.source_format, error=exc)
            raise ExtractionError("Word document could not be read") from exc

        parts = [p.text for p in document.paragraphs if p.text]
        for table in document.tables:
            for row in table.rows:
                parts.extend(cell.text for cell in row.cells if cell.text)
        return "\n".join(parts)


class PlainTextStrategy(BaseExtractionStrategy):
    source_format = "txt"

    def extract(self, data: bytes) -> str:
        try:
            return data.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ExtractionError(
                f"Text file is not valid UTF-8 (byte offset {exc.start})"
            ) from exc
