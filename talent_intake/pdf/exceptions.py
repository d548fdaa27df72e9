from talent_intake.exceptions import ExtractionError


class PdfExtractionError(ExtractionError):
    """Raised when a PDF engine cannot produce text from a file."""
