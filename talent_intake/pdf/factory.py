from talent_intake.config.settings import Settings
from talent_intake.pdf.base import BasePdfExtractor
from talent_intake.pdf.pdfplumber_adapter import PdfPlumberAdapter
from talent_intake.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Resolves ``settings.pdf_engine`` to an extractor instance."""

    ENGINES: tuple[type[BasePdfExtractor], ...] = (PdfPlumberAdapter, PyMuPdfAdapter)

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        requested = settings.pdf_engine.strip().lower()
        for engine_cls in cls.ENGINES:
            if engine_cls.engine == requested:
                return engine_cls()
        known = ", ".join(engine_cls.engine for engine_cls in cls.ENGINES)
        raise ValueError(f"Unknown PDF engine '{settings.pdf_engine}'. Known engines: {known}")
