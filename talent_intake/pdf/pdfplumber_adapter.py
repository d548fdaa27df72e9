from pathlib import Path

import pdfplumber

from talent_intake.pdf.base import BasePdfExtractor


class PdfPlumberAdapter(BasePdfExtractor):
    engine = "pdfplumber"

    def _read_pages(self, pdf_path: Path) -> list[str]:
        with pdfplumber.open(pdf_path) as pdf:
            return [page.extract_text() or "" for page in pdf.pages]
