import io

import docx
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

RESUME_LINES = [
    "Jane Doe - jane.doe@example.com - +1 555 0100 - Berlin, Germany",
    "Summary: Backend engineer focused on data pipelines and APIs.",
    "Experience",
    "Senior Software Engineer, Acme Corp, 2020-2024",
    "Built ingestion services processing two million documents a day.",
    "Software Engineer, Initech, 2016-2020",
    "Maintained billing APIs and reduced incident volume by forty percent.",
    "Education",
    "BSc Computer Science, Technical University of Berlin, 2016",
    "Skills: Python, PostgreSQL, Kubernetes, Communication",
]


@pytest.fixture()
def resume_text() -> str:
    return "\n".join(RESUME_LINES)


@pytest.fixture()
def resume_pdf_bytes() -> bytes:
    """Generate a single-page PDF carrying the sample resume."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    y = 720
    for line in RESUME_LINES:
        c.drawString(72, y, line)
        y -= 18
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def resume_docx_bytes() -> bytes:
    """Generate a DOCX with the sample resume as paragraphs plus a skills table."""
    document = docx.Document()
    for line in RESUME_LINES[:-1]:
        document.add_paragraph(line)
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Skills"
    table.rows[0].cells[1].text = "Python, PostgreSQL"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()
