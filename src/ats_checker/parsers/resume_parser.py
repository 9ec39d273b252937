import logging
from pathlib import Path

from ats_checker.pipeline.normalizer import normalize

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".pdf", ".docx", ".txt", ".md")
DEFAULT_EXTRACTED_NAME = "resume_extracted.txt"


def parse_resume(file_path: str | Path) -> str:
    """Extract plain text from a resume file (PDF, DOCX, TXT, MD)."""
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Resume file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".pdf":
        text = _parse_pdf(path)
    elif suffix == ".docx":
        text = _parse_docx(path)
    elif suffix in (".txt", ".md"):
        text = path.read_text(encoding="utf-8")
    else:
        raise ValueError(
            f"Unsupported file type: {path.suffix or '(none)'}. Please use PDF or DOCX."
        )
    return normalize(text)


def save_extracted_text(text: str, output_path: str | Path = DEFAULT_EXTRACTED_NAME) -> Path:
    """Save extracted resume text to a plain text file."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def _parse_pdf(path: Path) -> str:
    import fitz  # pymupdf

    doc = fitz.open(str(path))
    pages = []
    for i, page in enumerate(doc):
        logger.info("Extracting text from PDF page %d/%d", i + 1, doc.page_count)
        pages.append(page.get_text())
    doc.close()
    # Scanned PDFs come back empty
    return "\n".join(pages)


def _parse_docx(path: Path) -> str:
    from docx import Document

    doc = Document(str(path))
    return "\n".join(p.text for p in doc.paragraphs)
