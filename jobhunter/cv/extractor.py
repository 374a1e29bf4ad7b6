import re
from pathlib import Path

import fitz  # PyMuPDF

TEXT_SUFFIXES = {".txt", ".md"}


def extract_text(file_path: Path) -> str:
    """Extract best-effort plain text from a resume file.

    Args:
        file_path: Path to a .pdf, .txt or .md file.

    Returns:
        Extracted text with normalized whitespace.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file type is not supported.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Resume file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".pdf":
        return extract_text_from_pdf(path)
    if suffix in TEXT_SUFFIXES:
        return _clean_whitespace(path.read_text(encoding="utf-8", errors="ignore"))

    raise ValueError(f"Unsupported resume format: {path}. Use PDF, TXT or MD files.")


def extract_text_from_pdf(file_path: Path) -> str:
    """Extract text from a PDF file.

    Args:
        file_path: Path to the PDF file.

    Returns:
        Extracted text with normalized whitespace.

    Raises:
        FileNotFoundError: If the PDF file doesn't exist.
        ValueError: If the file is not a valid PDF.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"PDF file not found: {path}")

    if path.suffix.lower() != ".pdf":
        raise ValueError(f"File is not a PDF: {path}")

    with fitz.open(path) as doc:
        raw_text = "\n".join(page.get_text() for page in doc)

    return _clean_whitespace(raw_text)


def _clean_whitespace(text: str) -> str:
    """Normalize whitespace while keeping line structure for section parsing."""
    text = re.sub(r"\r\n?", "\n", text)
    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r" *\n *", "\n", text)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()
