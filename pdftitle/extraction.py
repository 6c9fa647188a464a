"""
PDF text extraction boundary.

This module turns a PDF (path or in-memory bytes) into the ordered list of
positioned text fragments of its first page. Two engines are
supported: pdfplumber (pdfminer.six underneath) and PyMuPDF.

The readers are third-party parsers fed with untrusted files and may fail in
many ways. ``read_first_page`` is the only entry point: every call into a
reader goes through it and every failure comes out as a
``TitleExtractionError`` subclass.
"""

import io
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple, Union

import fitz  # PyMuPDF
import pdfplumber

from .config import DEFAULT_ENGINE
from .data_models import TextFragment
from .logging_config import (
    ReaderFaultError,
    TitleExtractionError,
    UnreadableDocumentError,
    UnsupportedCompressionError,
)

logger = logging.getLogger(__name__)

PDFSource = Union[str, Path, bytes]

# Error texts meaning the reader met a stream filter it cannot decode.
# This is a best-effort match against pdfminer.six messages
# (PDFNotImplementedError("Unsupported filter: ...")); a pdfminer upgrade may
# change the wording and silently disable the conversion fallback.
UNSUPPORTED_COMPRESSION_SIGNATURES = (
    "Unsupported filter",
    "filter is unsupported",
    "stream not present",
)

# Reader faults whose messages embed raw document bytes are reported with a
# stable text so the output stays readable and deterministic.
KNOWN_FAULTS = (
    ("malformed hex string", "malformed hex string"),
    ("unexpected eof", "unexpected end of file"),
)


def is_unsupported_compression(message: str) -> bool:
    """Check whether a reader error message matches an unsupported filter signature."""
    return any(signature in message for signature in UNSUPPORTED_COMPRESSION_SIGNATURES)


def describe_fault(error: BaseException) -> str:
    """Return a printable description of a reader failure."""
    message = str(error).strip() or type(error).__name__
    lowered = message.lower()
    for pattern, stable in KNOWN_FAULTS:
        if pattern in lowered:
            return stable
    return message


def _open_pdfplumber(source: PDFSource) -> Any:
    if isinstance(source, bytes):
        return pdfplumber.open(io.BytesIO(source))
    return pdfplumber.open(str(source))


def _fragment_from_char(char: Dict[str, Any]) -> TextFragment:
    # the text matrix translation is the glyph origin on the baseline
    matrix = char.get("matrix")
    if matrix:
        x, y = float(matrix[4]), float(matrix[5])
    else:
        x, y = float(char["x0"]), float(char["y0"])
    return TextFragment(
        text=char.get("text", ""),
        x=x,
        y=y,
        width=float(char["x1"]) - float(char["x0"]),
        font=char.get("fontname", ""),
        font_size=float(char.get("size", 0.0)),
    )


def _pdfplumber_fragments(pdf: Any) -> List[TextFragment]:
    if not pdf.pages:
        return []
    chars = pdf.pages[0].chars
    logger.debug(f"First page has {len(chars)} characters")
    return [_fragment_from_char(char) for char in chars]


def _open_pymupdf(source: PDFSource) -> Any:
    if isinstance(source, bytes):
        return fitz.open(stream=source, filetype="pdf")
    return fitz.open(str(source))


def _pymupdf_fragments(doc: Any) -> List[TextFragment]:
    if len(doc) == 0:
        return []
    page = doc[0]
    # PyMuPDF puts the origin at the top-left corner, flip to PDF user space
    height = page.rect.height
    fragments = []
    raw = page.get_text("rawdict")

    for block in raw["blocks"]:
        if "lines" not in block:
            continue  # Skip image blocks

        for line in block["lines"]:
            for span in line["spans"]:
                for char in span["chars"]:
                    x0, _, x1, _ = char["bbox"]
                    origin_x, origin_y = char["origin"]
                    fragments.append(TextFragment(
                        text=char["c"],
                        x=float(origin_x),
                        y=float(height - origin_y),
                        width=float(x1 - x0),
                        font=span.get("font", ""),
                        font_size=float(span.get("size", 0.0)),
                    ))

    logger.debug(f"First page has {len(fragments)} characters")
    return fragments


READERS: Dict[str, Tuple[Callable[[PDFSource], Any], Callable[[Any], List[TextFragment]]]] = {
    "pdfplumber": (_open_pdfplumber, _pdfplumber_fragments),
    "pymupdf": (_open_pymupdf, _pymupdf_fragments),
}


def _close(document: Any) -> None:
    try:
        document.close()
    except Exception as e:
        logger.warning(f"Error closing document: {e}")


def read_first_page(source: PDFSource, engine: str = DEFAULT_ENGINE) -> List[TextFragment]:
    """
    Extract the text fragments of the first page.

    Args:
        source: Path to a PDF file or the PDF document itself
        engine: Reader engine name, one of READERS

    Returns:
        Fragments in content stream order, empty if the first page has no text

    Raises:
        UnsupportedCompressionError: If the reader cannot decode a stream filter
        UnreadableDocumentError: If the document cannot be opened
        ReaderFaultError: If the reader fails while walking the document
    """
    try:
        open_document, page_fragments = READERS[engine]
    except KeyError:
        raise ValueError(f"unknown engine: {engine!r}")

    try:
        document = open_document(source)
    except Exception as e:
        message = str(e).strip() or type(e).__name__
        if is_unsupported_compression(message):
            raise UnsupportedCompressionError(f"can't init reader: {message}") from e
        raise UnreadableDocumentError(f"can't init reader: {message}") from e

    try:
        return page_fragments(document)
    except TitleExtractionError:
        raise
    except Exception as e:
        message = str(e)
        if is_unsupported_compression(message):
            raise UnsupportedCompressionError(f"reader fault: {message}") from e
        raise ReaderFaultError(f"reader fault: {describe_fault(e)}") from e
    finally:
        _close(document)
