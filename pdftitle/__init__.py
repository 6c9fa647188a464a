"""
pdftitle: guess the title of a PDF document from its first page.
"""

from .config import TitleConfig
from .data_models import TextFragment, TitleResult
from .dictionary import Dictionary
from .logging_config import (
    ConversionError,
    ReaderFaultError,
    TitleExtractionError,
    UnreadableDocumentError,
    UnsupportedCompressionError,
)
from .phrases import Phrase, build_phrases
from .title_extractor import TitleExtractor, extract_title_from_pdf
from .title_selector import select_title

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "Dictionary",
    "Phrase",
    "ReaderFaultError",
    "TextFragment",
    "TitleConfig",
    "TitleExtractionError",
    "TitleExtractor",
    "TitleResult",
    "UnreadableDocumentError",
    "UnsupportedCompressionError",
    "build_phrases",
    "extract_title_from_pdf",
    "select_title",
]
