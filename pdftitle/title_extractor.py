"""
Title extraction for PDF documents.

This module ties the pipeline together: the first page is read into text
fragments, the fragments are grouped into phrases and the most likely title
phrase is selected. Documents the reader cannot decode are converted with
Ghostscript and read once more.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from .config import TitleConfig
from .conversion import decode_with_ghostscript
from .data_models import TextFragment, TitleResult
from .dictionary import Dictionary
from .extraction import PDFSource, read_first_page
from .logging_config import TitleExtractionError, UnsupportedCompressionError, handle_document_error
from .phrases import Phrase, build_phrases
from .title_selector import select_title

logger = logging.getLogger(__name__)


class TitleExtractor:
    """
    Extracts the probable title of PDF documents.

    The dictionary is loaded once here, unless the dictionary check is
    disabled, and shared by every document processed afterwards.
    """

    def __init__(self, config: Optional[TitleConfig] = None,
                 dictionary: Optional[Dictionary] = None):
        """
        Initialize the title extractor.

        Args:
            config: Extraction settings, defaults when omitted
            dictionary: Word list to use instead of loading one from config
        """
        self.config = config or TitleConfig()

        if self.config.disable_words_check:
            self.dictionary = None
        elif dictionary is not None:
            self.dictionary = dictionary
        else:
            self.dictionary = Dictionary.load(self.config.words_file)

    def phrases_of_fragments(self, fragments: Iterable[TextFragment]) -> List[Phrase]:
        return build_phrases(fragments, self.config.spacing_coefficient)

    def title_from_phrases(self, phrases: List[Phrase]) -> str:
        return select_title(phrases, self.dictionary, self.config.words_in_dict_percent)

    def title_from_fragments(self, fragments: Iterable[TextFragment]) -> str:
        """Select the title among the phrases built from ``fragments``."""
        return self.title_from_phrases(self.phrases_of_fragments(fragments))

    def phrases_of_document(self, source: PDFSource) -> List[Phrase]:
        """
        Extract the phrases of the first page.

        Raises:
            TitleExtractionError: If the document cannot be read
        """
        fragments = read_first_page(source, self.config.engine)
        if not fragments:
            logger.debug("No text fragments found")
            return []
        return self.phrases_of_fragments(fragments)

    def extract_title(self, pdf_path: Union[str, Path]) -> str:
        """
        Extract the title of a PDF file.

        Args:
            pdf_path: Path to the PDF file

        Returns:
            The title, empty when none was found or it failed the dictionary check

        Raises:
            TitleExtractionError: If the document cannot be read, even after conversion
        """
        try:
            phrases = self.phrases_of_document(pdf_path)
        except UnsupportedCompressionError as e:
            logger.info(f"Reader cannot decode {pdf_path} ({e}), converting with Ghostscript")
            converted = decode_with_ghostscript(
                pdf_path,
                gs_command=self.config.gs_command,
                timeout=self.config.conversion_timeout,
            )
            phrases = self.phrases_of_document(converted)

        title = self.title_from_phrases(phrases)
        logger.debug(f"Title of {pdf_path}: {title!r}")
        return title

    def process(self, pdf_path: Union[str, Path]) -> TitleResult:
        """
        Extract the title of a PDF file and report failures in the result.
        """
        try:
            return TitleResult(path=str(pdf_path), title=self.extract_title(pdf_path))
        except TitleExtractionError as e:
            handle_document_error(str(pdf_path), e, logger)
            return TitleResult(path=str(pdf_path), error=str(e))

    def process_all(self, pdf_paths: Iterable[Union[str, Path]]) -> Iterator[TitleResult]:
        """Process each file in turn, an error never stops the others."""
        for pdf_path in pdf_paths:
            yield self.process(pdf_path)


def extract_title_from_pdf(pdf_path: Union[str, Path], config: Optional[TitleConfig] = None) -> str:
    """
    Convenience function to extract the title of a single PDF file.

    Args:
        pdf_path: Path to the PDF file
        config: Extraction settings

    Returns:
        The title or an empty string
    """
    extractor = TitleExtractor(config)
    return extractor.extract_title(pdf_path)
