"""
Logging configuration and error handling framework for pdftitle.
"""

import logging
import sys
from typing import Optional, TextIO


LOGGER_NAME = "pdftitle"


def setup_logging(level: str = "WARNING", stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Set up logging configuration for the application.

    Log records go to stderr by default because stdout carries the titles.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        stream: Stream for the console handler (defaults to sys.stderr)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))

    # Avoid duplicate handlers
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(getattr(logging, level.upper()))
        return logger

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(getattr(logging, level.upper()))

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    return logger


class TitleExtractionError(Exception):
    """Base exception for title extraction errors."""
    pass


class UnreadableDocumentError(TitleExtractionError):
    """Exception raised when the document container cannot be opened or parsed."""
    pass


class UnsupportedCompressionError(UnreadableDocumentError):
    """
    Exception raised when the reader cannot decode a content stream filter.

    Callers may retry with a document re-encoded by the conversion fallback.
    """
    pass


class ReaderFaultError(TitleExtractionError):
    """Exception raised when the reader fails while walking the document."""
    pass


class ConversionError(TitleExtractionError):
    """Exception raised when the external conversion tool fails."""
    pass


def handle_document_error(pdf_path: str, error: Exception, logger: logging.Logger) -> None:
    """
    Handle document processing errors with appropriate logging.

    Args:
        pdf_path: Path to the PDF file that caused the error
        error: The exception that occurred
        logger: Logger instance for error reporting
    """
    error_msg = f"Error processing PDF '{pdf_path}': {str(error)}"

    if isinstance(error, TitleExtractionError):
        logger.debug(error_msg)
    else:
        logger.exception(error_msg)
