"""
Ghostscript conversion fallback.

pdfminer cannot decode every stream filter found in the wild. Ghostscript
rewrites the first page of such documents into a PDF the reader can parse.
"""

import logging
import subprocess
from typing import List, Union
from pathlib import Path

from .config import DEFAULT_CONVERSION_TIMEOUT, DEFAULT_GS_COMMAND
from .logging_config import ConversionError

logger = logging.getLogger(__name__)


def ghostscript_args(pdf_path: Union[str, Path]) -> List[str]:
    """Arguments writing the re-encoded first page of ``pdf_path`` to stdout."""
    return [
        "-dNOPAUSE",
        "-dBATCH",
        "-dSAFER",
        "-dQUIET",
        "-sDEVICE=pdfwrite",
        "-sOutputFile=-",
        "-dFirstPage=1",
        "-dLastPage=1",
        str(pdf_path),
    ]


def decode_with_ghostscript(pdf_path: Union[str, Path], gs_command: str = DEFAULT_GS_COMMAND,
                            timeout: float = DEFAULT_CONVERSION_TIMEOUT) -> bytes:
    """
    Run Ghostscript to produce an uncompressed copy of the first page.

    Args:
        pdf_path: Path to the PDF file
        gs_command: Ghostscript executable
        timeout: Seconds before the process is killed

    Returns:
        The converted PDF document

    Raises:
        ConversionError: If the process cannot start, times out or fails
    """
    cmd = [gs_command] + ghostscript_args(pdf_path)
    logger.info(f"Converting {pdf_path} with {gs_command}")

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        raise ConversionError(f"failed to transform '{pdf_path}': timed out after {timeout:g}s")
    except OSError as e:
        raise ConversionError(f"failed to transform '{pdf_path}': {e}") from e

    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        detail = f"exit status {result.returncode}"
        if stderr:
            detail = f"{detail}: {stderr}"
        raise ConversionError(f"failed to transform '{pdf_path}': {detail}")

    logger.debug(f"Ghostscript produced {len(result.stdout)} bytes for {pdf_path}")
    return result.stdout
