"""
Configuration for pdftitle.

Tunables that the command line can change live in TitleConfig; the fixed
heuristics are module level constants.
"""

import os
from dataclasses import dataclass
from typing import Optional


# Spacing coefficient multiplied by font size decides word boundaries
DEFAULT_SPACING_COEFFICIENT = 0.16

# Minimum fraction of dictionary words for a valid title
DEFAULT_WORDS_IN_DICT_PERCENT = 0.20

# Ghostscript executable name
DEFAULT_GS_COMMAND = "gswin64c" if os.name == "nt" else "gs"

# Seconds before the conversion fallback is killed
DEFAULT_CONVERSION_TIMEOUT = 60.0

ENGINES = ("pdfplumber", "pymupdf")
DEFAULT_ENGINE = "pdfplumber"

# Fragments whose sizes differ by this much never share a phrase
FONT_SIZE_TOLERANCE = 4.0

# Rendered phrases shorter than this are skipped as title candidates
MIN_TITLE_LENGTH = 4

# Rendered phrases are truncated to this many characters
MAX_TITLE_LENGTH = 80

# Length bounds of the alphabetic tokens checked against the dictionary
MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 30


@dataclass
class TitleConfig:
    """
    Settings for one title extraction run.
    """
    spacing_coefficient: float = DEFAULT_SPACING_COEFFICIENT
    disable_words_check: bool = False
    words_in_dict_percent: float = DEFAULT_WORDS_IN_DICT_PERCENT
    gs_command: str = DEFAULT_GS_COMMAND
    conversion_timeout: float = DEFAULT_CONVERSION_TIMEOUT
    engine: str = DEFAULT_ENGINE
    words_file: Optional[str] = None

    def __post_init__(self):
        """Validate configuration values."""
        self.spacing_coefficient = float(self.spacing_coefficient)
        self.words_in_dict_percent = float(self.words_in_dict_percent)
        self.conversion_timeout = float(self.conversion_timeout)

        if self.spacing_coefficient <= 0:
            raise ValueError(f"spacing coefficient must be positive: {self.spacing_coefficient}")
        if not 0.0 <= self.words_in_dict_percent <= 1.0:
            raise ValueError(f"words percent must be within [0, 1]: {self.words_in_dict_percent}")
        if self.conversion_timeout <= 0:
            raise ValueError(f"conversion timeout must be positive: {self.conversion_timeout}")
        if self.engine not in ENGINES:
            raise ValueError(f"unknown engine {self.engine!r}, expected one of {', '.join(ENGINES)}")
        if not self.gs_command:
            raise ValueError("ghostscript command must not be empty")
