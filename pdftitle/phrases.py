"""
Phrase reconstruction from positioned text fragments.

Fragments are consumed in content stream order and grouped into phrases:
runs of text that probably belong to one logical block. Font size is the
main signal; the gap between fragments only decides where separator spaces
go inside a phrase.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .config import DEFAULT_SPACING_COEFFICIENT, FONT_SIZE_TOLERANCE, MAX_TITLE_LENGTH
from .data_models import TextFragment
from .text_sanitize import printable

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass
class Phrase:
    """
    A list of words that probably form a single phrase.

    ``spacing_threshold`` is fixed when the phrase starts. ``cursor_x`` and
    ``cursor_y`` track the baseline position right after the last fragment.
    """
    font: str
    font_size: float
    spacing_threshold: float
    cursor_x: float = 0.0
    cursor_y: float = 0.0
    accumulated_length: int = 0
    parts: List[str] = field(default_factory=list)

    @classmethod
    def from_fragment(cls, fragment: TextFragment,
                      spacing_coefficient: float = DEFAULT_SPACING_COEFFICIENT) -> "Phrase":
        """Start a new phrase with ``fragment``."""
        phrase = cls(
            font=fragment.font,
            font_size=fragment.font_size,
            spacing_threshold=spacing_coefficient * fragment.font_size,
        )
        phrase._write(fragment)
        return phrase

    def try_append(self, fragment: TextFragment) -> bool:
        """
        Add ``fragment`` to the phrase and return True if it fits.

        Font names are not compared: slides mix many fonts inside one
        phrase and articles use standard fonts anyway.
        """
        if abs(fragment.font_size - self.font_size) >= FONT_SIZE_TOLERANCE:
            return False

        # no separator at the beginning
        if self.accumulated_length > 0:
            new_line = fragment.y < self.cursor_y
            gap = fragment.x - self.cursor_x >= self.spacing_threshold
            if new_line or gap:
                self.parts.append(" ")
                self.accumulated_length += 1

        self._write(fragment)
        return True

    def _write(self, fragment: TextFragment) -> None:
        self.parts.append(printable(fragment.text))
        self.accumulated_length += len(fragment.text)
        self.cursor_x = fragment.end_x
        self.cursor_y = fragment.y

    @property
    def raw_text(self) -> str:
        """Text as accumulated, separators included."""
        return "".join(self.parts)

    def __str__(self) -> str:
        # truncate for the cases where the whole page ends up in one phrase
        collapsed = _WHITESPACE_RE.sub(" ", self.raw_text).strip()
        return collapsed[:MAX_TITLE_LENGTH]


def build_phrases(fragments: Iterable[TextFragment],
                  spacing_coefficient: float = DEFAULT_SPACING_COEFFICIENT) -> List[Phrase]:
    """
    Group consecutive fragments into phrases.

    Args:
        fragments: Fragments in content stream order
        spacing_coefficient: Multiplied by the font size to get the gap
            that separates two words

    Returns:
        Phrases in the order they were closed
    """
    phrases: List[Phrase] = []
    current: Optional[Phrase] = None

    for fragment in fragments:
        if current is None:
            current = Phrase.from_fragment(fragment, spacing_coefficient)
        elif not current.try_append(fragment):
            phrases.append(current)
            current = Phrase.from_fragment(fragment, spacing_coefficient)

    if current is not None:
        phrases.append(current)

    logger.debug(f"Built {len(phrases)} phrases")
    return phrases
