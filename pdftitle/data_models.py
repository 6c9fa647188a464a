"""
Core data models for pdftitle.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TextFragment:
    """
    One run of glyphs sharing a font at a given baseline position.

    Coordinates are in PDF user space: the origin is the bottom-left corner
    of the page and y grows upward. ``x, y`` is where the run starts on its
    baseline and ``width`` is its total horizontal advance.
    """
    text: str
    x: float
    y: float
    width: float
    font: str
    font_size: float

    @property
    def end_x(self) -> float:
        """Baseline x coordinate right after the run."""
        return self.x + self.width


@dataclass
class TitleResult:
    """
    Outcome of title extraction for one document.
    """
    path: str
    title: str = ""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        """Check whether the document was processed without error."""
        return self.error is None

    def format_line(self) -> str:
        """Render the result the way the command line prints it."""
        if self.ok:
            return f"{self.path}: {self.title}"
        return f"error: {self.path}: {self.error}"
