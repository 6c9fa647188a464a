"""
Dictionary check for candidate titles.

A candidate is accepted when enough of its alphabetic words are found in a
word list. Titles often carry numbers, symbols and acronyms, so only a
fraction of the words has to be known; misencoded glyph garbage rarely
reaches that fraction.
"""

import logging
import re
from importlib import resources
from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional, Union

from nltk.stem.porter import PorterStemmer

from .config import DEFAULT_WORDS_IN_DICT_PERCENT, MAX_WORD_LENGTH, MIN_WORD_LENGTH

logger = logging.getLogger(__name__)

BUNDLED_WORDS_RESOURCE = "words.txt"

WORDS_EXTRACTOR = re.compile(rf"[A-Za-z]{{{MIN_WORD_LENGTH},{MAX_WORD_LENGTH}}}")


def extract_words(text: str) -> List[str]:
    """Return the alphabetic runs of ``text`` that are checked against the dictionary."""
    return WORDS_EXTRACTOR.findall(text)


class Dictionary:
    """
    Immutable set of lower-cased words.

    Build it once with ``from_file`` or ``bundled`` and pass it around; it is
    never modified afterwards, so one instance can be shared freely.
    """

    def __init__(self, words: Iterable[str]):
        self._words: FrozenSet[str] = frozenset(
            w.strip().lower() for w in words if w and w.strip()
        )
        self._stemmer = PorterStemmer()

    @classmethod
    def from_lines(cls, text: str) -> "Dictionary":
        """Create a dictionary from a word list with one word per line."""
        return cls(text.splitlines())

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Dictionary":
        """Load a word list file with one word per line."""
        path = Path(path)
        logger.debug(f"Loading word list from {path}")
        # system word lists are not always UTF-8 (Latin-1 on some systems)
        return cls.from_lines(path.read_text(encoding="utf-8", errors="replace"))

    @classmethod
    def bundled(cls) -> "Dictionary":
        """Load the word list shipped with the package."""
        text = resources.files("pdftitle.data").joinpath(BUNDLED_WORDS_RESOURCE).read_text(encoding="utf-8")
        return cls.from_lines(text)

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "Dictionary":
        """Load ``path`` when given, the bundled word list otherwise."""
        dictionary = cls.from_file(path) if path else cls.bundled()
        logger.info(f"Dictionary loaded with {len(dictionary)} words")
        return dictionary

    @property
    def words(self) -> FrozenSet[str]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._words

    def knows(self, word: str) -> bool:
        """
        Check whether ``word`` or its stem is in the dictionary.

        The Porter stemmer is aggressive (computers -> comput), so the word
        itself is checked as well as its stem.
        """
        lowered = word.lower()
        return lowered in self._words or self._stemmer.stem(lowered) in self._words

    def is_valid_title(self, candidate: str,
                       words_in_dict_percent: float = DEFAULT_WORDS_IN_DICT_PERCENT) -> bool:
        """
        Check whether ``candidate`` contains enough dictionary words.

        Args:
            candidate: Candidate title
            words_in_dict_percent: Minimum fraction of recognized words

        Returns:
            True if at least one word was found and the recognized fraction
            reaches the threshold
        """
        tokens = extract_words(candidate)
        if not tokens:
            return False

        recognized = sum(1 for token in tokens if self.knows(token))
        ratio = recognized / len(tokens)
        logger.debug(f"Dictionary check for {candidate!r}: {recognized}/{len(tokens)} words known")
        return ratio >= words_in_dict_percent
