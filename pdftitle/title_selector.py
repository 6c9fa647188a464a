"""
Title selection among the phrases of a page.
"""

import logging
from typing import List, Optional, Sequence

from .config import DEFAULT_WORDS_IN_DICT_PERCENT, MIN_TITLE_LENGTH
from .dictionary import Dictionary
from .phrases import Phrase

logger = logging.getLogger(__name__)


def rank_phrases(phrases: Sequence[Phrase]) -> List[Phrase]:
    """Return the phrases sorted by decreasing font size."""
    return sorted(phrases, key=lambda p: p.font_size, reverse=True)


def select_title(phrases: Sequence[Phrase], dictionary: Optional[Dictionary] = None,
                 words_in_dict_percent: float = DEFAULT_WORDS_IN_DICT_PERCENT) -> str:
    """
    Guess which of the phrases is the document title.

    The title is expected to be the phrase with the largest font size unless
    it is very short. The usual culprit is a paragraph after the title that
    starts with a very big letter.

    Args:
        phrases: Phrases of the first page, in any order
        dictionary: Word list for the dictionary check, None disables it
        words_in_dict_percent: Minimum fraction of dictionary words

    Returns:
        The title or an empty string
    """
    ranked = rank_phrases(phrases)
    if not ranked:
        return ""

    title = str(ranked[0])
    if len(title) < MIN_TITLE_LENGTH:
        if len(ranked) > 1:
            logger.debug(f"Top phrase {title!r} too short, trying the next one")
            title = str(ranked[1])
        else:
            title = ""

    if dictionary is None:
        return title

    if dictionary.is_valid_title(title, words_in_dict_percent):
        return title

    logger.debug(f"Candidate {title!r} rejected by the dictionary check")
    return ""
