"""
Tests for phrase reconstruction.
"""

import random

import pytest

from pdftitle.data_models import TextFragment
from pdftitle.phrases import Phrase, build_phrases
from pdftitle.text_sanitize import printable


def frag(text, x, y=100.0, width=None, size=12.0, font="F1"):
    """Build a fragment, width defaults to half the font size per character."""
    if width is None:
        width = len(text) * size * 0.5
    return TextFragment(text=text, x=x, y=y, width=width, font=font, font_size=size)


class TestPhrase:
    """Test cases for the Phrase accumulator."""

    def test_from_fragment(self):
        """Test a phrase starts with the fragment properties."""
        phrase = Phrase.from_fragment(frag("Hello", x=10, y=50, width=30, size=20), 0.16)

        assert phrase.font == "F1"
        assert phrase.font_size == 20
        assert phrase.spacing_threshold == pytest.approx(3.2)
        assert phrase.cursor_x == 40
        assert phrase.cursor_y == 50
        assert phrase.accumulated_length == 5
        assert str(phrase) == "Hello"

    def test_append_without_gap_has_no_separator(self):
        """Test touching fragments on the same baseline are glued together."""
        phrase = Phrase.from_fragment(frag("a", x=0, width=10), 0.16)

        assert phrase.try_append(frag("b", x=10.5, width=10))
        assert phrase.raw_text == "ab"

    def test_append_with_gap_inserts_separator(self):
        """Test a horizontal gap above the threshold inserts a space."""
        phrase = Phrase.from_fragment(frag("word", x=0, width=20), 0.16)

        assert phrase.try_append(frag("next", x=22, width=20))
        assert phrase.raw_text == "word next"

    def test_gap_equal_to_threshold_inserts_separator(self):
        """Test the threshold itself already counts as a gap."""
        phrase = Phrase.from_fragment(frag("ab", x=0, width=10, size=10), 0.5)

        assert phrase.try_append(frag("cd", x=15, width=10, size=10))
        assert phrase.raw_text == "ab cd"

    def test_new_line_inserts_separator(self):
        """Test a lower baseline starts a new line inside the phrase."""
        phrase = Phrase.from_fragment(frag("first", x=0, y=100, width=30), 0.16)

        assert phrase.try_append(frag("second", x=0, y=86, width=36))
        assert phrase.raw_text == "first second"

    def test_higher_baseline_without_gap_has_no_separator(self):
        """Test a rising baseline (superscript) does not insert a space."""
        phrase = Phrase.from_fragment(frag("x", x=0, y=100, width=6), 0.16)

        assert phrase.try_append(frag("2", x=6, y=104, width=4))
        assert phrase.raw_text == "x2"

    def test_font_size_difference_rejects(self):
        """Test a font size jump of 4 points or more closes the phrase."""
        phrase = Phrase.from_fragment(frag("Big", x=0, size=16), 0.16)

        assert not phrase.try_append(frag("small", x=30, size=12))
        assert not phrase.try_append(frag("huge", x=30, size=20))
        assert phrase.raw_text == "Big"

    def test_font_size_within_tolerance_appends(self):
        """Test sizes closer than 4 points stay in one phrase."""
        phrase = Phrase.from_fragment(frag("Big", x=0, size=16), 0.16)

        assert phrase.try_append(frag("ger", x=24, size=12.1))

    def test_font_name_is_ignored(self):
        """Test a font change alone does not split the phrase."""
        phrase = Phrase.from_fragment(frag("Bold", x=0, font="Arial-Bold"), 0.16)

        assert phrase.try_append(frag("Plain", x=24, font="Times-Roman"))
        assert phrase.font == "Arial-Bold"

    def test_spacing_threshold_is_fixed(self):
        """Test the threshold keeps the size of the first fragment."""
        phrase = Phrase.from_fragment(frag("a", x=0, width=5, size=10), 0.16)
        phrase.try_append(frag("b", x=5, width=5, size=13))

        assert phrase.spacing_threshold == pytest.approx(1.6)
        assert phrase.font_size == 10

    def test_empty_first_fragment_gets_no_separator(self):
        """Test no separator is added while the phrase holds no text."""
        phrase = Phrase.from_fragment(frag("", x=0, width=0), 0.16)

        assert phrase.try_append(frag("Title", x=50, width=30))
        assert phrase.raw_text == "Title"

    def test_control_characters_are_replaced(self):
        """Test non printable characters never reach the rendered text."""
        phrase = Phrase.from_fragment(frag("Ti\x00tle\x07", x=0), 0.16)

        assert phrase.raw_text == "Ti tle "
        assert str(phrase) == "Ti tle"

    def test_string_collapses_whitespace(self):
        """Test runs of whitespace render as one space."""
        phrase = Phrase.from_fragment(frag("  A   ", x=0, width=30), 0.16)
        phrase.try_append(frag("  B", x=50, width=15))

        assert str(phrase) == "A B"

    def test_string_is_truncated(self):
        """Test rendered phrases are capped at 80 characters."""
        phrase = Phrase.from_fragment(frag("x" * 200, x=0), 0.16)

        assert str(phrase) == "x" * 80


class TestBuildPhrases:
    """Test cases for build_phrases."""

    def test_empty_input(self):
        """Test no fragments give no phrases."""
        assert build_phrases([]) == []

    def test_single_fragment(self):
        """Test one fragment gives exactly one phrase."""
        phrases = build_phrases([frag("Alone", x=0)])

        assert len(phrases) == 1
        assert str(phrases[0]) == "Alone"

    def test_title_and_body(self):
        """Test a large title line followed by body text."""
        fragments = [
            frag("Big", x=0, y=100, width=30, size=24),
            frag("Title", x=35, y=100, width=40, size=24),
            frag("Some body text starts here", x=0, y=80, width=200, size=10),
        ]

        phrases = build_phrases(fragments, 0.16)

        assert [str(p) for p in phrases] == ["Big Title", "Some body text starts here"]
        assert [p.font_size for p in phrases] == [24, 10]

    def test_size_change_splits_every_time(self):
        """Test alternating sizes produce one phrase per fragment."""
        fragments = [
            frag("one", x=0, size=10),
            frag("two", x=20, size=14),
            frag("three", x=40, size=10),
        ]

        phrases = build_phrases(fragments)

        assert [str(p) for p in phrases] == ["one", "two", "three"]

    def test_glyph_by_glyph_words(self):
        """Test per-glyph fragments are rebuilt into words."""
        size = 10.0
        fragments = []
        x = 0.0
        for word in ("Phrase", "Builder"):
            for ch in word:
                fragments.append(frag(ch, x=x, width=5.0, size=size))
                x += 5.0
            x += 3.0  # inter-word gap above 0.16 * 10

        phrases = build_phrases(fragments, 0.16)

        assert len(phrases) == 1
        assert str(phrases[0]) == "Phrase Builder"

    def test_spacing_coefficient_changes_word_boundaries(self):
        """Test a larger coefficient glues words separated by small gaps."""
        fragments = [frag("ab", x=0, width=10, size=10), frag("cd", x=12, width=10, size=10)]

        assert str(build_phrases(fragments, 0.16)[0]) == "ab cd"
        assert str(build_phrases(fragments, 0.5)[0]) == "abcd"

    def test_fragments_are_preserved_in_order(self):
        """Test every fragment text lands in exactly one phrase, in order."""
        rng = random.Random(1234)
        for _ in range(50):
            fragments = []
            for _ in range(rng.randint(1, 40)):
                text = "".join(rng.choice("abcdefXYZ") for _ in range(rng.randint(1, 6)))
                fragments.append(frag(
                    text,
                    x=rng.uniform(0, 500),
                    y=rng.uniform(0, 800),
                    width=rng.uniform(1, 60),
                    size=rng.choice([8.0, 10.0, 11.5, 14.0, 24.0]),
                ))

            phrases = build_phrases(fragments, 0.16)

            assert 1 <= len(phrases) <= len(fragments)
            rebuilt = "".join(p.raw_text for p in phrases).replace(" ", "")
            assert rebuilt == "".join(printable(f.text) for f in fragments)
            for phrase in phrases:
                rendered = str(phrase)
                assert len(rendered) <= 80
                assert all(ch.isprintable() for ch in rendered)
