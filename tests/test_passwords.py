"""
Tests for the password generator.

Tests cover:
- Length bounds and alphabet membership
- Absence of ambiguous glyphs
- Rough uniformity over a large sample
- Injected random sources and the process-wide helper
"""
import random
import secrets
from collections import Counter

import pytest

from navigator_crypto import passwords
from navigator_crypto.passwords import PWCHARS, PasswordGenerator


@pytest.fixture
def generator():
    """Generator backed by its own unseeded source."""
    return PasswordGenerator()


class TestAlphabet:
    """Tests for the fixed password alphabet."""

    def test_alphabet_size(self):
        """Test the alphabet keeps its 70 distinct characters."""
        assert len(PWCHARS) == 70
        assert len(set(PWCHARS)) == 70

    @pytest.mark.parametrize("glyph", ["l", "o", "I", "O", "Q"])
    def test_no_ambiguous_glyphs(self, glyph):
        """Test that easily confused letters are excluded."""
        assert glyph not in PWCHARS


class TestGenerate:
    """Tests for PasswordGenerator.generate."""

    def test_zero_length(self, generator):
        """Test that a zero length gives an empty string."""
        assert generator.generate(0) == ""

    def test_length(self, generator):
        """Test that the requested length is honoured."""
        assert len(generator.generate(16)) == 16

    def test_negative_length(self, generator):
        """Test that a negative length is rejected."""
        with pytest.raises(ValueError):
            generator.generate(-1)

    def test_characters_from_alphabet(self, generator):
        """Test that every character comes from the alphabet."""
        assert set(generator.generate(2000)) <= set(PWCHARS)

    def test_roughly_uniform(self, generator):
        """Test that a large sample is spread evenly over the alphabet."""
        counts = Counter(generator.generate(70_000))
        assert set(counts) == set(PWCHARS)
        for count in counts.values():
            assert 700 < count < 1300

    def test_seeded_source_is_reproducible(self):
        """Test that an injected seeded source drives the output."""
        first = PasswordGenerator(random.Random(1234)).generate(32)
        second = PasswordGenerator(random.Random(1234)).generate(32)
        assert first == second

    def test_system_random_source(self):
        """Test that a CSPRNG can be injected."""
        value = PasswordGenerator(secrets.SystemRandom()).generate(24)
        assert len(value) == 24
        assert set(value) <= set(PWCHARS)

    def test_module_generate(self):
        """Test the process-wide generator helper."""
        assert len(passwords.generate(12)) == 12
