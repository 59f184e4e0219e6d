import pytest

from onetimepad.alphabet import DEFAULT_ALPHABET, Alphabet
from onetimepad.errors import CharacterNotInAlphabet, InvalidAlphabet


class TestDefaultAlphabet:
    """Test suite for the default alphabet"""

    def test_length(self):
        """Test that the default alphabet covers the 95 printable ASCII characters"""
        assert len(DEFAULT_ALPHABET) == 95
        assert set(DEFAULT_ALPHABET) == {chr(c) for c in range(0x20, 0x7F)}

    def test_ordering(self):
        """Test the documented ordering of the default alphabet"""
        alphabet = Alphabet()
        assert alphabet.index_of(" ") == 0
        assert alphabet.index_of("1") == 1
        assert alphabet.index_of("0") == 10
        assert alphabet.index_of("+") == 26
        assert alphabet.index_of("a") == 27
        assert alphabet.index_of("A") == 53
        assert alphabet.index_of("[") == 79
        assert alphabet.index_of("?") == 94

    def test_str(self):
        """Test that the alphabet renders back to its symbols"""
        assert str(Alphabet()) == DEFAULT_ALPHABET


class TestAlphabet:
    """Test suite for Alphabet class"""

    def test_index_of(self):
        """Test symbol to index lookup"""
        alphabet = Alphabet("ABCDE")
        assert [alphabet.index_of(s) for s in "ABCDE"] == [0, 1, 2, 3, 4]

    def test_index_of_missing_symbol(self):
        """Test that a missing symbol names the offending character"""
        alphabet = Alphabet("ABCDE")
        with pytest.raises(CharacterNotInAlphabet) as exc_info:
            alphabet.index_of("W")
        assert exc_info.value.symbol == "W"
        assert str(exc_info.value) == "The character 'W' is not in the alphabet of this one time pad."

    def test_symbol_at(self):
        """Test index to symbol lookup"""
        alphabet = Alphabet("ABCDE")
        assert alphabet.symbol_at(0) == "A"
        assert alphabet.symbol_at(4) == "E"

    def test_symbol_at_wraps(self):
        """Test that indices wrap around the alphabet length"""
        alphabet = Alphabet("ABCDE")
        assert alphabet.symbol_at(5) == "A"
        assert alphabet.symbol_at(7) == "C"
        assert alphabet.symbol_at(-1) == "E"

    def test_single_symbol(self):
        """Test that a one symbol alphabet is allowed"""
        alphabet = Alphabet("x")
        assert len(alphabet) == 1
        assert alphabet.symbol_at(3) == "x"

    def test_from_sequence(self):
        """Test construction from any sequence of symbols"""
        alphabet = Alphabet(["é", "ß", "☃"])
        assert alphabet.index_of("☃") == 2
        assert str(alphabet) == "éß☃"

    def test_empty_rejected(self):
        """Test that an empty alphabet is rejected"""
        with pytest.raises(InvalidAlphabet):
            Alphabet("")

    def test_duplicates_rejected(self):
        """Test that duplicate symbols are rejected at construction"""
        with pytest.raises(InvalidAlphabet, match="Duplicate symbol"):
            Alphabet("ABCA")

    def test_multi_character_symbol_rejected(self):
        """Test that symbols must be single characters"""
        with pytest.raises(InvalidAlphabet, match="single characters"):
            Alphabet(["A", "BC"])

    def test_invalid_alphabet_is_value_error(self):
        """Test that an invalid alphabet can be caught as a ValueError"""
        with pytest.raises(ValueError):
            Alphabet("AA")

    def test_container_protocol(self):
        """Test membership, iteration and equality"""
        alphabet = Alphabet("ABC")
        assert "B" in alphabet
        assert "Z" not in alphabet
        assert list(alphabet) == ["A", "B", "C"]
        assert alphabet == Alphabet("ABC")
        assert alphabet != Alphabet("CBA")
        assert hash(alphabet) == hash(Alphabet("ABC"))
