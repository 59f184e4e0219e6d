import pytest

from onetimepad.utils import (
    PadSourceLoadError,
    PadSourceSignatureError,
    load_pad_source,
    load_text,
)


def write_plugin(tmp_path, source: str) -> str:
    path = tmp_path / "source.py"
    path.write_text(source)
    return str(path)


class TestLoadPadSource:
    """Test suite for load_pad_source"""

    def test_load(self, tmp_path):
        """Test loading a well formed random index source"""
        path = write_plugin(tmp_path, "def random_index(size):\n    return size - 1\n")
        fn = load_pad_source(path)
        assert fn(95) == 94

    def test_missing_function(self, tmp_path):
        """Test that a plugin without random_index is rejected"""
        path = write_plugin(tmp_path, "def other(size):\n    return 0\n")
        with pytest.raises(PadSourceLoadError, match="random_index"):
            load_pad_source(path)

    def test_wrong_signature(self, tmp_path):
        """Test that random_index must take exactly one positional argument"""
        path = write_plugin(tmp_path, "def random_index(size, extra):\n    return 0\n")
        with pytest.raises(PadSourceSignatureError):
            load_pad_source(path)

    def test_not_a_python_file(self, tmp_path):
        """Test that a file without a Python loader is rejected"""
        path = tmp_path / "source.txt"
        path.write_text("random_index = 1")
        with pytest.raises(PadSourceLoadError, match="Could not load spec"):
            load_pad_source(str(path))

    def test_import_error_wrapped(self, tmp_path):
        """Test that errors raised while importing the plugin are wrapped"""
        path = write_plugin(tmp_path, "raise ValueError('bad plugin')\n")
        with pytest.raises(PadSourceLoadError, match="bad plugin") as exc_info:
            load_pad_source(path)
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestLoadText:
    """Test suite for load_text"""

    def test_strips_one_line_break(self, tmp_path):
        """Test that a single trailing newline is dropped"""
        path = tmp_path / "pad.txt"
        path.write_bytes(b"kgx:?exP2B8\n\n")
        assert load_text(str(path)) == "kgx:?exP2B8\n"

    def test_strips_windows_line_break(self, tmp_path):
        """Test that a trailing CRLF is dropped"""
        path = tmp_path / "pad.txt"
        path.write_bytes(b"abc\r\n")
        assert load_text(str(path)) == "abc"

    def test_keeps_spaces(self, tmp_path):
        """Test that spaces, which are alphabet symbols, are kept"""
        path = tmp_path / "pad.txt"
        path.write_text(" a b ", encoding="utf-8")
        assert load_text(str(path)) == " a b "
