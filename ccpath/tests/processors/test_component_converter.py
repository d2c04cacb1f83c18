"""Unit tests for component conversion."""

import pytest

from ccpath.errors import InvalidPathError, InvalidUtf8PathError
from ccpath.models.convention import Convention
from ccpath.models.rename import ConversionRequest
from ccpath.processors.component_converter import convert_component


def request(to_convention: Convention, from_convention: Convention | None = None) -> ConversionRequest:
    return ConversionRequest(from_convention=from_convention, to_convention=to_convention)


class TestConvertComponent:
    """Tests for convert_component."""

    def test_title_to_snake_without_source(self):
        """Test guessing word boundaries from spaces."""
        assert convert_component("Some File.jpg", request(Convention.SNAKE_CASE)) == "some_file.jpg"

    def test_kebab_to_snake_without_source(self):
        """Test guessing word boundaries from hyphens."""
        assert convert_component("some-file.jpg", request(Convention.SNAKE_CASE)) == "some_file.jpg"

    def test_upper_camel_to_flat_with_source(self):
        """Test conversion with a known source convention."""
        result = convert_component("SomeFile.jpg", request(Convention.FLAT_CASE, Convention.UPPER_CAMEL_CASE))

        assert result == "somefile.jpg"

    def test_extension_is_not_converted(self):
        """Test that the extension keeps its case."""
        assert convert_component("Some File.JPG", request(Convention.KEBAB_CASE)) == "some-file.JPG"

    def test_only_last_extension_is_kept(self):
        """Test that earlier dots belong to the stem."""
        assert convert_component("My Archive.tar.gz", request(Convention.SNAKE_CASE)) == "my_archive.tar.gz"

    def test_without_extension(self):
        """Test conversion of a directory-like name."""
        assert convert_component("Parent Dir", request(Convention.UPPER_CAMEL_CASE)) == "ParentDir"

    def test_single_word_only_changes_case(self):
        """Test that single words get no separators."""
        assert convert_component("README.md", request(Convention.SNAKE_CASE)) == "readme.md"

    def test_extension_only_is_unchanged(self):
        """Test that dotfiles are kept verbatim."""
        assert convert_component(".gitignore", request(Convention.UPPER_SNAKE_CASE)) == ".gitignore"

    def test_separators_only_stem_is_kept(self):
        """Test that a stem without words is not emptied."""
        assert convert_component("___.txt", request(Convention.CAMEL_CASE)) == "___.txt"

    def test_accepts_bytes(self):
        """Test that valid UTF-8 bytes are decoded."""
        assert convert_component("Café Menu".encode(), request(Convention.SNAKE_CASE)) == "café_menu"

    @pytest.mark.parametrize("name", ["", ".", ".."])
    def test_invalid_component(self, name):
        """Test that components without stem and extension are rejected."""
        with pytest.raises(InvalidPathError):
            convert_component(name, request(Convention.SNAKE_CASE))

    def test_invalid_utf8_bytes(self):
        """Test that undecodable bytes are rejected."""
        with pytest.raises(InvalidUtf8PathError) as exc_info:
            convert_component(b"bad\xffname.txt", request(Convention.SNAKE_CASE))

        assert "invalid utf-8" in str(exc_info.value)

    def test_invalid_utf8_surrogate_escaped(self):
        """Test that names decoded with surrogateescape are rejected."""
        name = b"bad\xffname.txt".decode("utf-8", errors="surrogateescape")

        with pytest.raises(InvalidUtf8PathError):
            convert_component(name, request(Convention.SNAKE_CASE))
