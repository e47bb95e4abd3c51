"""Unit tests for the format table."""

import pytest

from fillthis.models.errors import InvalidFormatError
from fillthis.utils.formats import (
    detect_image_format,
    get_format_type_codes,
    get_image_type_code,
    list_supported_formats,
    normalize_format,
)


class TestFormatTable:
    def test_supported_formats(self) -> None:
        assert list_supported_formats() == frozenset({"jpg", "jpeg", "png", "webp"})

    def test_type_codes(self) -> None:
        assert dict(get_format_type_codes()) == {
            "jpg": 2,
            "jpeg": 2,
            "png": 3,
            "webp": 18,
        }

    def test_type_codes_are_read_only(self) -> None:
        codes = get_format_type_codes()

        with pytest.raises(TypeError):
            codes["gif"] = 1  # type: ignore[index]

    def test_every_supported_format_has_a_code(self) -> None:
        assert set(get_format_type_codes()) == set(list_supported_formats())


class TestNormalizeFormat:
    def test_lowercases(self) -> None:
        assert normalize_format("WebP") == "webp"

    def test_rejects_unknown_format(self) -> None:
        with pytest.raises(InvalidFormatError) as exc_info:
            normalize_format("tiff")

        assert "jpeg, jpg, png, webp" in exc_info.value.message


def test_detect_jpeg(sample_jpeg_binary) -> None:
    assert detect_image_format(sample_jpeg_binary) == "jpeg"


def test_detect_png(sample_png_binary) -> None:
    assert detect_image_format(sample_png_binary) == "png"


def test_detect_webp(sample_webp_binary) -> None:
    assert detect_image_format(sample_webp_binary) == "webp"


def test_riff_without_webp_payload_is_unsupported() -> None:
    with pytest.raises(ValueError):
        detect_image_format(b"RIFF\x24\x00\x00\x00WAVEfmt ")


def test_unsupported_type() -> None:
    with pytest.raises(ValueError):
        detect_image_format(b"GIF89a-not-supported")


def test_get_image_type_code(tmp_path, sample_png_binary, sample_jpeg_binary) -> None:
    png_file = tmp_path / "a.png"
    png_file.write_bytes(sample_png_binary)
    jpeg_file = tmp_path / "b.jpg"
    jpeg_file.write_bytes(sample_jpeg_binary)

    assert get_image_type_code(png_file) == 3
    assert get_image_type_code(str(jpeg_file)) == 2


def test_get_image_type_code_unknown_file(tmp_path) -> None:
    text_file = tmp_path / "notes.txt"
    text_file.write_text("hello")

    with pytest.raises(ValueError):
        get_image_type_code(text_file)
