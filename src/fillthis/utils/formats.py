"""Supported image formats and their external type codes."""

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from fillthis.models.errors import InvalidFormatError
from fillthis.utils.constants import (
    ALLOWED_FORMATS,
    FORMAT_JPEG,
    FORMAT_PNG,
    FORMAT_TYPE_CODE_MAP,
    FORMAT_WEBP,
)

MAGIC_BYTES: Mapping[bytes, str] = {
    b"\xff\xd8\xff": FORMAT_JPEG,
    b"\x89PNG\r\n\x1a\n": FORMAT_PNG,
    b"RIFF": FORMAT_WEBP,
}

_HEADER_SIZE = 12

_FORMAT_TYPE_CODES: Mapping[str, int] = MappingProxyType(dict(FORMAT_TYPE_CODE_MAP))


def list_supported_formats() -> frozenset[str]:
    """Return the format identifiers accepted by the URL builder."""
    return ALLOWED_FORMATS


def get_format_type_codes() -> Mapping[str, int]:
    """Return the read-only mapping of format name to image type code."""
    return _FORMAT_TYPE_CODES


def normalize_format(value: str) -> str:
    """Lower-case ``value`` and check it against the supported formats.

    Raises:
        InvalidFormatError: If the format is not one of jpg, jpeg, png, webp
    """
    normalized = value.lower()
    if normalized not in ALLOWED_FORMATS:
        raise InvalidFormatError(
            message=(
                f'Invalid image format "{value}". '
                f"Allowed formats are: {', '.join(sorted(ALLOWED_FORMATS))}"
            ),
            details={"format": value},
        )
    return normalized


def detect_image_format(file_data: bytes) -> str:
    for signature, image_format in MAGIC_BYTES.items():
        if not file_data.startswith(signature):
            continue
        # RIFF is a container; only WEBP payloads count.
        if image_format == FORMAT_WEBP and file_data[8:12] != b"WEBP":
            continue
        return image_format

    raise ValueError("Unsupported or unknown file type")


def get_image_type_code(path: str | Path) -> int:
    """Classify an existing file by its header and return its type code.

    Args:
        path: Location of an image file on disk

    Returns:
        External image type code for the detected format

    Raises:
        ValueError: If the file is not a supported image
    """
    with open(path, "rb") as f:
        header = f.read(_HEADER_SIZE)

    return _FORMAT_TYPE_CODES[detect_image_format(header)]
