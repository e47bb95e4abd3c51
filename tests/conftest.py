"""
Pytest configuration and fixtures for fillthis tests.
Provides deterministic randomness sources and sample image payloads.
"""

import base64
from collections.abc import Callable

import pytest

from fillthis.services.url_builder import ImageUrlBuilder

FIXED_SEED = "3f2b8c1e-9d4a-4e6b-a1f0-7c5d2e8b9a34"
FIXED_WORD = "lorem"


@pytest.fixture
def fixed_seed() -> str:
    return FIXED_SEED


@pytest.fixture
def fixed_word() -> str:
    return FIXED_WORD


@pytest.fixture
def seed_source() -> Callable[[], str]:
    return lambda: FIXED_SEED


@pytest.fixture
def word_source() -> Callable[[], str]:
    return lambda: FIXED_WORD


@pytest.fixture
def url_builder(seed_source, word_source) -> ImageUrlBuilder:
    """URL builder with deterministic seed and word sources."""
    return ImageUrlBuilder(seed_source=seed_source, word_source=word_source)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove fillthis configuration variables inherited from the shell."""
    for name in (
        "FILLTHIS_TRANSPORT",
        "FILLTHIS_HTTP_TIMEOUT",
        "FILLTHIS_USER_AGENT",
        "SERVER_ADDR",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_png_binary() -> bytes:
    """Sample binary image data (1x1 PNG)."""
    png_base64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
    return base64.b64decode(png_base64)


@pytest.fixture
def sample_jpeg_binary() -> bytes:
    """Sample JPEG header bytes."""
    return b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00"


@pytest.fixture
def sample_webp_binary() -> bytes:
    """Sample WEBP header bytes."""
    return b"RIFF\x24\x00\x00\x00WEBPVP8 \x18\x00\x00\x00"
