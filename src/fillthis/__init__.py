"""Placeholder image URL generator and downloader for fillthis.io."""

from fillthis.models.errors import (
    DirectoryUnavailableError,
    DownloadFailedError,
    FillThisError,
    InvalidFormatError,
    TransportUnavailableError,
    ValidationError,
)
from fillthis.models.image import DownloadResult, ImageRequest
from fillthis.services.image_fetcher import ImageFetcher, fetch_image
from fillthis.services.url_builder import (
    ImageUrlBuilder,
    build_image_url,
    build_video_url,
    image_url,
)
from fillthis.utils.constants import BASE_URL
from fillthis.utils.formats import get_format_type_codes, list_supported_formats

__version__ = "1.0.0"
__description__ = "Placeholder image URL generator and downloader for fillthis.io"

__all__ = [
    "BASE_URL",
    "DirectoryUnavailableError",
    "DownloadFailedError",
    "DownloadResult",
    "FillThisError",
    "ImageFetcher",
    "ImageRequest",
    "ImageUrlBuilder",
    "InvalidFormatError",
    "TransportUnavailableError",
    "ValidationError",
    "build_image_url",
    "build_video_url",
    "fetch_image",
    "get_format_type_codes",
    "image_url",
    "list_supported_formats",
]
