"""Global constants used throughout the package.

The placeholder service origin, URL path fragments, supported formats,
error codes and environment variable names all live here so the URL
rules and the download routine share one definition of each.
"""

from typing import Final

# ============================================================================
# Service Endpoints
# ============================================================================

BASE_URL: Final[str] = "https://fillthis.io"

IMAGE_PATH = "/i"
CATEGORY_PATH = "/i/category/"
VIDEO_PATH = "/video.mp4"

# Standard images are always requested and stored as PNG.
STANDARD_IMAGE_EXTENSION = "png"

# ============================================================================
# Image Formats
# ============================================================================

FORMAT_JPG = "jpg"
FORMAT_JPEG = "jpeg"
FORMAT_PNG = "png"
FORMAT_WEBP = "webp"

# External image-type codes (IMAGETYPE_* numbering).
IMAGE_TYPE_JPEG = 2
IMAGE_TYPE_PNG = 3
IMAGE_TYPE_WEBP = 18

FORMAT_TYPE_CODE_MAP: Final[dict[str, int]] = {
    FORMAT_JPG: IMAGE_TYPE_JPEG,
    FORMAT_JPEG: IMAGE_TYPE_JPEG,
    FORMAT_PNG: IMAGE_TYPE_PNG,
    FORMAT_WEBP: IMAGE_TYPE_WEBP,
}

ALLOWED_FORMATS: Final[frozenset[str]] = frozenset(FORMAT_TYPE_CODE_MAP.keys())

# ============================================================================
# Categories
# ============================================================================

# Deprecated: the service accepts any category string, unknown names included.
CATEGORIES: Final[tuple[str, ...]] = (
    "abstract",
    "animals",
    "business",
    "cats",
    "city",
    "food",
    "nightlife",
    "fashion",
    "people",
    "nature",
    "sports",
    "technics",
    "transport",
    "anime",
)

CATEGORY_ALL = "all"

# ============================================================================
# Request Defaults
# ============================================================================

DEFAULT_WIDTH = 640
DEFAULT_HEIGHT = 480
DEFAULT_FORMAT = FORMAT_PNG

# ============================================================================
# Error Codes
# ============================================================================

ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_INVALID_FORMAT = "INVALID_FORMAT"
ERROR_CODE_DIRECTORY_UNAVAILABLE = "DIRECTORY_UNAVAILABLE"
ERROR_CODE_TRANSPORT_UNAVAILABLE = "TRANSPORT_UNAVAILABLE"
ERROR_CODE_DOWNLOAD_FAILED = "DOWNLOAD_FAILED"

# ============================================================================
# Transport Configuration
# ============================================================================

TRANSPORT_MODE_STREAM = "stream"
TRANSPORT_MODE_COPY = "copy"
TRANSPORT_MODE_NONE = "none"

DEFAULT_TRANSPORT_MODE = TRANSPORT_MODE_STREAM
DEFAULT_HTTP_TIMEOUT = 30  # seconds
DEFAULT_USER_AGENT = "fillthis-python/1.0"
DOWNLOAD_CHUNK_SIZE = 8192

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_TRANSPORT_MODE = "FILLTHIS_TRANSPORT"
ENV_HTTP_TIMEOUT = "FILLTHIS_HTTP_TIMEOUT"
ENV_USER_AGENT = "FILLTHIS_USER_AGENT"
ENV_SERVER_ADDR = "SERVER_ADDR"
