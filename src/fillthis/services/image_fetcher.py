"""Download placeholder images to local storage.

This module coordinates directory checks, transport selection, filename
generation and cleanup so that a failed download never leaves a partial
file behind.
"""

import hashlib
import os
import tempfile
import uuid
from typing import Any

from aws_lambda_powertools import Logger

from fillthis.infrastructure.adapters.http_adapter import create_transport
from fillthis.models.errors import (
    DirectoryUnavailableError,
    DownloadFailedError,
    TransportUnavailableError,
)
from fillthis.models.image import DownloadResult, ImageRequest
from fillthis.services.url_builder import ImageUrlBuilder
from fillthis.utils.constants import ENV_SERVER_ADDR, STANDARD_IMAGE_EXTENSION
from fillthis.utils.validators import validate_request

logger = Logger(UTC=True)


class ImageFetcher:
    """Application service responsible for image downloads.

    The fetch flow is:
    1. Resolve and check the target directory
    2. Resolve a transport (streaming or copy backend)
    3. Generate a unique filename and the image URL
    4. Fetch into the file, removing it again on failure
    """

    def __init__(
        self,
        transport: Any | None = None,
        url_builder: ImageUrlBuilder | None = None,
    ) -> None:
        self._transport = transport
        self.url_builder = url_builder or ImageUrlBuilder()

    @staticmethod
    def resolve_directory(directory: str | None) -> str:
        """Return the target directory, defaulting to the system temp dir.

        Raises:
            DirectoryUnavailableError: If the directory is missing or not writable
        """
        resolved = directory if directory is not None else tempfile.gettempdir()
        if not os.path.isdir(resolved) or not os.access(resolved, os.W_OK):
            raise DirectoryUnavailableError(
                message=f'Cannot write to directory "{resolved}"',
                details={"directory": resolved},
            )
        return resolved

    @staticmethod
    def generate_filename() -> str:
        """Generate a unique ``<md5 hex>.png`` filename."""
        seed = os.getenv(ENV_SERVER_ADDR) or ""
        name = hashlib.md5(f"{seed}{uuid.uuid4().hex}".encode()).hexdigest()
        return f"{name}.{STANDARD_IMAGE_EXTENSION}"

    def resolve_transport(self) -> Any:
        """Return the configured transport, checking it has a usable backend.

        Raises:
            TransportUnavailableError: If neither backend is available
        """
        transport = self._transport if self._transport is not None else create_transport()

        if not (hasattr(transport, "stream_to_file") or hasattr(transport, "copy_to_path")):
            raise TransportUnavailableError(
                message="A streaming or copy transport is required to download images",
                details={"transport": type(transport).__name__},
            )
        return transport

    def fetch(
        self,
        request: ImageRequest,
        *,
        directory: str | None = None,
        return_full_path: bool = True,
    ) -> DownloadResult:
        """Download the image described by ``request``.

        Args:
            request: Validated image request
            directory: Target directory (default: system temporary directory)
            return_full_path: Return the full path instead of the bare filename

        Returns:
            DownloadResult; falsy when the download failed

        Raises:
            DirectoryUnavailableError: If the directory cannot be written
            TransportUnavailableError: If no download backend is available
        """
        target_dir = self.resolve_directory(directory)
        transport = self.resolve_transport()

        filename = self.generate_filename()
        filepath = os.path.join(target_dir, filename)
        url = self.url_builder.build_image_url(request)

        logger.debug("Starting image download", extra={"url": url, "path": filepath})

        try:
            self._download(transport, url=url, filepath=filepath)
        except DownloadFailedError as exc:
            self._remove_partial_file(filepath)
            logger.warning(
                "Image download failed",
                extra={"url": url, "error_code": exc.error_code, **exc.details},
            )
            return DownloadResult(
                success=False,
                url=url,
                full_path=return_full_path,
                error_code=exc.error_code,
                error=exc.message,
            )
        except BaseException:
            self._remove_partial_file(filepath)
            raise

        logger.info("Image downloaded successfully", extra={"url": url, "path": filepath})
        return DownloadResult(
            success=True,
            url=url,
            path=filepath if return_full_path else filename,
            full_path=return_full_path,
        )

    @staticmethod
    def _download(transport: Any, *, url: str, filepath: str) -> None:
        try:
            if hasattr(transport, "stream_to_file"):
                with open(filepath, "wb") as f:
                    success = transport.stream_to_file(url=url, file=f)
            else:
                success = transport.copy_to_path(url=url, path=filepath)
        except OSError as exc:
            logger.exception("Unexpected error writing downloaded image")
            raise DownloadFailedError(
                message="Unable to save downloaded image",
                details={"path": filepath},
            ) from exc

        if not success:
            raise DownloadFailedError(
                message="Unable to download image",
                details={"path": filepath},
            )

    @staticmethod
    def _remove_partial_file(filepath: str) -> None:
        try:
            os.remove(filepath)
        except FileNotFoundError:
            pass


def fetch_image(
    directory: str | None = None,
    request: ImageRequest | None = None,
    return_full_path: bool = True,
    *,
    transport: Any | None = None,
    url_builder: ImageUrlBuilder | None = None,
    **request_fields: Any,
) -> DownloadResult:
    """Download a placeholder image into ``directory``.

    Either pass a prepared ``request`` or the request fields as keywords:

        fetch_image("/tmp", width=800, height=600, word="TestImage")

    Raises:
        ValidationError: If a request field has an invalid value
        InvalidFormatError: If the format is not supported
        DirectoryUnavailableError: If the directory cannot be written
        TransportUnavailableError: If no download backend is available
    """
    if request is None:
        request = validate_request(ImageRequest, request_fields)
    elif request_fields:
        raise TypeError("Pass either `request` or request fields, not both")

    fetcher = ImageFetcher(transport=transport, url_builder=url_builder)
    return fetcher.fetch(request, directory=directory, return_full_path=return_full_path)
