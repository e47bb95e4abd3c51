"""Custom exception classes for the placeholder image client."""

from typing import Any

from fillthis.utils.constants import (
    ERROR_CODE_DIRECTORY_UNAVAILABLE,
    ERROR_CODE_DOWNLOAD_FAILED,
    ERROR_CODE_INVALID_FORMAT,
    ERROR_CODE_TRANSPORT_UNAVAILABLE,
    ERROR_CODE_VALIDATION_FAILED,
)


class FillThisError(Exception):
    """
    Base exception for all placeholder image client errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class ValidationError(FillThisError):
    """Raised when image request fields fail validation."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_VALIDATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class InvalidFormatError(FillThisError):
    """Raised when the requested image format is not supported."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_FORMAT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class DirectoryUnavailableError(FillThisError):
    """Raised when the target directory is missing or not writable."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_DIRECTORY_UNAVAILABLE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class TransportUnavailableError(FillThisError):
    """Raised when no usable download backend is configured."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_TRANSPORT_UNAVAILABLE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class DownloadFailedError(FillThisError):
    """Raised when a remote fetch does not complete successfully.

    Never escapes ``ImageFetcher.fetch``; it is reported to callers
    as a failed ``DownloadResult`` instead.
    """

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_DOWNLOAD_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
