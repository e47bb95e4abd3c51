"""Thin adapters for fetching remote URLs with requests."""

import os
from http import HTTPStatus
from pathlib import Path
from typing import BinaryIO, Protocol

from aws_lambda_powertools import Logger
import requests

from fillthis.models.errors import TransportUnavailableError
from fillthis.utils.constants import (
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_TRANSPORT_MODE,
    DEFAULT_USER_AGENT,
    DOWNLOAD_CHUNK_SIZE,
    ENV_HTTP_TIMEOUT,
    ENV_TRANSPORT_MODE,
    ENV_USER_AGENT,
    TRANSPORT_MODE_COPY,
    TRANSPORT_MODE_NONE,
    TRANSPORT_MODE_STREAM,
)

logger = Logger(UTC=True)


class StreamingTransportProtocol(Protocol):
    """Writes a remote resource into an already open file handle."""

    def stream_to_file(self, *, url: str, file: BinaryIO) -> bool: ...


class CopyTransportProtocol(Protocol):
    """Copies a remote resource to a filesystem path."""

    def copy_to_path(self, *, url: str, path: str | Path) -> bool: ...


class _HttpAdapterBase:
    """Shared requests session setup.

    Adapters never raise for transfer problems; they log and return False
    so the fetcher can decide how to report the failure.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        timeout: float | None = None,
    ) -> None:
        self._timeout = timeout if timeout is not None else self._timeout_from_env()

        # Caller-supplied sessions keep their own headers.
        if session is None:
            session = requests.Session()
            session.headers.update(
                {"User-Agent": os.getenv(ENV_USER_AGENT, DEFAULT_USER_AGENT)}
            )
        self._session = session

    @staticmethod
    def _timeout_from_env() -> float:
        """Read the request timeout from the environment.

        Raises:
            TransportUnavailableError: If the configured value is not a number
        """
        raw = os.getenv(ENV_HTTP_TIMEOUT)
        if raw is None:
            return float(DEFAULT_HTTP_TIMEOUT)

        try:
            return float(raw)
        except ValueError as exc:
            raise TransportUnavailableError(
                message=f'Invalid HTTP timeout "{raw}"',
                details={"variable": ENV_HTTP_TIMEOUT, "value": raw},
            ) from exc

    def _get(self, url: str, *, stream: bool) -> requests.Response:
        return self._session.get(
            url,
            stream=stream,
            allow_redirects=True,
            timeout=self._timeout,
        )


class StreamingHttpAdapter(_HttpAdapterBase):
    """Streams the response body into a caller-owned file handle."""

    def stream_to_file(self, *, url: str, file: BinaryIO) -> bool:
        try:
            with self._get(url, stream=True) as response:
                if response.status_code != HTTPStatus.OK:
                    logger.warning(
                        "Unexpected HTTP status",
                        extra={"url": url, "status": response.status_code},
                    )
                    return False

                for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                    if chunk:
                        file.write(chunk)

            return True

        except requests.RequestException as exc:
            logger.warning("HTTP transfer failed", extra={"url": url, "error": str(exc)})
            return False


class CopyHttpAdapter(_HttpAdapterBase):
    """Downloads the whole response body and writes it to a path."""

    def copy_to_path(self, *, url: str, path: str | Path) -> bool:
        try:
            response = self._get(url, stream=False)
        except requests.RequestException as exc:
            logger.warning("HTTP transfer failed", extra={"url": url, "error": str(exc)})
            return False

        if response.status_code != HTTPStatus.OK:
            logger.warning(
                "Unexpected HTTP status",
                extra={"url": url, "status": response.status_code},
            )
            return False

        with open(path, "wb") as f:
            f.write(response.content)

        return True


def create_transport(
    mode: str | None = None,
) -> StreamingHttpAdapter | CopyHttpAdapter:
    """Create the transport named by ``mode`` or the environment.

    Raises:
        TransportUnavailableError: If the mode is ``none`` or unknown
    """
    resolved = (mode or os.getenv(ENV_TRANSPORT_MODE) or DEFAULT_TRANSPORT_MODE).lower()

    if resolved == TRANSPORT_MODE_STREAM:
        return StreamingHttpAdapter()
    if resolved == TRANSPORT_MODE_COPY:
        return CopyHttpAdapter()

    message = (
        "Downloads are disabled"
        if resolved == TRANSPORT_MODE_NONE
        else f'Unknown transport mode "{resolved}"'
    )
    raise TransportUnavailableError(
        message=message,
        details={
            "mode": resolved,
            "supported": [TRANSPORT_MODE_STREAM, TRANSPORT_MODE_COPY],
        },
    )
