# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import logging
import random
from typing import Any, Iterable

from androidpublisher.client.errors import AuthenticationError, TransportError
from androidpublisher.client.types import (
    ContentRange,
    HttpResponse,
    JsonServerError,
    MethodInfo,
    Retry,
    ServerError,
)

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 1 << 23


class Delegate:
    """
    Observer consulted at fixed points while a call executes.

    Every hook has a no-op default, subclasses override what they need.
    ``http_error`` and ``http_failure`` decide whether the attempt is
    repeated, ``token`` may supply a fallback token when the authenticator
    fails.

    The upload hooks only take part in resumable uploads: ``upload_url``
    hands back a session to resume, ``store_upload_url`` is told about a new
    session (and ``None`` once it completed), ``chunk_size`` sizes every
    chunk and ``cancel_chunk_upload`` may stop before a chunk is sent.
    """

    def begin(self, info: MethodInfo) -> None:
        pass

    def pre_request(self) -> None:
        pass

    def token(self, error: AuthenticationError) -> str | None:
        return None

    def http_error(self, error: TransportError) -> Retry:
        return Retry.abort()

    def http_failure(
        self,
        response: HttpResponse,
        json_server_error: JsonServerError | None,
        server_error: ServerError | None,
    ) -> Retry:
        return Retry.abort()

    def response_json_decode_error(self, body: str, error: Any) -> None:
        pass

    def upload_url(self) -> str | None:
        return None

    def store_upload_url(self, url: str | None) -> None:
        pass

    def chunk_size(self) -> int:
        return DEFAULT_CHUNK_SIZE

    def cancel_chunk_upload(self, chunk: ContentRange) -> bool:
        return False

    def finished(self, is_success: bool) -> None:
        pass


class DefaultDelegate(Delegate):
    pass


class LoggingDelegate(Delegate):
    """Logs every step of a call, useful while debugging integrations."""

    def __init__(self, log: logging.Logger | None = None, level: int = logging.INFO):
        self.log = log or logger
        self.level = level
        self._info: MethodInfo | None = None

    @property
    def _method_id(self) -> str:
        return self._info.id if self._info else "<unknown>"

    def begin(self, info: MethodInfo) -> None:
        self._info = info
        self.log.log(self.level, "Calling %s (%s)", info.id, info.http_method)

    def pre_request(self) -> None:
        self.log.debug("Sending request for %s", self._method_id)

    def token(self, error: AuthenticationError) -> str | None:
        self.log.error("Token retrieval for %s failed: %s", self._method_id, error)
        return None

    def http_error(self, error: TransportError) -> Retry:
        self.log.error("Transport error on %s: %s", self._method_id, error)
        return Retry.abort()

    def http_failure(
        self,
        response: HttpResponse,
        json_server_error: JsonServerError | None,
        server_error: ServerError | None,
    ) -> Retry:
        self.log.warning(
            "%s answered with status %s: %s",
            self._method_id,
            response.status_code,
            server_error.message if server_error else response.text,
        )
        return Retry.abort()

    def response_json_decode_error(self, body: str, error: Any) -> None:
        self.log.error("Could not decode response of %s: %s", self._method_id, error)

    def store_upload_url(self, url: str | None) -> None:
        if url is None:
            self.log.debug("Upload session of %s completed", self._method_id)
        else:
            self.log.log(self.level, "Upload session of %s at %s", self._method_id, url)

    def cancel_chunk_upload(self, chunk: ContentRange) -> bool:
        self.log.debug("Uploading %s for %s", chunk.header_value(), self._method_id)
        return False

    def finished(self, is_success: bool) -> None:
        self.log.log(
            self.level,
            "%s finished %s",
            self._method_id,
            "successfully" if is_success else "with failure",
        )


class BackoffDelegate(Delegate):
    """
    Retries transport errors and retryable statuses with exponential backoff.

    The delay doubles (``backoff_factor``) after each retry up to
    ``max_delay``, with ±25% jitter when enabled.
    """

    def __init__(
        self,
        max_retries: int = 3,
        initial_delay: float = 1.0,
        max_delay: float = 60.0,
        backoff_factor: float = 2.0,
        jitter: bool = True,
        retry_on_status_codes: Iterable[int] = (429, 500, 502, 503, 504),
    ):
        self.max_retries = max_retries
        self.initial_delay = initial_delay
        self.max_delay = max_delay
        self.backoff_factor = backoff_factor
        self.jitter = jitter
        self.retry_on_status_codes = frozenset(retry_on_status_codes)
        self.retries = 0

    def begin(self, info: MethodInfo) -> None:
        self.retries = 0

    def next_delay(self) -> float:
        delay = min(
            self.initial_delay * (self.backoff_factor**self.retries), self.max_delay
        )
        if self.jitter:
            jitter_amount = delay * 0.25
            delay = max(delay + random.uniform(-jitter_amount, jitter_amount), 0.0)
        return delay

    def _retry(self) -> Retry:
        if self.retries >= self.max_retries:
            return Retry.abort()
        delay = self.next_delay()
        self.retries += 1
        logger.warning(
            "Retry %s/%s in %.2fs", self.retries, self.max_retries, delay
        )
        return Retry.after(delay)

    def http_error(self, error: TransportError) -> Retry:
        return self._retry()

    def http_failure(
        self,
        response: HttpResponse,
        json_server_error: JsonServerError | None,
        server_error: ServerError | None,
    ) -> Retry:
        if response.status_code not in self.retry_on_status_codes:
            return Retry.abort()
        return self._retry()


__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "BackoffDelegate",
    "DefaultDelegate",
    "Delegate",
    "LoggingDelegate",
]
