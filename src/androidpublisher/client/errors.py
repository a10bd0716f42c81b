# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Any

from androidpublisher.client.types import ErrorResponse, HttpRequest, HttpResponse


class AndroidPublisherError(Exception):
    """Base class of every error raised while executing a call."""


class FieldClash(AndroidPublisherError):

    def __init__(self, field: str):
        self.field = field
        super().__init__(
            f"Additional parameter '{field}' clashes with a parameter of the call"
        )


class AuthenticationError(Exception):
    """Raised by authenticators which could not produce a token."""


class MissingToken(AndroidPublisherError):

    def __init__(self, error: AuthenticationError):
        self.error = error
        super().__init__(f"Token retrieval failed: {error}")


class TransportError(Exception):
    """Raised by transports when no response could be obtained."""

    def __init__(self, request: HttpRequest, message: str = "Network error"):
        self.request = request
        super().__init__(message)


class TransportTimeout(TransportError):
    pass


class HttpError(AndroidPublisherError):

    def __init__(self, error: TransportError):
        self.error = error
        super().__init__(f"HTTP error: {error}")


class UploadSizeLimitExceeded(AndroidPublisherError):

    def __init__(self, size: int, max_size: int):
        self.size = size
        self.max_size = max_size
        super().__init__(
            f"The media size {size} exceeds the maximum allowed upload size of {max_size}"
        )


class BadRequest(AndroidPublisherError):

    def __init__(self, error: ErrorResponse, response: HttpResponse):
        self.error = error
        self.response = response
        super().__init__(
            f"Bad request ({error.error.code}): {error.error.message}"
        )


class Failure(AndroidPublisherError):

    def __init__(self, response: HttpResponse):
        self.response = response
        super().__init__(f"Http status indicates failure: {response.status_code}")


class JsonDecodeError(AndroidPublisherError):

    def __init__(self, body: str, error: Any):
        self.body = body
        self.error = error
        super().__init__(f"JSON decoding failed: {error}")


class Cancelled(AndroidPublisherError):

    def __init__(self) -> None:
        super().__init__("Operation cancelled by delegate")


__all__ = [
    "AndroidPublisherError",
    "AuthenticationError",
    "BadRequest",
    "Cancelled",
    "Failure",
    "FieldClash",
    "HttpError",
    "JsonDecodeError",
    "MissingToken",
    "TransportError",
    "TransportTimeout",
    "UploadSizeLimitExceeded",
]
