# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from .client import (
    AndroidPublisherError,
    AuthenticationError,
    Authenticator,
    BackoffDelegate,
    BadRequest,
    CallableAuthenticator,
    Cancelled,
    ContentRange,
    DefaultDelegate,
    Delegate,
    ErrorResponse,
    Failure,
    FieldClash,
    HttpError,
    HttpRequest,
    HttpResponse,
    HTTPXTransport,
    JsonDecodeError,
    JsonServerError,
    LoggingDelegate,
    MethodInfo,
    MissingToken,
    Retry,
    Scope,
    ServerError,
    StaticTokenAuthenticator,
    Transport,
    TransportError,
    UploadSizeLimitExceeded,
)
from .config import VERSION, HubConfig, RetryPolicy
from .hub import AndroidPublisher

__version__ = VERSION

__all__ = [
    "AndroidPublisher",
    "HubConfig",
    "RetryPolicy",
    # Authentication
    "Authenticator",
    "StaticTokenAuthenticator",
    "CallableAuthenticator",
    "Scope",
    # Transport
    "Transport",
    "HTTPXTransport",
    "HttpRequest",
    "HttpResponse",
    # Delegates
    "Delegate",
    "DefaultDelegate",
    "LoggingDelegate",
    "BackoffDelegate",
    "MethodInfo",
    "Retry",
    "ContentRange",
    # Server errors
    "ErrorResponse",
    "JsonServerError",
    "ServerError",
    # Exceptions
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
    "UploadSizeLimitExceeded",
]
