# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Generic machinery shared by every operation of the API:

- operation decorators (@Get, @Post, @Put, @Patch, @Delete, @MediaUpload)
- parameter descriptors (PathParam, Query, RequestBody)
- call builders running the request protocol
- delegates, authenticators and the httpx transport
"""

from .auth import Authenticator, CallableAuthenticator, StaticTokenAuthenticator
from .backends.httpx import HTTPXTransport, Transport
from .call import BaseCall, CallBuilder, MediaSource, UploadCallBuilder
from .decorators import (
    Delete,
    Get,
    HttpMapping,
    MediaUpload,
    Patch,
    PathParam,
    Post,
    Put,
    Query,
    RequestBody,
)
from .delegate import BackoffDelegate, DefaultDelegate, Delegate, LoggingDelegate
from .errors import (
    AndroidPublisherError,
    AuthenticationError,
    BadRequest,
    Cancelled,
    Failure,
    FieldClash,
    HttpError,
    JsonDecodeError,
    MissingToken,
    TransportError,
    TransportTimeout,
    UploadSizeLimitExceeded,
)
from .types import (
    ContentRange,
    ErrorResponse,
    HttpRequest,
    HttpResponse,
    JsonServerError,
    MethodInfo,
    Retry,
    Scope,
    ServerError,
    ServerMessage,
)

__all__ = [
    # Operation decorators
    "Get",
    "Post",
    "Put",
    "Patch",
    "Delete",
    "HttpMapping",
    "MediaUpload",
    # Parameter descriptors
    "PathParam",
    "Query",
    "RequestBody",
    # Call builders
    "BaseCall",
    "CallBuilder",
    "UploadCallBuilder",
    "MediaSource",
    # Delegates
    "Delegate",
    "DefaultDelegate",
    "LoggingDelegate",
    "BackoffDelegate",
    "Retry",
    "MethodInfo",
    "ContentRange",
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
    # Server error payloads
    "ErrorResponse",
    "ServerError",
    "ServerMessage",
    "JsonServerError",
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
    "TransportTimeout",
    "UploadSizeLimitExceeded",
]
