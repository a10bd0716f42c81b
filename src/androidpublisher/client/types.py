# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class Scope(StrEnum):
    """OAuth2 scopes understood by the publishing API."""

    FULL = "https://www.googleapis.com/auth/androidpublisher"


@dataclass(frozen=True)
class MethodInfo:
    id: str
    http_method: str


@dataclass
class HttpRequest:
    url: str
    method: str
    headers: list[tuple[str, str]]
    query_params: list[tuple[str, str]]
    body: bytes | None = None

    def header(self, name: str) -> str | None:
        for key, value in self.headers:
            if key.lower() == name.lower():
                return value
        return None


@dataclass
class HttpResponse:
    status_code: int
    data: bytes
    headers: Dict[str, str] = field(default_factory=dict)
    elapsed_time: Optional[float] = None

    def header(self, name: str) -> str | None:
        for key, value in self.headers.items():
            if key.lower() == name.lower():
                return value
        return None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.data.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class Retry:
    """Answer of a delegate consulted after a failed attempt."""

    delay: float | None = None

    @classmethod
    def abort(cls) -> "Retry":
        return cls()

    @classmethod
    def after(cls, seconds: float) -> "Retry":
        return cls(delay=max(seconds, 0.0))

    @property
    def should_retry(self) -> bool:
        return self.delay is not None


@dataclass(frozen=True)
class ContentRange:
    """
    Byte range of one chunk of a resumable upload, ``first`` and ``last``
    inclusive. An empty range (``last < first``) only reports the total.
    """

    first: int
    last: int
    total: int

    @property
    def length(self) -> int:
        return max(self.last - self.first + 1, 0)

    def header_value(self) -> str:
        if self.length == 0:
            return f"bytes */{self.total}"
        return f"bytes {self.first}-{self.last}/{self.total}"


class ServerMessage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    domain: str | None = None
    reason: str | None = None
    message: str | None = None
    location_type: str | None = Field(default=None, alias="locationType")
    location: str | None = None


class ServerError(BaseModel):
    errors: list[ServerMessage] = Field(default_factory=list)
    code: int
    message: str
    status: str | None = None


class ErrorResponse(BaseModel):
    error: ServerError


class JsonServerError(BaseModel):
    """OAuth style error payload, e.g. ``{"error": "invalid_grant"}``."""

    error: str
    error_description: str | None = None
