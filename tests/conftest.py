# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Pytest configuration and fixtures for androidpublisher tests.
"""

import json
from typing import Any, Sequence

import pytest

from androidpublisher import AndroidPublisher, HubConfig, RetryPolicy
from androidpublisher.client.auth import CallableAuthenticator, StaticTokenAuthenticator
from androidpublisher.client.errors import AuthenticationError, TransportError
from androidpublisher.client.types import HttpRequest, HttpResponse


class RecordingTransport:
    """
    In-memory transport answering queued responses and recording every
    request it receives.
    """

    def __init__(self) -> None:
        self.requests: list[HttpRequest] = []
        self._answers: list[HttpResponse | Exception] = []

    def respond(
        self,
        status_code: int = 200,
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> "RecordingTransport":
        if body is None:
            data = b""
        elif isinstance(body, bytes):
            data = body
        else:
            data = json.dumps(body).encode()
        self._answers.append(
            HttpResponse(status_code=status_code, data=data, headers=headers or {})
        )
        return self

    def fail(self, message: str = "connection reset") -> "RecordingTransport":
        self._answers.append(TransportError(HttpRequest("", "", [], []), message))
        return self

    async def send(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        if not self._answers:
            raise AssertionError(f"Unexpected request {request.method} {request.url}")
        answer = self._answers.pop(0)
        if isinstance(answer, Exception):
            raise answer
        return answer

    @property
    def last(self) -> HttpRequest:
        assert self.requests, "no request was sent"
        return self.requests[-1]


class FailingAuthenticator:
    """Authenticator which never produces a token."""

    def __init__(self) -> None:
        self.calls = 0

    async def token(self, scopes: Sequence[str]) -> str:
        self.calls += 1
        raise AuthenticationError("refresh token revoked")


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def hub(transport: RecordingTransport) -> AndroidPublisher:
    return AndroidPublisher(
        StaticTokenAuthenticator("test-token"),
        transport=transport,
        config=HubConfig(retry_policy=RetryPolicy(max_attempts=5)),
    )


@pytest.fixture
def requested_scopes() -> list[list[str]]:
    return []


@pytest.fixture
def scoped_hub(
    transport: RecordingTransport, requested_scopes: list[list[str]]
) -> AndroidPublisher:
    """Hub whose authenticator records the scopes it was asked for."""

    def factory(scopes: Sequence[str]) -> str:
        requested_scopes.append(list(scopes))
        return "scoped-token"

    return AndroidPublisher(CallableAuthenticator(factory), transport=transport)


@pytest.fixture
def failing_auth() -> FailingAuthenticator:
    return FailingAuthenticator()


@pytest.fixture
def unauthenticated_hub(
    transport: RecordingTransport, failing_auth: FailingAuthenticator
) -> AndroidPublisher:
    return AndroidPublisher(failing_auth, transport=transport)
