# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Tests for the httpx transport.
"""

import json

import httpx
import pytest

from androidpublisher import AndroidPublisher
from androidpublisher.client.auth import StaticTokenAuthenticator
from androidpublisher.client.backends.httpx import HTTPXTransport
from androidpublisher.client.delegate import Delegate
from androidpublisher.client.errors import HttpError, TransportError, TransportTimeout
from androidpublisher.client.types import HttpRequest, Retry


def prepared_request(body: bytes | None = None) -> HttpRequest:
    return HttpRequest(
        url="https://androidpublisher.googleapis.com/androidpublisher/v3/applications/p/edits",
        method="POST",
        headers=[("Authorization", "Bearer t"), ("Content-Type", "application/json")],
        query_params=[("alt", "json")],
        body=body,
    )


class TestHTTPXTransport:
    """Test suite for HTTPXTransport."""

    @pytest.mark.asyncio
    async def test_send_forwards_request(self) -> None:
        """Method, url, query, headers and body reach httpx unchanged."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"id": "e1"}, headers={"X-Test": "1"})

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        transport = HTTPXTransport(client)

        response = await transport.send(prepared_request(b"{}"))

        request = seen[0]
        assert request.method == "POST"
        assert request.url.path == "/androidpublisher/v3/applications/p/edits"
        assert request.url.params["alt"] == "json"
        assert request.headers["Authorization"] == "Bearer t"
        assert request.content == b"{}"

        assert response.status_code == 200
        assert response.is_success
        assert json.loads(response.data) == {"id": "e1"}
        assert response.headers["x-test"] == "1"
        assert response.elapsed_time is not None

        await client.aclose()

    @pytest.mark.asyncio
    async def test_error_status_is_returned_not_raised(self) -> None:
        """Non-success statuses are left to the call protocol."""
        client = httpx.AsyncClient(
            transport=httpx.MockTransport(lambda request: httpx.Response(503))
        )

        response = await HTTPXTransport(client).send(prepared_request())

        assert response.status_code == 503
        assert not response.is_success

        await client.aclose()

    @pytest.mark.asyncio
    async def test_timeout_is_mapped(self) -> None:
        """httpx timeouts become TransportTimeout."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("read timed out", request=request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        request = prepared_request()

        with pytest.raises(TransportTimeout) as exc_info:
            await HTTPXTransport(client).send(request)

        assert exc_info.value.request is request
        await client.aclose()

    @pytest.mark.asyncio
    async def test_network_error_is_mapped(self) -> None:
        """Connection failures become TransportError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))

        with pytest.raises(TransportError) as exc_info:
            await HTTPXTransport(client).send(prepared_request())

        assert not isinstance(exc_info.value, TransportTimeout)
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
        await client.aclose()

    @pytest.mark.asyncio
    async def test_aclose_keeps_foreign_client_open(self) -> None:
        """A client passed in is owned by the caller."""
        client = httpx.AsyncClient()
        transport = HTTPXTransport(client)

        await transport.aclose()

        assert not client.is_closed
        await client.aclose()

    @pytest.mark.asyncio
    async def test_aclose_closes_own_client(self) -> None:
        """A lazily created client is released by aclose."""
        transport = HTTPXTransport(default_timeout=5.0)
        client = transport.client

        assert client.timeout.read == 5.0

        await transport.aclose()

        assert client.is_closed

    @pytest.mark.asyncio
    async def test_other_request_errors_are_mapped(self) -> None:
        """Redirect loops and other httpx request errors become TransportError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.TooManyRedirects("redirect loop", request=request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))

        with pytest.raises(TransportError) as exc_info:
            await HTTPXTransport(client).send(prepared_request())

        assert isinstance(exc_info.value.__cause__, httpx.TooManyRedirects)
        await client.aclose()


class FinishedDelegate(Delegate):
    def __init__(self) -> None:
        self.events: list[str] = []

    def http_error(self, error: TransportError) -> Retry:
        self.events.append("http_error")
        return Retry.abort()

    def finished(self, is_success: bool) -> None:
        self.events.append(f"finished:{is_success}")


class TestTransportFailuresThroughCalls:
    """Test suite for httpx failures surfacing from a call."""

    @pytest.mark.asyncio
    async def test_redirect_loop_becomes_http_error(self) -> None:
        """The delegate hears about the failure and the caller gets HttpError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.TooManyRedirects("redirect loop", request=request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        hub = AndroidPublisher(StaticTokenAuthenticator("t"), transport=HTTPXTransport(client))
        delegate = FinishedDelegate()

        with pytest.raises(HttpError) as exc_info:
            await hub.edits().get("app", "e1").delegate(delegate).doit()

        assert isinstance(exc_info.value.error.__cause__, httpx.TooManyRedirects)
        assert delegate.events == ["http_error", "finished:False"]
        await client.aclose()

    @pytest.mark.asyncio
    async def test_decoding_error_becomes_http_error(self) -> None:
        """A body httpx cannot decode is a transport failure too."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.DecodingError("bad gzip", request=request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        hub = AndroidPublisher(StaticTokenAuthenticator("t"), transport=HTTPXTransport(client))
        delegate = FinishedDelegate()

        with pytest.raises(HttpError):
            await hub.edits().tracks_list("app", "e1").delegate(delegate).doit()

        assert delegate.events == ["http_error", "finished:False"]
        await client.aclose()
