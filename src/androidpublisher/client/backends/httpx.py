# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import logging
import time
from typing import Protocol

import httpx

from androidpublisher.client.errors import TransportError, TransportTimeout
from androidpublisher.client.types import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class Transport(Protocol):

    async def send(self, request: HttpRequest) -> HttpResponse: ...


class HTTPXTransport(Transport):
    """
    Sends prepared requests through a shared ``httpx.AsyncClient``.

    A client passed in stays owned by the caller, otherwise one is created
    lazily and released by ``aclose``.
    """

    def __init__(
        self, client: httpx.AsyncClient | None = None, default_timeout: float = 30.0
    ):
        self._client = client
        self._owns_client = client is None
        self.default_timeout = default_timeout

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.default_timeout)
        return self._client

    async def send(self, request: HttpRequest) -> HttpResponse:
        start_time = time.time()

        try:
            response = await self.client.request(
                method=request.method,
                url=request.url,
                params=request.query_params,
                headers=request.headers,
                content=request.body,
            )
        except httpx.TimeoutException as err:
            raise TransportTimeout(request, f"Request timed out: {err}") from err
        except httpx.RequestError as err:
            raise TransportError(request, f"Network error: {err}") from err

        elapsed_time = time.time() - start_time
        logger.debug(
            "%s %s answered %s in %.3fs",
            request.method,
            request.url,
            response.status_code,
            elapsed_time,
        )

        return HttpResponse(
            status_code=response.status_code,
            data=response.content,
            headers=dict(response.headers),
            elapsed_time=elapsed_time,
        )

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
