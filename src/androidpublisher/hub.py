# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import logging
from types import TracebackType
from typing import Self

from androidpublisher.client.auth import Authenticator
from androidpublisher.client.backends.httpx import HTTPXTransport, Transport
from androidpublisher.config import HubConfig
from androidpublisher.resources.edits import EditMethods
from androidpublisher.resources.inappproducts import InappproductMethods
from androidpublisher.resources.internalappsharing import (
    InternalappsharingartifactMethods,
)
from androidpublisher.resources.orders import OrderMethods
from androidpublisher.resources.purchases import PurchaseMethods
from androidpublisher.resources.reviews import ReviewMethods
from androidpublisher.resources.systemapks import SystemapkMethods

logger = logging.getLogger(__name__)


class AndroidPublisher:
    """
    Central instance to access all resource collections of the publishing API.

    ::

        async with AndroidPublisher(StaticTokenAuthenticator(token)) as hub:
            edit = await hub.edits().insert(AppEdit(), "com.example.app").doit()
            tracks = await hub.edits().tracks_list("com.example.app", edit.id).doit()

    The transport and the authenticator are shared by every call created from
    the hub, calls may run concurrently.
    """

    def __init__(
        self,
        authenticator: Authenticator,
        transport: Transport | None = None,
        config: HubConfig | None = None,
    ) -> None:
        self.config = config or HubConfig()
        self.auth = authenticator
        self._owns_transport = transport is None
        self.transport: Transport = transport or HTTPXTransport(
            default_timeout=self.config.timeout
        )
        self._user_agent = self.config.user_agent
        self._base_url = self.config.base_url
        self._root_url = self.config.root_url

    def edits(self) -> EditMethods:
        return EditMethods(self)

    def inappproducts(self) -> InappproductMethods:
        return InappproductMethods(self)

    def internalappsharingartifacts(self) -> InternalappsharingartifactMethods:
        return InternalappsharingartifactMethods(self)

    def orders(self) -> OrderMethods:
        return OrderMethods(self)

    def purchases(self) -> PurchaseMethods:
        return PurchaseMethods(self)

    def reviews(self) -> ReviewMethods:
        return ReviewMethods(self)

    def systemapks(self) -> SystemapkMethods:
        return SystemapkMethods(self)

    def user_agent(self, agent_name: str) -> str:
        """
        Set the user-agent header field to use in all requests to the server.

        Returns the previously set user-agent.
        """
        previous, self._user_agent = self._user_agent, agent_name
        return previous

    def base_url(self, new_base_url: str) -> str:
        """
        Set the base url to use in all requests to the server.

        Returns the previously set base url.
        """
        previous, self._base_url = self._base_url, new_base_url
        return previous

    def root_url(self, new_root_url: str) -> str:
        """
        Set the root url media uploads are sent to.

        Returns the previously set root url.
        """
        previous, self._root_url = self._root_url, new_root_url
        return previous

    async def aclose(self) -> None:
        if self._owns_transport and isinstance(self.transport, HTTPXTransport):
            logger.debug("Closing http transport")
            await self.transport.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()
