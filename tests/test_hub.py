# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Tests for the hub and its method builders.
"""

import pytest

from androidpublisher import AndroidPublisher, HubConfig
from androidpublisher.client.auth import StaticTokenAuthenticator
from androidpublisher.client.backends.httpx import HTTPXTransport
from androidpublisher.resources import (
    EditMethods,
    InappproductMethods,
    InternalappsharingartifactMethods,
    OrderMethods,
    PurchaseMethods,
    ReviewMethods,
    SystemapkMethods,
)

from conftest import RecordingTransport


class TestAccessors:
    """Test suite for resource collection accessors."""

    @pytest.mark.parametrize(
        "accessor, builder",
        [
            ("edits", EditMethods),
            ("inappproducts", InappproductMethods),
            ("internalappsharingartifacts", InternalappsharingartifactMethods),
            ("orders", OrderMethods),
            ("purchases", PurchaseMethods),
            ("reviews", ReviewMethods),
            ("systemapks", SystemapkMethods),
        ],
    )
    def test_accessor_returns_builder_bound_to_hub(
        self, hub: AndroidPublisher, accessor: str, builder: type
    ) -> None:
        methods = getattr(hub, accessor)()

        assert isinstance(methods, builder)
        assert methods.hub is hub
        assert getattr(hub, accessor)() is not methods


class TestSwapSetters:
    """Test suite for user agent and url setters."""

    def test_user_agent_returns_previous(self, hub: AndroidPublisher) -> None:
        assert hub.user_agent("release-bot/1.0") == "androidpublisher-python/3.0.0"
        assert hub.user_agent("release-bot/2.0") == "release-bot/1.0"

    def test_base_url_returns_previous(self, hub: AndroidPublisher) -> None:
        assert hub.base_url("http://a/") == "https://androidpublisher.googleapis.com/"
        assert hub.base_url("http://b/") == "http://a/"

    def test_root_url_returns_previous(self, hub: AndroidPublisher) -> None:
        assert hub.root_url("http://a/") == "https://androidpublisher.googleapis.com/"
        assert hub.root_url("http://b/") == "http://a/"

    @pytest.mark.asyncio
    async def test_user_agent_is_sent(
        self, hub: AndroidPublisher, transport: RecordingTransport
    ) -> None:
        transport.respond(200, {})
        hub.user_agent("release-bot/1.0")

        await hub.edits().get("p", "e").doit()

        assert transport.last.header("User-Agent") == "release-bot/1.0"


class TestLifecycle:
    """Test suite for transport ownership."""

    def test_config_seeds_hub(self) -> None:
        config = HubConfig(user_agent="x", base_url="http://base/", timeout=120.0)

        hub = AndroidPublisher(StaticTokenAuthenticator("t"), config=config)

        assert hub.config is config
        assert isinstance(hub.transport, HTTPXTransport)
        assert hub.transport.default_timeout == 120.0
        assert hub.user_agent("y") == "x"
        assert hub.base_url("http://other/") == "http://base/"

    @pytest.mark.asyncio
    async def test_context_manager_closes_own_transport(self) -> None:
        async with AndroidPublisher(StaticTokenAuthenticator("t")) as hub:
            assert isinstance(hub.transport, HTTPXTransport)
            client = hub.transport.client

        assert client.is_closed

    @pytest.mark.asyncio
    async def test_given_transport_is_left_alone(self) -> None:
        transport = HTTPXTransport()
        client = transport.client

        async with AndroidPublisher(StaticTokenAuthenticator("t"), transport=transport):
            pass

        assert not client.is_closed
        await transport.aclose()
