# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import inspect
import logging
from typing import Awaitable, Callable, Protocol, Sequence

from androidpublisher.client.errors import AuthenticationError

logger = logging.getLogger(__name__)


class Authenticator(Protocol):

    async def token(self, scopes: Sequence[str]) -> str: ...


class StaticTokenAuthenticator(Authenticator):
    """Hands out a fixed bearer token, whatever the requested scopes."""

    def __init__(self, token: str):
        self._token = token

    async def token(self, scopes: Sequence[str]) -> str:
        if not self._token:
            raise AuthenticationError("No token configured")
        return self._token


TokenFactory = Callable[[Sequence[str]], "str | Awaitable[str]"]


class CallableAuthenticator(Authenticator):
    """
    Adapts a plain or async function returning a token for the given scopes.

    Any exception raised by the function is reported as an
    ``AuthenticationError``.
    """

    def __init__(self, factory: TokenFactory):
        self.factory = factory

    async def token(self, scopes: Sequence[str]) -> str:
        try:
            result = self.factory(scopes)
            if inspect.isawaitable(result):
                result = await result
        except AuthenticationError:
            raise
        except Exception as e:
            logger.debug("Token factory failed for scopes %s: %s", scopes, e)
            raise AuthenticationError(str(e)) from e

        if not result:
            raise AuthenticationError("Token factory returned an empty token")
        return result


__all__ = [
    "Authenticator",
    "CallableAuthenticator",
    "StaticTokenAuthenticator",
]
