# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import logging
import os
from typing import TypeVar, overload

from pydantic import BaseModel, Field

from androidpublisher.client.types import Scope

logger = logging.getLogger(__name__)

VERSION = "3.0.0"

DEFAULT_USER_AGENT = f"androidpublisher-python/{VERSION}"
DEFAULT_BASE_URL = "https://androidpublisher.googleapis.com/"
DEFAULT_ROOT_URL = "https://androidpublisher.googleapis.com/"

ENV_PREFIX = "ANDROIDPUBLISHER_"


DF_INT_T = TypeVar("DF_INT_T", bound="int | None")


@overload
def get_env_int(var_name: str, default: None = None) -> int | None: ...


@overload
def get_env_int(var_name: str, default: DF_INT_T) -> DF_INT_T | int: ...


def get_env_int(var_name: str, default: int | None = None) -> int | None:
    value = os.getenv(var_name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring %s=%r, not an integer", var_name, value)
        return default


def get_env_float(var_name: str, default: float) -> float:
    value = os.getenv(var_name)
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning("Ignoring %s=%r, not a number", var_name, value)
        return default


def get_env_str(var_name: str, default: str) -> str:
    value = os.getenv(var_name)
    if value is None or value.strip() == "":
        return default
    return value


class RetryPolicy(BaseModel):
    """
    Upper bound for delegate driven retries.

    ``max_attempts`` counts the attempts of one request, the first one
    included. Each request of a resumable upload gets its own budget. Once
    reached the last failure is raised even if the delegate asks for another
    retry.
    """

    max_attempts: int = Field(default=5, ge=1)


class HubConfig(BaseModel):
    user_agent: str = DEFAULT_USER_AGENT
    base_url: str = DEFAULT_BASE_URL
    root_url: str = DEFAULT_ROOT_URL
    timeout: float = 30.0
    default_scopes: list[str] = Field(default_factory=lambda: [Scope.FULL.value])
    retry_policy: RetryPolicy = Field(default_factory=RetryPolicy)

    @classmethod
    def from_env(cls) -> "HubConfig":
        defaults = cls()
        return cls(
            user_agent=get_env_str(ENV_PREFIX + "USER_AGENT", defaults.user_agent),
            base_url=get_env_str(ENV_PREFIX + "BASE_URL", defaults.base_url),
            root_url=get_env_str(ENV_PREFIX + "ROOT_URL", defaults.root_url),
            timeout=get_env_float(ENV_PREFIX + "TIMEOUT", defaults.timeout),
            retry_policy=RetryPolicy(
                max_attempts=get_env_int(
                    ENV_PREFIX + "MAX_ATTEMPTS", defaults.retry_policy.max_attempts
                )
            ),
        )
