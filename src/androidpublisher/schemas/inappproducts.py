# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Optional

from androidpublisher.schemas.base import Schema
from androidpublisher.schemas.common import PageInfo, Price, TokenPagination


class InAppProductListing(Schema):
    benefits: Optional[list[str]] = None
    description: Optional[str] = None
    title: Optional[str] = None


class InAppProduct(Schema):
    """
    A managed product or subscription sold inside an app.

    ``listings`` and ``prices`` are keyed by language and region code.
    """

    default_language: Optional[str] = None
    default_price: Optional[Price] = None
    # ISO 8601 period, subscriptions only
    grace_period: Optional[str] = None
    listings: Optional[dict[str, InAppProductListing]] = None
    package_name: Optional[str] = None
    prices: Optional[dict[str, Price]] = None
    # "managedUser" or "subscription"
    purchase_type: Optional[str] = None
    sku: Optional[str] = None
    # "active" or "inactive"
    status: Optional[str] = None
    subscription_period: Optional[str] = None
    trial_period: Optional[str] = None


class InappproductsListResponse(Schema):
    inappproduct: Optional[list[InAppProduct]] = None
    kind: Optional[str] = None
    page_info: Optional[PageInfo] = None
    token_pagination: Optional[TokenPagination] = None
