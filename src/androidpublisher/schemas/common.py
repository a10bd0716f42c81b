# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Optional

from androidpublisher.schemas.base import Schema


class PageInfo(Schema):
    result_per_page: Optional[int] = None
    start_index: Optional[int] = None
    total_results: Optional[int] = None


class TokenPagination(Schema):
    next_page_token: Optional[str] = None
    previous_page_token: Optional[str] = None


class Timestamp(Schema):
    nanos: Optional[int] = None
    seconds: Optional[str] = None


class Price(Schema):
    # 3 letter ISO 4217 code
    currency: Optional[str] = None
    # Price in 1/1,000,000 of the currency
    price_micros: Optional[str] = None
