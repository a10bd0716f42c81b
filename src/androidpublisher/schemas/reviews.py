# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Optional

from androidpublisher.schemas.base import Schema
from androidpublisher.schemas.common import PageInfo, Timestamp, TokenPagination


class DeviceMetadata(Schema):
    cpu_make: Optional[str] = None
    cpu_model: Optional[str] = None
    device_class: Optional[str] = None
    gl_es_version: Optional[int] = None
    manufacturer: Optional[str] = None
    native_platform: Optional[str] = None
    product_name: Optional[str] = None
    ram_mb: Optional[int] = None
    screen_density_dpi: Optional[int] = None
    screen_height_px: Optional[int] = None
    screen_width_px: Optional[int] = None


class UserComment(Schema):
    android_os_version: Optional[int] = None
    app_version_code: Optional[int] = None
    app_version_name: Optional[str] = None
    device: Optional[str] = None
    device_metadata: Optional[DeviceMetadata] = None
    last_modified: Optional[Timestamp] = None
    original_text: Optional[str] = None
    reviewer_language: Optional[str] = None
    star_rating: Optional[int] = None
    text: Optional[str] = None
    thumbs_down_count: Optional[int] = None
    thumbs_up_count: Optional[int] = None


class DeveloperComment(Schema):
    last_modified: Optional[Timestamp] = None
    text: Optional[str] = None


class Comment(Schema):
    developer_comment: Optional[DeveloperComment] = None
    user_comment: Optional[UserComment] = None


class Review(Schema):
    author_name: Optional[str] = None
    comments: Optional[list[Comment]] = None
    review_id: Optional[str] = None


class ReviewsListResponse(Schema):
    page_info: Optional[PageInfo] = None
    reviews: Optional[list[Review]] = None
    token_pagination: Optional[TokenPagination] = None


class ReviewsReplyRequest(Schema):
    reply_text: Optional[str] = None


class ReviewReplyResult(Schema):
    last_edited: Optional[Timestamp] = None
    reply_text: Optional[str] = None


class ReviewsReplyResponse(Schema):
    result: Optional[ReviewReplyResult] = None
