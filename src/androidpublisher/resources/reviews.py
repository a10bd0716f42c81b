# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from androidpublisher.client.call import CallBuilder
from androidpublisher.client.decorators import Get, PathParam, Post, Query, RequestBody
from androidpublisher.resources.base import APPLICATION_PATH, MethodBuilder
from androidpublisher.schemas.reviews import (
    Review,
    ReviewsListResponse,
    ReviewsReplyRequest,
    ReviewsReplyResponse,
)

REVIEWS_PATH = APPLICATION_PATH + "/reviews"


@Get(REVIEWS_PATH + "/{reviewId}", "androidpublisher.reviews.get")
class ReviewGetCall(CallBuilder[Review]):
    package_name = PathParam[str]("packageName")
    review_id = PathParam[str]("reviewId")
    translation_language = Query[str]("translationLanguage")


@Get(REVIEWS_PATH, "androidpublisher.reviews.list")
class ReviewListCall(CallBuilder[ReviewsListResponse]):
    """Lists the reviews of the last week, newest first."""

    package_name = PathParam[str]("packageName")
    translation_language = Query[str]("translationLanguage")
    token = Query[str]("token")
    start_index = Query[int]("startIndex")
    max_results = Query[int]("maxResults")


@Post(REVIEWS_PATH + "/{reviewId}:reply", "androidpublisher.reviews.reply")
class ReviewReplyCall(CallBuilder[ReviewsReplyResponse]):
    package_name = PathParam[str]("packageName")
    review_id = PathParam[str]("reviewId")
    request = RequestBody(ReviewsReplyRequest)


class ReviewMethods(MethodBuilder):
    """Obtained through ``AndroidPublisher.reviews()``."""

    def get(self, package_name: str, review_id: str) -> ReviewGetCall:
        return ReviewGetCall(self.hub, package_name=package_name, review_id=review_id)

    def list(self, package_name: str) -> ReviewListCall:
        return ReviewListCall(self.hub, package_name=package_name)

    def reply(
        self, request: ReviewsReplyRequest, package_name: str, review_id: str
    ) -> ReviewReplyCall:
        return ReviewReplyCall(
            self.hub, request=request, package_name=package_name, review_id=review_id
        )
