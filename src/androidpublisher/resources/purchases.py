# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from androidpublisher.client.call import CallBuilder
from androidpublisher.client.decorators import Get, PathParam, Post, Query, RequestBody
from androidpublisher.resources.base import APPLICATION_PATH, MethodBuilder
from androidpublisher.schemas.purchases import (
    ProductPurchase,
    ProductPurchasesAcknowledgeRequest,
    SubscriptionPurchase,
    SubscriptionPurchasesAcknowledgeRequest,
    SubscriptionPurchasesDeferRequest,
    SubscriptionPurchasesDeferResponse,
    VoidedPurchasesListResponse,
)

PRODUCT_TOKEN_PATH = (
    APPLICATION_PATH + "/purchases/products/{productId}/tokens/{token}"
)
SUBSCRIPTION_TOKEN_PATH = (
    APPLICATION_PATH + "/purchases/subscriptions/{subscriptionId}/tokens/{token}"
)


class ProductPurchaseCall:
    package_name = PathParam[str]("packageName")
    product_id = PathParam[str]("productId")
    token = PathParam[str]("token")


class SubscriptionPurchaseCall:
    package_name = PathParam[str]("packageName")
    subscription_id = PathParam[str]("subscriptionId")
    token = PathParam[str]("token")


# purchases.products


@Post(
    PRODUCT_TOKEN_PATH + ":acknowledge",
    "androidpublisher.purchases.products.acknowledge",
)
class PurchaseProductAcknowledgeCall(ProductPurchaseCall, CallBuilder[None]):
    """Acknowledges a purchase of an inapp item."""

    request = RequestBody(ProductPurchasesAcknowledgeRequest)


@Get(PRODUCT_TOKEN_PATH, "androidpublisher.purchases.products.get")
class PurchaseProductGetCall(ProductPurchaseCall, CallBuilder[ProductPurchase]):
    """Checks the purchase and consumption status of an inapp item."""


# purchases.subscriptions


@Post(
    SUBSCRIPTION_TOKEN_PATH + ":acknowledge",
    "androidpublisher.purchases.subscriptions.acknowledge",
)
class PurchaseSubscriptionAcknowledgeCall(SubscriptionPurchaseCall, CallBuilder[None]):
    request = RequestBody(SubscriptionPurchasesAcknowledgeRequest)


@Post(
    SUBSCRIPTION_TOKEN_PATH + ":cancel",
    "androidpublisher.purchases.subscriptions.cancel",
)
class PurchaseSubscriptionCancelCall(SubscriptionPurchaseCall, CallBuilder[None]):
    """
    Cancels a user's subscription purchase. The subscription remains valid
    until its expiration time.
    """


@Post(
    SUBSCRIPTION_TOKEN_PATH + ":defer",
    "androidpublisher.purchases.subscriptions.defer",
)
class PurchaseSubscriptionDeferCall(
    SubscriptionPurchaseCall, CallBuilder[SubscriptionPurchasesDeferResponse]
):
    """Defers a user's subscription purchase until a specified future expiration time."""

    request = RequestBody(SubscriptionPurchasesDeferRequest)


@Get(SUBSCRIPTION_TOKEN_PATH, "androidpublisher.purchases.subscriptions.get")
class PurchaseSubscriptionGetCall(
    SubscriptionPurchaseCall, CallBuilder[SubscriptionPurchase]
):
    pass


@Post(
    SUBSCRIPTION_TOKEN_PATH + ":refund",
    "androidpublisher.purchases.subscriptions.refund",
)
class PurchaseSubscriptionRefundCall(SubscriptionPurchaseCall, CallBuilder[None]):
    """Refunds a user's subscription purchase, the subscription keeps recurring."""


@Post(
    SUBSCRIPTION_TOKEN_PATH + ":revoke",
    "androidpublisher.purchases.subscriptions.revoke",
)
class PurchaseSubscriptionRevokeCall(SubscriptionPurchaseCall, CallBuilder[None]):
    """
    Refunds and immediately revokes a user's subscription purchase. Access to
    the subscription is terminated immediately and it stops recurring.
    """


# purchases.voidedpurchases


@Get(
    APPLICATION_PATH + "/purchases/voidedpurchases",
    "androidpublisher.purchases.voidedpurchases.list",
)
class PurchaseVoidedpurchaseListCall(CallBuilder[VoidedPurchasesListResponse]):
    """Lists the purchases that were canceled, refunded or charged-back."""

    package_name = PathParam[str]("packageName")
    # 0 for in-app purchases only, 1 to include subscriptions
    type = Query[int]("type")
    token = Query[str]("token")
    # Milliseconds since epoch, not older than 30 days
    start_time = Query[str]("startTime")
    start_index = Query[int]("startIndex")
    max_results = Query[int]("maxResults")
    end_time = Query[str]("endTime")


class PurchaseMethods(MethodBuilder):
    """
    Billing operations on in-app products and subscriptions, plus the voided
    purchases feed. Obtained through ``AndroidPublisher.purchases()``.
    """

    def products_acknowledge(
        self,
        request: ProductPurchasesAcknowledgeRequest,
        package_name: str,
        product_id: str,
        token: str,
    ) -> PurchaseProductAcknowledgeCall:
        return PurchaseProductAcknowledgeCall(
            self.hub,
            request=request,
            package_name=package_name,
            product_id=product_id,
            token=token,
        )

    def products_get(
        self, package_name: str, product_id: str, token: str
    ) -> PurchaseProductGetCall:
        return PurchaseProductGetCall(
            self.hub, package_name=package_name, product_id=product_id, token=token
        )

    def subscriptions_acknowledge(
        self,
        request: SubscriptionPurchasesAcknowledgeRequest,
        package_name: str,
        subscription_id: str,
        token: str,
    ) -> PurchaseSubscriptionAcknowledgeCall:
        return PurchaseSubscriptionAcknowledgeCall(
            self.hub,
            request=request,
            package_name=package_name,
            subscription_id=subscription_id,
            token=token,
        )

    def subscriptions_cancel(
        self, package_name: str, subscription_id: str, token: str
    ) -> PurchaseSubscriptionCancelCall:
        return PurchaseSubscriptionCancelCall(
            self.hub,
            package_name=package_name,
            subscription_id=subscription_id,
            token=token,
        )

    def subscriptions_defer(
        self,
        request: SubscriptionPurchasesDeferRequest,
        package_name: str,
        subscription_id: str,
        token: str,
    ) -> PurchaseSubscriptionDeferCall:
        return PurchaseSubscriptionDeferCall(
            self.hub,
            request=request,
            package_name=package_name,
            subscription_id=subscription_id,
            token=token,
        )

    def subscriptions_get(
        self, package_name: str, subscription_id: str, token: str
    ) -> PurchaseSubscriptionGetCall:
        return PurchaseSubscriptionGetCall(
            self.hub,
            package_name=package_name,
            subscription_id=subscription_id,
            token=token,
        )

    def subscriptions_refund(
        self, package_name: str, subscription_id: str, token: str
    ) -> PurchaseSubscriptionRefundCall:
        return PurchaseSubscriptionRefundCall(
            self.hub,
            package_name=package_name,
            subscription_id=subscription_id,
            token=token,
        )

    def subscriptions_revoke(
        self, package_name: str, subscription_id: str, token: str
    ) -> PurchaseSubscriptionRevokeCall:
        return PurchaseSubscriptionRevokeCall(
            self.hub,
            package_name=package_name,
            subscription_id=subscription_id,
            token=token,
        )

    def voidedpurchases_list(self, package_name: str) -> PurchaseVoidedpurchaseListCall:
        return PurchaseVoidedpurchaseListCall(self.hub, package_name=package_name)
