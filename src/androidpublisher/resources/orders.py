# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from androidpublisher.client.call import CallBuilder
from androidpublisher.client.decorators import PathParam, Post, Query
from androidpublisher.resources.base import APPLICATION_PATH, MethodBuilder


@Post(APPLICATION_PATH + "/orders/{orderId}:refund", "androidpublisher.orders.refund")
class OrderRefundCall(CallBuilder[None]):
    """Refunds a user's subscription or in-app purchase order."""

    package_name = PathParam[str]("packageName")
    order_id = PathParam[str]("orderId")
    # Also revoke the item the order granted
    revoke = Query[bool]("revoke")


class OrderMethods(MethodBuilder):
    """Obtained through ``AndroidPublisher.orders()``."""

    def refund(self, package_name: str, order_id: str) -> OrderRefundCall:
        return OrderRefundCall(self.hub, package_name=package_name, order_id=order_id)
