# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from androidpublisher.client.call import CallBuilder
from androidpublisher.client.decorators import (
    Delete,
    Get,
    Patch,
    PathParam,
    Post,
    Put,
    Query,
    RequestBody,
)
from androidpublisher.resources.base import APPLICATION_PATH, MethodBuilder
from androidpublisher.schemas.inappproducts import (
    InAppProduct,
    InappproductsListResponse,
)

PRODUCTS_PATH = APPLICATION_PATH + "/inappproducts"
PRODUCT_PATH = PRODUCTS_PATH + "/{sku}"


class InappproductCall:
    package_name = PathParam[str]("packageName")


@Delete(PRODUCT_PATH, "androidpublisher.inappproducts.delete")
class InappproductDeleteCall(InappproductCall, CallBuilder[None]):
    """Deletes an in-app product (i.e. a managed product or a subscriptions)."""

    sku = PathParam[str]("sku")


@Get(PRODUCT_PATH, "androidpublisher.inappproducts.get")
class InappproductGetCall(InappproductCall, CallBuilder[InAppProduct]):
    sku = PathParam[str]("sku")


@Post(PRODUCTS_PATH, "androidpublisher.inappproducts.insert")
class InappproductInsertCall(InappproductCall, CallBuilder[InAppProduct]):
    request = RequestBody(InAppProduct)
    # Converts the default price to every missing region when set
    auto_convert_missing_prices = Query[bool]("autoConvertMissingPrices")


@Get(PRODUCTS_PATH, "androidpublisher.inappproducts.list")
class InappproductListCall(InappproductCall, CallBuilder[InappproductsListResponse]):
    """Lists all in-app products, both managed products and subscriptions."""

    max_results = Query[int]("maxResults")
    start_index = Query[int]("startIndex")
    token = Query[str]("token")


@Patch(PRODUCT_PATH, "androidpublisher.inappproducts.patch")
class InappproductPatchCall(InappproductCall, CallBuilder[InAppProduct]):
    sku = PathParam[str]("sku")
    request = RequestBody(InAppProduct)
    auto_convert_missing_prices = Query[bool]("autoConvertMissingPrices")


@Put(PRODUCT_PATH, "androidpublisher.inappproducts.update")
class InappproductUpdateCall(InappproductCall, CallBuilder[InAppProduct]):
    sku = PathParam[str]("sku")
    request = RequestBody(InAppProduct)
    auto_convert_missing_prices = Query[bool]("autoConvertMissingPrices")
    allow_missing = Query[bool]("allowMissing")


class InappproductMethods(MethodBuilder):
    """Obtained through ``AndroidPublisher.inappproducts()``."""

    def delete(self, package_name: str, sku: str) -> InappproductDeleteCall:
        return InappproductDeleteCall(self.hub, package_name=package_name, sku=sku)

    def get(self, package_name: str, sku: str) -> InappproductGetCall:
        return InappproductGetCall(self.hub, package_name=package_name, sku=sku)

    def insert(
        self, request: InAppProduct, package_name: str
    ) -> InappproductInsertCall:
        return InappproductInsertCall(
            self.hub, request=request, package_name=package_name
        )

    def list(self, package_name: str) -> InappproductListCall:
        return InappproductListCall(self.hub, package_name=package_name)

    def patch(
        self, request: InAppProduct, package_name: str, sku: str
    ) -> InappproductPatchCall:
        return InappproductPatchCall(
            self.hub, request=request, package_name=package_name, sku=sku
        )

    def update(
        self, request: InAppProduct, package_name: str, sku: str
    ) -> InappproductUpdateCall:
        return InappproductUpdateCall(
            self.hub, request=request, package_name=package_name, sku=sku
        )
