# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from androidpublisher.client.call import CallBuilder
from androidpublisher.client.decorators import Get, PathParam, Post, RequestBody
from androidpublisher.resources.base import APPLICATION_PATH, MethodBuilder
from androidpublisher.schemas.sharing import SystemApksListResponse, Variant

VARIANTS_PATH = APPLICATION_PATH + "/systemApks/{versionCode}/variants"


class SystemapkVariantCall:
    package_name = PathParam[str]("packageName")
    version_code = PathParam[str]("versionCode")


@Post(VARIANTS_PATH, "androidpublisher.systemapks.variants.create")
class SystemapkVariantCreateCall(SystemapkVariantCall, CallBuilder[Variant]):
    """Creates an APK which is suitable for inclusion in a system image."""

    request = RequestBody(Variant)


@Get(
    VARIANTS_PATH + "/{variantId}:download",
    "androidpublisher.systemapks.variants.download",
    alt="media",
)
class SystemapkVariantDownloadCall(SystemapkVariantCall, CallBuilder[None]):
    """
    Downloads a previously created system APK. The APK bytes are the
    ``data`` of the returned response.
    """

    variant_id = PathParam[int]("variantId")


@Get(VARIANTS_PATH + "/{variantId}", "androidpublisher.systemapks.variants.get")
class SystemapkVariantGetCall(SystemapkVariantCall, CallBuilder[Variant]):
    variant_id = PathParam[int]("variantId")


@Get(VARIANTS_PATH, "androidpublisher.systemapks.variants.list")
class SystemapkVariantListCall(SystemapkVariantCall, CallBuilder[SystemApksListResponse]):
    pass


class SystemapkMethods(MethodBuilder):
    """Obtained through ``AndroidPublisher.systemapks()``."""

    def variants_create(
        self, request: Variant, package_name: str, version_code: str
    ) -> SystemapkVariantCreateCall:
        return SystemapkVariantCreateCall(
            self.hub,
            request=request,
            package_name=package_name,
            version_code=version_code,
        )

    def variants_download(
        self, package_name: str, version_code: str, variant_id: int
    ) -> SystemapkVariantDownloadCall:
        return SystemapkVariantDownloadCall(
            self.hub,
            package_name=package_name,
            version_code=version_code,
            variant_id=variant_id,
        )

    def variants_get(
        self, package_name: str, version_code: str, variant_id: int
    ) -> SystemapkVariantGetCall:
        return SystemapkVariantGetCall(
            self.hub,
            package_name=package_name,
            version_code=version_code,
            variant_id=variant_id,
        )

    def variants_list(
        self, package_name: str, version_code: str
    ) -> SystemapkVariantListCall:
        return SystemapkVariantListCall(
            self.hub, package_name=package_name, version_code=version_code
        )
