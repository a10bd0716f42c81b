# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from androidpublisher.client.call import UploadCallBuilder
from androidpublisher.client.decorators import MediaUpload, PathParam, Post
from androidpublisher.resources.base import UPLOAD_PREFIX, GiB, MethodBuilder
from androidpublisher.schemas.sharing import InternalAppSharingArtifact

ARTIFACTS_PATH = "androidpublisher/v3/applications/internalappsharing/{packageName}/artifacts"

INTERNAL_APK_MAX_SIZE = 1 * GiB
INTERNAL_BUNDLE_MAX_SIZE = 10 * GiB


@Post(ARTIFACTS_PATH + "/apk", "androidpublisher.internalappsharingartifacts.uploadapk")
@MediaUpload(
    UPLOAD_PREFIX + ARTIFACTS_PATH + "/apk",
    INTERNAL_APK_MAX_SIZE,
    ("application/octet-stream", "application/vnd.android.package-archive"),
)
class InternalappsharingartifactUploadapkCall(
    UploadCallBuilder[InternalAppSharingArtifact]
):
    """
    Uploads an APK to internal app sharing. The artifact is immediately
    downloadable from the returned url.
    """

    package_name = PathParam[str]("packageName")


@Post(
    ARTIFACTS_PATH + "/bundle",
    "androidpublisher.internalappsharingartifacts.uploadbundle",
)
@MediaUpload(
    UPLOAD_PREFIX + ARTIFACTS_PATH + "/bundle",
    INTERNAL_BUNDLE_MAX_SIZE,
    ("application/octet-stream",),
)
class InternalappsharingartifactUploadbundleCall(
    UploadCallBuilder[InternalAppSharingArtifact]
):
    package_name = PathParam[str]("packageName")


class InternalappsharingartifactMethods(MethodBuilder):
    """Obtained through ``AndroidPublisher.internalappsharingartifacts()``."""

    def uploadapk(self, package_name: str) -> InternalappsharingartifactUploadapkCall:
        return InternalappsharingartifactUploadapkCall(
            self.hub, package_name=package_name
        )

    def uploadbundle(
        self, package_name: str
    ) -> InternalappsharingartifactUploadbundleCall:
        return InternalappsharingartifactUploadbundleCall(
            self.hub, package_name=package_name
        )
