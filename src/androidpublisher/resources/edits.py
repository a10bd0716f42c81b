# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from androidpublisher.client.call import CallBuilder, UploadCallBuilder
from androidpublisher.client.decorators import (
    Delete,
    Get,
    MediaUpload,
    Patch,
    PathParam,
    Post,
    Put,
    Query,
    RequestBody,
)
from androidpublisher.resources.base import (
    APPLICATION_PATH,
    EDIT_PATH,
    UPLOAD_PREFIX,
    GiB,
    MiB,
    MethodBuilder,
)
from androidpublisher.schemas.edits import (
    Apk,
    ApksAddExternallyHostedRequest,
    ApksAddExternallyHostedResponse,
    ApksListResponse,
    AppDetails,
    AppEdit,
    Bundle,
    BundlesListResponse,
    DeobfuscationFilesUploadResponse,
    ExpansionFile,
    ExpansionFilesUploadResponse,
    ImagesDeleteAllResponse,
    ImagesListResponse,
    ImagesUploadResponse,
    Listing,
    ListingsListResponse,
    Testers,
    Track,
    TracksListResponse,
)

APK_MAX_SIZE = 10 * GiB
BUNDLE_MAX_SIZE = 10 * GiB
DEOBFUSCATION_FILE_MAX_SIZE = 300 * MiB
EXPANSION_FILE_MAX_SIZE = 2 * GiB
IMAGE_MAX_SIZE = 15 * MiB

APK_MIME_TYPES = ("application/octet-stream", "application/vnd.android.package-archive")
OCTET_STREAM = ("application/octet-stream",)
IMAGE_MIME_TYPES = ("image/*",)

EXPANSION_FILE_PATH = (
    EDIT_PATH + "/apks/{apkVersionCode}/expansionFiles/{expansionFileType}"
)
IMAGE_TYPE_PATH = EDIT_PATH + "/listings/{language}/{imageType}"


class EditCall:
    """Parameters shared by every operation on an edit."""

    package_name = PathParam[str]("packageName")
    edit_id = PathParam[str]("editId")


# edits


@Post(EDIT_PATH + ":commit", "androidpublisher.edits.commit")
class EditCommitCall(EditCall, CallBuilder[AppEdit]):
    """Commits an app edit. The edit can not be changed afterwards."""

    changes_not_sent_for_review = Query[bool]("changesNotSentForReview")


@Delete(EDIT_PATH, "androidpublisher.edits.delete")
class EditDeleteCall(EditCall, CallBuilder[None]):
    """Deletes an app edit."""


@Get(EDIT_PATH, "androidpublisher.edits.get")
class EditGetCall(EditCall, CallBuilder[AppEdit]):
    """Gets an app edit."""


@Post(APPLICATION_PATH + "/edits", "androidpublisher.edits.insert")
class EditInsertCall(CallBuilder[AppEdit]):
    """Creates a new edit for an app."""

    package_name = PathParam[str]("packageName")
    request = RequestBody(AppEdit)


@Post(EDIT_PATH + ":validate", "androidpublisher.edits.validate")
class EditValidateCall(EditCall, CallBuilder[AppEdit]):
    """Validates an app edit."""


# edits.apks


@Post(
    EDIT_PATH + "/apks/externallyHosted",
    "androidpublisher.edits.apks.addexternallyhosted",
)
class EditApkAddexternallyhostedCall(
    EditCall, CallBuilder[ApksAddExternallyHostedResponse]
):
    """Creates a new APK without uploading the APK itself to Google Play."""

    request = RequestBody(ApksAddExternallyHostedRequest)


@Get(EDIT_PATH + "/apks", "androidpublisher.edits.apks.list")
class EditApkListCall(EditCall, CallBuilder[ApksListResponse]):
    pass


@Post(EDIT_PATH + "/apks", "androidpublisher.edits.apks.upload")
@MediaUpload(UPLOAD_PREFIX + EDIT_PATH + "/apks", APK_MAX_SIZE, APK_MIME_TYPES)
class EditApkUploadCall(EditCall, UploadCallBuilder[Apk]):
    """Uploads an APK and adds to the current edit."""


# edits.bundles


@Get(EDIT_PATH + "/bundles", "androidpublisher.edits.bundles.list")
class EditBundleListCall(EditCall, CallBuilder[BundlesListResponse]):
    pass


@Post(EDIT_PATH + "/bundles", "androidpublisher.edits.bundles.upload")
@MediaUpload(UPLOAD_PREFIX + EDIT_PATH + "/bundles", BUNDLE_MAX_SIZE, OCTET_STREAM)
class EditBundleUploadCall(EditCall, UploadCallBuilder[Bundle]):
    """
    Uploads a new Android App Bundle to this edit.

    Large bundles take a while; configure a generous transport timeout.
    """

    ack_bundle_installation_warning = Query[bool]("ackBundleInstallationWarning")


# edits.deobfuscationfiles


@Post(
    EDIT_PATH + "/apks/{apkVersionCode}/deobfuscationFiles/{deobfuscationFileType}",
    "androidpublisher.edits.deobfuscationfiles.upload",
)
@MediaUpload(
    UPLOAD_PREFIX
    + EDIT_PATH
    + "/apks/{apkVersionCode}/deobfuscationFiles/{deobfuscationFileType}",
    DEOBFUSCATION_FILE_MAX_SIZE,
    OCTET_STREAM,
)
class EditDeobfuscationfileUploadCall(
    EditCall, UploadCallBuilder[DeobfuscationFilesUploadResponse]
):
    """Uploads a new deobfuscation file and attaches to the specified APK."""

    apk_version_code = PathParam[int]("apkVersionCode")
    deobfuscation_file_type = PathParam[str]("deobfuscationFileType")


# edits.details


@Get(EDIT_PATH + "/details", "androidpublisher.edits.details.get")
class EditDetailGetCall(EditCall, CallBuilder[AppDetails]):
    pass


@Patch(EDIT_PATH + "/details", "androidpublisher.edits.details.patch")
class EditDetailPatchCall(EditCall, CallBuilder[AppDetails]):
    request = RequestBody(AppDetails)


@Put(EDIT_PATH + "/details", "androidpublisher.edits.details.update")
class EditDetailUpdateCall(EditCall, CallBuilder[AppDetails]):
    request = RequestBody(AppDetails)


# edits.expansionfiles


class ExpansionFileCall(EditCall):
    apk_version_code = PathParam[int]("apkVersionCode")
    expansion_file_type = PathParam[str]("expansionFileType")


@Get(EXPANSION_FILE_PATH, "androidpublisher.edits.expansionfiles.get")
class EditExpansionfileGetCall(ExpansionFileCall, CallBuilder[ExpansionFile]):
    pass


@Patch(EXPANSION_FILE_PATH, "androidpublisher.edits.expansionfiles.patch")
class EditExpansionfilePatchCall(ExpansionFileCall, CallBuilder[ExpansionFile]):
    request = RequestBody(ExpansionFile)


@Put(EXPANSION_FILE_PATH, "androidpublisher.edits.expansionfiles.update")
class EditExpansionfileUpdateCall(ExpansionFileCall, CallBuilder[ExpansionFile]):
    request = RequestBody(ExpansionFile)


@Post(EXPANSION_FILE_PATH, "androidpublisher.edits.expansionfiles.upload")
@MediaUpload(
    UPLOAD_PREFIX + EXPANSION_FILE_PATH, EXPANSION_FILE_MAX_SIZE, OCTET_STREAM
)
class EditExpansionfileUploadCall(
    ExpansionFileCall, UploadCallBuilder[ExpansionFilesUploadResponse]
):
    pass


# edits.images


class ImageTypeCall(EditCall):
    language = PathParam[str]("language")
    image_type = PathParam[str]("imageType")


@Delete(IMAGE_TYPE_PATH + "/{imageId}", "androidpublisher.edits.images.delete")
class EditImageDeleteCall(ImageTypeCall, CallBuilder[None]):
    """Deletes the image (specified by id) from the edit."""

    image_id = PathParam[str]("imageId")


@Delete(IMAGE_TYPE_PATH, "androidpublisher.edits.images.deleteall")
class EditImageDeleteallCall(ImageTypeCall, CallBuilder[ImagesDeleteAllResponse]):
    """Deletes all images for the specified language and image type."""


@Get(IMAGE_TYPE_PATH, "androidpublisher.edits.images.list")
class EditImageListCall(ImageTypeCall, CallBuilder[ImagesListResponse]):
    pass


@Post(IMAGE_TYPE_PATH, "androidpublisher.edits.images.upload")
@MediaUpload(UPLOAD_PREFIX + IMAGE_TYPE_PATH, IMAGE_MAX_SIZE, IMAGE_MIME_TYPES)
class EditImageUploadCall(ImageTypeCall, UploadCallBuilder[ImagesUploadResponse]):
    pass


# edits.listings


@Delete(EDIT_PATH + "/listings/{language}", "androidpublisher.edits.listings.delete")
class EditListingDeleteCall(EditCall, CallBuilder[None]):
    language = PathParam[str]("language")


@Delete(EDIT_PATH + "/listings", "androidpublisher.edits.listings.deleteall")
class EditListingDeleteallCall(EditCall, CallBuilder[None]):
    pass


@Get(EDIT_PATH + "/listings/{language}", "androidpublisher.edits.listings.get")
class EditListingGetCall(EditCall, CallBuilder[Listing]):
    language = PathParam[str]("language")


@Get(EDIT_PATH + "/listings", "androidpublisher.edits.listings.list")
class EditListingListCall(EditCall, CallBuilder[ListingsListResponse]):
    pass


@Patch(EDIT_PATH + "/listings/{language}", "androidpublisher.edits.listings.patch")
class EditListingPatchCall(EditCall, CallBuilder[Listing]):
    language = PathParam[str]("language")
    request = RequestBody(Listing)


@Put(EDIT_PATH + "/listings/{language}", "androidpublisher.edits.listings.update")
class EditListingUpdateCall(EditCall, CallBuilder[Listing]):
    language = PathParam[str]("language")
    request = RequestBody(Listing)


# edits.testers


@Get(EDIT_PATH + "/testers/{track}", "androidpublisher.edits.testers.get")
class EditTesterGetCall(EditCall, CallBuilder[Testers]):
    track = PathParam[str]("track")


@Patch(EDIT_PATH + "/testers/{track}", "androidpublisher.edits.testers.patch")
class EditTesterPatchCall(EditCall, CallBuilder[Testers]):
    track = PathParam[str]("track")
    request = RequestBody(Testers)


@Put(EDIT_PATH + "/testers/{track}", "androidpublisher.edits.testers.update")
class EditTesterUpdateCall(EditCall, CallBuilder[Testers]):
    track = PathParam[str]("track")
    request = RequestBody(Testers)


# edits.tracks


@Get(EDIT_PATH + "/tracks/{track}", "androidpublisher.edits.tracks.get")
class EditTrackGetCall(EditCall, CallBuilder[Track]):
    track = PathParam[str]("track")


@Get(EDIT_PATH + "/tracks", "androidpublisher.edits.tracks.list")
class EditTrackListCall(EditCall, CallBuilder[TracksListResponse]):
    pass


@Patch(EDIT_PATH + "/tracks/{track}", "androidpublisher.edits.tracks.patch")
class EditTrackPatchCall(EditCall, CallBuilder[Track]):
    """Patches a track; only the releases present in the request change."""

    track = PathParam[str]("track")
    request = RequestBody(Track)


@Put(EDIT_PATH + "/tracks/{track}", "androidpublisher.edits.tracks.update")
class EditTrackUpdateCall(EditCall, CallBuilder[Track]):
    track = PathParam[str]("track")
    request = RequestBody(Track)


class EditMethods(MethodBuilder):
    """
    Operations on edits and everything staged inside one: apks, bundles,
    deobfuscation files, details, expansion files, images, listings, testers
    and tracks.

    Obtained through ``AndroidPublisher.edits()``.
    """

    def commit(self, package_name: str, edit_id: str) -> EditCommitCall:
        return EditCommitCall(self.hub, package_name=package_name, edit_id=edit_id)

    def delete(self, package_name: str, edit_id: str) -> EditDeleteCall:
        return EditDeleteCall(self.hub, package_name=package_name, edit_id=edit_id)

    def get(self, package_name: str, edit_id: str) -> EditGetCall:
        return EditGetCall(self.hub, package_name=package_name, edit_id=edit_id)

    def insert(self, request: AppEdit, package_name: str) -> EditInsertCall:
        return EditInsertCall(self.hub, request=request, package_name=package_name)

    def validate(self, package_name: str, edit_id: str) -> EditValidateCall:
        return EditValidateCall(self.hub, package_name=package_name, edit_id=edit_id)

    def apks_addexternallyhosted(
        self, request: ApksAddExternallyHostedRequest, package_name: str, edit_id: str
    ) -> EditApkAddexternallyhostedCall:
        return EditApkAddexternallyhostedCall(
            self.hub, request=request, package_name=package_name, edit_id=edit_id
        )

    def apks_list(self, package_name: str, edit_id: str) -> EditApkListCall:
        return EditApkListCall(self.hub, package_name=package_name, edit_id=edit_id)

    def apks_upload(self, package_name: str, edit_id: str) -> EditApkUploadCall:
        return EditApkUploadCall(self.hub, package_name=package_name, edit_id=edit_id)

    def bundles_list(self, package_name: str, edit_id: str) -> EditBundleListCall:
        return EditBundleListCall(
            self.hub, package_name=package_name, edit_id=edit_id
        )

    def bundles_upload(self, package_name: str, edit_id: str) -> EditBundleUploadCall:
        return EditBundleUploadCall(
            self.hub, package_name=package_name, edit_id=edit_id
        )

    def deobfuscationfiles_upload(
        self,
        package_name: str,
        edit_id: str,
        apk_version_code: int,
        deobfuscation_file_type: str,
    ) -> EditDeobfuscationfileUploadCall:
        return EditDeobfuscationfileUploadCall(
            self.hub,
            package_name=package_name,
            edit_id=edit_id,
            apk_version_code=apk_version_code,
            deobfuscation_file_type=deobfuscation_file_type,
        )

    def details_get(self, package_name: str, edit_id: str) -> EditDetailGetCall:
        return EditDetailGetCall(self.hub, package_name=package_name, edit_id=edit_id)

    def details_patch(
        self, request: AppDetails, package_name: str, edit_id: str
    ) -> EditDetailPatchCall:
        return EditDetailPatchCall(
            self.hub, request=request, package_name=package_name, edit_id=edit_id
        )

    def details_update(
        self, request: AppDetails, package_name: str, edit_id: str
    ) -> EditDetailUpdateCall:
        return EditDetailUpdateCall(
            self.hub, request=request, package_name=package_name, edit_id=edit_id
        )

    def expansionfiles_get(
        self,
        package_name: str,
        edit_id: str,
        apk_version_code: int,
        expansion_file_type: str,
    ) -> EditExpansionfileGetCall:
        return EditExpansionfileGetCall(
            self.hub,
            package_name=package_name,
            edit_id=edit_id,
            apk_version_code=apk_version_code,
            expansion_file_type=expansion_file_type,
        )

    def expansionfiles_patch(
        self,
        request: ExpansionFile,
        package_name: str,
        edit_id: str,
        apk_version_code: int,
        expansion_file_type: str,
    ) -> EditExpansionfilePatchCall:
        return EditExpansionfilePatchCall(
            self.hub,
            request=request,
            package_name=package_name,
            edit_id=edit_id,
            apk_version_code=apk_version_code,
            expansion_file_type=expansion_file_type,
        )

    def expansionfiles_update(
        self,
        request: ExpansionFile,
        package_name: str,
        edit_id: str,
        apk_version_code: int,
        expansion_file_type: str,
    ) -> EditExpansionfileUpdateCall:
        return EditExpansionfileUpdateCall(
            self.hub,
            request=request,
            package_name=package_name,
            edit_id=edit_id,
            apk_version_code=apk_version_code,
            expansion_file_type=expansion_file_type,
        )

    def expansionfiles_upload(
        self,
        package_name: str,
        edit_id: str,
        apk_version_code: int,
        expansion_file_type: str,
    ) -> EditExpansionfileUploadCall:
        return EditExpansionfileUploadCall(
            self.hub,
            package_name=package_name,
            edit_id=edit_id,
            apk_version_code=apk_version_code,
            expansion_file_type=expansion_file_type,
        )

    def images_delete(
        self,
        package_name: str,
        edit_id: str,
        language: str,
        image_type: str,
        image_id: str,
    ) -> EditImageDeleteCall:
        return EditImageDeleteCall(
            self.hub,
            package_name=package_name,
            edit_id=edit_id,
            language=language,
            image_type=image_type,
            image_id=image_id,
        )

    def images_deleteall(
        self, package_name: str, edit_id: str, language: str, image_type: str
    ) -> EditImageDeleteallCall:
        return EditImageDeleteallCall(
            self.hub,
            package_name=package_name,
            edit_id=edit_id,
            language=language,
            image_type=image_type,
        )

    def images_list(
        self, package_name: str, edit_id: str, language: str, image_type: str
    ) -> EditImageListCall:
        return EditImageListCall(
            self.hub,
            package_name=package_name,
            edit_id=edit_id,
            language=language,
            image_type=image_type,
        )

    def images_upload(
        self, package_name: str, edit_id: str, language: str, image_type: str
    ) -> EditImageUploadCall:
        return EditImageUploadCall(
            self.hub,
            package_name=package_name,
            edit_id=edit_id,
            language=language,
            image_type=image_type,
        )

    def listings_delete(
        self, package_name: str, edit_id: str, language: str
    ) -> EditListingDeleteCall:
        return EditListingDeleteCall(
            self.hub, package_name=package_name, edit_id=edit_id, language=language
        )

    def listings_deleteall(
        self, package_name: str, edit_id: str
    ) -> EditListingDeleteallCall:
        return EditListingDeleteallCall(
            self.hub, package_name=package_name, edit_id=edit_id
        )

    def listings_get(
        self, package_name: str, edit_id: str, language: str
    ) -> EditListingGetCall:
        return EditListingGetCall(
            self.hub, package_name=package_name, edit_id=edit_id, language=language
        )

    def listings_list(self, package_name: str, edit_id: str) -> EditListingListCall:
        return EditListingListCall(
            self.hub, package_name=package_name, edit_id=edit_id
        )

    def listings_patch(
        self, request: Listing, package_name: str, edit_id: str, language: str
    ) -> EditListingPatchCall:
        return EditListingPatchCall(
            self.hub,
            request=request,
            package_name=package_name,
            edit_id=edit_id,
            language=language,
        )

    def listings_update(
        self, request: Listing, package_name: str, edit_id: str, language: str
    ) -> EditListingUpdateCall:
        return EditListingUpdateCall(
            self.hub,
            request=request,
            package_name=package_name,
            edit_id=edit_id,
            language=language,
        )

    def testers_get(
        self, package_name: str, edit_id: str, track: str
    ) -> EditTesterGetCall:
        return EditTesterGetCall(
            self.hub, package_name=package_name, edit_id=edit_id, track=track
        )

    def testers_patch(
        self, request: Testers, package_name: str, edit_id: str, track: str
    ) -> EditTesterPatchCall:
        return EditTesterPatchCall(
            self.hub,
            request=request,
            package_name=package_name,
            edit_id=edit_id,
            track=track,
        )

    def testers_update(
        self, request: Testers, package_name: str, edit_id: str, track: str
    ) -> EditTesterUpdateCall:
        return EditTesterUpdateCall(
            self.hub,
            request=request,
            package_name=package_name,
            edit_id=edit_id,
            track=track,
        )

    def tracks_get(self, package_name: str, edit_id: str, track: str) -> EditTrackGetCall:
        return EditTrackGetCall(
            self.hub, package_name=package_name, edit_id=edit_id, track=track
        )

    def tracks_list(self, package_name: str, edit_id: str) -> EditTrackListCall:
        return EditTrackListCall(self.hub, package_name=package_name, edit_id=edit_id)

    def tracks_patch(
        self, request: Track, package_name: str, edit_id: str, track: str
    ) -> EditTrackPatchCall:
        return EditTrackPatchCall(
            self.hub,
            request=request,
            package_name=package_name,
            edit_id=edit_id,
            track=track,
        )

    def tracks_update(
        self, request: Track, package_name: str, edit_id: str, track: str
    ) -> EditTrackUpdateCall:
        return EditTrackUpdateCall(
            self.hub,
            request=request,
            package_name=package_name,
            edit_id=edit_id,
            track=track,
        )
