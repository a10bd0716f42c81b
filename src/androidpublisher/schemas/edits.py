# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Optional

from androidpublisher.schemas.base import Schema
from androidpublisher.schemas.enums import TrackReleaseStatus


class AppEdit(Schema):
    """
    A draft of pending changes to an app, valid until committed or expired.

    Created by ``edits.insert``; never mutated after commit.
    """

    # Seconds since epoch, encoded as a string
    expiry_time_seconds: Optional[str] = None
    id: Optional[str] = None


class ApkBinary(Schema):
    sha1: Optional[str] = None
    sha256: Optional[str] = None


class Apk(Schema):
    binary: Optional[ApkBinary] = None
    version_code: Optional[int] = None


class ApksListResponse(Schema):
    apks: Optional[list[Apk]] = None
    kind: Optional[str] = None


class UsesPermission(Schema):
    max_sdk_version: Optional[int] = None
    name: Optional[str] = None


class ExternallyHostedApk(Schema):
    """An APK served from the developer's own infrastructure."""

    application_label: Optional[str] = None
    certificate_base64s: Optional[list[str]] = None
    externally_hosted_url: Optional[str] = None
    file_sha1_base64: Optional[str] = None
    file_sha256_base64: Optional[str] = None
    file_size: Optional[str] = None
    icon_base64: Optional[str] = None
    maximum_sdk: Optional[int] = None
    minimum_sdk: Optional[int] = None
    native_codes: Optional[list[str]] = None
    package_name: Optional[str] = None
    uses_features: Optional[list[str]] = None
    uses_permissions: Optional[list[UsesPermission]] = None
    version_code: Optional[int] = None
    version_name: Optional[str] = None


class ApksAddExternallyHostedRequest(Schema):
    externally_hosted_apk: Optional[ExternallyHostedApk] = None


class ApksAddExternallyHostedResponse(Schema):
    externally_hosted_apk: Optional[ExternallyHostedApk] = None


class Bundle(Schema):
    sha1: Optional[str] = None
    sha256: Optional[str] = None
    version_code: Optional[int] = None


class BundlesListResponse(Schema):
    bundles: Optional[list[Bundle]] = None
    kind: Optional[str] = None


class DeobfuscationFile(Schema):
    # "proguard" or "nativeCode"
    symbol_type: Optional[str] = None


class DeobfuscationFilesUploadResponse(Schema):
    deobfuscation_file: Optional[DeobfuscationFile] = None


class AppDetails(Schema):
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    contact_website: Optional[str] = None
    default_language: Optional[str] = None


class ExpansionFile(Schema):
    file_size: Optional[str] = None
    references_version: Optional[int] = None


class ExpansionFilesUploadResponse(Schema):
    expansion_file: Optional[ExpansionFile] = None


class Image(Schema):
    id: Optional[str] = None
    sha1: Optional[str] = None
    sha256: Optional[str] = None
    url: Optional[str] = None


class ImagesDeleteAllResponse(Schema):
    deleted: Optional[list[Image]] = None


class ImagesListResponse(Schema):
    images: Optional[list[Image]] = None


class ImagesUploadResponse(Schema):
    image: Optional[Image] = None


class Listing(Schema):
    full_description: Optional[str] = None
    language: Optional[str] = None
    short_description: Optional[str] = None
    title: Optional[str] = None
    video: Optional[str] = None


class ListingsListResponse(Schema):
    kind: Optional[str] = None
    listings: Optional[list[Listing]] = None


class Testers(Schema):
    google_groups: Optional[list[str]] = None


class LocalizedText(Schema):
    language: Optional[str] = None
    text: Optional[str] = None


class CountryTargeting(Schema):
    countries: Optional[list[str]] = None
    include_rest_of_world: Optional[bool] = None


class TrackRelease(Schema):
    """
    One release of a track. ``user_fraction`` is only meaningful for
    ``inProgress`` and ``halted`` releases; bounds are checked by the server.
    """

    country_targeting: Optional[CountryTargeting] = None
    in_app_update_priority: Optional[int] = None
    name: Optional[str] = None
    release_notes: Optional[list[LocalizedText]] = None
    status: Optional[TrackReleaseStatus | str] = None
    user_fraction: Optional[float] = None
    version_codes: Optional[list[str]] = None


class Track(Schema):
    releases: Optional[list[TrackRelease]] = None
    track: Optional[str] = None


class TracksListResponse(Schema):
    kind: Optional[str] = None
    tracks: Optional[list[Track]] = None
