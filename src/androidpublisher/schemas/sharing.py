# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Optional

from androidpublisher.schemas.base import Schema


class InternalAppSharingArtifact(Schema):
    certificate_fingerprint: Optional[str] = None
    download_url: Optional[str] = None
    sha256: Optional[str] = None


class DeviceSpec(Schema):
    screen_density: Optional[int] = None
    supported_abis: Optional[list[str]] = None
    supported_locales: Optional[list[str]] = None


class Variant(Schema):
    """A system APK built for one device specification."""

    device_spec: Optional[DeviceSpec] = None
    variant_id: Optional[int] = None


class SystemApksListResponse(Schema):
    variants: Optional[list[Variant]] = None
