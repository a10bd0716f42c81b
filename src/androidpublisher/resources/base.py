# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from androidpublisher.hub import AndroidPublisher

APPLICATION_PATH = "androidpublisher/v3/applications/{packageName}"
EDIT_PATH = APPLICATION_PATH + "/edits/{editId}"
UPLOAD_PREFIX = "upload/"

KiB = 1024
MiB = 1024 * KiB
GiB = 1024 * MiB


class MethodBuilder:
    """Groups the operations of one resource collection of the hub."""

    def __init__(self, hub: "AndroidPublisher") -> None:
        self.hub = hub
