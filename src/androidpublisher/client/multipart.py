# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import uuid

JSON_MIME_TYPE = "application/json"


def build_multipart_related(
    metadata: bytes, media: bytes, media_type: str, boundary: str | None = None
) -> tuple[bytes, str]:
    """
    Encode a JSON metadata part followed by a media part as ``multipart/related``.

    Returns the body and the matching ``Content-Type`` header value.
    """
    boundary = boundary or uuid.uuid4().hex
    delimiter = f"--{boundary}\r\n".encode()

    parts = [
        delimiter,
        f"Content-Type: {JSON_MIME_TYPE}\r\n".encode(),
        f"Content-Length: {len(metadata)}\r\n\r\n".encode(),
        metadata,
        b"\r\n",
        delimiter,
        f"Content-Type: {media_type}\r\n".encode(),
        f"Content-Length: {len(media)}\r\n\r\n".encode(),
        media,
        b"\r\n",
        f"--{boundary}--".encode(),
    ]

    return b"".join(parts), f'multipart/related; boundary="{boundary}"'
