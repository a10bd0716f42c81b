# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from .httpx import HTTPXTransport, Transport

__all__ = [
    "HTTPXTransport",
    "Transport",
]
