# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from pydantic import BaseModel, ConfigDict


def to_wire_name(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


class Schema(BaseModel):
    """
    Base of every resource of the API.

    Fields are snake_case in python and camelCase on the wire; ``None``
    means absent and is never serialized.
    """

    model_config = ConfigDict(
        alias_generator=to_wire_name,
        populate_by_name=True,
        extra="ignore",
    )

    def to_json(self) -> bytes:
        return self.model_dump_json(by_alias=True, exclude_none=True).encode()

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
