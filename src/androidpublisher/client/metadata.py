# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Any, Self, TypedDict, TypeVar, cast

DECORATED_CLS = TypeVar("DECORATED_CLS", bound=type)


class OperationMetadata(TypedDict):
    decorators: "list[OperationDecorator]"
    decorators_by_type: "dict[Any, list[OperationDecorator]]"


class OperationDecorator:
    """
    Class decorator which records itself on the decorated call builder.

    Only the class it was applied to sees the metadata, subclasses of a
    decorated call builder must be decorated again.
    """

    _ATTR_NAME: str = "__androidpublisher_operation__"

    def __call__(self, subject: DECORATED_CLS) -> DECORATED_CLS:
        self.register(subject, self)
        return subject

    @classmethod
    def decorator_key(cls) -> Any:
        return cls

    @classmethod
    def get_metadata(cls, subject: Any) -> OperationMetadata | None:
        subject_type = subject if isinstance(subject, type) else type(subject)
        if cls._ATTR_NAME not in subject_type.__dict__:
            return None
        return cast(OperationMetadata, subject_type.__dict__[cls._ATTR_NAME])

    @classmethod
    def register(cls, subject: type, decorator: "OperationDecorator") -> None:
        metadata = cls.get_metadata(subject)
        if metadata is None:
            metadata = OperationMetadata(decorators=[], decorators_by_type={})
            setattr(subject, cls._ATTR_NAME, metadata)

        metadata["decorators"].append(decorator)
        metadata["decorators_by_type"].setdefault(cls.decorator_key(), []).append(
            decorator
        )

    @classmethod
    def get(cls, subject: Any) -> list[Self]:
        metadata = cls.get_metadata(subject)
        if metadata is None:
            return []

        if cls is OperationDecorator:
            return cast(list[Self], metadata["decorators"])
        return cast(
            list[Self], metadata["decorators_by_type"].get(cls.decorator_key(), [])
        )

    @classmethod
    def get_last(cls, subject: Any) -> Self | None:
        decorators = cls.get(subject)
        if decorators:
            return decorators[-1]
        return None
