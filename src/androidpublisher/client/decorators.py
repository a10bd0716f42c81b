# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Generic,
    Iterable,
    Literal,
    TypeVar,
    overload,
)

from pydantic import BaseModel

from androidpublisher.client.metadata import OperationDecorator

if TYPE_CHECKING:
    from androidpublisher.client.call import BaseCall

V = TypeVar("V")
M = TypeVar("M", bound=BaseModel)


class HttpMapping(OperationDecorator):

    def __init__(
        self, method: str, path: str, method_id: str, alt: Literal["json", "media"]
    ):
        self.method = method
        self.path = path
        self.method_id = method_id
        self.alt = alt

    @classmethod
    def decorator_key(cls) -> Any:
        return HttpMapping


class Get(HttpMapping):

    def __init__(
        self, path: str, method_id: str, alt: Literal["json", "media"] = "json"
    ):
        super().__init__("GET", path, method_id, alt)


class Post(HttpMapping):

    def __init__(self, path: str, method_id: str):
        super().__init__("POST", path, method_id, "json")


class Put(HttpMapping):

    def __init__(self, path: str, method_id: str):
        super().__init__("PUT", path, method_id, "json")


class Patch(HttpMapping):

    def __init__(self, path: str, method_id: str):
        super().__init__("PATCH", path, method_id, "json")


class Delete(HttpMapping):

    def __init__(self, path: str, method_id: str):
        super().__init__("DELETE", path, method_id, "json")


class MediaUpload(OperationDecorator):
    """Marks a call as accepting media, sent to ``path`` on the root url."""

    def __init__(self, path: str, max_size: int, mime_types: Iterable[str]):
        self.path = path
        self.max_size = max_size
        self.mime_types = tuple(mime_types)


class RequestAttribute(Generic[V]):
    """
    Declares a parameter of a call builder.

    Reading the attribute from an instance yields a fluent setter:
    ``call.edit_id("123")`` stores the value and returns the call.
    """

    location: Literal["path", "query", "body"]

    def __init__(self, name: str | None = None):
        self.name = name or ""
        self.attr_name = ""

    def __set_name__(self, owner: type, attr_name: str) -> None:
        self.attr_name = attr_name
        if not self.name:
            self.name = attr_name

    @overload
    def __get__(self, instance: None, owner: type) -> "RequestAttribute[V]": ...

    @overload
    def __get__(self, instance: "BaseCall[Any]", owner: type) -> Callable[[V], Any]: ...

    def __get__(self, instance: Any, owner: type) -> Any:
        if instance is None:
            return self

        def setter(value: V) -> Any:
            instance._values[self.attr_name] = value
            return instance

        setter.__name__ = self.attr_name
        setter.__doc__ = f"Sets the *{self.name}* {self.location} property."
        return setter


class PathParam(RequestAttribute[V]):
    location = "path"


class Query(RequestAttribute[V]):
    location = "query"


class RequestBody(RequestAttribute[M]):
    location = "body"

    def __init__(self, model: type[M]):
        super().__init__("request")
        self.model = model


__all__ = [
    "Delete",
    "Get",
    "HttpMapping",
    "MediaUpload",
    "Patch",
    "PathParam",
    "Post",
    "Put",
    "Query",
    "RequestAttribute",
    "RequestBody",
]
