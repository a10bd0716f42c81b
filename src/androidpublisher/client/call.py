# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import io
import logging
import re
import typing
from enum import Enum
from typing import (
    TYPE_CHECKING,
    Any,
    Awaitable,
    BinaryIO,
    Callable,
    ClassVar,
    Generic,
    Sequence,
    TypeVar,
    get_args,
    get_origin,
)
from urllib.parse import quote

import pydantic
import tenacity
from pydantic import BaseModel

from androidpublisher.client.decorators import (
    HttpMapping,
    MediaUpload,
    RequestAttribute,
    RequestBody,
)
from androidpublisher.client.delegate import DefaultDelegate, Delegate
from androidpublisher.client.errors import (
    AuthenticationError,
    BadRequest,
    Cancelled,
    Failure,
    FieldClash,
    HttpError,
    JsonDecodeError,
    MissingToken,
    TransportError,
    UploadSizeLimitExceeded,
)
from androidpublisher.client.multipart import JSON_MIME_TYPE, build_multipart_related
from androidpublisher.client.types import (
    ContentRange,
    ErrorResponse,
    HttpRequest,
    HttpResponse,
    JsonServerError,
    MethodInfo,
    ServerError,
)

if TYPE_CHECKING:
    from androidpublisher.hub import AndroidPublisher

logger = logging.getLogger(__name__)

R = TypeVar("R")
C = TypeVar("C", bound="BaseCall[Any]")

PLACEHOLDER_RE = re.compile(r"\{(\+?)([A-Za-z0-9_.]+)\}")
RANGE_RE = re.compile(r"bytes=(\d+)-(\d+)")

# Status of a resumable upload chunk which the server stored without completing
# the upload.
RESUME_INCOMPLETE = 308

MediaSource = bytes | bytearray | memoryview | BinaryIO
Acceptor = Callable[[HttpResponse], bool]


class _RetryRequested(Exception):
    """Raised inside an attempt when the delegate asked for another one."""

    def __init__(self, delay: float, error: Exception):
        self.delay = delay
        self.error = error
        super().__init__(f"retry in {delay}s after: {error}")


def _delegate_wait(retry_state: tenacity.RetryCallState) -> float:
    exception = retry_state.outcome.exception() if retry_state.outcome else None
    if isinstance(exception, _RetryRequested):
        return exception.delay
    return 0.0


def _is_success(response: HttpResponse) -> bool:
    return response.is_success


def _is_chunk_answer(response: HttpResponse) -> bool:
    return response.is_success or response.status_code == RESUME_INCOMPLETE


def to_query_value(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def expand_path(
    template: str, params: list[tuple[str, str]]
) -> tuple[str, list[tuple[str, str]]]:
    """
    Replace every ``{name}`` placeholder of ``template`` by the matching
    parameter value and return the url together with the parameters which
    are left for the query string.

    ``{+name}`` placeholders keep ``/`` unescaped.
    """
    values = dict(params)
    substituted: set[str] = set()

    def replace(match: re.Match[str]) -> str:
        reserved, name = match.groups()
        if name not in values:
            raise ValueError(f"No value for placeholder {{{name}}} in {template}")
        substituted.add(name)
        return quote(values[name], safe="/" if reserved else "")

    url = PLACEHOLDER_RE.sub(replace, template)
    remaining = [(name, value) for name, value in params if name not in substituted]
    return url, remaining


def media_size(source: MediaSource) -> int:
    if isinstance(source, (bytes, bytearray, memoryview)):
        return len(source)
    size = source.seek(0, io.SEEK_END)
    source.seek(0)
    return size


def read_media(source: MediaSource) -> bytes:
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    return source.read()


def read_chunk(source: MediaSource, offset: int, length: int) -> bytes:
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source[offset : offset + length])
    source.seek(offset)
    return source.read(length)


def next_offset(response: HttpResponse) -> int:
    """
    First byte the server still expects, from the ``Range`` header of a
    resume-incomplete answer. No header means nothing was stored yet.
    """
    match = RANGE_RE.match(response.header("Range") or "")
    if match is None:
        return 0
    return int(match.group(2)) + 1


class BaseCall(Generic[R]):
    """
    State shared by every call builder and the request protocol they run.

    Subclasses declare their parameters with ``PathParam``/``Query``/
    ``RequestBody`` and are decorated with one ``HttpMapping`` (and
    ``MediaUpload`` for media operations). The response model is taken from
    the generic argument, ``None`` meaning the raw response is returned.
    """

    response_type: ClassVar[type[BaseModel] | None] = None
    _attributes: ClassVar[tuple[RequestAttribute[Any], ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        attributes: dict[str, RequestAttribute[Any]] = {}
        for klass in reversed(cls.__mro__):
            for attr_name, value in vars(klass).items():
                if isinstance(value, RequestAttribute):
                    attributes[attr_name] = value
        cls._attributes = tuple(attributes.values())

        for base in getattr(cls, "__orig_bases__", ()):
            origin = get_origin(base)
            if isinstance(origin, type) and issubclass(origin, BaseCall):
                (response_type,) = get_args(base)
                if isinstance(response_type, TypeVar):
                    continue
                cls.response_type = (
                    None if response_type is type(None) else response_type
                )

    def __init__(self, hub: "AndroidPublisher", **values: Any) -> None:
        self.hub = hub
        self._values: dict[str, Any] = {}
        self._delegate: Delegate | None = None
        self._additional_params: dict[str, str] = {}
        self._scopes: set[str] = set()

        for attr_name, value in values.items():
            if not isinstance(getattr(type(self), attr_name, None), RequestAttribute):
                raise TypeError(
                    f"{type(self).__name__} has no parameter named {attr_name!r}"
                )
            self._values[attr_name] = value

    def delegate(self: C, new_value: Delegate) -> C:
        """
        The delegate implementation is consulted whenever there is an
        intermediate result, or if something goes wrong while executing the
        call.
        """
        self._delegate = new_value
        return self

    def param(self: C, name: str, value: Any) -> C:
        """
        Set any additional query parameter. Names of the call's own
        parameters are rejected with ``FieldClash`` when the call executes.
        """
        self._additional_params[name] = to_query_value(value)
        return self

    def add_scope(self: C, scope: str) -> C:
        """
        Identifies the authorization scope for the method you are building.
        Defaults to the hub's default scopes when none is added.
        """
        self._scopes.add(str(scope))
        return self

    @property
    def scopes(self) -> list[str]:
        if self._scopes:
            return sorted(self._scopes)
        return list(self.hub.config.default_scopes)

    @classmethod
    def mapping(cls) -> HttpMapping:
        mapping = HttpMapping.get_last(cls)
        if mapping is None:
            raise TypeError(f"{cls.__name__} is not mapped to an http operation")
        return mapping

    @classmethod
    def reserved_params(cls) -> list[str]:
        reserved = ["alt"]
        reserved.extend(
            attribute.name
            for attribute in cls._attributes
            if attribute.location in ("path", "query")
        )
        if MediaUpload.get_last(cls) is not None:
            reserved.append("uploadType")
        return reserved

    def _query_params(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        for attribute in self._attributes:
            if attribute.location == "body":
                continue
            value = self._values.get(attribute.attr_name)
            if value is not None:
                params.append((attribute.name, to_query_value(value)))
        return params

    def _request_body(self) -> BaseModel | None:
        for attribute in self._attributes:
            if isinstance(attribute, RequestBody):
                return typing.cast(
                    BaseModel | None, self._values.get(attribute.attr_name)
                )
        return None

    def _params(
        self, mapping: HttpMapping, upload_type: str | None = None
    ) -> list[tuple[str, str]]:
        params = self._query_params()
        for field in self.reserved_params():
            if field in self._additional_params:
                raise FieldClash(field)

        params.extend(self._additional_params.items())
        params.append(("alt", mapping.alt))
        if upload_type is not None:
            params.append(("uploadType", upload_type))
        return params

    def _json_body(self) -> bytes | None:
        request_value = self._request_body()
        if request_value is None:
            return None
        return request_value.model_dump_json(by_alias=True, exclude_none=True).encode()

    def _checked_size(self, upload: MediaUpload, source: MediaSource) -> int:
        size = media_size(source)
        if size > upload.max_size:
            logger.error(
                "Refusing to upload %s bytes to %s, limit is %s",
                size,
                self.mapping().method_id,
                upload.max_size,
            )
            raise UploadSizeLimitExceeded(size, upload.max_size)
        return size

    def _headers(
        self, content: bytes | None, content_type: str | None
    ) -> list[tuple[str, str]]:
        headers: list[tuple[str, str]] = [("User-Agent", self.hub._user_agent)]
        if content is not None and content_type is not None:
            headers.append(("Content-Type", content_type))
            headers.append(("Content-Length", str(len(content))))
        return headers

    async def _execute(self, media: tuple[MediaSource, str] | None = None) -> Any:
        return await self._notified(lambda dlg: self._run(dlg, media))

    async def _notified(self, run: Callable[[Delegate], Awaitable[Any]]) -> Any:
        mapping = self.mapping()
        dlg = self._delegate or DefaultDelegate()

        dlg.begin(MethodInfo(id=mapping.method_id, http_method=mapping.method))
        try:
            result = await run(dlg)
        except Exception:
            dlg.finished(False)
            raise

        dlg.finished(True)
        return result

    async def _run(self, dlg: Delegate, media: tuple[MediaSource, str] | None) -> Any:
        mapping = self.mapping()
        upload = MediaUpload.get_last(type(self)) if media is not None else None

        if upload is not None:
            params = self._params(mapping, "multipart")
            template = self.hub._root_url + upload.path
        else:
            params = self._params(mapping)
            template = self.hub._base_url + mapping.path

        url, params = expand_path(template, params)

        content = self._json_body()
        content_type = JSON_MIME_TYPE if content is not None else None

        if media is not None and upload is not None:
            source, mime_type = media
            self._checked_size(upload, source)

            data = read_media(source)
            if content is not None:
                content, content_type = build_multipart_related(
                    content, data, mime_type
                )
            else:
                content, content_type = data, mime_type

        request = HttpRequest(
            url=url,
            method=mapping.method,
            headers=self._headers(content, content_type),
            query_params=params,
            body=content,
        )

        logger.debug(
            "Prepared request %s: %s %s\nQuery Params: %s",
            mapping.method_id,
            request.method,
            request.url,
            request.query_params,
        )

        response = await self._send(request, dlg)
        return self._decode(response, dlg)

    async def _run_resumable(
        self, dlg: Delegate, source: MediaSource, mime_type: str
    ) -> Any:
        mapping = self.mapping()
        upload = MediaUpload.get_last(type(self))
        if upload is None:
            raise TypeError(f"{type(self).__name__} is not a media upload")

        params = self._params(mapping, "resumable")
        url, params = expand_path(self.hub._root_url + upload.path, params)
        size = self._checked_size(upload, source)

        session_url = dlg.upload_url()
        if session_url is None:
            content = self._json_body()
            headers = self._headers(content, JSON_MIME_TYPE)
            headers.append(("X-Upload-Content-Type", mime_type))
            headers.append(("X-Upload-Content-Length", str(size)))

            response = await self._send(
                HttpRequest(
                    url=url,
                    method=mapping.method,
                    headers=headers,
                    query_params=params,
                    body=content,
                ),
                dlg,
            )
            session_url = response.header("Location")
            if not session_url:
                logger.error("%s did not open an upload session", mapping.method_id)
                raise Failure(response)

            logger.debug("Opened upload session for %s", mapping.method_id)
            dlg.store_upload_url(session_url)
            start = 0
        else:
            response = await self._send_chunk(
                session_url, ContentRange(0, -1, size), b"", dlg
            )
            if response.is_success:
                dlg.store_upload_url(None)
                return self._decode(response, dlg)
            start = next_offset(response)
            logger.debug("Resuming %s at byte %s", mapping.method_id, start)

        chunk_size = max(dlg.chunk_size(), 1)
        while True:
            end = min(start + chunk_size, size)
            chunk = ContentRange(start, end - 1, size)
            if dlg.cancel_chunk_upload(chunk):
                logger.warning(
                    "Upload of %s cancelled at %s", mapping.method_id, chunk.header_value()
                )
                raise Cancelled()

            response = await self._send_chunk(
                session_url, chunk, read_chunk(source, start, chunk.length), dlg
            )
            if response.is_success:
                dlg.store_upload_url(None)
                return self._decode(response, dlg)
            if chunk.length == 0:
                logger.error(
                    "Upload session of %s did not complete after the last byte",
                    mapping.method_id,
                )
                raise Failure(response)
            start = next_offset(response)

    async def _send_chunk(
        self, session_url: str, chunk: ContentRange, data: bytes, dlg: Delegate
    ) -> HttpResponse:
        headers = [
            ("User-Agent", self.hub._user_agent),
            ("Content-Range", chunk.header_value()),
            ("Content-Length", str(len(data))),
        ]
        request = HttpRequest(
            url=session_url,
            method="PUT",
            headers=headers,
            query_params=[],
            body=data,
        )
        return await self._send(request, dlg, accept=_is_chunk_answer)

    async def _send(
        self, request: HttpRequest, dlg: Delegate, accept: Acceptor = _is_success
    ) -> HttpResponse:
        """
        Send ``request`` until an accepted response arrives, the delegate stops
        retrying or the retry policy runs out.
        """
        policy = self.hub.config.retry_policy
        response: HttpResponse | None = None
        try:
            async for attempt in tenacity.AsyncRetrying(
                stop=tenacity.stop_after_attempt(policy.max_attempts),
                wait=_delegate_wait,
                retry=tenacity.retry_if_exception_type(_RetryRequested),
                before_sleep=tenacity.before_sleep_log(logger, logging.WARNING),
                reraise=True,
            ):
                with attempt:
                    response = await self._attempt(request, dlg, accept)
        except _RetryRequested as e:
            logger.error(
                "Giving up %s after %s attempts: %s",
                self.mapping().method_id,
                policy.max_attempts,
                e.error,
            )
            raise e.error

        return typing.cast(HttpResponse, response)

    async def _token(self, dlg: Delegate) -> str:
        try:
            return await self.hub.auth.token(self.scopes)
        except Exception as err:
            error = (
                err
                if isinstance(err, AuthenticationError)
                else AuthenticationError(f"{type(err).__name__}: {err}")
            )
            fallback = dlg.token(error)
            if fallback is None:
                logger.error("No token available for scopes %s: %s", self.scopes, err)
                raise MissingToken(error) from err
            return fallback

    async def _attempt(
        self, request: HttpRequest, dlg: Delegate, accept: Acceptor
    ) -> HttpResponse:
        token = await self._token(dlg)

        sent = HttpRequest(
            url=request.url,
            method=request.method,
            headers=[*request.headers, ("Authorization", f"Bearer {token}")],
            query_params=request.query_params,
            body=request.body,
        )

        dlg.pre_request()
        try:
            response = await self.hub.transport.send(sent)
        except TransportError as err:
            retry = dlg.http_error(err)
            if retry.should_retry:
                raise _RetryRequested(typing.cast(float, retry.delay), HttpError(err))
            raise HttpError(err) from err

        if accept(response):
            return response

        json_server_error = _parse_or_none(JsonServerError, response.data)
        server_error = _parse_or_none(ServerError, response.data)
        if server_error is None:
            error_response = _parse_or_none(ErrorResponse, response.data)
            server_error = error_response.error if error_response else None

        retry = dlg.http_failure(response, json_server_error, server_error)
        error = _failure_error(response)
        if retry.should_retry:
            raise _RetryRequested(typing.cast(float, retry.delay), error)

        logger.warning(
            "Request %s %s failed with status %s",
            request.method,
            request.url,
            response.status_code,
        )
        raise error

    def _decode(self, response: HttpResponse, dlg: Delegate) -> Any:
        if self.response_type is None:
            return response

        try:
            return self.response_type.model_validate_json(response.data)
        except pydantic.ValidationError as err:
            dlg.response_json_decode_error(response.text, err)
            raise JsonDecodeError(response.text, err) from err


def _parse_or_none(model: type[BaseModel], data: bytes) -> Any:
    try:
        return model.model_validate_json(data)
    except pydantic.ValidationError:
        return None


def _failure_error(response: HttpResponse) -> Exception:
    error_response = _parse_or_none(ErrorResponse, response.data)
    if error_response is None:
        return Failure(response)
    return BadRequest(error_response, response)


class CallBuilder(BaseCall[R]):
    """Call builder of an operation exchanging JSON only."""

    async def doit(self) -> R:
        """Perform the operation you have built so far."""
        return typing.cast(R, await self._execute())


class UploadCallBuilder(BaseCall[R]):
    """Call builder of an operation which sends media."""

    async def upload(self, stream: MediaSource, mime_type: str) -> R:
        """
        Upload media all at once.

        ``stream`` is either the raw bytes or a seekable binary file object;
        its size is checked against the operation's limit before anything is
        sent. The whole media is held in memory while it is sent, prefer
        ``upload_resumable`` for large files.
        """
        return typing.cast(R, await self._execute(media=(stream, mime_type)))

    async def upload_resumable(self, stream: MediaSource, mime_type: str) -> R:
        """
        Upload media in chunks through a resumable upload session.

        The session is opened with ``uploadType=resumable`` unless the
        delegate's ``upload_url`` returns one to resume, then the media is
        sent in ``chunk_size`` pieces, one ``PUT`` with a ``Content-Range``
        each, until the server answers with the created resource. Only one
        chunk is read from ``stream`` at a time.
        """
        return typing.cast(
            R,
            await self._notified(
                lambda dlg: self._run_resumable(dlg, stream, mime_type)
            ),
        )

    @classmethod
    def max_upload_size(cls) -> int:
        upload = MediaUpload.get_last(cls)
        if upload is None:
            raise TypeError(f"{cls.__name__} is not a media upload")
        return upload.max_size

    @classmethod
    def accepted_mime_types(cls) -> Sequence[str]:
        upload = MediaUpload.get_last(cls)
        return upload.mime_types if upload else ()


__all__ = [
    "BaseCall",
    "CallBuilder",
    "MediaSource",
    "UploadCallBuilder",
    "expand_path",
    "media_size",
    "next_offset",
    "read_chunk",
    "to_query_value",
]
