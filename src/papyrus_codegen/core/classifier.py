"""Attribute classification: one ``RawAttribute`` in, at most one typed directive out."""

from collections.abc import Callable

from papyrus_codegen.core.arguments import (
    first_argument,
    labeled_or_default,
    positional_argument,
    positional_or_default,
    unquote,
)
from papyrus_codegen.core.errors import ClassificationError, MalformedAttributeError, UnknownAttributeError
from papyrus_codegen.models import (
    Authorization,
    Body,
    Converter,
    Directive,
    Field,
    Header,
    Headers,
    HttpRoute,
    Json,
    KeyMapping,
    Multipart,
    Path,
    Query,
    RawAttribute,
    UrlForm,
)

HTTP_VERBS = ("GET", "DELETE", "PATCH", "POST", "PUT", "OPTIONS", "HEAD", "TRACE", "CONNECT")


def _require(raw: RawAttribute, index: int, argument: str) -> str:
    value = positional_argument(raw, index)
    if value is None:
        raise MalformedAttributeError(raw.name, argument)
    return value


def _optional_key(raw: RawAttribute) -> str | None:
    key = first_argument(raw)
    return unquote(key) if key is not None else None


def _verb_route(raw: RawAttribute) -> Directive:
    # The verb comes from the attribute name itself, never unquoted.
    return HttpRoute(method=raw.name, path=_require(raw, 0, "path"))


def _custom_route(raw: RawAttribute) -> Directive:
    path = _require(raw, 0, "path")
    method = _require(raw, 1, "method")
    return HttpRoute(method=unquote(method), path=path)


def _body(raw: RawAttribute) -> Directive:
    return Body()


def _field(raw: RawAttribute) -> Directive:
    return Field(key=_optional_key(raw))


def _query(raw: RawAttribute) -> Directive:
    return Query(key=_optional_key(raw))


def _header(raw: RawAttribute) -> Directive:
    return Header(key=_optional_key(raw))


def _path(raw: RawAttribute) -> Directive:
    return Path(key=_optional_key(raw))


def _headers(raw: RawAttribute) -> Directive:
    return Headers(value=_require(raw, 0, "headers"))


def _json(raw: RawAttribute) -> Directive:
    return Json(encoder=labeled_or_default(raw, "encoder"), decoder=labeled_or_default(raw, "decoder"))


def _url_form(raw: RawAttribute) -> Directive:
    return UrlForm(encoder=positional_or_default(raw, 0, "encoder"))


def _multipart(raw: RawAttribute) -> Directive:
    return Multipart(encoder=positional_or_default(raw, 0, "encoder"))


def _converter(raw: RawAttribute) -> Directive:
    return Converter(encoder=_require(raw, 0, "encoder"), decoder=_require(raw, 1, "decoder"))


def _key_mapping(raw: RawAttribute) -> Directive:
    return KeyMapping(value=_require(raw, 0, "value"))


def _authorization(raw: RawAttribute) -> Directive:
    return Authorization(value=_require(raw, 0, "value"))


_BUILDERS: dict[str, Callable[[RawAttribute], Directive]] = {
    **{verb: _verb_route for verb in HTTP_VERBS},
    "HTTP": _custom_route,
    "Body": _body,
    "Field": _field,
    "Query": _query,
    "Header": _header,
    "Path": _path,
    "Headers": _headers,
    "JSON": _json,
    "URLForm": _url_form,
    "Multipart": _multipart,
    "Converter": _converter,
    "KeyMapping": _key_mapping,
    "Authorization": _authorization,
}

RECOGNIZED_NAMES: frozenset[str] = frozenset(_BUILDERS)


def is_recognized(name: str) -> bool:
    return name in _BUILDERS


def classify_or_raise(raw: RawAttribute) -> Directive:
    """Classify ``raw``, telling foreign attributes apart from malformed directives.

    Raises ``UnknownAttributeError`` when the name is not a directive and
    ``MalformedAttributeError`` when a required argument is missing.
    """
    builder = _BUILDERS.get(raw.name)
    if builder is None:
        raise UnknownAttributeError(raw.name)
    return builder(raw)


def classify(raw: RawAttribute) -> Directive | None:
    """Classify ``raw``; ``None`` covers both foreign and malformed attributes."""
    try:
        return classify_or_raise(raw)
    except ClassificationError:
        return None
