"""Lowering of directives into request-builder statements."""

from collections.abc import Callable
from typing import Any

from papyrus_codegen.core.arguments import INPUT_REQUIRED
from papyrus_codegen.core.errors import InputRequiredError
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
    StatementBlock,
    UrlForm,
)


def _wire_key(key: str | None, input: str) -> str:
    return input if key is None else key


def _body(directive: Body, input: str) -> list[str]:
    return [f"req.setBody({input})"]


def _query(directive: Query, input: str) -> list[str]:
    map_parameter = "" if directive.key is None else ", mapKey: false"
    return [f'req.addQuery("{_wire_key(directive.key, input)}", value: {input}{map_parameter})']


def _header(directive: Header, input: str) -> list[str]:
    # Inverse of query/field: only the inferred key gets header-case conversion.
    convert_parameter = ", convertToHeaderCase: true" if directive.key is None else ""
    return [f'req.addHeader("{_wire_key(directive.key, input)}", value: {input}{convert_parameter})']


def _path(directive: Path, input: str) -> list[str]:
    return [f'req.addParameter("{_wire_key(directive.key, input)}", value: {input})']


def _field(directive: Field, input: str) -> list[str]:
    map_parameter = "" if directive.key is None else ", mapKey: false"
    return [f'req.addField("{_wire_key(directive.key, input)}", value: {input}{map_parameter})']


def _json(directive: Json, input: str | None) -> list[str]:
    return [
        f"req.requestEncoder = .json({directive.encoder})",
        f"req.responseDecoder = .json({directive.decoder})",
    ]


def _url_form(directive: UrlForm, input: str | None) -> list[str]:
    return [f"req.requestEncoder = .urlForm({directive.encoder})"]


def _multipart(directive: Multipart, input: str | None) -> list[str]:
    return [f"req.requestEncoder = .multipart({directive.encoder})"]


def _converter(directive: Converter, input: str | None) -> list[str]:
    return [
        f"req.requestEncoder = {directive.encoder}",
        f"req.responseDecoder = {directive.decoder}",
    ]


def _headers(directive: Headers, input: str | None) -> list[str]:
    return [f"req.addHeaders({directive.value})"]


def _key_mapping(directive: KeyMapping, input: str | None) -> list[str]:
    return [f"req.keyMapping = {directive.value}"]


def _authorization(directive: Authorization, input: str | None) -> list[str]:
    return [f"req.addAuthorization({directive.value})"]


def _http_route(directive: HttpRoute, input: str | None) -> list[str]:
    # Consumed by the caller for the method signature and URL template.
    return []


_TEMPLATES: dict[type, Callable[[Any, Any], list[str]]] = {
    Body: _body,
    Query: _query,
    Header: _header,
    Path: _path,
    Field: _field,
    Json: _json,
    UrlForm: _url_form,
    Multipart: _multipart,
    Converter: _converter,
    Headers: _headers,
    KeyMapping: _key_mapping,
    Authorization: _authorization,
    HttpRoute: _http_route,
}


def render(directive: Directive, input: str | None = None, *, strict: bool = False) -> StatementBlock:
    """Render the builder statements for a single directive.

    ``input`` is the name of the parameter bound to a parameter-level directive.
    Without it such directives render as the ``Input Required!`` sentinel line, or
    raise ``InputRequiredError`` when ``strict`` is set.
    """
    if directive.level == "parameter" and input is None:
        if strict:
            raise InputRequiredError(directive.kind)
        return StatementBlock(lines=[INPUT_REQUIRED], missing_input=True)
    return StatementBlock(lines=_TEMPLATES[type(directive)](directive, input))
