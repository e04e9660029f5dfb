"""Assemble generated method bodies from scanned declarations."""

import logging
from collections.abc import Iterable

from papyrus_codegen.core.classifier import classify_or_raise
from papyrus_codegen.core.errors import MalformedAttributeError, UnknownAttributeError
from papyrus_codegen.core.renderer import render
from papyrus_codegen.core.scanner import scan_source
from papyrus_codegen.models import (
    Directive,
    GeneratedMethod,
    HttpRoute,
    RawAttribute,
    ScannedFunction,
    ScannedType,
)

logger = logging.getLogger(__name__)


def collect_directives(attributes: Iterable[RawAttribute], *, strict: bool = False) -> list[Directive]:
    """Classify ``attributes`` in order, dropping the ones that are not directives.

    Malformed directives are dropped too, unless ``strict`` is set, in which case
    the ``MalformedAttributeError`` propagates.
    """
    directives: list[Directive] = []
    for raw in attributes:
        try:
            directives.append(classify_or_raise(raw))
        except UnknownAttributeError:
            continue
        except MalformedAttributeError as exc:
            if strict:
                raise
            logger.debug("Skipping malformed attribute: %s", exc)
    return directives


def generate_function(
    function: ScannedFunction,
    type_attributes: Iterable[RawAttribute] = (),
    *,
    strict: bool = False,
) -> GeneratedMethod:
    generated = GeneratedMethod(function=function.name)
    statements: list[str] = []

    for directive in [
        *collect_directives(type_attributes, strict=strict),
        *collect_directives(function.attributes, strict=strict),
    ]:
        if isinstance(directive, HttpRoute):
            generated.method = directive.method
            generated.path = directive.path
            continue
        statements.extend(render(directive, strict=strict).lines)

    for parameter in function.parameters:
        for directive in collect_directives(parameter.attributes, strict=strict):
            statements.extend(render(directive, parameter.name, strict=strict).lines)

    generated.statements = statements
    return generated


def generate_type(scanned: ScannedType, *, strict: bool = False) -> list[GeneratedMethod]:
    methods = [generate_function(f, scanned.attributes, strict=strict) for f in scanned.functions]
    logger.info("Generated %d method(s) for %s", len(methods), scanned.name)
    return methods


def generate_source(source: bytes, *, strict: bool = False) -> dict[str, list[GeneratedMethod]]:
    """Scan Swift ``source`` and generate method bodies keyed by declaring type."""
    return {scanned.name: generate_type(scanned, strict=strict) for scanned in scan_source(source)}


def format_method(method: GeneratedMethod, indent: int = 4) -> str:
    if method.method is not None:
        header = f"// {method.function}: {method.method} {method.path}"
    else:
        header = f"// {method.function}"
    padding = " " * indent
    return "\n".join([header, *(f"{padding}{line}" for line in method.statements)])
