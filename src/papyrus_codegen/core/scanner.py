"""Extract raw attributes from Swift declarations with tree-sitter."""

import logging
from pathlib import Path
from typing import cast

from tree_sitter import Node
from tree_sitter_language_pack import SupportedLanguage, get_parser

from papyrus_codegen.core.languages import resolve_language
from papyrus_codegen.models import RawAttribute, ScannedFunction, ScannedParameter, ScannedType

logger = logging.getLogger(__name__)

_TYPE_DECLARATIONS = frozenset({"protocol_declaration", "class_declaration"})
_FUNCTION_DECLARATIONS = frozenset({"protocol_function_declaration", "function_declaration"})
_COMMENTS = frozenset({"comment", "multiline_comment"})
_ARGUMENT_WRAPPERS = frozenset({"value_argument", "attribute_argument"})


def _text(node: Node, source: bytes) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8")


def _find_all(node: Node, node_type: str) -> list[Node]:
    """Collect descendants of ``node_type`` in source order, without descending into matches."""
    found: list[Node] = []
    for child in node.children:
        if child.type == node_type:
            found.append(child)
        else:
            found.extend(_find_all(child, node_type))
    return found


def _declared_name(node: Node, source: bytes, fallback_types: tuple[str, ...]) -> str:
    name_node = node.child_by_field_name("name")
    if name_node is None:
        name_node = next((c for c in node.children if c.type in fallback_types), None)
    return _text(name_node, source) if name_node is not None else ""


def _attribute_name(node: Node, source: bytes) -> str:
    for child in node.children:
        if child.type == "user_type":
            return _text(child, source)
    return ""


def _argument_groups(node: Node) -> list[list[Node]]:
    """Split the children between the attribute's parentheses on top-level commas."""
    groups: list[list[Node]] = []
    current: list[Node] = []
    inside = False
    children = node.children
    if not any(c.type == "(" for c in children):
        wrapper = next((c for c in children if any(g.type == "(" for g in c.children)), None)
        children = wrapper.children if wrapper is not None else []
    for child in children:
        if not inside:
            inside = child.type == "("
            continue
        if child.type in (",", ")"):
            if current:
                groups.append(current)
            current = []
        elif child.type not in _COMMENTS:
            current.append(child)
    return groups


def parse_attribute(node: Node, source: bytes) -> RawAttribute:
    arguments: list[tuple[str | None, str]] = []
    for group in _argument_groups(node):
        if len(group) == 1 and group[0].type in _ARGUMENT_WRAPPERS:
            group = [c for c in group[0].children if c.type not in _COMMENTS]
        if not group:
            continue
        if len(group) >= 3 and group[1].type == ":":
            label: str | None = _text(group[0], source)
            expression = group[2:]
        else:
            label = None
            expression = group
        text = source[expression[0].start_byte : expression[-1].end_byte].decode("utf-8")
        arguments.append((label, text))
    return RawAttribute.from_arguments(_attribute_name(node, source), arguments)


def _modifier_attributes(node: Node, source: bytes) -> list[RawAttribute]:
    attributes: list[RawAttribute] = []
    for child in node.children:
        if child.type == "modifiers":
            attributes.extend(parse_attribute(a, source) for a in _find_all(child, "attribute"))
    return attributes


def _scan_function(node: Node, source: bytes) -> ScannedFunction:
    parameters: list[ScannedParameter] = []
    pending: list[RawAttribute] = []
    for child in node.children:
        if child.type == "attribute":
            # Parameter attributes precede the parameter node they decorate.
            pending.append(parse_attribute(child, source))
        elif child.type == "parameter":
            nested = [parse_attribute(a, source) for a in _find_all(child, "attribute")]
            parameters.append(
                ScannedParameter(
                    name=_declared_name(child, source, ("simple_identifier",)),
                    attributes=[*pending, *nested],
                )
            )
            pending = []
    return ScannedFunction(
        name=_declared_name(node, source, ("simple_identifier",)),
        line=node.start_point[0] + 1,
        attributes=_modifier_attributes(node, source),
        parameters=parameters,
    )


def _scan_type(node: Node, source: bytes) -> ScannedType:
    functions: list[ScannedFunction] = []
    for child in node.children:
        if child.type.endswith("_body"):
            functions.extend(
                _scan_function(member, source) for member in child.children if member.type in _FUNCTION_DECLARATIONS
            )
    return ScannedType(
        name=_declared_name(node, source, ("type_identifier",)),
        attributes=_modifier_attributes(node, source),
        functions=functions,
    )


def scan_source(source: bytes, language: str = "swift") -> list[ScannedType]:
    """Return every protocol, class or struct declaration in ``source`` with its attributes."""
    parser = get_parser(cast(SupportedLanguage, language))
    tree = parser.parse(source)
    scanned = [_scan_type(node, source) for node in _find_declarations(tree.root_node)]
    logger.debug("Scanned %d type declaration(s)", len(scanned))
    return scanned


def _find_declarations(node: Node) -> list[Node]:
    found: list[Node] = []
    for child in node.children:
        if child.type in _TYPE_DECLARATIONS:
            found.append(child)
        found.extend(_find_declarations(child))
    return found


def scan_file(path: str, language: str | None = None) -> list[ScannedType]:
    file_path = Path(path)
    resolved_language = resolve_language(language, file_path)

    try:
        source_bytes = file_path.read_bytes()
    except FileNotFoundError:
        raise FileNotFoundError(f"File not found: {path}") from None

    logger.info("Scanning %s (language: %s)", file_path, resolved_language)
    return scan_source(source_bytes, resolved_language)
