from collections.abc import Iterable
from typing import Annotated, Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic import Field as ModelField


class RawAttribute(BaseModel):
    """One attribute occurrence as written in source: name plus verbatim argument text.

    ``arguments`` keeps every argument in source order, labeled or not. When it is
    not given it is derived from the positional arguments followed by the labeled ones.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    positional_arguments: list[str] = []
    labeled_arguments: dict[str, str] = {}
    arguments: list[tuple[str | None, str]] = []

    @model_validator(mode="before")
    @classmethod
    def _default_source_order(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("arguments"):
            positional = data.get("positional_arguments") or []
            labeled = data.get("labeled_arguments") or {}
            data = {**data, "arguments": [*((None, p) for p in positional), *labeled.items()]}
        return data

    @classmethod
    def from_arguments(cls, name: str, arguments: Iterable[tuple[str | None, str]]) -> "RawAttribute":
        """Build from ``(label, expression)`` pairs in source order.

        Unlabeled pairs (``label is None``) become positional arguments. A repeated
        label keeps the last expression written.
        """
        ordered = list(arguments)
        positional: list[str] = []
        labeled: dict[str, str] = {}
        for label, expression in ordered:
            if label is None:
                positional.append(expression)
            else:
                labeled[label] = expression
        return cls(name=name, positional_arguments=positional, labeled_arguments=labeled, arguments=ordered)


# ---------------------------------------------------------------------------
# Directives
# ---------------------------------------------------------------------------

DirectiveLevel = Literal["function", "type", "parameter"]


class _Directive(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: ClassVar[DirectiveLevel]


class HttpRoute(_Directive):
    level: ClassVar[DirectiveLevel] = "function"
    kind: Literal["http_route"] = "http_route"
    method: str
    path: str


class Json(_Directive):
    level: ClassVar[DirectiveLevel] = "type"
    kind: Literal["json"] = "json"
    encoder: str
    decoder: str


class UrlForm(_Directive):
    level: ClassVar[DirectiveLevel] = "type"
    kind: Literal["url_form"] = "url_form"
    encoder: str


class Multipart(_Directive):
    level: ClassVar[DirectiveLevel] = "type"
    kind: Literal["multipart"] = "multipart"
    encoder: str


class Converter(_Directive):
    level: ClassVar[DirectiveLevel] = "type"
    kind: Literal["converter"] = "converter"
    encoder: str
    decoder: str


class KeyMapping(_Directive):
    level: ClassVar[DirectiveLevel] = "type"
    kind: Literal["key_mapping"] = "key_mapping"
    value: str


class Headers(_Directive):
    level: ClassVar[DirectiveLevel] = "type"
    kind: Literal["headers"] = "headers"
    value: str


class Authorization(_Directive):
    level: ClassVar[DirectiveLevel] = "type"
    kind: Literal["authorization"] = "authorization"
    value: str


class Body(_Directive):
    level: ClassVar[DirectiveLevel] = "parameter"
    kind: Literal["body"] = "body"


class Field(_Directive):
    level: ClassVar[DirectiveLevel] = "parameter"
    kind: Literal["field"] = "field"
    key: str | None = None


class Query(_Directive):
    level: ClassVar[DirectiveLevel] = "parameter"
    kind: Literal["query"] = "query"
    key: str | None = None


class Header(_Directive):
    level: ClassVar[DirectiveLevel] = "parameter"
    kind: Literal["header"] = "header"
    key: str | None = None


class Path(_Directive):
    level: ClassVar[DirectiveLevel] = "parameter"
    kind: Literal["path"] = "path"
    key: str | None = None


Directive = Annotated[
    HttpRoute
    | Json
    | UrlForm
    | Multipart
    | Converter
    | KeyMapping
    | Headers
    | Authorization
    | Body
    | Field
    | Query
    | Header
    | Path,
    ModelField(discriminator="kind"),
]


class StatementBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    lines: list[str] = []
    missing_input: bool = False

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


# ---------------------------------------------------------------------------
# Scanned declarations
# ---------------------------------------------------------------------------


class ScannedParameter(BaseModel):
    name: str
    attributes: list[RawAttribute] = []


class ScannedFunction(BaseModel):
    name: str
    line: int
    attributes: list[RawAttribute] = []
    parameters: list[ScannedParameter] = []


class ScannedType(BaseModel):
    name: str
    attributes: list[RawAttribute] = []
    functions: list[ScannedFunction] = []


class GeneratedMethod(BaseModel):
    function: str
    method: str | None = None
    path: str | None = None
    statements: list[str] = []
