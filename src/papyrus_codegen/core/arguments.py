from papyrus_codegen.models import RawAttribute

INPUT_REQUIRED = "Input Required!"

DEFAULT_JSON_ENCODER = "JSONEncoder()"
DEFAULT_JSON_DECODER = "JSONDecoder()"
DEFAULT_URL_FORM_ENCODER = "URLEncodedFormEncoder()"
DEFAULT_MULTIPART_ENCODER = "MultipartEncoder()"

# (attribute name, argument role) -> expression emitted when the argument is omitted.
# Generated code is compared byte-for-byte against golden files, keep these stable.
DEFAULT_EXPRESSIONS: dict[tuple[str, str], str] = {
    ("JSON", "encoder"): DEFAULT_JSON_ENCODER,
    ("JSON", "decoder"): DEFAULT_JSON_DECODER,
    ("URLForm", "encoder"): DEFAULT_URL_FORM_ENCODER,
    ("Multipart", "encoder"): DEFAULT_MULTIPART_ENCODER,
}

_QUOTE_DELIMITERS = ('"""', '"')


def unquote(text: str) -> str:
    """Strip one layer of string-literal quotes, leaving any other expression untouched."""
    for delimiter in _QUOTE_DELIMITERS:
        width = len(delimiter)
        if len(text) >= 2 * width and text.startswith(delimiter) and text.endswith(delimiter):
            return text[width:-width]
    return text


def positional_argument(raw: RawAttribute, index: int) -> str | None:
    """Return the ``index``-th argument in source order, labeled or not."""
    if index < len(raw.arguments):
        return raw.arguments[index][1]
    return None


def first_argument(raw: RawAttribute) -> str | None:
    return positional_argument(raw, 0)


def second_argument(raw: RawAttribute) -> str | None:
    return positional_argument(raw, 1)


def positional_or_default(raw: RawAttribute, index: int, role: str) -> str:
    value = positional_argument(raw, index)
    if value is None:
        return DEFAULT_EXPRESSIONS[(raw.name, role)]
    return value


def labeled_or_default(raw: RawAttribute, label: str) -> str:
    value = raw.labeled_arguments.get(label)
    if value is None:
        return DEFAULT_EXPRESSIONS[(raw.name, label)]
    return value
