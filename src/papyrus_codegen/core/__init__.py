from papyrus_codegen.core.arguments import (
    DEFAULT_JSON_DECODER,
    DEFAULT_JSON_ENCODER,
    DEFAULT_MULTIPART_ENCODER,
    DEFAULT_URL_FORM_ENCODER,
    INPUT_REQUIRED,
    unquote,
)
from papyrus_codegen.core.classifier import RECOGNIZED_NAMES, classify, classify_or_raise, is_recognized
from papyrus_codegen.core.errors import (
    ClassificationError,
    CodegenError,
    InputRequiredError,
    MalformedAttributeError,
    UnknownAttributeError,
)
from papyrus_codegen.core.generator import generate_function, generate_source, generate_type
from papyrus_codegen.core.renderer import render
from papyrus_codegen.core.scanner import scan_file, scan_source

__all__ = [
    "DEFAULT_JSON_DECODER",
    "DEFAULT_JSON_ENCODER",
    "DEFAULT_MULTIPART_ENCODER",
    "DEFAULT_URL_FORM_ENCODER",
    "INPUT_REQUIRED",
    "RECOGNIZED_NAMES",
    "ClassificationError",
    "CodegenError",
    "InputRequiredError",
    "MalformedAttributeError",
    "UnknownAttributeError",
    "classify",
    "classify_or_raise",
    "generate_function",
    "generate_source",
    "generate_type",
    "is_recognized",
    "render",
    "scan_file",
    "scan_source",
    "unquote",
]
