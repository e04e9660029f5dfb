class CodegenError(Exception):
    """Base class for errors raised while translating attributes into builder statements."""


class ClassificationError(CodegenError):
    def __init__(self, name: str, message: str) -> None:
        self.name = name
        super().__init__(message)


class UnknownAttributeError(ClassificationError):
    """The attribute name is not one of the recognized directives."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Unknown attribute '@{name}'")


class MalformedAttributeError(ClassificationError):
    """A recognized attribute is missing one of its required arguments."""

    def __init__(self, name: str, argument: str) -> None:
        self.argument = argument
        super().__init__(name, f"Attribute '@{name}' requires a '{argument}' argument")


class InputRequiredError(CodegenError):
    """A parameter-level directive was rendered without the name of the bound parameter."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Directive '{kind}' needs an input value to render")
