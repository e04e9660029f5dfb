from typing import Annotated

import typer
from rich.console import Console

from papyrus_codegen.config import get_settings
from papyrus_codegen.core.errors import CodegenError
from papyrus_codegen.core.generator import format_method, generate_type
from papyrus_codegen.core.scanner import scan_file

console = Console()


def generate(
    path: Annotated[str, typer.Argument(help="Path to a Swift source file.")],
    strict: Annotated[bool | None, typer.Option("--strict/--lenient", help="Fail on malformed directives.")] = None,
    indent: Annotated[int | None, typer.Option(help="Spaces to indent statements by.")] = None,
) -> None:
    """Generate request-builder statements for every API declaration in a file."""
    settings = get_settings()
    resolved_strict = settings.strict if strict is None else strict
    resolved_indent = settings.indent if indent is None else indent

    try:
        scanned_types = scan_file(path)
        for scanned in scanned_types:
            console.print(f"[bold]{scanned.name}[/bold]")
            for method in generate_type(scanned, strict=resolved_strict):
                console.print(format_method(method, resolved_indent), markup=False, highlight=False, soft_wrap=True)
    except (CodegenError, FileNotFoundError, ValueError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from None

    if not scanned_types:
        console.print("(0 declarations)")
