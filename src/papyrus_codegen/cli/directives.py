"""Classify or render a single attribute from the command line."""

from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from papyrus_codegen.config import get_settings
from papyrus_codegen.core.classifier import classify, classify_or_raise
from papyrus_codegen.core.errors import CodegenError
from papyrus_codegen.core.renderer import render
from papyrus_codegen.models import Directive, RawAttribute

console = Console()

NameArgument = Annotated[str, typer.Argument(help="Attribute name without '@' (e.g. GET, Query, JSON).")]
ArgumentsArgument = Annotated[list[str] | None, typer.Argument(help="Unlabeled argument expressions, in order.")]
LabelOption = Annotated[
    list[str] | None, typer.Option("--label", "-l", help="Labeled argument as LABEL=EXPRESSION; repeatable.")
]
StrictOption = Annotated[bool | None, typer.Option("--strict/--lenient", help="Fail instead of skipping.")]


def _build_raw(name: str, arguments: list[str] | None, labels: list[str] | None) -> RawAttribute:
    pairs: list[tuple[str | None, str]] = [(None, a) for a in arguments or []]
    for item in labels or []:
        label, sep, expression = item.partition("=")
        if not sep or not label:
            console.print(f"[red]Invalid --label '{item}', expected LABEL=EXPRESSION.[/red]")
            raise typer.Exit(1)
        pairs.append((label.strip(), expression))
    return RawAttribute.from_arguments(name, pairs)


def _classify(raw: RawAttribute, strict: bool) -> Directive | None:
    if not strict:
        return classify(raw)
    try:
        return classify_or_raise(raw)
    except CodegenError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from None


def classify_command(
    name: NameArgument,
    arguments: ArgumentsArgument = None,
    label: LabelOption = None,
    strict: StrictOption = None,
) -> None:
    """Show the directive an attribute classifies to."""
    resolved_strict = get_settings().strict if strict is None else strict
    directive = _classify(_build_raw(name, arguments, label), resolved_strict)
    if directive is None:
        console.print(f"@{name} is not applicable")
        return

    table = Table(show_lines=False)
    table.add_column("field")
    table.add_column("value")
    table.add_row("level", directive.level)
    for key, value in directive.model_dump().items():
        table.add_row(key, "" if value is None else str(value))
    console.print(table)


def render_command(
    name: NameArgument,
    arguments: ArgumentsArgument = None,
    label: LabelOption = None,
    input: Annotated[str | None, typer.Option("--input", "-i", help="Name of the bound parameter.")] = None,
    strict: StrictOption = None,
) -> None:
    """Print the builder statements for an attribute."""
    resolved_strict = get_settings().strict if strict is None else strict
    directive = _classify(_build_raw(name, arguments, label), resolved_strict)
    if directive is None:
        console.print(f"@{name} is not applicable")
        return

    try:
        block = render(directive, input, strict=resolved_strict)
    except CodegenError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from None
    for line in block.lines:
        console.print(line, markup=False, highlight=False, soft_wrap=True)
