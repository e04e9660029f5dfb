import logging
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console

from papyrus_codegen.cli.directives import classify_command, render_command
from papyrus_codegen.cli.generate import generate
from papyrus_codegen.config import Settings, get_settings

app = typer.Typer(
    name="papyrus-codegen",
    help="Papyrus codegen CLI — turn API attributes into request-builder statements.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


@app.callback()
def configure(
    log_level: Annotated[str | None, typer.Option(help="Logging level (e.g. DEBUG, INFO).")] = None,
) -> None:
    try:
        settings = get_settings()
        if log_level is not None:
            settings = Settings.model_validate({**settings.model_dump(), "log_level": log_level.upper()})
    except ValidationError as exc:
        console.print(f"[red]Invalid configuration: {exc.errors()[0]['msg']}[/red]")
        raise typer.Exit(1) from None
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")


app.command("classify")(classify_command)
app.command("render")(render_command)
app.command("generate")(generate)


def main() -> None:
    app()
