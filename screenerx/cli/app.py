import asyncio
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import typer

from screenerx.cli.common import verbose_callback
from screenerx.cli.config import config_app
from screenerx.config import get_config
from screenerx.models import CliArguments
from screenerx.resolver import load_config
from screenerx.runner import run

app = typer.Typer(
    name="screenerx",
    help="Batch-capture screenshots of a list of URLs with a headless browser.",
)
app.add_typer(config_app, name="config")


def version_callback(value: bool) -> None:
    """Print the installed screenerx version and exit."""
    if value:
        from screenerx.__about__ import __version__

        typer.echo(f"{__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    file: Optional[str] = typer.Option(
        None,
        "--file",
        "-f",
        help="Path to link file",
    ),
    url: Optional[str] = typer.Option(
        None,
        "--url",
        help="URL to screenshot (ignores link file)",
    ),
    width: Optional[int] = typer.Option(
        None,
        "--width",
        help="Width of the viewport",
    ),
    height: Optional[str] = typer.Option(
        None,
        "--height",
        help="Height of the viewport, or 'full' for a full-page capture",
    ),
    output_path: Optional[Path] = typer.Option(
        None,
        "--outputPath",
        "--output-path",
        help="Path to save screenshots",
    ),
    output_file: Optional[str] = typer.Option(
        None,
        "--outputFile",
        "--output-file",
        help="File name to save screenshots under",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to the JSON config file",
    ),
    version: bool = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        callback=verbose_callback,
        help="show the log messages",
    ),
) -> None:
    "take a screenshot of every link for every enabled task"
    if ctx.invoked_subcommand is not None:
        return

    settings = get_config()
    conf = load_config(config_file or settings.config_file)
    arguments = CliArguments(
        link_file=file,
        url=url,
        width=width,
        height=height,
        output_path=output_path,
        output_file=output_file,
    )

    summary = asyncio.run(
        run(conf, arguments, datetime.now(timezone.utc), settings)
    )

    typer.echo(
        f"Done! {summary.captured_count} captured, {summary.failed_count} failed."
    )


if __name__ == "__main__":
    app()
