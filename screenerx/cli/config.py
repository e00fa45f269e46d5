from pathlib import Path
from typing import Optional

from rich.console import Console
import typer

from screenerx.cli.common import verbose_callback
from screenerx.config import get_config
from screenerx.resolver import load_config, write_default_config

config_app = typer.Typer()


@config_app.callback()
def config(
    verbose: bool = typer.Option(
        False,
        callback=verbose_callback,
        help="show the log messages",
    ),
):
    "configuration cli"


@config_app.command()
def show(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to the JSON config file",
    ),
    verbose: bool = typer.Option(
        False,
        callback=verbose_callback,
        help="show the log messages",
    ),
):
    "print the settings and the config the next run would use"
    settings = get_config()
    console = Console()
    console.print(settings)
    console.print(load_config(config_file or settings.config_file))


@config_app.command()
def init(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to the JSON config file",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        help="overwrite an existing config file",
    ),
):
    "write the default config file"
    path = config_file or Path(get_config().config_file)
    try:
        write_default_config(path, force=force)
    except FileExistsError:
        typer.echo(f"{path} already exists, use --force to overwrite it.", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Wrote default config to {path}")
