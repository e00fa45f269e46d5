from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import typer
from pydantic import BaseModel

from screenerx.capture import CaptureEngine
from screenerx.config import Config, get_config
from screenerx.console import console
from screenerx.errors import (
    BrowserLaunchFailed,
    CaptureFailed,
    InvalidSetting,
    LinkFileNotFound,
    LinkFileUnreadable,
)
from screenerx.links import get_links, normalize_url
from screenerx.models import CliArguments, GlobalConfig, TaskConfig
from screenerx.naming import ensure_dir, format_run_timestamp, output_filename
from screenerx.resolver import resolve_task


class TaskResult(BaseModel):
    name: str
    captured: list[Path] = []
    failed: list[str] = []
    skipped: Optional[str] = None


class RunSummary(BaseModel):
    run_timestamp: str
    tasks: list[TaskResult] = []

    @property
    def captured_count(self) -> int:
        return sum(len(task.captured) for task in self.tasks)

    @property
    def failed_count(self) -> int:
        return sum(len(task.failed) for task in self.tasks)


async def run_task(
    task: TaskConfig,
    global_config: GlobalConfig,
    cli: CliArguments,
    run_timestamp: str,
    config: Optional[Config] = None,
    engine_factory: Optional[Callable[..., CaptureEngine]] = None,
) -> TaskResult:
    """Capture every link of one task with a single browser instance."""
    config = config or get_config()
    engine_factory = engine_factory or CaptureEngine
    result = TaskResult(name=task.name)

    try:
        settings = resolve_task(task, global_config, cli, run_timestamp, config)
    except InvalidSetting as e:
        typer.echo(f"Skipping task {task.name}: {e}", err=True)
        result.skipped = str(e)
        return result
    console.log(settings)

    if not settings.url:
        typer.echo(f"Reading links from file: {settings.link_file}")
    try:
        links = get_links(settings)
    except (LinkFileNotFound, LinkFileUnreadable) as e:
        typer.echo(str(e), err=True)
        result.skipped = str(e)
        return result

    if not links:
        typer.echo(f"No links to capture for task {task.name}.")
        return result

    try:
        ensure_dir(settings.output_dir)
    except OSError as e:
        message = f"Cannot create output directory {settings.output_dir}: {e}"
        typer.echo(f"Skipping task {task.name}: {message}", err=True)
        result.skipped = message
        return result

    if settings.output_file and len(links) > 1:
        typer.echo(
            f"Warning: --outputFile {settings.output_file} given for "
            f"{len(links)} links, numbering the files.",
            err=True,
        )

    try:
        async with engine_factory(settings, config) as engine:
            for index, link in enumerate(links, start=1):
                url = normalize_url(link, settings.base_url)
                path = settings.output_dir / output_filename(
                    link,
                    index,
                    len(links),
                    settings.output_file,
                    settings.image_format,
                )
                typer.echo(f"Taking screenshot of {url}...")
                try:
                    await engine.capture(url, path)
                except CaptureFailed as e:
                    typer.echo(str(e), err=True)
                    result.failed.append(url)
                    continue
                console.log(f"saved {path}")
                result.captured.append(path)
    except BrowserLaunchFailed as e:
        typer.echo(f"Skipping task {task.name}: {e}", err=True)
        result.skipped = str(e)

    return result


async def run(
    global_config: GlobalConfig,
    cli: CliArguments,
    run_at: datetime,
    config: Optional[Config] = None,
    engine_factory: Optional[Callable[..., CaptureEngine]] = None,
) -> RunSummary:
    """Run every enabled task in order, one after another."""
    summary = RunSummary(run_timestamp=format_run_timestamp(run_at))

    for task in global_config.tasks:
        if not task.is_enabled:
            console.log(f"task {task.name} is disabled")
            summary.tasks.append(TaskResult(name=task.name, skipped="disabled"))
            continue
        summary.tasks.append(
            await run_task(
                task,
                global_config,
                cli,
                summary.run_timestamp,
                config,
                engine_factory,
            )
        )

    return summary
