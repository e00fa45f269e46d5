import re
from datetime import datetime, timezone
from pathlib import Path

UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9]")


def format_run_timestamp(run_at: datetime) -> str:
    """ISO-8601 UTC with milliseconds, e.g. ``2024-05-01T12:30:00.000Z``."""
    run_at = run_at.astimezone(timezone.utc)
    return run_at.strftime("%Y-%m-%dT%H:%M:%S.") + f"{run_at.microsecond // 1000:03d}Z"


def task_output_dir(
    base_path: str, run_timestamp: str, task_name: str, browser: str
) -> Path:
    return Path(base_path) / run_timestamp / f"{task_name}_{browser}"


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def sanitize_filename(link: str, image_format: str = "png") -> str:
    """Replace everything outside ``[A-Za-z0-9]`` with ``-`` and add the extension."""
    return f"{UNSAFE_CHARS.sub('-', link)}.{image_format}"


def output_filename(
    link: str,
    index: int,
    total: int,
    output_file: str | None = None,
    image_format: str = "png",
) -> str:
    """Pick the file name for the ``index``-th (1-based) of ``total`` links.

    A fixed ``output_file`` is used as-is for a single link; with several
    links the index is appended to its stem so captures do not overwrite
    each other.
    """
    if not output_file:
        return sanitize_filename(link, image_format)
    if total <= 1:
        return output_file
    path = Path(output_file)
    return str(path.with_name(f"{path.stem}-{index}{path.suffix}"))
