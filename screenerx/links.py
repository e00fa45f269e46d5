from pathlib import Path
from typing import Union

from screenerx.errors import LinkFileNotFound, LinkFileUnreadable
from screenerx.models import EffectiveTaskSettings

SCHEME_PREFIXES = ("http://", "https://", "file://")


def read_link_file(path: Union[str, Path]) -> list[str]:
    """Read one link per line, skipping blank lines."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise LinkFileNotFound(path) from e
    except OSError as e:
        raise LinkFileUnreadable(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise LinkFileUnreadable(path, str(e)) from e
    return [line.strip() for line in text.splitlines() if line.strip()]


def get_links(settings: EffectiveTaskSettings) -> list[str]:
    if settings.url:
        return [settings.url]
    return read_link_file(settings.link_file)


def normalize_url(link: str, base_url: str | None = "") -> str:
    if link.startswith(SCHEME_PREFIXES):
        return link
    return f"{base_url or ''}{link}"
