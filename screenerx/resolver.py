import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Union

import pydantic

from screenerx.config import Config, get_config
from screenerx.console import console
from screenerx.errors import ConfigMissing, ConfigUnparsable, InvalidSetting
from screenerx.models import (
    CliArguments,
    EffectiveTaskSettings,
    GlobalConfig,
    TaskConfig,
)
from screenerx.naming import task_output_dir

FULL_HEIGHT = "full"
FULL_PAGE_VIEWPORT_HEIGHT = 800

DEFAULTS = {
    "link_file": "links.txt",
    "browser": "chrome",
    "width": 1920,
    "height": FULL_HEIGHT,
    "full_page": False,
}

DEFAULT_CONFIG = {
    "linkFile": "links.txt",
    "tasks": [
        {
            "name": "screenshot",
            "enabled": True,
            "browser": "chrome",
            "width": 1920,
            "height": 1080,
            "fullPage": False,
        }
    ],
}


def default_config() -> GlobalConfig:
    return GlobalConfig.model_validate(DEFAULT_CONFIG)


def read_config(path: Union[str, Path]) -> GlobalConfig:
    """Read and validate a config file, raising if it is absent or broken."""
    try:
        data = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigMissing(path) from e
    except OSError as e:
        raise ConfigUnparsable(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise ConfigUnparsable(path, str(e)) from e
    try:
        return GlobalConfig.model_validate(json.loads(data))
    except json.JSONDecodeError as e:
        raise ConfigUnparsable(path, str(e)) from e
    except pydantic.ValidationError as e:
        raise ConfigUnparsable(
            path, f"{e.error_count()} validation error(s)\n{e}"
        ) from e


def load_config(path: Union[str, Path]) -> GlobalConfig:
    """Load the config file, falling back to the built-in default."""
    try:
        conf = read_config(path)
    except ConfigMissing:
        console.log(f"Config file {path} does not exist. Using default config.")
        return default_config()
    except ConfigUnparsable as e:
        console.log(f"{e} Using default config.")
        return default_config()
    console.log(f"Loaded config from {path}")
    return conf


def write_default_config(path: Union[str, Path], force: bool = False) -> Path:
    path = Path(path)
    if path.exists() and not force:
        raise FileExistsError(f"{path} already exists")
    path.write_text(json.dumps(DEFAULT_CONFIG, indent=4) + "\n", encoding="utf-8")
    return path


def is_present(value: Any) -> bool:
    return value is not None and value != ""


class Layered:
    """Ordered stack of settings sources, highest priority first.

    A source is a model (looked up by attribute) or a mapping (looked up by
    key). ``get`` returns the first present value for a field, so every field
    falls through the same chain.
    """

    def __init__(self, *layers: Union[pydantic.BaseModel, Mapping]):
        self.layers = layers

    def lookup(self, layer, field: str) -> Any:
        if isinstance(layer, Mapping):
            return layer.get(field)
        return getattr(layer, field, None)

    def get(self, field: str, default: Any = None) -> Any:
        for layer in self.layers:
            value = self.lookup(layer, field)
            if is_present(value):
                return value
        return default


def to_int(field: str, value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidSetting(field, value)
    try:
        number = int(str(value).strip())
    except ValueError:
        raise InvalidSetting(field, value) from None
    if number <= 0:
        raise InvalidSetting(field, value)
    return number


def resolve_task(
    task: TaskConfig,
    global_config: GlobalConfig,
    cli: CliArguments,
    run_timestamp: str,
    config: Optional[Config] = None,
) -> EffectiveTaskSettings:
    """Merge cli > task > global > defaults into the settings for one task."""
    config = config or get_config()
    layers = Layered(cli, task, global_config, DEFAULTS)

    browser = layers.get("browser")
    width = to_int("width", layers.get("width"))
    full_page = bool(layers.get("full_page"))

    height = layers.get("height")
    if height == FULL_HEIGHT:
        full_page = True
        height = FULL_PAGE_VIEWPORT_HEIGHT
    else:
        height = to_int("height", height)

    output_path = layers.get("output_path")
    if output_path:
        output_dir = Path(output_path)
    else:
        output_dir = task_output_dir(
            config.screenshot_base_path, run_timestamp, task.name, browser
        )

    return EffectiveTaskSettings(
        name=task.name,
        browser=browser,
        width=width,
        height=height,
        full_page=full_page,
        base_url=layers.get("base_url", ""),
        link_file=layers.get("link_file"),
        url=layers.get("url"),
        output_dir=output_dir,
        output_file=layers.get("output_file"),
        image_format=config.image_format,
    )
