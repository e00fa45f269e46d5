from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Config(BaseSettings):
    # Files and paths
    config_file: str = "screenerx.conf.json"
    screenshot_base_path: str = "screenshots"
    image_format: Literal["png", "jpg"] = "png"

    # Browser
    headless: bool = True
    ignore_https_errors: bool = True
    wait_until: Literal["load", "domcontentloaded", "networkidle", "commit"] = (
        "networkidle"
    )
    navigation_timeout_ms: int = Field(30000, ge=0)

    class Config:
        env_prefix = "SCREENERX_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_config() -> Config:
    """Get cached config instance."""

    return Config()
