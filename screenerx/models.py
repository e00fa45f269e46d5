from pathlib import Path
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

Browser = Literal["chrome", "firefox"]
Height = Union[int, Literal["full"]]


class TaskConfig(BaseModel):
    """One named screenshot job as written in the config file."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str
    enabled: Optional[bool] = None
    browser: Optional[Browser] = None
    width: Optional[int] = None
    height: Optional[Height] = None
    full_page: Optional[bool] = Field(None, alias="fullPage")
    base_url: Optional[str] = Field(None, alias="baseUrl")
    link_file: Optional[str] = Field(None, alias="linkFile")

    @property
    def is_enabled(self) -> bool:
        # only an explicit false disables a task
        return self.enabled is not False


class GlobalConfig(BaseModel):
    """Top level of ``screenerx.conf.json``.

    Besides ``linkFile`` and ``tasks`` the global level may carry the same
    viewport and URL settings as a task; they act as defaults for every task.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    link_file: Optional[str] = Field(None, alias="linkFile")
    tasks: list[TaskConfig] = []
    browser: Optional[Browser] = None
    width: Optional[int] = None
    height: Optional[Height] = None
    full_page: Optional[bool] = Field(None, alias="fullPage")
    base_url: Optional[str] = Field(None, alias="baseUrl")


class CliArguments(BaseModel):
    link_file: Optional[str] = None
    url: Optional[str] = None
    width: Optional[Union[int, str]] = None
    height: Optional[Union[int, str]] = None
    output_path: Optional[str] = None
    output_file: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def empty_as_missing(cls, v):
        """Treat empty strings from the command line as not given."""
        if isinstance(v, str) and not v.strip():
            return None
        if isinstance(v, Path):
            return str(v)
        return v


class EffectiveTaskSettings(BaseModel):
    name: str
    browser: Browser
    width: int
    height: int
    full_page: bool
    base_url: str
    link_file: str
    url: Optional[str] = None
    output_dir: Path
    output_file: Optional[str] = None
    image_format: str = "png"
