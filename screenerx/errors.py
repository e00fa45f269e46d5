from pathlib import Path
from typing import Union


class ScreenerError(Exception):
    """Base class for every error screenerx raises on purpose."""


class ConfigMissing(ScreenerError):
    def __init__(self, path: Union[str, Path]):
        self.path = str(path)
        super().__init__(f"Config file {self.path} does not exist.")


class ConfigUnparsable(ScreenerError):
    def __init__(self, path: Union[str, Path], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Config file {self.path} could not be parsed: {reason}")


class LinkFileNotFound(ScreenerError):
    def __init__(self, path: Union[str, Path]):
        self.path = str(path)
        super().__init__(f"Link file {self.path} does not exist.")


class InvalidSetting(ScreenerError):
    def __init__(self, field: str, value: object):
        self.field = field
        self.value = value
        super().__init__(f"Invalid value for {field}: {value!r}")


class BrowserLaunchFailed(ScreenerError):
    def __init__(self, browser: str, reason: str):
        self.browser = browser
        self.reason = reason
        super().__init__(f"Failed to launch {browser}: {reason}")


class CaptureFailed(ScreenerError):
    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to capture {url}: {reason}")


class LinkFileUnreadable(ScreenerError):
    def __init__(self, path: Union[str, Path], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Link file {self.path} could not be read: {reason}")
