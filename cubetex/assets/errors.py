# cubetex/assets/errors.py
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class TextureError(Exception):
    """Base class for every failure while loading a texture."""

    def __init__(self, path: Optional[PathLike], reason: str):
        super().__init__(reason if path is None else f"{path}: {reason}")
        self.path = None if path is None else str(path)
        self.reason = reason


class TextureIOError(TextureError):
    """File missing or unreadable, or ends before the declared data."""


class TextureFormatError(TextureError):
    """File is readable but is not a valid COMPTEX0 texture."""


class CubemapResourceError(TextureError):
    """The graphics backend failed to create the cubemap resource."""

    def __init__(self, reason: str):
        super().__init__(None, f"cubemap {reason}")
