# cubetex/assets/types.py
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class LevelDescriptor:
    """Location and byte size of one mip level's payload."""

    offset: int
    size: int


@dataclass(frozen=True)
class TextureHeader:
    """Fixed-size header at the start of every COMPTEX0 file."""

    magic: bytes
    pixel_format: int  # Opaque GL compressed internal format.
    flags: int
    level_count: int
    width: int
    height: int
    levels: Tuple[LevelDescriptor, ...]  # Sized to level_count, max 20.

    @property
    def base_level(self) -> LevelDescriptor:
        return self.levels[0]


@dataclass(frozen=True)
class CompressedTextureData:
    """Base level of a compressed texture, ready for GPU upload."""

    width: int
    height: int
    pixel_format: int
    size: int
    payload: bytes
