# cubetex/assets/format.py
import struct
from pathlib import Path
from typing import Union

from cubetex.assets.types import LevelDescriptor, TextureHeader

MAGIC = b"COMPTEX0"
MAX_LEVELS = 20

# magic, pixel_format, flags, level_count, width, height,
# 20 x (offset, size), 8 reserved bytes. Little-endian throughout.
HEADER_STRUCT = struct.Struct(f"<8sIHHII{MAX_LEVELS * 2}I8x")
HEADER_SIZE = HEADER_STRUCT.size  # 192


def unpack_header(data: bytes) -> TextureHeader:
    """
    Decode raw header bytes. Performs no validation beyond the length.
    """
    if len(data) != HEADER_SIZE:
        raise ValueError(f"Header must be {HEADER_SIZE} bytes, got {len(data)}")

    magic, pixel_format, flags, level_count, width, height, *slots = (
        HEADER_STRUCT.unpack(data)
    )

    # Keep at least the base slot so a zero level count still exposes it.
    used = min(max(level_count, 1), MAX_LEVELS)
    levels = tuple(
        LevelDescriptor(offset=slots[i * 2], size=slots[i * 2 + 1])
        for i in range(used)
    )

    return TextureHeader(
        magic=magic,
        pixel_format=pixel_format,
        flags=flags,
        level_count=level_count,
        width=width,
        height=height,
        levels=levels,
    )


def pack_header(header: TextureHeader) -> bytes:
    if len(header.levels) > MAX_LEVELS:
        raise ValueError(f"At most {MAX_LEVELS} level descriptors fit a header")

    slots = [0] * (MAX_LEVELS * 2)
    for i, level in enumerate(header.levels):
        slots[i * 2] = level.offset
        slots[i * 2 + 1] = level.size

    return HEADER_STRUCT.pack(
        header.magic,
        header.pixel_format,
        header.flags,
        header.level_count,
        header.width,
        header.height,
        *slots,
    )


def write_texture(
    path: Union[str, Path],
    payload: bytes,
    *,
    width: int,
    height: int,
    pixel_format: int,
    flags: int = 0,
    level_count: int = 1,
) -> None:
    """
    Write a single-level texture file: header followed by the payload.
    """
    header = TextureHeader(
        magic=MAGIC,
        pixel_format=pixel_format,
        flags=flags,
        level_count=level_count,
        width=width,
        height=height,
        levels=(LevelDescriptor(offset=0, size=len(payload)),),
    )

    with open(path, "wb") as f:
        f.write(pack_header(header))
        f.write(payload)
