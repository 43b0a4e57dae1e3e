# cubetex/assets/__init__.py
from cubetex.assets.errors import (
    CubemapResourceError,
    TextureError,
    TextureFormatError,
    TextureIOError,
)
from cubetex.assets.format import (
    HEADER_SIZE,
    MAGIC,
    MAX_LEVELS,
    pack_header,
    unpack_header,
    write_texture,
)
from cubetex.assets.importers.comptex import (
    CompressedTextureImporter,
    read_texture,
)
from cubetex.assets.types import (
    CompressedTextureData,
    LevelDescriptor,
    TextureHeader,
)

__all__ = [
    "CompressedTextureImporter",
    "read_texture",
    "CompressedTextureData",
    "LevelDescriptor",
    "TextureHeader",
    "TextureError",
    "TextureIOError",
    "TextureFormatError",
    "CubemapResourceError",
    "HEADER_SIZE",
    "MAGIC",
    "MAX_LEVELS",
    "pack_header",
    "unpack_header",
    "write_texture",
]
