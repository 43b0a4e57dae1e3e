# cubetex/assets/importers/comptex.py
from pathlib import Path
from typing import Union

from cubetex.assets.errors import TextureFormatError, TextureIOError
from cubetex.assets.format import HEADER_SIZE, MAGIC, MAX_LEVELS, unpack_header
from cubetex.assets.importers.base import AssetImporter
from cubetex.assets.types import CompressedTextureData, TextureHeader


class CompressedTextureImporter(AssetImporter):
    """
    Reads the base level of a COMPTEX0 file.

    The payload is assumed to follow the header directly; the offset stored
    in the level descriptor is not honoured, and levels past 0 are ignored.
    """

    def import_file(self, path: Union[str, Path]) -> CompressedTextureData:
        try:
            with open(path, "rb") as f:
                raw = f.read(HEADER_SIZE)
                if len(raw) != HEADER_SIZE:
                    raise TextureIOError(
                        path,
                        f"truncated header ({len(raw)} of {HEADER_SIZE} bytes)",
                    )

                header = unpack_header(raw)
                self._validate(path, header)

                size = header.base_level.size
                payload = f.read(size)
                if len(payload) != size:
                    raise TextureIOError(
                        path,
                        f"unexpected end of file ({len(payload)} of {size} payload bytes)",
                    )
        except OSError as e:
            raise TextureIOError(path, e.strerror or str(e)) from e

        return CompressedTextureData(
            width=header.width,
            height=header.height,
            pixel_format=header.pixel_format,
            size=size,
            payload=payload,
        )

    @staticmethod
    def _validate(path: Union[str, Path], header: TextureHeader) -> None:
        # First failing rule wins.
        if header.magic != MAGIC:
            raise TextureFormatError(
                path, f"bad magic {header.magic!r}, expected {MAGIC!r}"
            )
        if not 1 <= header.level_count <= MAX_LEVELS:
            raise TextureFormatError(
                path,
                f"level count {header.level_count} outside [1, {MAX_LEVELS}]",
            )
        if header.base_level.size == 0:
            raise TextureFormatError(path, "base level size is zero")


def read_texture(path: Union[str, Path]) -> CompressedTextureData:
    """Shorthand for a one-off CompressedTextureImporter read."""
    return CompressedTextureImporter().import_file(path)
