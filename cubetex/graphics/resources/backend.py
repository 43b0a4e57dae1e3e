# cubetex/graphics/resources/backend.py
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import NewType

from cubetex.assets.types import CompressedTextureData

CubemapHandle = NewType("CubemapHandle", int)

# GL never hands out texture name 0.
NO_CUBEMAP = CubemapHandle(0)


class CubemapFace(IntEnum):
    """Cube faces in GL order (GL_TEXTURE_CUBE_MAP_POSITIVE_X + index)."""

    POSITIVE_X = 0
    NEGATIVE_X = 1
    POSITIVE_Y = 2
    NEGATIVE_Y = 3
    POSITIVE_Z = 4
    NEGATIVE_Z = 5


class CubemapBackend(ABC):
    """
    Graphics API calls needed to build a compressed cubemap.
    Must be driven from the thread that owns the graphics context.
    """

    @abstractmethod
    def create_cubemap(self) -> CubemapHandle:
        """Allocate an empty cubemap. Returns NO_CUBEMAP on failure."""

    @abstractmethod
    def configure_sampling(self, handle: CubemapHandle) -> None:
        """Linear min/mag filtering, clamp-to-edge on S and T."""

    @abstractmethod
    def upload_compressed_face(
        self,
        handle: CubemapHandle,
        face: CubemapFace,
        texture: CompressedTextureData,
    ) -> None:
        """Upload texture.payload as mip level 0 of the given face."""

    @abstractmethod
    def destroy(self, handle: CubemapHandle) -> None:
        """Release the cubemap and every face uploaded into it."""
