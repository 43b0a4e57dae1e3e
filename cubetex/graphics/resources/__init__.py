# cubetex/graphics/resources/__init__.py
from cubetex.graphics.resources.backend import (
    NO_CUBEMAP,
    CubemapBackend,
    CubemapFace,
    CubemapHandle,
)
from cubetex.graphics.resources.cubemap import (
    FACE_NAMES,
    BuildState,
    CubemapAssembler,
)

__all__ = [
    "CubemapAssembler",
    "CubemapBackend",
    "CubemapFace",
    "CubemapHandle",
    "BuildState",
    "FACE_NAMES",
    "NO_CUBEMAP",
]
