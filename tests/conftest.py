from typing import Dict, List, Tuple

import pytest

from cubetex.assets.format import write_texture
from cubetex.assets.types import CompressedTextureData
from cubetex.graphics.resources.backend import (
    NO_CUBEMAP,
    CubemapBackend,
    CubemapFace,
    CubemapHandle,
)
from cubetex.graphics.resources.cubemap import FACE_NAMES

DXT1 = 0x83F0
DXT5 = 0x83F3


class RecordingBackend(CubemapBackend):
    """In-memory backend that tracks live cubemaps and every call made."""

    def __init__(self, fail_create: bool = False) -> None:
        self.fail_create = fail_create
        self.next_handle = 1
        self.live: Dict[CubemapHandle, Dict[CubemapFace, CompressedTextureData]] = {}
        self.calls: List[Tuple[str, ...]] = []

    def create_cubemap(self) -> CubemapHandle:
        self.calls.append(("create",))
        if self.fail_create:
            return NO_CUBEMAP
        handle = CubemapHandle(self.next_handle)
        self.next_handle += 1
        self.live[handle] = {}
        return handle

    def configure_sampling(self, handle: CubemapHandle) -> None:
        self.calls.append(("configure", handle))

    def upload_compressed_face(self, handle, face, texture) -> None:
        self.calls.append(("upload", handle, face))
        self.live[handle][face] = texture

    def destroy(self, handle: CubemapHandle) -> None:
        self.calls.append(("destroy", handle))
        del self.live[handle]


@pytest.fixture
def backend():
    return RecordingBackend()


@pytest.fixture
def face_dir(tmp_path):
    """Six valid 4x4 DXT1 faces; payload byte i identifies face i."""
    for i, name in enumerate(FACE_NAMES):
        write_texture(
            tmp_path / f"{name}.tex",
            bytes([i]) * 8,
            width=4,
            height=4,
            pixel_format=DXT1,
        )
    return tmp_path


@pytest.fixture
def face_paths(face_dir):
    return [face_dir / f"{name}.tex" for name in FACE_NAMES]


@pytest.fixture
def failing_backend():
    return RecordingBackend(fail_create=True)
