# cubetex/graphics/resources/cubemap.py
import sys
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from cubetex.assets.errors import CubemapResourceError
from cubetex.assets.importers.comptex import CompressedTextureImporter
from cubetex.graphics.resources.backend import (
    NO_CUBEMAP,
    CubemapBackend,
    CubemapFace,
    CubemapHandle,
)

# Positional: FACE_NAMES[i] is bound to CubemapFace(i).
FACE_NAMES: Tuple[str, ...] = ("right", "left", "up", "down", "back", "front")


class BuildState(str, Enum):
    CREATED = "created"
    CONFIGURING = "configuring"
    UPLOADING = "uploading"
    COMPLETE = "complete"
    FAILED = "failed"


class CubemapAssembler:
    """
    Builds one GPU cubemap from six compressed texture files.

    Either all six faces upload and the handle is returned, or the resource
    is destroyed and the first error is re-raised.
    """

    def __init__(
        self,
        backend: CubemapBackend,
        importer: Optional[CompressedTextureImporter] = None,
    ):
        self.backend = backend
        self.importer = importer or CompressedTextureImporter()

        self.state = BuildState.CREATED
        self.face_index = -1  # Face being uploaded while UPLOADING.

    def build(self, face_paths: Sequence[Union[str, Path]]) -> CubemapHandle:
        """
        face_paths must be ordered right, left, up, down, back, front.
        Faces are not checked against each other.
        """
        if isinstance(face_paths, (str, bytes)):
            raise ValueError(
                f"Expected {len(CubemapFace)} face paths, got a single {type(face_paths).__name__}"
            )
        if len(face_paths) != len(CubemapFace):
            raise ValueError(
                f"Expected {len(CubemapFace)} face paths, got {len(face_paths)}"
            )

        self.state = BuildState.CREATED
        self.face_index = -1

        try:
            handle = self.backend.create_cubemap()
        except Exception as e:
            self.state = BuildState.FAILED
            raise CubemapResourceError(f"creation failed: {e}") from e
        if handle == NO_CUBEMAP:
            self.state = BuildState.FAILED
            raise CubemapResourceError("backend returned no resource")

        try:
            self.state = BuildState.CONFIGURING
            self.backend.configure_sampling(handle)

            self.state = BuildState.UPLOADING
            for face, path in zip(CubemapFace, face_paths):
                self.face_index = int(face)
                texture = self.importer.import_file(path)
                self.backend.upload_compressed_face(handle, face, texture)
        except Exception as err:
            self.state = BuildState.FAILED
            try:
                self.backend.destroy(handle)
            except Exception as teardown_err:
                print(
                    f"[CUBEMAP] teardown of texture {handle} failed: {teardown_err}",
                    file=sys.stderr,
                )
            raise err

        self.state = BuildState.COMPLETE
        return handle

    def build_from_directory(
        self, directory: Union[str, Path], extension: str = ".tex"
    ) -> CubemapHandle:
        """Build from `right.tex`, `left.tex`, ... inside directory."""
        root = Path(directory)
        return self.build([root / f"{name}{extension}" for name in FACE_NAMES])

    def destroy(self, handle: CubemapHandle) -> None:
        if handle == NO_CUBEMAP:
            return
        self.backend.destroy(handle)
