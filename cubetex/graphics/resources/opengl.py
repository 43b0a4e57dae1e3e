# cubetex/graphics/resources/opengl.py
from OpenGL import GL

from cubetex.assets.types import CompressedTextureData
from cubetex.graphics.resources.backend import (
    NO_CUBEMAP,
    CubemapBackend,
    CubemapFace,
    CubemapHandle,
)


class GLCubemapBackend(CubemapBackend):
    """
    PyOpenGL implementation. Works against whatever context is current,
    e.g. the one moderngl created for the window.
    """

    def create_cubemap(self) -> CubemapHandle:
        glo = int(GL.glGenTextures(1))
        if glo == 0:
            return NO_CUBEMAP
        return CubemapHandle(glo)

    def configure_sampling(self, handle: CubemapHandle) -> None:
        GL.glBindTexture(GL.GL_TEXTURE_CUBE_MAP, handle)
        GL.glTexParameteri(GL.GL_TEXTURE_CUBE_MAP, GL.GL_TEXTURE_MIN_FILTER, GL.GL_LINEAR)
        GL.glTexParameteri(GL.GL_TEXTURE_CUBE_MAP, GL.GL_TEXTURE_MAG_FILTER, GL.GL_LINEAR)
        GL.glTexParameteri(GL.GL_TEXTURE_CUBE_MAP, GL.GL_TEXTURE_WRAP_S, GL.GL_CLAMP_TO_EDGE)
        GL.glTexParameteri(GL.GL_TEXTURE_CUBE_MAP, GL.GL_TEXTURE_WRAP_T, GL.GL_CLAMP_TO_EDGE)

    def upload_compressed_face(
        self,
        handle: CubemapHandle,
        face: CubemapFace,
        texture: CompressedTextureData,
    ) -> None:
        GL.glBindTexture(GL.GL_TEXTURE_CUBE_MAP, handle)
        GL.glCompressedTexImage2D(
            GL.GL_TEXTURE_CUBE_MAP_POSITIVE_X + int(face),
            0,
            texture.pixel_format,
            texture.width,
            texture.height,
            0,
            texture.size,
            texture.payload,
        )

    def destroy(self, handle: CubemapHandle) -> None:
        GL.glDeleteTextures([handle])
