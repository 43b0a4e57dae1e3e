# cubetex/viewer/renderer.py
from __future__ import annotations

import moderngl
import numpy as np
from OpenGL import GL

from cubetex.graphics.core.settings import ViewerSettings
from cubetex.graphics.resources.backend import NO_CUBEMAP
from cubetex.graphics.utils.geometry import create_sphere
from cubetex.viewer.camera import perspective
from cubetex.viewer.scene import ViewerScene

VERTEX_SHADER = """
#version 330 core
in vec3 in_pos;
uniform mat4 u_mvp;
out vec3 v_dir;
void main() {
    v_dir = in_pos;
    gl_Position = u_mvp * vec4(in_pos, 1.0);
}
"""

FRAGMENT_SHADER = """
#version 330 core
in vec3 v_dir;
uniform samplerCube u_cubemap;
out vec4 f_color;
void main() {
    f_color = texture(u_cubemap, v_dir);
}
"""

CUBEMAP_UNIT = 0


class SphereRenderer:
    """
    Draws the cubemap onto a sphere surrounding the camera.
    """

    def __init__(self, ctx: moderngl.Context, settings: ViewerSettings):
        self.ctx = ctx
        self.settings = settings

        self._program = ctx.program(
            vertex_shader=VERTEX_SHADER, fragment_shader=FRAGMENT_SHADER
        )
        sphere = settings.sphere
        self._vbo = create_sphere(ctx, sphere.radius, sphere.slices, sphere.stacks)
        self._vao = ctx.vertex_array(self._program, [(self._vbo, "3f", "in_pos")])

        self._u_mvp = self._program["u_mvp"]
        self._program["u_cubemap"].value = CUBEMAP_UNIT

    def render(self, scene: ViewerScene, width: int, height: int) -> None:
        self.ctx.viewport = (0, 0, width, height)
        self.ctx.clear(0.0, 0.0, 0.0, depth=1.0)

        if scene.cubemap == NO_CUBEMAP:
            return

        proj = self.settings.projection
        mvp = perspective(
            proj.fov_y, width / max(height, 1), proj.near, proj.far
        ) @ scene.camera.view_matrix()
        self._u_mvp.write(mvp.astype(np.float32).T.tobytes())

        # The cubemap is a raw GL name, not a moderngl object.
        GL.glActiveTexture(GL.GL_TEXTURE0 + CUBEMAP_UNIT)
        GL.glBindTexture(GL.GL_TEXTURE_CUBE_MAP, scene.cubemap)
        self._vao.render(moderngl.TRIANGLES)

    def release(self) -> None:
        self._vao.release()
        self._vbo.release()
        self._program.release()
