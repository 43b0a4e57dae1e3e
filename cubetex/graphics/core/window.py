# cubetex/graphics/core/window.py
from typing import Tuple

import moderngl
import pygame

from cubetex.graphics.core.settings import ViewerSettings


class Window:
    """
    Fixed-size pygame window owning the GL context the cubemap lives in.
    """

    def __init__(self, settings: ViewerSettings):
        pygame.init()
        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MAJOR_VERSION, 3)
        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MINOR_VERSION, 3)
        pygame.display.gl_set_attribute(
            pygame.GL_CONTEXT_PROFILE_MASK, pygame.GL_CONTEXT_PROFILE_CORE
        )

        self._surface = pygame.display.set_mode(
            (settings.width, settings.height), pygame.OPENGL | pygame.DOUBLEBUF
        )
        pygame.display.set_caption(settings.title)

        self.ctx = moderngl.create_context()
        print(f"[VIEWER] OpenGL {self.ctx.info['GL_VERSION']}")

    @property
    def size(self) -> Tuple[int, int]:
        return self._surface.get_size()

    def present(self) -> None:
        pygame.display.flip()

    def destroy(self) -> None:
        pygame.quit()
