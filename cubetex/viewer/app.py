# cubetex/viewer/app.py
import sys
from typing import Optional

import pygame

from cubetex.assets.errors import TextureError
from cubetex.graphics.core.settings import ViewerSettings
from cubetex.graphics.core.window import Window
from cubetex.graphics.resources.cubemap import CubemapAssembler
from cubetex.graphics.resources.opengl import GLCubemapBackend
from cubetex.viewer.renderer import SphereRenderer
from cubetex.viewer.scene import ViewerScene, load_cubemap


def run(settings: Optional[ViewerSettings] = None) -> int:
    """
    Open the window, assemble the cubemap and run until quit.
    Returns the process exit status.
    """
    settings = settings or ViewerSettings()
    window = Window(settings)

    assembler = CubemapAssembler(GLCubemapBackend())
    scene = ViewerScene()
    scene.camera.sensitivity = settings.orbit_sensitivity
    scene.camera.pitch_limit = settings.pitch_limit

    try:
        load_cubemap(scene, assembler, settings)
    except TextureError as e:
        print(f"[CUBEMAP] failed to assemble cubemap: {e}", file=sys.stderr)
        window.destroy()
        return 1

    print(f"[CUBEMAP] loaded {settings.data_dir} as texture {scene.cubemap}")

    renderer: Optional[SphereRenderer] = None
    try:
        renderer = SphereRenderer(window.ctx, settings)
        clock = pygame.time.Clock()

        while scene.running:
            for event in pygame.event.get():
                scene.handle_event(event)

            width, height = window.size
            renderer.render(scene, width, height)
            window.present()
            clock.tick(60)
    finally:
        assembler.destroy(scene.cubemap)
        if renderer is not None:
            renderer.release()
        window.destroy()

    return 0
