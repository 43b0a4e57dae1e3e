# cubetex/viewer/scene.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

import pygame

from cubetex.graphics.core.settings import ViewerSettings
from cubetex.graphics.resources.backend import NO_CUBEMAP, CubemapHandle
from cubetex.graphics.resources.cubemap import CubemapAssembler
from cubetex.viewer.camera import OrbitCamera


@dataclass(slots=True)
class ViewerScene:
    """
    Everything the viewer mutates between frames.
    Passed explicitly to the loader, the input handler and the renderer.
    """

    cubemap: CubemapHandle = NO_CUBEMAP
    camera: OrbitCamera = field(default_factory=OrbitCamera)
    running: bool = True
    dragging: bool = False
    prev_mouse: Tuple[int, int] = (0, 0)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.prev_mouse = event.pos
            if event.button == 1:
                self.dragging = True
        elif event.type == pygame.MOUSEBUTTONUP:
            self.prev_mouse = event.pos
            if event.button == 1:
                self.dragging = False
        elif event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            if self.dragging:
                self.camera.drag(x - self.prev_mouse[0], y - self.prev_mouse[1])
            self.prev_mouse = (x, y)


def load_cubemap(
    scene: ViewerScene, assembler: CubemapAssembler, settings: ViewerSettings
) -> ViewerScene:
    """
    Assemble the cubemap from settings.data_dir and attach it to the scene.
    On failure the scene keeps NO_CUBEMAP and the error propagates.
    """
    scene.cubemap = assembler.build_from_directory(
        settings.data_dir, settings.face_extension
    )
    return scene
