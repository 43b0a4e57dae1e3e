import pygame
import pytest

from cubetex.assets.errors import TextureFormatError
from cubetex.graphics.core.settings import ViewerSettings
from cubetex.graphics.resources.backend import NO_CUBEMAP
from cubetex.graphics.resources.cubemap import CubemapAssembler
from cubetex.viewer.scene import ViewerScene, load_cubemap


def test_escape_stops_scene():
    scene = ViewerScene()

    scene.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))

    assert not scene.running


def test_quit_stops_scene():
    scene = ViewerScene()

    scene.handle_event(pygame.event.Event(pygame.QUIT))

    assert not scene.running


def test_other_keys_ignored():
    scene = ViewerScene()

    scene.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))

    assert scene.running


def test_left_drag_orbits_camera():
    scene = ViewerScene()

    scene.handle_event(
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(100, 100))
    )
    scene.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(120, 90)))

    assert scene.camera.theta == pytest.approx(10.0)
    assert scene.camera.phi == pytest.approx(-5.0)
    assert scene.prev_mouse == (120, 90)


def test_motion_without_button_only_tracks_mouse():
    scene = ViewerScene()

    scene.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(50, 60)))

    assert (scene.camera.phi, scene.camera.theta) == (0.0, 0.0)
    assert scene.prev_mouse == (50, 60)


def test_release_ends_drag():
    scene = ViewerScene()
    scene.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)))
    scene.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(0, 0)))

    scene.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(40, 40)))

    assert scene.camera.theta == 0.0


def test_load_cubemap_attaches_handle(backend, face_dir):
    settings = ViewerSettings(data_dir=face_dir)
    scene = ViewerScene()

    returned = load_cubemap(scene, CubemapAssembler(backend), settings)

    assert returned is scene
    assert scene.cubemap in backend.live


def test_load_cubemap_failure_leaves_no_resource(backend, face_dir):
    (face_dir / "down.tex").write_bytes(b"NOTATEXTURE" + b"\x00" * 200)
    settings = ViewerSettings(data_dir=face_dir)
    scene = ViewerScene()

    with pytest.raises(TextureFormatError):
        load_cubemap(scene, CubemapAssembler(backend), settings)

    assert scene.cubemap == NO_CUBEMAP
    assert backend.live == {}
