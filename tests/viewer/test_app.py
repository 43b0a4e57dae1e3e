import pytest

pytest.importorskip("OpenGL.GL")

from cubetex.graphics.core.settings import ViewerSettings  # noqa: E402
from cubetex.viewer import app  # noqa: E402


class FakeWindow:
    instances = []

    def __init__(self, settings):
        self.settings = settings
        self.ctx = object()
        self.destroyed = False
        FakeWindow.instances.append(self)

    def destroy(self):
        self.destroyed = True


@pytest.fixture
def headless(monkeypatch, backend):
    FakeWindow.instances = []
    monkeypatch.setattr(app, "Window", FakeWindow)
    monkeypatch.setattr(app, "GLCubemapBackend", lambda: backend)
    return backend


def test_failed_face_exits_nonzero(headless, face_dir, capsys):
    data = bytearray((face_dir / "down.tex").read_bytes())
    data[:8] = b"xxxxxxxx"
    (face_dir / "down.tex").write_bytes(bytes(data))

    status = app.run(ViewerSettings(data_dir=face_dir))

    assert status == 1
    err = capsys.readouterr().err
    assert "down.tex" in err
    assert "bad magic" in err
    assert headless.live == {}
    assert FakeWindow.instances[0].destroyed


def test_missing_directory_exits_nonzero(headless, tmp_path, capsys):
    status = app.run(ViewerSettings(data_dir=tmp_path / "nowhere"))

    assert status == 1
    assert "right.tex" in capsys.readouterr().err
    assert headless.live == {}


def test_renderer_failure_still_tears_down(headless, face_dir, monkeypatch):
    def broken_renderer(ctx, settings):
        raise RuntimeError("shader compile failed")

    monkeypatch.setattr(app, "SphereRenderer", broken_renderer)

    with pytest.raises(RuntimeError, match="shader compile failed"):
        app.run(ViewerSettings(data_dir=face_dir))

    assert headless.live == {}
    assert FakeWindow.instances[0].destroyed
