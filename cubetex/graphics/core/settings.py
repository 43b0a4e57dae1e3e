# cubetex/graphics/core/settings.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ProjectionSettings:
    """Perspective projection used by the viewer."""

    fov_y: float = 45.0
    near: float = 0.5
    far: float = 100.0


@dataclass(frozen=True, slots=True)
class SphereSettings:
    """Tessellation of the sphere the cubemap is mapped onto."""

    radius: float = 10.0
    slices: int = 10
    stacks: int = 5


@dataclass(frozen=True, slots=True)
class ViewerSettings:
    """Startup configuration for the cubemap viewer."""

    width: int = 1024
    height: int = 768
    title: str = "cubetest"
    data_dir: Path = Path("data")
    face_extension: str = ".tex"
    orbit_sensitivity: float = 0.5  # Degrees per pixel of mouse drag.
    pitch_limit: float = 90.0
    projection: ProjectionSettings = ProjectionSettings()
    sphere: SphereSettings = SphereSettings()
