# cubetex/viewer/camera.py
from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


def rotation_x(degrees: float) -> NDArray[np.float32]:
    c, s = math.cos(math.radians(degrees)), math.sin(math.radians(degrees))
    return np.array(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float32,
    )


def rotation_y(degrees: float) -> NDArray[np.float32]:
    c, s = math.cos(math.radians(degrees)), math.sin(math.radians(degrees))
    return np.array(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float32,
    )


def perspective(
    fov_y: float, aspect: float, near: float, far: float
) -> NDArray[np.float32]:
    """Same matrix gluPerspective builds. fov_y in degrees."""
    f = 1.0 / math.tan(math.radians(fov_y) * 0.5)
    inv_nf = 1.0 / (near - far)
    return np.array(
        [
            [f / aspect, 0.0, 0.0, 0.0],
            [0.0, f, 0.0, 0.0],
            [0.0, 0.0, (far + near) * inv_nf, 2.0 * far * near * inv_nf],
            [0.0, 0.0, -1.0, 0.0],
        ],
        dtype=np.float32,
    )


@dataclass(slots=True)
class OrbitCamera:
    """
    Camera sitting inside the sphere, rotated by dragging the mouse.
    phi is pitch about X, theta is yaw about Y, both in degrees.
    """

    phi: float = 0.0
    theta: float = 0.0
    sensitivity: float = 0.5
    pitch_limit: float = 90.0

    def drag(self, dx: float, dy: float) -> None:
        self.phi += dy * self.sensitivity
        self.theta += dx * self.sensitivity
        self.phi = max(-self.pitch_limit, min(self.pitch_limit, self.phi))

    def view_matrix(self) -> NDArray[np.float32]:
        return rotation_x(self.phi) @ rotation_y(self.theta)
