# cubetex/graphics/utils/geometry.py
import moderngl
import numpy as np
from numpy.typing import NDArray


def sphere_vertices(
    radius: float, slices: int, stacks: int
) -> NDArray[np.float32]:
    """
    Triangle list for a UV sphere centred on the origin.
    Shape (slices * stacks * 6, 3), positions only.
    """
    if slices < 3 or stacks < 2:
        raise ValueError("Sphere needs at least 3 slices and 2 stacks")

    theta = np.linspace(0.0, 2.0 * np.pi, slices + 1, dtype=np.float64)
    phi = np.linspace(0.0, np.pi, stacks + 1, dtype=np.float64)

    # grid[i, j] = point at stack i, slice j
    sin_phi = np.sin(phi)[:, None]
    grid = np.stack(
        [
            radius * sin_phi * np.cos(theta)[None, :],
            radius * np.cos(phi)[:, None] * np.ones_like(theta)[None, :],
            radius * sin_phi * np.sin(theta)[None, :],
        ],
        axis=-1,
    )

    a = grid[:-1, :-1]
    b = grid[1:, :-1]
    c = grid[1:, 1:]
    d = grid[:-1, 1:]

    # Two triangles per quad: (a, b, c) and (a, c, d)
    tris = np.stack([a, b, c, a, c, d], axis=2)
    return tris.reshape(-1, 3).astype(np.float32)


def create_sphere(
    ctx: moderngl.Context, radius: float, slices: int, stacks: int
) -> moderngl.Buffer:
    """
    Create a vertex buffer for a sphere (Pos only, 3f).
    The object space position doubles as the cubemap lookup direction.
    """
    return ctx.buffer(sphere_vertices(radius, slices, stacks).tobytes())
