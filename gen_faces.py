from pathlib import Path

import numpy as np

from cubetex.assets.format import write_texture
from cubetex.graphics.resources.cubemap import FACE_NAMES

GL_COMPRESSED_RGB_S3TC_DXT1_EXT = 0x83F0


def rgb565(r: int, g: int, b: int) -> int:
    return ((r >> 3) << 11) | ((g >> 2) << 5) | (b >> 3)


def solid_dxt1(width: int, height: int, color: tuple[int, int, int]) -> bytes:
    """
    DXT1 payload where every 4x4 block is one colour.
    Block: color0 (u16), color1 (u16), 2-bit indices (u32) all pointing at color0.
    """
    blocks_x = max(1, (width + 3) // 4)
    blocks_y = max(1, (height + 3) // 4)

    c = rgb565(*color)
    block = np.zeros(4, dtype="<u2")
    block[0] = c
    block[1] = c
    return np.tile(block, blocks_x * blocks_y).tobytes()


def generate_faces(out_dir: Path = Path("data"), size: int = 256) -> None:
    # Settings: one distinguishable colour per face
    colors = {
        "right": (220, 60, 60),
        "left": (60, 220, 220),
        "up": (60, 220, 60),
        "down": (220, 60, 220),
        "back": (60, 60, 220),
        "front": (220, 220, 60),
    }

    out_dir.mkdir(parents=True, exist_ok=True)

    for name in FACE_NAMES:
        path = out_dir / f"{name}.tex"
        write_texture(
            path,
            solid_dxt1(size, size, colors[name]),
            width=size,
            height=size,
            pixel_format=GL_COMPRESSED_RGB_S3TC_DXT1_EXT,
        )
        print(f"Wrote {path}")


if __name__ == "__main__":
    generate_faces()
