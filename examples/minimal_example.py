import math

import gmath3d as gm
from gmath3d.utils import logger


def create_simple_cube():
    """Минимальный куб из 12 треугольников."""
    p = [gm.Vec3(x, y, z) for x in (-0.5, 0.5) for y in (-0.5, 0.5) for z in (-0.5, 0.5)]
    faces = [
        (0, 1, 3), (0, 3, 2),  # Left
        (4, 6, 7), (4, 7, 5),  # Right
        (0, 4, 5), (0, 5, 1),  # Bottom
        (2, 3, 7), (2, 7, 6),  # Top
        (0, 2, 6), (0, 6, 4),  # Back
        (1, 5, 7), (1, 7, 3),  # Front
    ]
    triangles = [gm.Triangle([gm.Vertex(p[a]), gm.Vertex(p[b]), gm.Vertex(p[c])])
                 for a, b, c in faces]
    return gm.Object(triangles, name="Cube")


if __name__ == "__main__":
    logger.info("Starting minimal example...")

    cube = create_simple_cube()
    camera = gm.Camera(position=gm.Vec3(0, 0, -3), angle_h=0.1, angle_v=0.2)

    with gm.TaskPool() as pool:
        for frame in range(4):
            cube.rotate(gm.Vec3(0, 1, 0), math.pi / 8, gm.Vec3(0, 0, 0), pool=pool)
            camera.turn(0.0, 0.05)
            projected = [camera.transform() @ camera.to_camera_space(v.position)
                         for v in cube.vertices()]
            logger.info(f"frame {frame}: first vertex {projected[0]!r}")

    # Буфер для GPU: позиции подряд, float32 little‑endian
    buffer = b"".join(v.position.to_bytes() for v in cube.vertices())
    logger.info(f"vertex buffer: {len(buffer)} bytes, view matrix:\n{camera.view_matrix()}")
