"""
Минимальное дерево объекта: Object → Triangle → Vertex.

Object.rotate() поворачивает каждую вершину через Quat.rotate_offset;
при переданном TaskPool вершины обрабатываются пачками в потоках.
"""

from typing import List, Sequence

from gmath3d.math.quat import Quat
from gmath3d.math.vec3 import Vec3
from gmath3d.math.vec4 import Vec4
from gmath3d.utils.profiler import Profiler


class Vertex:
    __slots__ = ("position", "color")

    def __init__(self, position: Vec3, color: Vec4 = None):
        self.position = position
        self.color = color if color is not None else Vec4(1.0, 1.0, 1.0, 1.0)

    def __repr__(self):
        return f"Vertex({self.position!r}, {self.color!r})"


class Triangle:
    __slots__ = ("vertices", "normal")

    def __init__(self, vertices: Sequence[Vertex], normal: Vec3 = None):
        if len(vertices) != 3:
            raise ValueError(f"Triangle needs 3 vertices, got {len(vertices)}")
        self.vertices = list(vertices)
        self.normal = normal if normal is not None else self.face_normal()

    def face_normal(self) -> Vec3:
        a, b, c = (v.position for v in self.vertices)
        return (b - a).cross(c - a).normalize()


class Object:
    def __init__(self, triangles: List[Triangle] = None, position: Vec3 = None,
                 collision: bool = False, name="Object"):
        self.name = name
        self.triangles = triangles or []
        self.position = position if position is not None else Vec3()
        self.collision = collision

    def vertices(self) -> List[Vertex]:
        return [v for tri in self.triangles for v in tri.vertices]

    def rotate(self, axis: Vec3, angle: float, offset: Vec3, pool=None) -> None:
        """Повернуть все вершины на `angle` радиан вокруг оси через `offset`."""
        verts = self.vertices()

        def _rotate(position):
            return Quat.rotate_offset(position, axis, offset, angle)

        with Profiler(f"{self.name}.rotate"):
            positions = [v.position for v in verts]
            if pool is None:
                rotated = [_rotate(p) for p in positions]
            else:
                rotated = pool.map(_rotate, positions)

        for vertex, position in zip(verts, rotated):
            vertex.position = position
        for tri in self.triangles:
            tri.normal = tri.face_normal()
