"""
Пакет scene – потребители математики: камера и объект из треугольников.
"""

from gmath3d.scene.camera import Camera
from gmath3d.scene.object import Vertex, Triangle, Object

__all__ = ["Camera", "Vertex", "Triangle", "Object"]
