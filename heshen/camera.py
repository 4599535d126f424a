"""Cameras that produce view and projection matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Protocol

from heshen.image import Rect
from heshen.matrix import Matrix, Vector


class _HasResolution(Protocol):
    def resolution(self) -> Rect: ...


def _basis(eye: Vector, target: Vector, up: Vector) -> tuple[Vector, Vector, Vector]:
    """Return the forward, right and up axes of a camera at ``eye``."""
    forward = (target - eye).normalize()
    right = up.cross(forward).normalize()
    true_up = forward.cross(right).normalize()
    return forward, right, true_up


def _look_at(eye: Vector, target: Vector, up: Vector) -> Matrix:
    forward, right, true_up = _basis(eye, target, up)
    view = Matrix(4, 4)
    view.set_row(0, right)
    view.set_row(1, true_up)
    view.set_row(2, -forward)
    view.set_row(3, Vector(0, 0, 0, 1))
    view[0, 3] = -right.dot(eye)
    view[1, 3] = -true_up.dot(eye)
    view[2, 3] = forward.dot(eye)
    return view


def _orthographic(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> Matrix:
    result = Matrix(4, 4)
    result[0, 0] = 2.0 / (right - left)
    result[1, 1] = 2.0 / (top - bottom)
    result[2, 2] = -2.0 / (far - near)
    result[0, 3] = -(right + left) / (right - left)
    result[1, 3] = -(top + bottom) / (top - bottom)
    result[2, 3] = -(far + near) / (far - near)
    result[3, 3] = 1.0
    return result


def _frustum_orthographic(fov: float, aspect: float, near: float, far: float) -> Matrix:
    top = near * math.tan(fov / 2.0)
    bottom = -top
    return _orthographic(bottom * aspect, top * aspect, bottom, top, near, far)


@dataclass
class Camera2D:
    """Camera for flat worlds; its orthographic view spans the world's resolution."""

    eye: Vector = field(default_factory=lambda: Vector(0, 0, 0))
    target: Vector = field(default_factory=lambda: Vector(0, 0, -1))
    up: Vector = field(default_factory=lambda: Vector(0, 1, 0))
    fov: float = math.pi / 3
    aspect: float = 4.0 / 3.0
    near: float = 0.1
    far: float = 10000.0
    world: Optional[_HasResolution] = field(default=None, compare=False, repr=False)

    def view_matrix(self) -> Matrix:
        return _look_at(self.eye, self.target, self.up)

    def projection_matrix(self) -> Matrix:
        """Perspective matrix that keeps depth unchanged on the near and far planes."""
        projection = Matrix(4, 4)
        projection[0, 0] = self.near
        projection[1, 1] = self.near
        projection[2, 2] = self.far + self.near
        projection[2, 3] = -(self.far * self.near)
        projection[3, 2] = 1.0
        return projection

    def view_projection_matrix(self) -> Matrix:
        return self.projection_matrix() @ self.view_matrix()

    def orthographic_matrix(self) -> Matrix:
        """Map the world's resolution rectangle onto normalised device coordinates."""
        if self.world is None:
            raise ValueError("camera is not attached to a world")
        rect = self.world.resolution()
        if rect.width <= 0 or rect.height <= 0:
            raise ValueError("world resolution is empty")
        return _orthographic(0.0, float(rect.width), 0.0, float(rect.height), 0.0, 10000.0)

    def orthographic_matrix2(self) -> Matrix:
        """Orthographic matrix sized to the view frustum at the near plane."""
        return _frustum_orthographic(self.fov, self.aspect, self.near, self.far)


@dataclass
class Camera3D:
    """Perspective camera that can be moved and turned in its own frame."""

    eye: Vector = field(default_factory=lambda: Vector.zeros(3))
    target: Vector = field(default_factory=lambda: Vector.zeros(3))
    up: Vector = field(default_factory=lambda: Vector.zeros(3))
    fov: float = math.pi / 3
    aspect: float = 4.0 / 3.0
    near: float = 0.1
    far: float = 100.0
    world: Optional[_HasResolution] = field(default=None, compare=False, repr=False)

    def view_matrix(self) -> Matrix:
        return _look_at(self.eye, self.target, self.up)

    def projection_matrix(self) -> Matrix:
        projection = Matrix(4, 4)
        f = 1.0 / math.tan(self.fov / 2.0)
        projection[0, 0] = f / self.aspect
        projection[1, 1] = f
        projection[2, 2] = (self.far + self.near) / (self.far - self.near)
        projection[2, 3] = (2.0 * self.far * self.near) / (self.far - self.near)
        projection[3, 2] = -1.0
        return projection

    def view_projection_matrix(self) -> Matrix:
        return self.projection_matrix() @ self.view_matrix()

    def orthographic_matrix(self) -> Matrix:
        return _frustum_orthographic(self.fov, self.aspect, self.near, self.far)

    def move_local(self, local_move: Vector) -> None:
        """Shift eye and target by (right, up, forward) amounts in the camera frame."""
        forward, right, true_up = _basis(self.eye, self.target, self.up)
        offset = forward * local_move[2] + right * local_move[0] + true_up * local_move[1]
        self.eye = self.eye + offset
        self.target = self.target + offset

    def rotate_local(self, yaw: float, pitch: float) -> None:
        """Turn the target around the eye; angles in degrees, pitch within ±89.

        The target keeps its distance from the eye, truncated to a whole number.
        """
        distance = int((self.target - self.eye).length())
        forward, right, true_up = _basis(self.eye, self.target, self.up)
        pitch = min(max(pitch, -89.0), 89.0)
        direction = (forward + right * math.sin(math.radians(yaw))).normalize()
        direction = (direction + true_up * math.sin(math.radians(pitch))).normalize()
        self.target = self.eye + direction * distance