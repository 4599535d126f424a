"""Scene graph nodes: 2D nodes with children, lines and wireframe cubes."""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from typing import Any, Optional

from heshen.color import BaseColor, Color
from heshen.commands import CommandList, PrimitiveType, ShaderBuffer, ShaderCommand
from heshen.matrix import Matrix, Vector

_DEFAULT_COLOR = Color.from_argb(BaseColor.WHITE)


def _compose(position: Vector, scale: Vector) -> Matrix:
    """Translation times rotation (none yet) times an x/y scale."""
    translation = Matrix.identity(4)
    translation.set_column(3, position)
    scaling = Matrix.identity(4)
    scaling[0, 0] = scale[0]
    scaling[1, 1] = scale[1]
    return translation @ Matrix.identity(4) @ scaling


def _command_list(world: Any) -> CommandList:
    if world is None:
        raise RuntimeError("node is not attached to a world")
    return world.command_list


class _Transformable:
    def __init__(self) -> None:
        self.world: Any = None
        self._position = Vector(0, 0, 0, 1)
        self._scale = Vector(1, 1, 1, 1)
        self._transform = Matrix.identity(4)
        self._dirty = True

    def _cached_transform(self) -> Matrix:
        if self._dirty:
            self._transform = _compose(self._position, self._scale)
            self._dirty = False
        return self._transform.copy()


class Node2D(_Transformable):
    """A node in a 2D scene graph; children inherit its transform."""

    def __init__(self) -> None:
        super().__init__()
        self._children: list[Node2D] = []
        self._parent: Optional[weakref.ref[Node2D]] = None

    @property
    def children(self) -> tuple[Node2D, ...]:
        return tuple(self._children)

    @property
    def parent(self) -> Optional[Node2D]:
        return None if self._parent is None else self._parent()

    def update(self, model_view: Matrix) -> None:
        """Render this node and then its children under the combined transform."""
        combined = model_view @ self.local_transform()
        self.render(combined)
        for child in list(self._children):
            child.update(combined)

    def render(self, model_view: Matrix) -> None:
        """Draw the node itself; a plain node draws nothing."""

    def add_child(self, child: Node2D) -> None:
        self._children.append(child)
        child.set_parent(self)

    def remove_child(self, child: Node2D) -> None:
        """Detach ``child``; nodes that are not children are ignored."""
        for index, existing in enumerate(self._children):
            if existing is child:
                del self._children[index]
                child.set_parent(None)
                return

    def set_parent(self, parent: Optional[Node2D]) -> None:
        """Link to ``parent`` and take over its world; None detaches."""
        if parent is None:
            self._parent = None
            self.world = None
        else:
            self._parent = weakref.ref(parent)
            self.world = parent.world

    def local_transform(self) -> Matrix:
        """Return the node's transform relative to its parent."""
        return self._cached_transform()

    def set_position(self, x: float, y: float) -> None:
        self._position = Vector(x, y, 0, 1)
        self._dirty = True

    def set_scale(self, x: float, y: float) -> None:
        self._scale = Vector(x, y, 1, 1)
        self._dirty = True


class Line2D(Node2D):
    """A coloured segment between two points in the node's frame."""

    def __init__(self) -> None:
        super().__init__()
        self.pos1 = Vector.zeros(4)
        self.pos2 = Vector.zeros(4)
        self.color1 = _DEFAULT_COLOR
        self.color2 = _DEFAULT_COLOR

    def render(self, model_view: Matrix) -> None:
        """Queue a line command on the world's command list."""
        commands = _command_list(self.world)
        buffer = ShaderBuffer()
        buffer.add_data(model_view.copy())
        buffer.add_data(self.pos1.copy())
        buffer.add_data(self.pos2.copy())
        buffer.add_data(self.color1)
        buffer.add_data(self.color2)
        commands.add_command(ShaderCommand(PrimitiveType.LINE, buffer))

    def set_pos1(self, x: float, y: float) -> None:
        self.pos1 = Vector(x, y, 0, 1)

    def set_pos2(self, x: float, y: float) -> None:
        self.pos2 = Vector(x, y, 0, 1)

    def set_color(self, color: Color) -> None:
        """Give both endpoints the same colour."""
        self.color1 = color
        self.color2 = color


class Node3D(_Transformable, ABC):
    """Base of objects placed directly in a 3D world."""

    @abstractmethod
    def render(self, model_view: Matrix) -> None:
        """Queue the draw commands for this node."""

    @abstractmethod
    def update(self, model_view: Matrix) -> None:
        """Advance the node by one frame."""

    def local_transform(self) -> Matrix:
        """Return the node's transform within its world."""
        return self._cached_transform()

    def set_position(self, x: float, y: float, z: float) -> None:
        self._position = Vector(x, y, z, self._position[3])
        self._dirty = True

    def set_scale(self, x: float, y: float, z: float) -> None:
        self._scale = Vector(x, y, z, self._scale[3])
        self._dirty = True


_CUBE_EDGES = (
    (0, 1), (1, 2), (2, 3), (3, 0),
    (4, 5), (5, 6), (6, 7), (7, 4),
    (0, 4), (1, 5), (2, 6), (3, 7),
)


class Cube(Node3D):
    """A wireframe box with a colour per corner."""

    VERTEX_COUNT = 8

    def __init__(self) -> None:
        super().__init__()
        self.width = 1
        self.height = 1
        self.depth = 1
        self.colors = [_DEFAULT_COLOR] * self.VERTEX_COUNT

    def _vertices(self) -> list[Vector]:
        w, h, d = self.width, self.height, self.depth
        return [
            Vector(0, 0, 0, 1),
            Vector(0, h, 0, 1),
            Vector(0, h, d, 1),
            Vector(0, 0, d, 1),
            Vector(w, 0, 0, 1),
            Vector(w, h, 0, 1),
            Vector(w, h, d, 1),
            Vector(w, 0, d, 1),
        ]

    def render(self, model_view: Matrix) -> None:
        """Queue one line command holding all twelve edges."""
        commands = _command_list(self.world)
        vertices = self._vertices()
        buffer = ShaderBuffer()
        buffer.add_data(model_view.copy())
        for i, j in _CUBE_EDGES:
            buffer.add_data(vertices[i].copy())
            buffer.add_data(vertices[j].copy())
            buffer.add_data(self.colors[i])
            buffer.add_data(self.colors[j])
        commands.add_command(ShaderCommand(PrimitiveType.LINE, buffer))

    def update(self, model_view: Matrix) -> None:
        """A cube does not change between frames."""

    def set_color(self, index: int, color: Color) -> None:
        """Colour one corner; indices outside 0..7 are ignored."""
        if 0 <= index < self.VERTEX_COUNT:
            self.colors[index] = color