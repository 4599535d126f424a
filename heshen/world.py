"""Worlds: a camera, the nodes it looks at and the commands they produce."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Optional

from heshen.camera import Camera2D, Camera3D
from heshen.commands import CommandList
from heshen.image import Rect
from heshen.input import InputManager
from heshen.matrix import Vector
from heshen.nodes import Node2D, Node3D
from heshen.playercontrol import PlayerControl
from heshen.renderer import Renderer

if TYPE_CHECKING:
    from heshen.scene import Scene


class _WorldBase:
    def __init__(self, renderer: Any = None) -> None:
        self.scene: Optional[Scene] = None
        self.command_list = CommandList()
        self._renderer = renderer

    @property
    def renderer(self) -> Any:
        return self._renderer if self._renderer is not None else Renderer.instance()

    def _submit(self) -> None:
        self.renderer.add_command_list(self.command_list)


class World2D(_WorldBase):
    """A flat world viewed through an orthographic camera."""

    def __init__(self, renderer: Any = None) -> None:
        super().__init__(renderer)
        self.camera = Camera2D(
            eye=Vector(0, 0, -100),
            target=Vector(0, 0, 0),
            up=Vector(0, 1, 0),
            fov=math.pi / 2,
            near=1.0,
            far=1000.0,
            world=self,
        )
        self.root = Node2D()
        self.root.world = self

    def render(self) -> None:
        """Rebuild the command list from the node tree and submit it."""
        self.command_list.clear()
        model_view = self.camera.orthographic_matrix() @ self.camera.view_matrix()
        self.root.update(model_view)
        self._submit()

    def update(self) -> None:
        """A 2D world has no per-frame state of its own."""

    def add_node(self, node: Node2D) -> None:
        self.root.add_child(node)

    def resolution(self) -> Rect:
        """The scene's resolution, or an empty rect outside a scene."""
        if self.scene is not None:
            return self.scene.resolution
        return Rect()


class World3D(_WorldBase):
    """A 3D world seen through a perspective camera steered by the player."""

    def __init__(
        self, renderer: Any = None, input_manager: Optional[InputManager] = None
    ) -> None:
        super().__init__(renderer)
        self.camera = Camera3D(
            eye=Vector(0, 0, -300),
            target=Vector(0, 0, 0),
            up=Vector(0, 1, 0),
            fov=math.pi / 4,
            aspect=4.0 / 3,
            near=1.0,
            far=1000.0,
            world=self,
        )
        self.nodes: list[Node3D] = []
        self.player_control = PlayerControl(self, input_manager)

    def render(self) -> None:
        """Rebuild the command list from every node and submit it."""
        self.command_list.clear()
        model_view = self.camera.projection_matrix() @ self.camera.view_matrix()
        for node in self.nodes:
            node.render(model_view)
        self._submit()

    def update(self) -> None:
        """Apply player input, then advance every node."""
        self.player_control.update()
        model_view = self.camera.orthographic_matrix() @ self.camera.view_matrix()
        for node in self.nodes:
            node.update(model_view)

    def add_node(self, node: Node3D) -> None:
        self.nodes.append(node)
        node.world = self

    def resolution(self) -> Rect:
        if self.scene is None:
            raise RuntimeError("world is not part of a scene")
        return self.scene.resolution