"""A scene: the 2D and 3D worlds drawn into one frame."""

from __future__ import annotations

from typing import Union

from heshen.image import Rect
from heshen.world import World2D, World3D


class Scene:
    """Holds worlds and drives them; 2D worlds go before 3D ones."""

    def __init__(self) -> None:
        self.worlds2d: list[World2D] = []
        self.worlds3d: list[World3D] = []
        self.resolution = Rect()

    def add_world(self, world: Union[World2D, World3D]) -> None:
        if isinstance(world, World2D):
            self.worlds2d.append(world)
        elif isinstance(world, World3D):
            self.worlds3d.append(world)
        else:
            raise TypeError(f"not a world: {type(world).__name__}")
        world.scene = self

    def _worlds(self) -> list[Union[World2D, World3D]]:
        return [*self.worlds2d, *self.worlds3d]

    def update(self) -> None:
        for world in self._worlds():
            world.update()

    def render(self) -> None:
        for world in self._worlds():
            world.render()

    def set_resolution(self, width: int, height: int) -> None:
        self.resolution = Rect(0, 0, width, height)