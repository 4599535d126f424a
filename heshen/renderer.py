"""The frame renderer: queues command lists and draws them into a target image."""

from __future__ import annotations

from collections import deque
from typing import Callable, ClassVar, Optional

from heshen.commands import CommandList, PrimitiveType
from heshen.image import Image, Rect
from heshen.lineshader import LineShaderPipeline

PresentFunc = Callable[[Image], None]


class Renderer:
    """Executes queued command lists and hands the finished image on."""

    _instance: ClassVar[Optional[Renderer]] = None

    def __init__(self) -> None:
        self._queue: deque[CommandList] = deque()
        self.render_target: Image = Image()
        self._present_func: Optional[PresentFunc] = None

    @classmethod
    def instance(cls) -> Renderer:
        """Return the shared renderer, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def set_present_func(self, func: Optional[PresentFunc]) -> None:
        self._present_func = func

    def prepare(self, client_rect: Rect) -> None:
        """Start a frame: a blank target of the rect's size and an empty queue."""
        self.render_target = Image(client_rect.width, client_rect.height)
        self._queue.clear()

    def render(self) -> None:
        """Execute and drop every queued command list, oldest first."""
        while self._queue:
            self._execute(self._queue.popleft())

    def present(self) -> None:
        if self._present_func is not None:
            self._present_func(self.render_target)

    def add_command_list(self, command_list: CommandList) -> None:
        self._queue.append(command_list.copy())

    def _execute(self, command_list: CommandList) -> None:
        for command in command_list:
            if command.primitive_type is PrimitiveType.LINE:
                LineShaderPipeline().process_buffer(command.buffer, self.render_target)