"""Shader vocabulary, shader buffers and the command lists sent to the renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Iterator


class ShaderType(Enum):
    VERTEX = auto()
    FRAGMENT = auto()
    GEOMETRY = auto()
    TESS_CONTROL = auto()
    TESS_EVALUATION = auto()
    COMPUTE = auto()


class PrimitiveType(Enum):
    POINT = auto()
    LINE = auto()
    TRIANGLE = auto()
    QUAD = auto()
    CIRCLE = auto()
    SQUARE = auto()


@dataclass
class ShaderBuffer:
    """An ordered sequence of values consumed by a shader pipeline."""

    items: list[Any] = field(default_factory=list)

    def add_data(self, value: Any) -> None:
        """Append ``value`` to the end of the buffer."""
        self.items.append(value)

    def copy(self) -> ShaderBuffer:
        return ShaderBuffer(list(self.items))

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass
class ShaderCommand:
    """One draw call: a primitive type and the data it draws from."""

    primitive_type: PrimitiveType
    buffer: ShaderBuffer = field(default_factory=ShaderBuffer)


@dataclass
class CommandList:
    """Draw commands collected for one frame, in submission order."""

    commands: list[ShaderCommand] = field(default_factory=list)

    def add_command(self, command: ShaderCommand) -> None:
        self.commands.append(command)

    def add(self, primitive_type: PrimitiveType, buffer: ShaderBuffer) -> None:
        """Append a command drawing ``primitive_type`` from a copy of ``buffer``."""
        self.commands.append(ShaderCommand(primitive_type, buffer.copy()))

    def clear(self) -> None:
        self.commands.clear()

    def copy(self) -> CommandList:
        return CommandList(list(self.commands))

    def __iter__(self) -> Iterator[ShaderCommand]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)