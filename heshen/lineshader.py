"""A software pipeline that draws coloured line segments into an image."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from heshen.color import Color
from heshen.commands import ShaderBuffer
from heshen.image import Image
from heshen.matrix import Matrix, Vector


@dataclass
class LineVertices:
    """The two endpoints of a segment with their colours."""

    pos1: Vector
    pos2: Vector
    color1: Color
    color2: Color


def _to_viewport(pos: Vector, width: int, height: int) -> tuple[float, float]:
    ndc = pos / pos[3]
    return (ndc[0] + 1) * 0.5 * width, (ndc[1] + 1) * 0.5 * height


def _bresenham_x(x1: int, y1: int, x2: int, y2: int) -> Iterator[tuple[int, int, float]]:
    dh = y2 - y1
    dw = x2 - x1 if dh > 0 else x1 - x2
    step = 1 if dh > 0 else -1
    x, y, error = x1, y1, 0
    yield x, y, 0.0
    while x < x2:
        x += 1
        if abs(error + dh * 2) < abs(dw * 2):
            error += dh * 2
        else:
            y += step
            error += 2 * dh - 2 * dw
        yield x, y, (x - x1) / (x2 - x1)


def _bresenham_y(x1: int, y1: int, x2: int, y2: int) -> Iterator[tuple[int, int, float]]:
    dw = x2 - x1
    dh = y2 - y1 if dw > 0 else y1 - y2
    step = 1 if dw > 0 else -1
    x, y, error = x1, y1, 0
    yield x, y, 0.0
    while y < y2:
        y += 1
        if abs(error + dw * 2) < abs(dh * 2):
            error += dw * 2
        else:
            x += step
            error += 2 * dw - 2 * dh
        yield x, y, (y - y1) / (y2 - y1)


class LineShaderPipeline:
    """Vertex transform, Bresenham rasterisation and colour output for lines."""

    def __init__(self) -> None:
        self.model_view_projection = Matrix(4, 4)

    def process_buffer(self, buffer: ShaderBuffer, image: Image) -> None:
        """Draw every segment in ``buffer``.

        A leading matrix becomes the model-view-projection; the remaining
        items are read in groups of pos1, pos2, color1, color2.
        """
        items = list(buffer)
        if items and isinstance(items[0], Matrix):
            self.setup_constant_buffer(items[0])
            items = items[1:]
        if len(items) % 4:
            raise ValueError("line buffer holds an incomplete vertex group")
        for pos1, pos2, color1, color2 in zip(*[iter(items)] * 4):
            vertices = LineVertices(pos1, pos2, color1, color2)
            self.rasterize(self.vertex_shader(vertices), image)

    def setup_constant_buffer(self, model_view_projection: Matrix) -> None:
        self.model_view_projection = model_view_projection.copy()

    def vertex_shader(self, vertices: LineVertices) -> LineVertices:
        mvp = self.model_view_projection
        return LineVertices(
            mvp @ vertices.pos1, mvp @ vertices.pos2, vertices.color1, vertices.color2
        )

    def rasterize(self, vertices: LineVertices, image: Image) -> None:
        """Map clip-space endpoints to the viewport and plot the segment."""
        p1 = _to_viewport(vertices.pos1, image.width, image.height)
        p2 = _to_viewport(vertices.pos2, image.width, image.height)
        c1, c2 = vertices.color1, vertices.color2

        if abs(p2[1] - p1[1]) > abs(p2[0] - p1[0]):
            if p1[1] > p2[1]:
                p1, p2, c1, c2 = p2, p1, c2, c1
            points = _bresenham_y(int(p1[0]), int(p1[1]), int(p2[0]), int(p2[1]))
        else:
            if p1[0] > p2[0]:
                p1, p2, c1, c2 = p2, p1, c2, c1
            points = _bresenham_x(int(p1[0]), int(p1[1]), int(p2[0]), int(p2[1]))

        for x, y, t in points:
            color = self.pixel_shader(Color.lerp(c1, c2, t))
            self.output_merge((x, y), color, image)

    def pixel_shader(self, color: Color) -> Color:
        """Produce the output colour of one pixel: the interpolated input colour."""
        return Color.from_argb(color.to_argb())

    def output_merge(self, pos: Sequence[float], color: Color, image: Image) -> None:
        image.set(int(pos[0]), int(pos[1]), color.to_argb())