import pytest

from heshen.color import BaseColor, Color
from heshen.commands import PrimitiveType
from heshen.image import Rect
from heshen.input import InputManager, KeyCode, KeyEvent
from heshen.matrix import Matrix, Vector
from heshen.nodes import Cube, Line2D, Node3D
from heshen.renderer import Renderer
from heshen.scene import Scene
from heshen.world import World2D, World3D

RED = Color.from_argb(BaseColor.RED)
GREEN = Color.from_argb(BaseColor.GREEN)
BLUE = Color.from_argb(BaseColor.BLUE)
WHITE = Color.from_argb(BaseColor.WHITE)
YELLOW = Color.from_argb(BaseColor.YELLOW)
CYAN = Color.from_argb(BaseColor.CYAN)
MAGENTA = Color.from_argb(BaseColor.MAGENTA)


def make_scene():
    scene = Scene()
    scene.set_resolution(800, 600)
    return scene


def make_cube():
    cube = Cube()
    cube.set_position(0, 0, 0)
    cube.set_scale(1, 1, 1)
    cube.width = 100
    cube.height = 100
    cube.depth = 100
    for index, color in enumerate([RED, GREEN, BLUE, WHITE, YELLOW, CYAN, MAGENTA, WHITE]):
        cube.set_color(index, color)
    return cube


def drawn_pixels(image, rows):
    return {
        (x, y): image.get(x, y)
        for y in rows
        for x in range(image.width)
        if image.get(x, y)
    }


def test_world2d_line_renders_into_target():
    renderer = Renderer()
    scene = make_scene()
    world = World2D(renderer=renderer)
    scene.add_world(world)

    line = Line2D()
    line.set_position(300, 200)
    line.set_pos1(0, 0)
    line.set_pos2(100, 0)
    world.add_node(line)
    line.color1 = RED
    line.color2 = BLUE

    renderer.prepare(Rect(0, 0, 800, 600))
    world.render()
    renderer.render()

    pixels = drawn_pixels(renderer.render_target, range(195, 206))
    assert pixels
    assert {y for _, y in pixels} <= {199, 200}
    xs = sorted(x for x, _ in pixels)
    assert 299 <= xs[0] <= 300
    assert 400 <= xs[-1] <= 401
    leftmost = min(pixels, key=lambda p: p[0])
    rightmost = max(pixels, key=lambda p: p[0])
    assert pixels[leftmost] == RED.to_argb()
    assert pixels[rightmost] == BLUE.to_argb()


def test_world2d_render_rebuilds_command_list():
    renderer = Renderer()
    scene = make_scene()
    world = World2D(renderer=renderer)
    scene.add_world(world)
    world.add_node(Line2D())
    world.render()
    world.render()
    assert len(world.command_list) == 1
    assert world.command_list.commands[0].primitive_type is PrimitiveType.LINE


def test_world2d_node_takes_world():
    world = World2D(renderer=Renderer())
    line = Line2D()
    world.add_node(line)
    assert line.world is world
    assert line.parent is world.root


def test_world2d_resolution_without_scene_is_empty():
    assert World2D(renderer=Renderer()).resolution() == Rect()


def test_world2d_resolution_follows_scene():
    scene = make_scene()
    world = World2D(renderer=Renderer())
    scene.add_world(world)
    assert world.resolution() == Rect(0, 0, 800, 600)


def test_world3d_cube_command():
    renderer = Renderer()
    scene = make_scene()
    world = World3D(renderer=renderer, input_manager=InputManager())
    scene.add_world(world)
    cube = make_cube()
    world.add_node(cube)
    world.render()

    assert cube.world is world
    assert len(world.command_list) == 1
    items = list(world.command_list.commands[0].buffer)
    assert len(items) == 1 + 12 * 4
    assert isinstance(items[0], Matrix)
    assert items[1] == Vector(0, 0, 0, 1)
    assert items[2] == Vector(0, 100, 0, 1)
    assert items[3] == RED
    assert items[4] == GREEN


def test_world3d_update_moves_camera_with_keys():
    manager = InputManager()
    world = World3D(renderer=Renderer(), input_manager=manager)
    manager.process_key_event(KeyCode.W, KeyEvent.KEY_DOWN)
    world.update()
    assert world.camera.eye == Vector(0, 0, -290)


def test_world3d_update_advances_nodes():
    class Recorder(Node3D):
        def __init__(self):
            super().__init__()
            self.updates = []

        def render(self, model_view):
            pass

        def update(self, model_view):
            self.updates.append(model_view)

    world = World3D(renderer=Renderer(), input_manager=InputManager())
    node = Recorder()
    world.add_node(node)
    world.update()
    world.update()
    assert len(node.updates) == 2
    assert node.updates[0] == world.camera.orthographic_matrix() @ world.camera.view_matrix()


def test_world3d_resolution_requires_scene():
    world = World3D(renderer=Renderer(), input_manager=InputManager())
    with pytest.raises(RuntimeError):
        world.resolution()