import math

import pytest

from heshen.camera import Camera2D, Camera3D
from heshen.image import Rect
from heshen.matrix import Matrix, Vector


class _World:
    def __init__(self, width, height):
        self._rect = Rect(0, 0, width, height)

    def resolution(self):
        return self._rect


def _values(v):
    return list(v)


def _placed(cls):
    camera = cls()
    camera.eye = Vector(10, -20, -300)
    camera.target = Vector(5, 0, 0)
    camera.up = Vector(0, 1, 0)
    return camera


def test_camera2d_defaults():
    camera = Camera2D()
    assert camera.eye == Vector(0, 0, 0)
    assert camera.target == Vector(0, 0, -1)
    assert camera.up == Vector(0, 1, 0)
    assert camera.near == pytest.approx(0.1)
    assert camera.far == pytest.approx(10000.0)
    assert camera.fov == pytest.approx(math.pi / 3)
    assert camera.world is None


def test_camera3d_defaults():
    camera = Camera3D()
    assert camera.eye == Vector(0, 0, 0)
    assert camera.target == Vector(0, 0, 0)
    assert camera.far == pytest.approx(100.0)
    assert camera.aspect == pytest.approx(4.0 / 3.0)


@pytest.mark.parametrize("cls", [Camera2D, Camera3D])
def test_view_maps_eye_to_origin(cls):
    camera = _placed(cls)
    point = camera.view_matrix() @ Vector(*camera.eye, 1)
    assert _values(point) == pytest.approx([0, 0, 0, 1], abs=1e-9)


@pytest.mark.parametrize("cls", [Camera2D, Camera3D])
def test_view_puts_target_on_negative_z(cls):
    camera = _placed(cls)
    distance = (camera.target - camera.eye).length()
    point = camera.view_matrix() @ Vector(*camera.target, 1)
    assert _values(point) == pytest.approx([0, 0, -distance, 1], abs=1e-9)


@pytest.mark.parametrize("cls", [Camera2D, Camera3D])
def test_view_rotation_is_orthonormal(cls):
    view = _placed(cls).view_matrix()
    rows = [Vector(*row[:3]) for row in list(view)[:3]]
    for i, a in enumerate(rows):
        for j, b in enumerate(rows):
            assert a.dot(b) == pytest.approx(1.0 if i == j else 0.0, abs=1e-9)


@pytest.mark.parametrize("cls", [Camera2D, Camera3D])
def test_view_projection_is_product(cls):
    camera = _placed(cls)
    assert camera.view_projection_matrix() == camera.projection_matrix() @ camera.view_matrix()


@pytest.mark.parametrize("depth", [2.0, 50.0])
def test_camera2d_projection_keeps_depth_on_planes(depth):
    camera = Camera2D(near=2.0, far=50.0)
    clip = camera.projection_matrix() @ Vector(1, 1, depth, 1)
    assert clip[2] / clip[3] == pytest.approx(depth)


def test_camera3d_projection_maps_planes_to_unit_depth():
    camera = Camera3D(near=1.0, far=1000.0)
    projection = camera.projection_matrix()
    near_clip = projection @ Vector(0, 0, -1, 1)
    far_clip = projection @ Vector(0, 0, -1000, 1)
    assert near_clip[2] / near_clip[3] == pytest.approx(1.0)
    assert far_clip[2] / far_clip[3] == pytest.approx(-1.0)


def test_camera3d_projection_perspective_row():
    projection = Camera3D().projection_matrix()
    assert list(projection)[3] == (0.0, 0.0, -1.0, 0.0)


def test_camera2d_orthographic_spans_resolution():
    camera = Camera2D(world=_World(800, 600))
    ortho = camera.orthographic_matrix()
    assert _values(ortho @ Vector(0, 0, 0, 1)) == pytest.approx([-1, -1, -1, 1])
    assert _values(ortho @ Vector(800, 600, 0, 1)) == pytest.approx([1, 1, -1, 1])


def test_camera2d_orthographic_requires_world():
    with pytest.raises(ValueError):
        Camera2D().orthographic_matrix()
    with pytest.raises(ValueError):
        Camera2D(world=_World(0, 0)).orthographic_matrix()


def test_frustum_orthographic_matches_between_cameras():
    flat = Camera2D(fov=math.pi / 2, aspect=2.0, near=1.0, far=1000.0)
    deep = Camera3D(fov=math.pi / 2, aspect=2.0, near=1.0, far=1000.0)
    ortho = deep.orthographic_matrix()
    assert flat.orthographic_matrix2() == ortho
    assert ortho[0, 3] == pytest.approx(0.0)
    assert ortho[1, 3] == pytest.approx(0.0)
    assert ortho[0, 0] * deep.aspect == pytest.approx(ortho[1, 1])


def _looking_camera():
    return Camera3D(eye=Vector(0, 0, -300), target=Vector(0, 0, 0), up=Vector(0, 1, 0))


def test_move_local_forward():
    camera = _looking_camera()
    camera.move_local(Vector(0, 0, 10))
    assert _values(camera.eye) == pytest.approx([0, 0, -290])
    assert _values(camera.target) == pytest.approx([0, 0, 10])


def test_move_local_keeps_view_direction():
    camera = _looking_camera()
    before = camera.target - camera.eye
    camera.move_local(Vector(5, 7, 0))
    after = camera.target - camera.eye
    assert _values(after) == pytest.approx(_values(before))
    assert camera.eye != Vector(0, 0, -300)


def test_rotate_local_zero_keeps_target():
    camera = _looking_camera()
    camera.rotate_local(0, 0)
    assert _values(camera.target) == pytest.approx([0, 0, 0], abs=1e-9)


def test_rotate_local_clamps_pitch():
    clamped = _looking_camera()
    limit = _looking_camera()
    clamped.rotate_local(0, 200)
    limit.rotate_local(0, 89)
    assert _values(clamped.target) == pytest.approx(_values(limit.target))


def test_rotate_local_keeps_eye_and_truncates_distance():
    camera = Camera3D(eye=Vector(0, 0, 0), target=Vector(0, 0, 10.7), up=Vector(0, 1, 0))
    camera.rotate_local(30, 0)
    assert camera.eye == Vector(0, 0, 0)
    assert (camera.target - camera.eye).length() == pytest.approx(10)


def test_rotate_local_yaw_turns_towards_right():
    camera = Camera3D(eye=Vector(0, 0, 0), target=Vector(0, 0, 10), up=Vector(0, 1, 0))
    camera.rotate_local(30, 0)
    assert camera.target[0] > 0
    assert camera.target[1] == pytest.approx(0.0, abs=1e-9)