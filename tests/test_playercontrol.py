from types import SimpleNamespace

import pytest

from heshen.camera import Camera3D
from heshen.input import InputManager, KeyCode, KeyEvent
from heshen.matrix import Vector
from heshen.playercontrol import InputSubscription, PlayerControl


def make_control():
    camera = Camera3D(eye=Vector(0, 0, 0), target=Vector(0, 0, 10), up=Vector(0, 1, 0))
    manager = InputManager()
    world = SimpleNamespace(camera=camera)
    return PlayerControl(world, manager), camera, manager


def press(manager, key):
    manager.process_key_event(key, KeyEvent.KEY_DOWN)


def move_mouse(manager, dx, dy):
    manager.handle_input_event(KeyEvent.MOUSE_MOVE, KeyCode.NONE, 100, 100)
    manager.handle_input_event(KeyEvent.MOUSE_MOVE, KeyCode.NONE, 100 + dx, 100 + dy)


def test_forward_key_moves_eye_by_speed():
    control, camera, manager = make_control()
    press(manager, KeyCode.W)
    control.update()
    assert camera.eye == Vector(0, 0, 10)
    assert camera.target - camera.eye == Vector(0, 0, 10)


def test_right_key_moves_along_right_axis():
    control, camera, manager = make_control()
    press(manager, KeyCode.D)
    control.update()
    assert camera.eye == Vector(10, 0, 0)


def test_up_key_moves_along_up_axis():
    control, camera, manager = make_control()
    press(manager, KeyCode.Q)
    control.update()
    assert camera.eye[1] == pytest.approx(10.0)
    assert camera.eye[0] == pytest.approx(0.0)


@pytest.mark.parametrize(
    "first, second",
    [(KeyCode.W, KeyCode.S), (KeyCode.A, KeyCode.D), (KeyCode.Q, KeyCode.E)],
)
def test_opposite_keys_cancel(first, second):
    control, camera, manager = make_control()
    press(manager, first)
    press(manager, second)
    control.update()
    assert camera.eye == Vector(0, 0, 0)
    assert camera.target == Vector(0, 0, 10)


def test_released_key_stops_movement():
    control, camera, manager = make_control()
    press(manager, KeyCode.W)
    manager.process_key_event(KeyCode.W, KeyEvent.KEY_UP)
    control.update()
    assert camera.eye == Vector(0, 0, 0)


def test_mouse_look_needs_right_button():
    control, camera, manager = make_control()
    move_mouse(manager, 30, 0)
    control.update()
    assert camera.target == Vector(0, 0, 10)


def test_mouse_look_turns_target_and_keeps_distance():
    control, camera, manager = make_control()
    manager.handle_input_event(KeyEvent.MOUSE_RIGHT_DOWN, KeyCode.MOUSE_RIGHT, 0, 0)
    move_mouse(manager, 30, 20)
    control.update()
    assert camera.eye == Vector(0, 0, 0)
    assert camera.target[0] > 0
    assert (camera.target - camera.eye).length() == pytest.approx(10.0)


def test_subscription_delivers_until_closed():
    manager = InputManager()
    seen = []
    subscription = InputSubscription(lambda k, e: seen.append((k, e)), manager)
    manager.process_key_event(KeyCode.A, KeyEvent.KEY_DOWN)
    subscription.close()
    subscription.close()
    manager.process_key_event(KeyCode.A, KeyEvent.KEY_UP)
    assert seen == [(KeyCode.A, KeyEvent.KEY_DOWN)]
    assert subscription.active is False


def test_subscription_as_context_manager():
    manager = InputManager()
    seen = []
    with InputSubscription(lambda k, e: seen.append(k), manager) as subscription:
        assert subscription.active is True
        manager.process_key_event(KeyCode.S, KeyEvent.KEY_DOWN)
    manager.process_key_event(KeyCode.D, KeyEvent.KEY_DOWN)
    assert seen == [KeyCode.S]


def test_attach_replaces_previous_subscription():
    control, _, _ = make_control()
    first = control.attach()
    second = control.attach()
    assert first.active is False
    assert second.active is True
    assert control.subscription is second