"""Keyboard and mouse steering of a 3D world's camera."""

from __future__ import annotations

from typing import Any, Optional

from heshen.input import InputHandler, InputManager, KeyCode, KeyEvent
from heshen.matrix import Vector

MOVE_SPEED = 10.0
MOUSE_SENSITIVITY = 0.1

# key -> (axis in camera frame: 0 right, 1 up, 2 forward; signed step)
_KEY_MOVES = {
    KeyCode.W: (2, MOVE_SPEED),
    KeyCode.S: (2, -MOVE_SPEED),
    KeyCode.A: (0, -MOVE_SPEED),
    KeyCode.D: (0, MOVE_SPEED),
    KeyCode.Q: (1, MOVE_SPEED),
    KeyCode.E: (1, -MOVE_SPEED),
}


class InputSubscription:
    """Keeps a handler registered with an input manager until closed."""

    def __init__(
        self, handler: InputHandler, manager: Optional[InputManager] = None
    ) -> None:
        self._manager = manager if manager is not None else InputManager.instance()
        self._handler_id: Optional[int] = self._manager.register_handler(handler)

    @property
    def active(self) -> bool:
        return self._handler_id is not None

    def close(self) -> None:
        """Unregister the handler; closing twice does nothing."""
        if self._handler_id is not None:
            self._manager.unregister_handler(self._handler_id)
            self._handler_id = None

    def __enter__(self) -> InputSubscription:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class PlayerControl:
    """Moves and turns the camera of ``world`` from the current input state."""

    def __init__(self, world: Any, input_manager: Optional[InputManager] = None) -> None:
        self.world = world
        self._input = input_manager
        self.subscription: Optional[InputSubscription] = None

    @property
    def input(self) -> InputManager:
        return self._input if self._input is not None else InputManager.instance()

    def attach(self) -> InputSubscription:
        """Subscribe to key events, replacing any earlier subscription."""
        if self.subscription is not None:
            self.subscription.close()
        self.subscription = InputSubscription(self._on_input_event, self.input)
        return self.subscription

    def update(self) -> None:
        """Apply held movement keys and right-button mouse look to the camera."""
        manager = self.input
        camera = self.world.camera

        local_move = Vector.zeros(3)
        for key, (axis, step) in _KEY_MOVES.items():
            if manager.is_key_pressed(key):
                local_move[axis] += step
        if not local_move.is_zero():
            camera.move_local(local_move)

        move_x, move_y = manager.mouse_move_x, manager.mouse_move_y
        if manager.is_key_pressed(KeyCode.MOUSE_RIGHT) and (move_x or move_y):
            yaw = move_x * MOUSE_SENSITIVITY
            pitch = move_y * MOUSE_SENSITIVITY
            camera.rotate_local(yaw, -pitch)

    def _on_input_event(self, key: KeyCode, event: KeyEvent) -> None:
        # Movement is polled in update(); discrete key events need no action.
        return None