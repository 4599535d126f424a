"""Keyboard and mouse state shared by the application."""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable, ClassVar, Optional


class KeyCode(Enum):
    NONE = auto()
    W = auto()
    A = auto()
    S = auto()
    D = auto()
    Q = auto()
    E = auto()
    MOUSE_LEFT = auto()
    MOUSE_RIGHT = auto()
    MOUSE_MIDDLE = auto()


class KeyEvent(Enum):
    NONE = auto()
    KEY_DOWN = auto()
    KEY_UP = auto()
    MOUSE_MOVE = auto()
    FOCUS_IN = auto()
    FOCUS_OUT = auto()
    MOUSE_LEFT_DOWN = auto()
    MOUSE_LEFT_UP = auto()
    MOUSE_RIGHT_DOWN = auto()
    MOUSE_RIGHT_UP = auto()
    MOUSE_MIDDLE_DOWN = auto()
    MOUSE_MIDDLE_UP = auto()


InputHandler = Callable[[KeyCode, KeyEvent], None]

_VIRTUAL_KEYS = {
    0x57: KeyCode.W,
    0x41: KeyCode.A,
    0x53: KeyCode.S,
    0x44: KeyCode.D,
    0x51: KeyCode.Q,
    0x45: KeyCode.E,
}

_WINDOW_MESSAGES = {
    0x0100: KeyEvent.KEY_DOWN,
    0x0101: KeyEvent.KEY_UP,
    0x0007: KeyEvent.FOCUS_IN,
    0x0008: KeyEvent.FOCUS_OUT,
    0x0200: KeyEvent.MOUSE_MOVE,
    0x0201: KeyEvent.MOUSE_LEFT_DOWN,
    0x0202: KeyEvent.MOUSE_LEFT_UP,
    0x0204: KeyEvent.MOUSE_RIGHT_DOWN,
    0x0205: KeyEvent.MOUSE_RIGHT_UP,
    0x0207: KeyEvent.MOUSE_MIDDLE_DOWN,
    0x0208: KeyEvent.MOUSE_MIDDLE_UP,
}

_MOUSE_BUTTONS = {
    KeyEvent.MOUSE_LEFT_DOWN: (KeyCode.MOUSE_LEFT, True),
    KeyEvent.MOUSE_LEFT_UP: (KeyCode.MOUSE_LEFT, False),
    KeyEvent.MOUSE_RIGHT_DOWN: (KeyCode.MOUSE_RIGHT, True),
    KeyEvent.MOUSE_RIGHT_UP: (KeyCode.MOUSE_RIGHT, False),
    KeyEvent.MOUSE_MIDDLE_DOWN: (KeyCode.MOUSE_MIDDLE, True),
    KeyEvent.MOUSE_MIDDLE_UP: (KeyCode.MOUSE_MIDDLE, False),
}


def translate_virtual_key(key: int) -> KeyCode:
    """Map a virtual-key code to a KeyCode; unknown keys give NONE."""
    return _VIRTUAL_KEYS.get(key, KeyCode.NONE)


def translate_window_message(message: int) -> KeyEvent:
    """Map a window message number to a KeyEvent; unknown messages give NONE."""
    return _WINDOW_MESSAGES.get(message, KeyEvent.NONE)


class InputManager:
    """Tracks pressed keys and mouse motion and notifies registered handlers."""

    _instance: ClassVar[Optional[InputManager]] = None

    def __init__(self) -> None:
        self._handlers: dict[int, InputHandler] = {}
        self._key_states: dict[KeyCode, bool] = {}
        self._last_id = 0
        self.mouse_x = 0
        self.mouse_y = 0
        self.mouse_move_x = 0
        self.mouse_move_y = 0
        self._first_mouse_move = True

    @classmethod
    def instance(cls) -> InputManager:
        """Return the shared input manager, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register_handler(self, handler: InputHandler) -> int:
        """Register ``handler`` for key events and return its id."""
        self._last_id += 1
        self._handlers[self._last_id] = handler
        return self._last_id

    def unregister_handler(self, handler_id: int) -> None:
        self._handlers.pop(handler_id, None)

    def process_key_event(self, key: KeyCode, event: KeyEvent) -> None:
        """Record a key press or release and pass the event to every handler."""
        if event is KeyEvent.KEY_DOWN:
            self._key_states[key] = True
        elif event is KeyEvent.KEY_UP:
            self._key_states[key] = False
        for handler in list(self._handlers.values()):
            handler(key, event)

    def handle_input_event(self, event: KeyEvent, key: KeyCode, x: int, y: int) -> None:
        """Update mouse position, focus and mouse-button state."""
        if event is KeyEvent.MOUSE_MOVE:
            if self._first_mouse_move:
                self._first_mouse_move = False
            else:
                self.mouse_move_x = x - self.mouse_x
                self.mouse_move_y = y - self.mouse_y
            self.mouse_x = x
            self.mouse_y = y
        elif event is KeyEvent.FOCUS_IN:
            self._first_mouse_move = True
        elif event is KeyEvent.FOCUS_OUT:
            self.clear_key_states()
        elif event in _MOUSE_BUTTONS:
            button, pressed = _MOUSE_BUTTONS[event]
            self._key_states[button] = pressed

    def is_key_pressed(self, key: KeyCode) -> bool:
        return self._key_states.get(key, False)

    def clear_key_state(self, key: KeyCode) -> None:
        if key in self._key_states:
            self._key_states[key] = False

    def clear_key_states(self) -> None:
        for key in self._key_states:
            self._key_states[key] = False

    def end_frame(self) -> None:
        """Forget the mouse motion accumulated during the frame."""
        self.mouse_move_x = 0
        self.mouse_move_y = 0