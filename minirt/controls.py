"""Keyboard controls that move, turn and zoom the camera."""

from __future__ import annotations

from enum import Enum, auto

from .errors import SceneError
from .scene import Scene

OGLK_ESC = 53
OGLK_FOVP = 24
OGLK_FOVM = 27
OGLK_FORWARD = 13
OGLK_BACKWARD = 1
OGLK_LEFT = 0
OGLK_RIGHT = 2
OGLK_SPACE = 49
OGLK_SHIFT = 257
OGLK_ARROW_UP = 126
OGLK_ARROW_DOWN = 125
OGLK_ARROW_LEFT = 123
OGLK_ARROW_RIGHT = 124

XK_ESC = 65307
XK_FOVP = ord("=")
XK_FOVM = ord("-")
XK_FORWARD = ord("w")
XK_BACKWARD = ord("s")
XK_LEFT = ord("a")
XK_RIGHT = ord("d")
XK_SPACE = ord(" ")
XK_SHIFT = 65505
XK_ARROW_UP = 65362
XK_ARROW_DOWN = 65364
XK_ARROW_LEFT = 65361
XK_ARROW_RIGHT = 65363

ROTATION_STEP = 0.1
MOVE_STEP = 1.0


class KeyAction(Enum):
    """What a key does to the camera."""

    FOV_NARROW = auto()
    FOV_WIDEN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_FORWARD = auto()
    MOVE_BACKWARD = auto()
    YAW_LEFT = auto()
    YAW_RIGHT = auto()
    PITCH_UP = auto()
    PITCH_DOWN = auto()
    CLOSE = auto()

    @classmethod
    def from_keycode(cls, keycode: int) -> KeyAction | None:
        """The action bound to *keycode*, or None."""
        return _KEYMAP.get(keycode)


_KEYMAP: dict[int, KeyAction] = {
    OGLK_FOVP: KeyAction.FOV_NARROW,
    XK_FOVP: KeyAction.FOV_NARROW,
    OGLK_FOVM: KeyAction.FOV_WIDEN,
    XK_FOVM: KeyAction.FOV_WIDEN,
    OGLK_LEFT: KeyAction.MOVE_LEFT,
    XK_LEFT: KeyAction.MOVE_LEFT,
    OGLK_RIGHT: KeyAction.MOVE_RIGHT,
    XK_RIGHT: KeyAction.MOVE_RIGHT,
    OGLK_SPACE: KeyAction.MOVE_UP,
    XK_SPACE: KeyAction.MOVE_UP,
    OGLK_SHIFT: KeyAction.MOVE_DOWN,
    XK_SHIFT: KeyAction.MOVE_DOWN,
    OGLK_FORWARD: KeyAction.MOVE_FORWARD,
    XK_FORWARD: KeyAction.MOVE_FORWARD,
    OGLK_BACKWARD: KeyAction.MOVE_BACKWARD,
    XK_BACKWARD: KeyAction.MOVE_BACKWARD,
    OGLK_ARROW_LEFT: KeyAction.YAW_LEFT,
    XK_ARROW_LEFT: KeyAction.YAW_LEFT,
    OGLK_ARROW_RIGHT: KeyAction.YAW_RIGHT,
    XK_ARROW_RIGHT: KeyAction.YAW_RIGHT,
    OGLK_ARROW_UP: KeyAction.PITCH_UP,
    XK_ARROW_UP: KeyAction.PITCH_UP,
    OGLK_ARROW_DOWN: KeyAction.PITCH_DOWN,
    XK_ARROW_DOWN: KeyAction.PITCH_DOWN,
    OGLK_ESC: KeyAction.CLOSE,
    XK_ESC: KeyAction.CLOSE,
}


def handle_key(scene: Scene, keycode: int) -> KeyAction | None:
    """Apply the action bound to *keycode* to the scene's camera and return it.

    KeyAction.CLOSE is returned untouched for the caller to close the view;
    unbound keys return None and change nothing.
    """
    action = KeyAction.from_keycode(keycode)
    if action is None or action is KeyAction.CLOSE:
        return action
    camera = scene.camera
    if camera is None:
        raise SceneError("Scene has no camera")
    match action:
        case KeyAction.FOV_NARROW:
            camera.update_fov(-1)
        case KeyAction.FOV_WIDEN:
            camera.update_fov(1)
        case KeyAction.MOVE_LEFT:
            camera.position = camera.position + camera.right
        case KeyAction.MOVE_RIGHT:
            camera.position = camera.position - camera.right
        case KeyAction.MOVE_UP:
            p = camera.position
            camera.position = type(p)(p.x, p.y + MOVE_STEP, p.z)
        case KeyAction.MOVE_DOWN:
            p = camera.position
            camera.position = type(p)(p.x, p.y - MOVE_STEP, p.z)
        case KeyAction.MOVE_FORWARD:
            camera.position = camera.position + camera.normal
        case KeyAction.MOVE_BACKWARD:
            camera.position = camera.position - camera.normal
        case KeyAction.YAW_LEFT:
            camera.update_yaw(ROTATION_STEP)
        case KeyAction.YAW_RIGHT:
            camera.update_yaw(-ROTATION_STEP)
        case KeyAction.PITCH_UP:
            camera.update_pitch(ROTATION_STEP)
        case KeyAction.PITCH_DOWN:
            camera.update_pitch(-ROTATION_STEP)
    return action