import pytest

from minirt.controls import (
    OGLK_ESC,
    OGLK_FORWARD,
    XK_ARROW_LEFT,
    XK_ARROW_RIGHT,
    XK_ARROW_UP,
    XK_ESC,
    XK_SHIFT,
    KeyAction,
    handle_key,
)
from minirt.errors import SceneError
from minirt.objects import Camera
from minirt.scene import Scene
from minirt.vector import Vec3


def _scene(fov=70):
    scene = Scene()
    scene.camera = Camera(Vec3(1.0, 2.0, 3.0), Vec3(0.0, 0.0, 1.0), fov)
    return scene


@pytest.mark.parametrize("keycode", [ord("w"), OGLK_FORWARD])
def test_forward_moves_along_normal(keycode):
    scene = _scene()
    cam = scene.camera
    expected = cam.position + cam.normal
    assert handle_key(scene, keycode) is KeyAction.MOVE_FORWARD
    assert tuple(cam.position) == pytest.approx(tuple(expected), abs=1e-9)


def test_backward_undoes_forward():
    scene = _scene()
    start = scene.camera.position
    handle_key(scene, ord("w"))
    assert handle_key(scene, ord("s")) is KeyAction.MOVE_BACKWARD
    assert tuple(scene.camera.position) == pytest.approx(tuple(start), abs=1e-9)


def test_left_and_right_move_along_right_vector():
    scene = _scene()
    cam = scene.camera
    start = cam.position
    handle_key(scene, ord("a"))
    assert tuple(cam.position) == pytest.approx(tuple(start + cam.right), abs=1e-9)
    handle_key(scene, ord("d"))
    assert tuple(cam.position) == pytest.approx(tuple(start), abs=1e-9)


def test_space_and_shift_move_vertically():
    scene = _scene()
    cam = scene.camera
    start = cam.position
    assert handle_key(scene, ord(" ")) is KeyAction.MOVE_UP
    assert cam.position.y == pytest.approx(start.y + 1.0)
    assert handle_key(scene, XK_SHIFT) is KeyAction.MOVE_DOWN
    assert cam.position == start


def test_fov_keys_change_fov():
    scene = _scene(fov=70)
    handle_key(scene, ord("="))
    assert scene.camera.fov == 69
    handle_key(scene, ord("-"))
    handle_key(scene, ord("-"))
    assert scene.camera.fov == 71


def test_fov_stays_within_bounds():
    low = _scene(fov=0)
    handle_key(low, ord("="))
    assert low.camera.fov == 0
    high = _scene(fov=180)
    handle_key(high, ord("-"))
    assert high.camera.fov == 180


def test_yaw_round_trip_and_unit_normal():
    scene = _scene()
    cam = scene.camera
    start = cam.normal
    assert handle_key(scene, XK_ARROW_LEFT) is KeyAction.YAW_LEFT
    assert cam.normal.length() == pytest.approx(1.0)
    assert tuple(cam.normal) != pytest.approx(tuple(start), abs=1e-9)
    handle_key(scene, XK_ARROW_RIGHT)
    assert tuple(cam.normal) == pytest.approx(tuple(start), abs=1e-9)


def test_pitch_keeps_basis_orthogonal():
    scene = _scene()
    cam = scene.camera
    handle_key(scene, XK_ARROW_UP)
    assert cam.normal.length() == pytest.approx(1.0)
    assert cam.up.dot(cam.normal) == pytest.approx(0.0, abs=1e-9)
    assert cam.normal.y > 0


@pytest.mark.parametrize("keycode", [XK_ESC, OGLK_ESC])
def test_escape_requests_close_without_moving(keycode):
    scene = _scene()
    start = scene.camera.position
    assert handle_key(scene, keycode) is KeyAction.CLOSE
    assert scene.camera.position == start


def test_unknown_key_changes_nothing():
    scene = _scene()
    start = (scene.camera.position, scene.camera.normal, scene.camera.fov)
    assert handle_key(scene, 9999) is None
    assert (scene.camera.position, scene.camera.normal, scene.camera.fov) == start


def test_movement_without_camera_raises():
    with pytest.raises(SceneError):
        handle_key(Scene(), ord("w"))