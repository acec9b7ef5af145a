from unittest import mock

from cardslot.mouse import MOUSE_INPUT_LEFT, MOUSE_INPUT_RIGHT, Mouse


def test_update_records_position():
    mouse = Mouse()
    mouse.update(600, 580, 0)
    assert (mouse.x, mouse.y) == (600, 580)
    assert mouse.left is False


def test_press_hold_release_edges():
    mouse = Mouse()
    mouse.update(0, 0, 0)
    assert not mouse.button_down() and not mouse.button() and not mouse.button_up()

    mouse.update(0, 0, MOUSE_INPUT_LEFT)
    assert mouse.button_down() is True
    assert mouse.button() is False
    assert mouse.button_up() is False

    mouse.update(0, 0, MOUSE_INPUT_LEFT)
    assert mouse.button_down() is False
    assert mouse.button() is True
    assert mouse.button_up() is False

    mouse.update(0, 0, 0)
    assert mouse.button_down() is False
    assert mouse.button() is False
    assert mouse.button_up() is True

    mouse.update(0, 0, 0)
    assert mouse.button_up() is False


def test_right_button_is_not_left():
    mouse = Mouse()
    mouse.update(0, 0, MOUSE_INPUT_RIGHT)
    assert mouse.left is False
    assert mouse.button_down() is False


def test_end_never_requested():
    mouse = Mouse()
    mouse.update(1, 1, MOUSE_INPUT_LEFT)
    assert mouse.end_requested() is False


def test_poll_reads_pygame_state():
    mouse = Mouse()
    with mock.patch("pygame.mouse.get_pos", return_value=(700, 600)), mock.patch(
        "pygame.mouse.get_pressed", return_value=(True, False, True)
    ):
        mouse.poll()
    assert (mouse.x, mouse.y) == (700, 600)
    assert mouse.left is True
    assert mouse.buttons & MOUSE_INPUT_RIGHT
    assert mouse.button_down() is True