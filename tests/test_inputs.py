import pygame
import pytest

from gridsnake.inputs import FrameHost, Key


@pytest.fixture
def display():
    pygame.display.init()
    pygame.display.set_mode((10, 10))
    yield
    pygame.display.quit()


def _post_key(code: int) -> None:
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=code, mod=0, unicode="", scancode=0))


def test_poll_collects_pressed_keys(display) -> None:
    host = FrameHost(fps=60)
    pygame.event.clear()
    _post_key(pygame.K_LEFT)
    _post_key(pygame.K_ESCAPE)
    _post_key(pygame.K_a)

    assert host.poll_events()
    assert host.is_key_pressed(Key.LEFT)
    assert host.is_key_pressed(Key.ESCAPE)
    assert not host.is_key_pressed(Key.UP)


def test_presses_only_last_one_frame(display) -> None:
    host = FrameHost(fps=60)
    pygame.event.clear()
    _post_key(pygame.K_DOWN)
    host.poll_events()
    assert host.is_key_pressed(Key.DOWN)

    host.poll_events()
    assert not host.is_key_pressed(Key.DOWN)


def test_quit_event_stops_loop(display) -> None:
    host = FrameHost(fps=60)
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert host.poll_events() is False


def test_frame_time_measured_by_next_frame(display) -> None:
    host = FrameHost(fps=1000)
    assert host.frame_time() == 0.0
    host.next_frame()
    assert host.frame_time() >= 0.0


def test_fps_must_be_positive() -> None:
    with pytest.raises(ValueError):
        FrameHost(fps=0)


def test_quit_still_drains_rest_of_queue(display) -> None:
    host = FrameHost(fps=60)
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    _post_key(pygame.K_UP)

    assert host.poll_events() is False
    assert host.is_key_pressed(Key.UP)
    assert pygame.event.peek(pygame.KEYDOWN) is False
