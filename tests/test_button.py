import pygame
import pytest

from crisscross.button import BUTTON_OFFSET, Button

COLOR = (101, 161, 224)
MOUSE_COLOR = (56, 83, 112)


@pytest.fixture
def button():
    pygame.font.init()
    return Button(COLOR, MOUSE_COLOR, 400, 180, None, "New game", 64)


def _centre(button):
    left, top, width, height = button.bounds
    return left + width / 2, top + height / 2


def test_box_is_centred_on_x_center(button):
    left, _, width, _ = button.bounds
    assert left + width / 2 == pytest.approx(400)


def test_box_wraps_text_with_offset(button):
    font = pygame.font.Font(None, 64)
    text_width, text_height = font.size("New game")
    _, top, width, height = button.bounds
    assert width == text_width + 2 * BUTTON_OFFSET
    assert height == text_height + 2 * BUTTON_OFFSET
    assert top == 180 + 8 - BUTTON_OFFSET


def test_contains(button):
    left, top, width, height = button.bounds
    assert button.contains(_centre(button))
    assert button.contains((left, top))
    assert not button.contains((left + width, top))
    assert not button.contains((left - 1, top + height / 2))
    assert not button.contains((0, 0))


def test_is_clicked_needs_click_and_position(button):
    inside = _centre(button)
    assert button.is_clicked(inside, True) is True
    assert button.is_clicked(inside, False) is False
    assert button.is_clicked((0, 0), True) is False


def test_draw_uses_hover_colour(button):
    left, top, _, height = button.bounds
    sample = (round(left) + 3, round(top + height / 2))
    outline = (round(left) - 2, round(top + height / 2))

    surface = pygame.Surface((800, 640))
    surface.fill((255, 255, 255))
    button.draw(surface, (0, 0))
    assert tuple(surface.get_at(sample))[:3] == COLOR
    assert tuple(surface.get_at(outline))[:3] == (0, 0, 0)

    button.draw(surface, _centre(button))
    assert tuple(surface.get_at(sample))[:3] == MOUSE_COLOR