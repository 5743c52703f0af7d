"""A clickable text button that highlights under the mouse."""

from __future__ import annotations

from os import PathLike

import pygame

BUTTON_OFFSET = 10
OUTLINE_THICKNESS = 4
TEXT_COLOR = (0, 0, 0)
OUTLINE_COLOR = (0, 0, 0)


class Button:
    """A label in a filled, outlined box, centred horizontally on ``x_center``.

    ``font`` is a path to a font file, or None for pygame's default font;
    ``size`` is the font size.
    """

    def __init__(
        self,
        color,
        mouse_color,
        x_center: int,
        y_top: int,
        font: str | PathLike | None,
        text: str,
        size: int,
    ) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self.color = pygame.Color(color)
        self.mouse_color = pygame.Color(mouse_color)
        self.text = text
        self._label = pygame.font.Font(font, size).render(text, True, TEXT_COLOR)
        text_width, text_height = self._label.get_size()

        x = x_center - text_width / 2
        self._text_pos = (round(x), y_top)

        box_top = y_top + (4 * size) // 32
        self._left = x - BUTTON_OFFSET
        self._top = float(box_top - BUTTON_OFFSET)
        self._width = float(text_width + 2 * BUTTON_OFFSET)
        self._height = float(text_height + 2 * BUTTON_OFFSET)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """The box as (left, top, width, height)."""
        return self._left, self._top, self._width, self._height

    def contains(self, pos) -> bool:
        """True if the point lies inside the box (right and bottom edges excluded)."""
        px, py = pos
        return (
            self._left <= px < self._left + self._width
            and self._top <= py < self._top + self._height
        )

    def draw(self, surface: pygame.Surface, mouse_pos) -> None:
        """Draw the box, highlighted if ``mouse_pos`` is over it, and its label."""
        fill = self.mouse_color if self.contains(mouse_pos) else self.color
        box = pygame.Rect(
            round(self._left), round(self._top), round(self._width), round(self._height)
        )
        outline = box.inflate(2 * OUTLINE_THICKNESS, 2 * OUTLINE_THICKNESS)
        pygame.draw.rect(surface, OUTLINE_COLOR, outline, OUTLINE_THICKNESS)
        pygame.draw.rect(surface, fill, box)
        surface.blit(self._label, self._text_pos)

    def is_clicked(self, mouse_pos, mouse_click: bool) -> bool:
        """True if there was a click and it landed on the box."""
        return bool(mouse_click) and self.contains(mouse_pos)