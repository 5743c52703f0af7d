"""Turns the held state of a mouse button into single click events."""

from __future__ import annotations


class ClickDetector:
    """Reports a click only on the frame the button goes down.

    It starts as if the button were already held, so a press carried over
    from before it existed is not reported.
    """

    def __init__(self) -> None:
        self._last_click = True

    def is_clicked(self, pressed: bool) -> bool:
        """Feed the current button state; True on a fresh press."""
        if pressed and not self._last_click:
            self._last_click = True
            return True
        if not pressed:
            self._last_click = False
        return False