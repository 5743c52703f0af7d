"""The game's screens and the window loop that drives them."""

from __future__ import annotations

import argparse
import os
import random
from enum import Enum, auto
from pathlib import Path

import pygame

from crisscross.board import Board
from crisscross.button import Button
from crisscross.clicks import ClickDetector
from crisscross.display import (
    WHITE,
    choose_starting_symbol,
    draw_board,
    draw_board_with_points,
    show_and_place_round_symbols,
    show_rules,
    show_text_score,
)

WINDOW_SIZE = (800, 640)
WINDOW_TITLE = "CrissCross"
FRAME_RATE = 60
DEFAULT_FONT = "my_font.ttf"


class GameState(Enum):
    """The screen the game is showing."""

    MENU = auto()
    HELP = auto()
    START = auto()
    PLAY = auto()
    SHOW_POINTS = auto()


class Game:
    """The state of one session, advanced one frame at a time by ``step``."""

    def __init__(self, surface, font=None, rng: random.Random | None = None) -> None:
        self.surface = surface
        self.font = font
        self.rng = rng if rng is not None else random.Random()
        self.state = GameState.MENU
        self.board = Board()
        self.round_symbols = [1, 1]
        self.symbol_no = 0
        self.last: tuple[int, int] | None = None
        self.score = 0
        self._clicks = ClickDetector()

        self.start_button = Button((101, 161, 224), (56, 83, 112), 400, 180, font, "New game", 128)
        self.how_to_play_button = Button(
            (101, 161, 224), (56, 83, 112), 400, 400, font, "How to play", 64
        )
        self.back_button = Button((242, 87, 87), (138, 58, 58), 400, 530, font, "Back", 48)
        self.finish_button = Button((141, 209, 140), (95, 140, 94), 710, 545, font, "Finish", 48)

    def new_round_symbols(self) -> list[int]:
        """Draw two random symbols for the next round."""
        self.round_symbols = [self.rng.randint(1, 6), self.rng.randint(1, 6)]
        return self.round_symbols

    def step(self, mouse_pos, mouse_pressed) -> GameState:
        """Draw one frame for the mouse state given; return the new state."""
        self.surface.fill(WHITE)
        click = self._clicks.is_clicked(bool(mouse_pressed))

        if self.state is GameState.MENU:
            self._menu(mouse_pos, click)
        elif self.state is GameState.HELP:
            self._help(mouse_pos, click)
        elif self.state is GameState.START:
            self._start(mouse_pos, click)
        elif self.state is GameState.PLAY:
            self._play(mouse_pos, click)
        else:
            self._show_points(mouse_pos, click)
        return self.state

    def _menu(self, mouse_pos, click) -> None:
        self.start_button.draw(self.surface, mouse_pos)
        self.how_to_play_button.draw(self.surface, mouse_pos)
        if self.start_button.is_clicked(mouse_pos, click):
            self.state = GameState.START
            self.board = Board()
        if self.how_to_play_button.is_clicked(mouse_pos, click):
            self.state = GameState.HELP

    def _help(self, mouse_pos, click) -> None:
        show_rules(self.surface, self.font)
        self.back_button.draw(self.surface, mouse_pos)
        if self.back_button.is_clicked(mouse_pos, click):
            self.state = GameState.MENU

    def _start(self, mouse_pos, click) -> None:
        choose_starting_symbol(self.board, self.surface, self.font, mouse_pos, click)
        draw_board(self.board, self.surface, self.font)
        if not self.board.is_first_valid_pos(0, 0):
            self.state = GameState.PLAY
            self.new_round_symbols()
            self.symbol_no = 0

    def _play(self, mouse_pos, click) -> None:
        draw_board(self.board, self.surface, self.font)
        new_symbol_no, self.last = show_and_place_round_symbols(
            self.symbol_no, self.round_symbols, self.surface, self.font,
            mouse_pos, click, self.board, self.last,
        )
        if self.symbol_no == 1 and new_symbol_no == 0:
            self.new_round_symbols()
        self.symbol_no = new_symbol_no
        if self.symbol_no == 0 and self.board.is_finished():
            self.state = GameState.SHOW_POINTS

    def _show_points(self, mouse_pos, click) -> None:
        self.score = draw_board_with_points(self.board, self.surface, self.font)
        show_text_score(self.score, self.surface, self.font)
        self.finish_button.draw(self.surface, mouse_pos)
        if self.finish_button.is_clicked(mouse_pos, click):
            self.state = GameState.MENU


def main(argv=None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="crisscross", description="Play CrissCross.")
    parser.add_argument("--font", default=None, help="path to a TrueType font")
    args = parser.parse_args(argv)

    font = args.font
    if font is None and Path(DEFAULT_FONT).is_file():
        font = str(Path(DEFAULT_FONT).resolve())

    os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        game = Game(screen, font)
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            game.step(pygame.mouse.get_pos(), pygame.mouse.get_pressed()[0])
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0