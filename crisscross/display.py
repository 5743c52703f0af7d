"""Drawing of the board, the round prompts, the score and the rules."""

from __future__ import annotations

import math
from functools import lru_cache
from os import PathLike

import pygame

from crisscross.board import (
    BOARD_LEFT_OFFSET,
    BOARD_TOP_OFFSET,
    CELL_SIZE,
    GRID_SIZE,
    Board,
    LineType,
    get_symbol,
)

TEXT_LEFT_OFFSET = 64
TEXT_TOP_OFFSET = 550

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
HIGHLIGHT = (95, 140, 94)
DIAGONAL_COLOR = (219, 222, 158)
CORNER_COLOR = (158, 181, 222)
GREY = (115, 115, 115)
TOTAL_COLOR = (141, 209, 140)

PROMPT_SIZE = CELL_SIZE // 2
CELL_TEXT_SIZE = 3 * CELL_SIZE // 4
SLOT_WIDTH = CELL_SIZE * 0.75
BOARD_LINE_WIDTH = 2
FRAME_LINE_WIDTH = 5

SYMBOL_NUMBERS = range(1, 7)

RULES_HEADER = "Rules"
RULES = (
    "At the start of the game choose one of the six shapes. It\n"
    "will be placed in the top leftcorner of the 5x5 board. Every\n"
    "round you will get two random symbols. The symbols must be \n"
    "entered into two empty spaces that are horizontally or \n"
    "vertically next to each other. The game ends when the board \n"
    "is filled or there are no legal adjacent spaces left\n"
)
POINTS_HEADER = "Points"
POINTS = (
    "You score points for the same adjacent symbols in each \n"
    "column, row and on the marked diagonal.\n"
    "Points are awarded according to the following rule:\n"
    " Two adjacent symbols - 2 points\n"
    " Three adjacent symbols - 3 points\n"
    " Four adjacent symbols - 8 points\n"
    " Five adjacent symbols - 10 points\n"
    "Remember, the diagonal counts twice!\n"
)

FontSource = "str | PathLike | None"


@lru_cache(maxsize=None)
def _font(font: str | PathLike | None, size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(font, size)


def _render(surface, font, size, text, color, pos) -> pygame.Rect:
    """Draw one line of text with its top-left corner at ``pos``."""
    label = _font(font, size).render(text, True, color)
    rect = label.get_rect(topleft=(round(pos[0]), round(pos[1])))
    surface.blit(label, rect)
    return rect


def _render_block(surface, font, size, text, color, pos) -> pygame.Rect:
    """Draw several lines of text, one below the other."""
    face = _font(font, size)
    left, top = pos
    rects = [
        _render(surface, font, size, line, color, (left, top + k * face.get_linesize()))
        for k, line in enumerate(text.splitlines())
    ]
    return rects[0].unionall(rects[1:])


def _contains(left, top, width, height, pos) -> bool:
    px, py = pos
    return left <= px < left + width and top <= py < top + height


def _slot_label(surface, font, left, symbol, color) -> None:
    label = _font(font, PROMPT_SIZE).render(get_symbol(symbol), True, color)
    x = left + SLOT_WIDTH / 2 - label.get_width() / 2
    surface.blit(label, (round(x), TEXT_TOP_OFFSET))


def cell_at(pos) -> tuple[int, int] | None:
    """Return (row, column) of the board cell under ``pos``, or None."""
    px, py = pos
    col = math.floor((px - BOARD_LEFT_OFFSET) / CELL_SIZE)
    row = math.floor((py - BOARD_TOP_OFFSET) / CELL_SIZE)
    if 0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE:
        return row, col
    return None


def draw_rect(surface, width, height, x, y, line_width, fill, line, font, text="") -> pygame.Rect:
    """Draw a filled box with an outline outside it and optional centred text."""
    box = pygame.Rect(round(x), round(y), round(width), round(height))
    if line_width > 0:
        outline = box.inflate(2 * line_width, 2 * line_width)
        pygame.draw.rect(surface, line, outline, line_width)
    pygame.draw.rect(surface, fill, box)
    if text:
        label = _font(font, CELL_TEXT_SIZE).render(text, True, BLACK)
        surface.blit(label, label.get_rect(center=box.center))
    return box


def draw_board(board: Board, surface, font) -> None:
    """Draw the grid with its symbols, marking the corner and the diagonal."""
    draw_rect(
        surface,
        CELL_SIZE * GRID_SIZE,
        CELL_SIZE * GRID_SIZE,
        BOARD_LEFT_OFFSET,
        BOARD_TOP_OFFSET,
        FRAME_LINE_WIDTH,
        WHITE,
        BLACK,
        font,
    )
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            if col == GRID_SIZE - 1 - row:
                color = DIAGONAL_COLOR
            elif (row, col) == (0, 0):
                color = CORNER_COLOR
            else:
                color = WHITE
            draw_rect(
                surface,
                CELL_SIZE,
                CELL_SIZE,
                BOARD_LEFT_OFFSET + col * CELL_SIZE,
                BOARD_TOP_OFFSET + row * CELL_SIZE,
                BOARD_LINE_WIDTH,
                color,
                BLACK,
                font,
                get_symbol(board.symbol_at(row, col)),
            )


def draw_board_with_points(board: Board, surface, font) -> int:
    """Draw the board with each line's points beside it; return the total."""
    total = 0
    below = BOARD_TOP_OFFSET + BOARD_LINE_WIDTH + GRID_SIZE * CELL_SIZE
    beside = BOARD_LEFT_OFFSET + BOARD_LINE_WIDTH + GRID_SIZE * CELL_SIZE

    # The diagonal sits in slot -1 of both the column and the row sums.
    for i in range(-1, GRID_SIZE):
        line_type = LineType.DIAG if i == -1 else LineType.COL
        points = board.count_points(line_type, i)
        total += points
        draw_rect(
            surface, CELL_SIZE, CELL_SIZE, BOARD_LEFT_OFFSET + i * CELL_SIZE, below,
            BOARD_LINE_WIDTH, WHITE, GREY, font, str(points),
        )

    for i in range(-1, GRID_SIZE):
        line_type = LineType.DIAG if i == -1 else LineType.ROW
        points = board.count_points(line_type, i)
        total += points
        draw_rect(
            surface, CELL_SIZE, CELL_SIZE, beside, BOARD_TOP_OFFSET + i * CELL_SIZE,
            BOARD_LINE_WIDTH, WHITE, GREY, font, str(points),
        )

    draw_rect(
        surface, CELL_SIZE, CELL_SIZE, beside, below,
        BOARD_LINE_WIDTH, TOTAL_COLOR, GREY, font, str(total),
    )
    draw_board(board, surface, font)
    return total


def choose_starting_symbol(board: Board, surface, font, mouse_pos, mouse_click) -> int | None:
    """Offer the six symbols; on a click place the chosen one in the corner.

    Returns the chosen symbol, or None if none was clicked.
    """
    prompt = _render(
        surface, font, PROMPT_SIZE, "Choose starting symbol: ", BLACK,
        (TEXT_LEFT_OFFSET, TEXT_TOP_OFFSET),
    )
    left_offset = TEXT_LEFT_OFFSET + prompt.width
    chosen = None

    for k, symbol in enumerate(SYMBOL_NUMBERS):
        left = left_offset + k * SLOT_WIDTH
        hovered = _contains(left, TEXT_TOP_OFFSET, SLOT_WIDTH, CELL_SIZE, mouse_pos)
        _slot_label(surface, font, left, symbol, HIGHLIGHT if hovered else BLACK)
        if mouse_click and hovered:
            board.place(symbol, 0, 0)
            chosen = symbol
    return chosen


def show_text_score(score: int, surface, font) -> pygame.Rect:
    """Write the final score under the board; return where it was drawn."""
    return _render(
        surface, font, PROMPT_SIZE, f"You've scored {score} points!", BLACK,
        (3 * TEXT_LEFT_OFFSET, TEXT_TOP_OFFSET),
    )


def show_and_place_round_symbols(
    symbol_no, round_symbols, surface, font, mouse_pos, mouse_click, board, last
) -> tuple[int, tuple[int, int] | None]:
    """Show this round's two symbols and place the current one on a valid click.

    ``symbol_no`` is 0 or 1 for the symbol to place next and ``last`` the cell
    of the first symbol. Returns the next ``symbol_no`` and the updated ``last``.
    """
    prompt_text = "Place  1st symbol: " if symbol_no == 0 else "Place 2nd symbol: "
    prompt = _render(
        surface, font, PROMPT_SIZE, prompt_text, BLACK,
        (3 * TEXT_LEFT_OFFSET, TEXT_TOP_OFFSET),
    )
    left_offset = 3 * TEXT_LEFT_OFFSET + prompt.width
    for k, symbol in enumerate(round_symbols[:2]):
        color = HIGHLIGHT if k == symbol_no else BLACK
        _slot_label(surface, font, left_offset + k * SLOT_WIDTH, symbol, color)

    if not mouse_click:
        return symbol_no, last
    cell = cell_at(mouse_pos)
    if cell is None:
        return symbol_no, last

    row, col = cell
    if symbol_no == 0 and board.is_first_valid_pos(row, col):
        board.place(round_symbols[0], row, col)
        return 1, cell
    if symbol_no == 1 and last is not None and board.is_second_valid_pos(row, col, *last):
        board.place(round_symbols[1], row, col)
        return 0, last
    return symbol_no, last


def show_rules(surface, font) -> None:
    """Draw the rules and the scoring table."""
    left, top = 40, 10
    header_size, text_size = 48, 24

    rect = _render(surface, font, header_size, RULES_HEADER, BLACK, (left, top))
    top += rect.height + 20
    rect = _render_block(surface, font, text_size, RULES, BLACK, (left, top))
    top += rect.height
    rect = _render(surface, font, header_size, POINTS_HEADER, BLACK, (left, top))
    top += rect.height + 20
    _render_block(surface, font, text_size, POINTS, BLACK, (left, top))