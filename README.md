# crisscross

A small puzzle game played on a 5x5 board, drawn with pygame.

## How to play

At the start of a game you choose one of six symbols (`*`, `/`, `o`, `X`, `#`, `@`).
It is placed in the top-left corner of the board. Each round you get two
random symbols and place them in two empty cells that are horizontally or
vertically next to each other. The game ends when no empty cell with an empty
neighbour is left.

Every row, every column and the marked diagonal (bottom-left to top-right)
score points for runs of the same symbol next to each other:

| Run length | Points |
|-----------:|-------:|
| 2          | 2      |
| 3          | 3      |
| 4          | 8      |
| 5          | 10     |

The diagonal is counted twice, once with the columns and once with the rows.

## Installing and running

```
pip install .
crisscross
```

The game opens an 800x640 window titled "CrissCross" and runs at 60 frames a
second until the window is closed. Use the left mouse button to pick menu
entries ("New game", "How to play"), choose the starting symbol and place
symbols on the board. When the game is over the points of every line and the
total are shown; "Finish" goes back to the menu.

Text is drawn with the font given by `--font PATH`. Without it, a file named
`my_font.ttf` in the current directory is used if there is one, and pygame's
default font otherwise:

```
crisscross --font /path/to/font.ttf
```

## Using the board in code

The rules live in `crisscross.board` and do not need a display:

```python
from crisscross.board import Board, LineType, get_symbol, get_points

board = Board()
board.place(1, 0, 0)
board.place(1, 0, 1)
print(board.count_points(LineType.ROW, 0))   # 2
print(board.total_score())                   # every row and column, diagonal twice
print(get_symbol(4))                         # "X"
print(get_points(4))                         # 8
```

- `Board.is_first_valid_pos(x, y)`: the cell is empty and has an empty
  horizontal or vertical neighbour.
- `Board.is_second_valid_pos(x, y, last_x, last_y)`: the cell is empty and
  next to the cell of the round's first symbol.
- `Board.is_finished()`: no cell can take the first symbol of a round.
- `Board.symbol_at(x, y)`: the symbol number in a cell, 0 when empty.

Cells outside the board raise `IndexError`.

## Other modules

- `crisscross.clicks.ClickDetector` turns the held state of a mouse button
  into single clicks: `is_clicked(pressed)` is true only on the frame the
  button goes down.
- `crisscross.button.Button` is a text button that highlights under the mouse.
- `crisscross.display` draws the board, the per-line points, the round
  prompts, the final score and the rules; `cell_at(pos)` maps a window
  position to a board cell.
- `crisscross.game.Game` holds one session; `Game.step(mouse_pos, mouse_pressed)`
  draws one frame onto its surface and returns the new `GameState`.

## Tests

```
pip install .[test]
pytest
```