# playlab

A handful of small games and toys built around classic programming
exercises:

- **Hangman guesser** (`playlab.hangman`): a player that guesses the
  letters of your secret word by narrowing a vocabulary down to the words
  that still fit the mask, plus an assessment tool that counts how many
  wrong guesses it needs per word.
- **Painter** (`playlab.painter`): a turtle-style pen that moves, turns
  and draws lines, circles, squares and parallelograms onto an in-memory
  image, which can be saved to a file.
- **Snake** (`playlab.snake`): the snake game on a grid board, with
  cherries to eat and a snake that grows as it eats them, played in the
  terminal.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

### Hangman

```
playlab-hangman [--vocabulary PATH]
```

Think of a word. The program asks for the number of wrong guesses it is
allowed and the length of your word, then proposes one letter at a time.
After each letter, answer with the current mask of your word, using `-`
for letters still hidden (for example `-e---` for "lemon" after `e`).
The game ends when the word is complete, when the allowed number of wrong
guesses is used up, or when the guesser runs out of letters.

```
playlab-hangman-assess [--vocabulary PATH] [WORD ...]
```

Lets the guesser solve each given word (by default: lemon, apple, banana,
orange, pear, grape, strawberry, watermelon) and prints, sorted by the
number of mistakes and then by word, how many wrong guesses each word
cost, the average number of mistakes over the solved words, and any words
it could not solve.

Both commands read their vocabulary from a text file of
whitespace-separated words, by default `data/hangman_dictionary.txt`
relative to the current directory. No word list ships with the package;
`playlab.hangman.words.filter_words(source_path, target_path)` can turn
any word file into one holding only lowercase a–z words, one per line.

### Painter

```
playlab-painter [FIGURE] [--output PATH] [--width W] [--height H]
```

Draws one of the built-in figures (numbered 0 to 14; larger numbers wrap
around) – squares, triangles, stars, circle patterns, a snowflake and more –
on an 800 × 600 canvas by default, and writes it to `painter.png` (or the
given path; the image format follows the file extension).

### Snake

```
playlab-snake [--width W] [--height H] [--delay SECONDS] [--seed N] [--snapshot PATH]
```

Plays the snake game in the terminal on a 30 × 20 board by default, moving
one step every 0.2 seconds. Steer with the arrow keys; a turn is only
accepted at right angles to the current heading, eating a cherry makes the
snake longer and adds a new cherry, and running into a wall or into its own
body ends the game. The final score is printed on exit, and `--snapshot`
saves the final board as an image.

## Library use

```python
from playlab.hangman.guesser import HangmanGuesser
from playlab.hangman.assessment import count_mistakes, mistakes_by_word

guesser = HangmanGuesser(["lemon", "melon", "apple"])
print(count_mistakes("lemon", guesser))
mistakes, unsolvable = mistakes_by_word(["lemon", "apple"], guesser)
```

```python
from playlab.painter.canvas import Painter
from playlab.painter.figures import draw_figure

painter = Painter(800, 600)
for _ in range(4):
    painter.move_forward(100)
    painter.turn_right(90)
painter.save("square.png")

draw_figure(Painter(), 14)  # the snowflake
```

```python
from playlab.snake.game import Game
from playlab.snake.position import Direction
from playlab.snake.app import render_board

game = Game(30, 20)
game.process_user_input(Direction.UP)
game.next_step()
print(game.snake_positions(), game.is_game_running())
render_board(game).save("board.png")
```

## What it does not do

- There is no graphical window. The painter only draws into an image that
  you save to a file, and the snake game is played as text in a terminal
  using the standard `curses` module, which must be available on your
  platform.
- The snake board image from `render_board` draws the cherry and the snake
  as coloured squares; no picture files are loaded.
- No hangman vocabulary is included; you provide the word list.
- There is no score table; the snake game only prints the final score.