"""Small games and toys: a hangman guesser, a turtle-style painter and snake."""

__version__ = "0.1.0"