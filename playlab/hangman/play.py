"""Interactive hangman where the computer guesses the player's secret word."""

import argparse

from .assessment import DEFAULT_VOCABULARY, MASK_CHAR, is_correct_char, is_whole_word
from .guesser import HangmanGuesser

QUIT_MESSAGE = "There is something wrong. I quit :|"
WIN_MESSAGE = "It is easy :)"
LOSE_MESSAGE = "Maybe, you should give me more times to guess :("


def play(guesser, max_guess, word_len, answer):
    """Play one game and return the final message.

    *answer* is called with each guessed letter and must return the updated
    mask of the secret word.
    """
    guesser.new_game(word_len, MASK_CHAR)
    mask = MASK_CHAR * word_len
    print(f"So your secret word looks like: {mask}")

    incorrect = 0
    while True:
        ch = guesser.get_char(mask)
        if ch is None:
            return QUIT_MESSAGE
        mask = answer(ch)
        if is_correct_char(ch, mask):
            if is_whole_word(mask):
                return WIN_MESSAGE
        else:
            incorrect += 1
            print(f"Incorrect guess count: {incorrect}")
            if max_guess <= incorrect:
                return LOSE_MESSAGE


def _ask_mask(ch):
    print(f"The next char is: {ch}")
    return input("Please give me your answer: ").strip()


def main(argv=None):
    """Run an interactive game on the terminal."""
    parser = argparse.ArgumentParser(description="Let the computer guess your word.")
    parser.add_argument("--vocabulary", default=DEFAULT_VOCABULARY)
    args = parser.parse_args(argv)

    guesser = HangmanGuesser.from_file(args.vocabulary)
    try:
        max_guess = int(input("\nEnter the number of incorrect guesses: "))
        word_len = int(input("\nEnter the number characters of your secret word: "))
        message = play(guesser, max_guess, word_len, _ask_mask)
    except (EOFError, ValueError) as exc:
        print(f"Invalid input: {exc}")
        return 1
    print(message)
    return 0