"""Measure how many mistakes a hangman guesser makes on a list of words."""

import argparse
from dataclasses import dataclass

from .guesser import HangmanGuesser

MASK_CHAR = "-"

DEFAULT_VOCABULARY = "data/hangman_dictionary.txt"
DEFAULT_WORDS = (
    "lemon",
    "apple",
    "banana",
    "orange",
    "pear",
    "grape",
    "strawberry",
    "watermelon",
)


class UnsolvableWordError(Exception):
    """Raised when a guesser runs out of letters before solving a word."""

    def __init__(self, word):
        super().__init__(f"guesser could not solve {word!r}")
        self.word = word


@dataclass(frozen=True, order=True)
class MistakeByWord:
    """A word and the number of mistakes made on it; ordered by count, then word."""

    count: int
    word: str


def update_mask(mask, ch, word):
    """Return *mask* with every position where *word* has *ch* revealed."""
    return "".join(w if w == ch else m for m, w in zip(mask, word))


def is_correct_char(ch, mask):
    """Return True when *ch* is shown in *mask*."""
    return ch in mask


def is_whole_word(mask):
    """Return True when *mask* has no hidden positions left."""
    return MASK_CHAR not in mask


def count_mistakes(word, guesser):
    """Return the number of wrong guesses *guesser* makes while solving *word*.

    Raises UnsolvableWordError if the guesser gives up first.
    """
    guesser.new_game(len(word), MASK_CHAR)
    mask = MASK_CHAR * len(word)
    mistakes = 0
    while not is_whole_word(mask):
        ch = guesser.get_char(mask)
        if ch is None:
            raise UnsolvableWordError(word)
        mask = update_mask(mask, ch, word)
        if not is_correct_char(ch, mask):
            mistakes += 1
    return mistakes


def mistakes_by_word(test_words, guesser):
    """Run *guesser* on each word.

    Returns a list of MistakeByWord for the solved words, in input order,
    and a list of the words the guesser could not solve.
    """
    mistakes = []
    unsolvable = []
    for word in test_words:
        try:
            mistakes.append(MistakeByWord(count_mistakes(word, guesser), word))
        except UnsolvableWordError:
            unsolvable.append(word)
    return mistakes, unsolvable


def main(argv=None):
    """Report the guesser's mistakes on a list of words."""
    parser = argparse.ArgumentParser(description="Assess a hangman guesser.")
    parser.add_argument("--vocabulary", default=DEFAULT_VOCABULARY)
    parser.add_argument("words", nargs="*", default=list(DEFAULT_WORDS))
    args = parser.parse_args(argv)

    guesser = HangmanGuesser.from_file(args.vocabulary)
    mistakes, unsolvable = mistakes_by_word(args.words, guesser)

    total = 0
    for rank, item in enumerate(sorted(mistakes), start=1):
        total += item.count
        print(f"{rank}. {item.word} {item.count}")

    solvable = len(args.words) - len(unsolvable)
    average = total / solvable if solvable else float("nan")
    print(f"Average misktake: {average:g}")

    if unsolvable:
        print(f"Number of unsolvable words: {len(unsolvable)}")
        print("".join(f"{word} " for word in unsolvable))
    else:
        print("All words can be solved.")
    return 0