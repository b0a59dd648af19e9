"""A frequency-based hangman guesser working from a vocabulary."""

import string
from collections import Counter

from .words import read_word_list


def next_unused_char(selected):
    """Return the first letter a-z not in *selected*, or None if all are used."""
    return next((ch for ch in string.ascii_lowercase if ch not in selected), None)


def count_occurrences(words):
    """Count, for each character, how many of *words* contain it."""
    return dict(Counter(ch for word in words for ch in set(word)))


def most_frequent_char(occurrences, selected):
    """Return the unselected character with the highest count.

    Ties go to the smallest character. Returns None when no character
    qualifies.
    """
    best = None
    best_count = 0
    for ch, count in sorted(occurrences.items()):
        if count > best_count and ch not in selected:
            best, best_count = ch, count
    return best


def word_conforms_to_mask(word, mask, ch):
    """Return True when *ch* appears in *word* exactly where it appears in *mask*."""
    return all((m == ch) == (w == ch) for w, m in zip(word, mask))


class HangmanGuesser:
    """Guesses letters of a hidden word by narrowing down a vocabulary."""

    def __init__(self, vocabulary):
        self.vocabulary = list(vocabulary)
        self.mask_char = "-"
        self.word_len = 0
        self.selected = set()
        self.candidates = []
        self._last = None

    @classmethod
    def from_file(cls, path):
        """Build a guesser from a whitespace-separated word file."""
        return cls(read_word_list(path))

    def new_game(self, word_len, mask_char="-"):
        """Forget previous guesses and get ready for a new word."""
        self.word_len = word_len
        self.mask_char = mask_char
        self.selected = set()
        self._last = None

    def get_char(self, mask):
        """Return the next letter to try given the current *mask*, or None."""
        if not self.selected:
            self.candidates = [w for w in self.vocabulary if len(w) == len(mask)]
        elif self._last is not None:
            last = self._last
            if last in mask:
                self.candidates = [
                    w for w in self.candidates if word_conforms_to_mask(w, mask, last)
                ]
            else:
                self.candidates = [w for w in self.candidates if last not in w]

        best = self._best_char()
        self._last = best
        if best is not None:
            self.selected.add(best)
        return best

    def _best_char(self):
        if not self.candidates:
            return next_unused_char(self.selected)
        best = most_frequent_char(count_occurrences(self.candidates), self.selected)
        if best is None:
            return next_unused_char(self.selected)
        return best