"""Word-list helpers shared by the hangman tools."""

import random
import string

_LOWERCASE = frozenset(string.ascii_lowercase)


def read_word_list(path):
    """Return the whitespace-separated words stored in the file at *path*.

    Raises OSError (for example FileNotFoundError) when the file cannot be read.
    """
    with open(path, encoding="utf-8", errors="surrogateescape") as handle:
        return handle.read().split()


def is_char_in_word(ch, word):
    """Return True when *ch* occurs somewhere in *word*."""
    return ch in word


def random_number(low, high):
    """Return a random integer in the closed range [low, high]."""
    return random.randint(low, high)


def is_a2z_word(word):
    """Return True when every character of *word* is a lowercase ASCII letter."""
    return all(ch in _LOWERCASE for ch in word)


def _ascii_lower(word):
    return "".join(ch.lower() if ch.isascii() else ch for ch in word)


def filter_words(source_path, target_path):
    """Copy the lowercase a-z words of *source_path* into *target_path*.

    Words are lowercased (ASCII only) before filtering; one word is written
    per line. Progress is reported on standard output. Returns a tuple of
    the number of words read and the number of words written.
    """
    words = read_word_list(source_path)
    total = 0
    kept = 0
    with open(target_path, "w", encoding="utf-8") as target:
        for word in words:
            word = _ascii_lower(word)
            if is_a2z_word(word):
                target.write(word + "\n")
                kept += 1
            total += 1
            if total % 1000 == 1:
                print(f"Count: {total}")
    print(f"Total: {total}")
    print(f"Number of new words: {kept}")
    return total, kept