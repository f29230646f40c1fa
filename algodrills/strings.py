"""Exercises on strings, letter counts and simple hashes."""

from __future__ import annotations

import math
import string
from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Optional

_VOWELS = frozenset("aeiou")
_ALPHABET = string.ascii_lowercase
_GOLDEN = (1 + math.sqrt(5)) / 2.0


def _check_lowercase(text: str) -> None:
    for char in text:
        if char not in _ALPHABET:
            raise ValueError(f"expected lowercase letters a-z only, got {char!r}")


class PrefixCounts:
    """Answers letter-count queries over ranges of a lowercase text."""

    def __init__(self, text: str) -> None:
        _check_lowercase(text)
        self._text = text
        self._prefix: list[list[int]] = [[0] * 26]
        for char in text:
            row = list(self._prefix[-1])
            row[ord(char) - ord("a")] += 1
            self._prefix.append(row)

    def query(self, left: int, right: int) -> Optional[str]:
        """Return the longest proper border of the count word for ``left..right``.

        Positions are 1-based and inclusive. The count word has one letter per
        alphabet letter, the letter's count in the range modulo 26 mapped onto
        ``a..z``. Its longest prefix (shorter than the word) that is also a
        suffix is returned, or None when there is none.
        """
        if not 1 <= left <= right <= len(self._text):
            raise ValueError(f"range {left}..{right} is outside 1..{len(self._text)}")
        upper, lower = self._prefix[right], self._prefix[left - 1]
        word = "".join(
            chr(ord("a") + (high - low) % 26) for high, low in zip(upper, lower)
        )
        for length in range(len(word) - 1, 0, -1):
            if word[:length] == word[-length:]:
                return word[:length]
        return None


def zombies_killed(distances: Iterable[int]) -> tuple[bool, int]:
    """Simulate the zombie fight and return ``(survived, zombies_killed)``.

    Zombies are shot nearest first; each shot moves every zombie one step
    closer, and every sixth shot costs an extra step for reloading. The fight
    is lost once a zombie has reached the shooter.
    """
    elapsed = 1
    killed = 0
    for distance in sorted(distances):
        if elapsed > distance:
            return False, killed
        killed += 1
        elapsed += 1
        if killed % 6 == 0:
            elapsed += 1
    return True, killed


def count_rubies(text: str) -> int:
    """Return how many times the letters of ``ruby`` can be taken from ``text``."""
    counts = Counter(text)
    return min(counts[letter] for letter in "ruby")


def can_group_equally(words: Sequence[str], groups: int) -> bool:
    """Tell whether the words split into ``groups`` groups with equal length profiles."""
    if groups <= 0:
        raise ValueError("groups must be positive")
    if len(words) % groups:
        return False
    lengths = Counter(len(word) for word in words)
    return all(count % groups == 0 for count in lengths.values())


def has_all_vowels(text: str) -> bool:
    """Tell whether every one of the vowels ``a e i o u`` appears in ``text``."""
    return _VOWELS <= set(text)


def _golden_index(value: int) -> Optional[int]:
    estimate = int(value / _GOLDEN)
    for index in (estimate - 1, estimate, estimate + 1, estimate + 2):
        if index >= 1 and int(_GOLDEN * float(index)) == value:
            return index
    return None


def game_winner(first: int, second: int) -> str:
    """Return the winner of the two-pile game for piles ``first`` and ``second``.

    ``Chandu`` wins on the losing positions of the first player, that is when
    ``first`` is the floor of ``i * phi`` and ``second`` the floor of
    ``i * phi * phi`` for some ``i``, and on two empty piles; otherwise
    ``Chandni`` wins.
    """
    if first < 0 or second < 0:
        raise ValueError("pile sizes must not be negative")
    if first == 0:
        return "Chandu" if second == 0 else "Chandni"
    index = _golden_index(first)
    if index is not None and int(_GOLDEN * _GOLDEN * index) == second:
        return "Chandu"
    return "Chandni"


def most_frequent_char(text: str) -> tuple[str, int]:
    """Return the most frequent character and its count, the smallest on ties."""
    if not text:
        raise ValueError("text must not be empty")
    char, count = min(Counter(text).items(), key=lambda item: (-item[1], item[0]))
    return char, count


def consonant_verdict(word: str) -> str:
    """Return ``HE!`` for an odd number of distinct consonants, else ``SHE!``."""
    _check_lowercase(word)
    consonants = {char for char in word if char not in _VOWELS}
    return "HE!" if len(consonants) % 2 else "SHE!"


def letters_by_frequency(word: str) -> list[str]:
    """Return all 26 letters, least frequent first, later letters first on ties."""
    _check_lowercase(word)
    counts = Counter(word)
    return sorted(_ALPHABET, key=lambda letter: (counts[letter], -ord(letter)))


def min_removals_for_palindrome(word: str) -> int:
    """Return how many letters must go so the rest can be arranged as a palindrome."""
    _check_lowercase(word)
    odd = sum(count % 2 for count in Counter(word).values())
    return max(odd - 1, 0)


def anagram_distance(first: str, second: str) -> int:
    """Return how many characters must be deleted in total to make two anagrams."""
    difference = Counter(first)
    difference.subtract(Counter(second))
    return sum(abs(count) for count in difference.values())


def digit_hash(number: int) -> int:
    """Return the digit sum of ``number`` XOR ``number`` (digit sum 0 when not positive)."""
    digit_sum = sum(int(digit) for digit in str(number)) if number > 0 else 0
    return digit_sum ^ number


def hash_collisions(numbers: Iterable[int]) -> tuple[int, int]:
    """Return ``(hash, collisions)`` for the digit hashes of the numbers.

    ``collisions`` counts the hashes that repeat an earlier one. ``hash`` is
    the smallest of the most repeated hashes, or the largest hash when no
    hash repeats.
    """
    hashes = [digit_hash(number) for number in numbers]
    if not hashes:
        raise ValueError("numbers must not be empty")
    counts = Counter(hashes)
    collisions = len(hashes) - len(counts)
    best = max(counts.values())
    if best > 1:
        chosen = min(value for value, count in counts.items() if count == best)
    else:
        chosen = max(hashes)
    return chosen, collisions