"""String drills."""

from __future__ import annotations

import math
from collections.abc import MutableSequence
from itertools import groupby

_LETTER_CODES = {str(number): chr(ord("a") + number - 1) for number in range(1, 27)}
_LOWER_VOWELS = frozenset("aeiou")
_ALL_VOWELS = frozenset("aeiouAEIOU")


def freq_alphabets(s: str) -> str:
    """Decode digits to letters: '1'-'9' are a-i, '10#'-'26#' are j-z."""
    letters: list[str] = []
    index = len(s) - 1
    while index >= 0:
        if s[index] == "#":
            if index < 2:
                raise ValueError(f"'#' at position {index} has no two-digit code")
            code = s[index - 2 : index]
            index -= 3
        else:
            code = s[index]
            index -= 1
        try:
            letters.append(_LETTER_CODES[code])
        except KeyError:
            raise ValueError(f"no letter for code {code!r}") from None
    return "".join(reversed(letters))


def gcd_of_strings(str1: str, str2: str) -> str:
    """Longest string that divides both, or '' when none does."""
    if str1 + str2 != str2 + str1:
        return ""
    return str1[: math.gcd(len(str1), len(str2))]


def is_subsequence(s: str, t: str) -> bool:
    """Tell whether ``s`` can be obtained from ``t`` by deleting characters."""
    remaining = iter(t)
    return all(char in remaining for char in s)


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    best = start = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            best = max(best, index - start)
            start = last_seen[char] + 1
        last_seen[char] = index
    return max(best, len(s) - start)


def max_vowels(s: str, k: int) -> int:
    """Most lowercase vowels in any substring of length ``k``."""
    if k < 0:
        raise ValueError(f"window length must not be negative, got {k}")
    count = best = 0
    for index, char in enumerate(s):
        if char in _LOWER_VOWELS:
            count += 1
        if index >= k and s[index - k] in _LOWER_VOWELS:
            count -= 1
        best = max(best, count)
    return best


def merge_alternately(word1: str, word2: str) -> str:
    """Interleave the letters of both words, then append what is left."""
    shared = min(len(word1), len(word2))
    interleaved = "".join(a + b for a, b in zip(word1, word2))
    return interleaved + word1[shared:] + word2[shared:]


def reverse_string(chars: MutableSequence[str]) -> None:
    """Reverse ``chars`` in place."""
    chars[:] = chars[::-1]


def reverse_vowels(s: str) -> str:
    """Reverse the order of the vowels, either case, leaving other characters."""
    vowels = [char for char in s if char in _ALL_VOWELS]
    return "".join(vowels.pop() if char in _ALL_VOWELS else char for char in s)


def reverse_words(s: str) -> str:
    """Words of ``s`` in reverse order, separated by single spaces."""
    return " ".join(reversed(s.split()))


def compress(chars: MutableSequence[str]) -> int:
    """Run-length encode ``chars`` in place and return the new length.

    A run of one character stays as it is; a longer run becomes the character
    followed by the digits of its length.
    """
    encoded: list[str] = []
    for char, run in groupby(chars):
        length = sum(1 for _ in run)
        encoded.append(char)
        if length > 1:
            encoded.extend(str(length))
    chars[:] = encoded
    return len(encoded)