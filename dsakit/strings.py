"""String algorithms: pattern search, subsequences, word order and letter queries."""

from __future__ import annotations

from collections import Counter
from enum import Enum
from string import ascii_lowercase

_RADIX = 256


class LetterCase(Enum):
    """Case of a single ASCII character."""

    LOWER = "lowercase"
    UPPER = "uppercase"
    OTHER = "not a letter"


def rabin_karp(pattern: str, text: str, modulus: int = 2**31 - 1) -> list[int]:
    """Return every index where ``pattern`` occurs in ``text``, using rolling hashes."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    if modulus < 1:
        raise ValueError("modulus must be positive")
    m, n = len(pattern), len(text)
    if m > n:
        return []
    high = pow(_RADIX, m - 1, modulus)
    p = t = 0
    for a, b in zip(pattern, text):
        p = (_RADIX * p + ord(a)) % modulus
        t = (_RADIX * t + ord(b)) % modulus
    matches = []
    for i in range(n - m + 1):
        if p == t and text[i : i + m] == pattern:
            matches.append(i)
        if i < n - m:
            t = (_RADIX * (t - ord(text[i]) * high) + ord(text[i + m])) % modulus
    return matches


def lcs_length(x: str, y: str) -> int:
    """Return the length of the longest common subsequence of ``x`` and ``y``."""
    previous = [0] * (len(y) + 1)
    for a in x:
        current = [0]
        for j, b in enumerate(y, 1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def reverse_words(text: str) -> str:
    """Return the space-separated words of ``text`` in reverse order."""
    return " ".join(reversed(text.split(" ")))


def most_frequent_letter(text: str) -> str:
    """Return the lowercase letter occurring most often; ties go to the earliest letter."""
    invalid = set(text) - set(ascii_lowercase)
    if invalid:
        raise ValueError(f"only lowercase letters are counted, got {sorted(invalid)!r}")
    counts = Counter(text)
    return max(ascii_lowercase, key=lambda letter: counts[letter])


def letter_case(ch: str) -> LetterCase:
    """Classify one character as an ASCII lowercase letter, uppercase letter or neither."""
    if len(ch) != 1:
        raise ValueError("expected exactly one character")
    if "a" <= ch <= "z":
        return LetterCase.LOWER
    if "A" <= ch <= "Z":
        return LetterCase.UPPER
    return LetterCase.OTHER


def letter_pattern(n: int) -> list[str]:
    """Return ``n`` rows of ``n`` letters, each row starting one letter after the last."""
    base = ord("A")
    return ["".join(chr(base + row + col) for col in range(n)) for row in range(n)]