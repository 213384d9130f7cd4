"""String algorithms: palindromes, pangrams and the Z-function."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from string import ascii_lowercase

_DIGITS = frozenset("0123456789")


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` reads the same backwards."""
    return text == text[::-1]


def palindrome_partitions(text: str) -> Iterator[list[str]]:
    """Yield every split of ``text`` into palindromic pieces.

    Shorter first pieces come first, in depth-first order.
    """

    def _split(start: int) -> Iterator[list[str]]:
        if start == len(text):
            yield []
            return
        for end in range(start + 1, len(text) + 1):
            piece = text[start:end]
            if is_palindrome(piece):
                for rest in _split(end):
                    yield [piece, *rest]

    return _split(0)


def is_pangram(sentence: str) -> bool:
    """Return True if every lowercase English letter occurs in ``sentence``."""
    return set(ascii_lowercase) <= set(sentence)


def _mirror(digits: str) -> str:
    half = len(digits) // 2
    return digits[: len(digits) - half] + digits[:half][::-1]


def next_palindrome(digits: str) -> str:
    """Return the smallest palindromic number greater than ``digits``.

    The input is a string of decimal digits; the result keeps its length
    unless every digit of the mirrored form is 9.
    """
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError(f"not a string of decimal digits: {digits!r}")
    mirrored = _mirror(digits)
    if mirrored > digits:
        return mirrored
    if set(mirrored) == {"9"}:
        return _mirror("1" + "0" * len(mirrored))

    chars = list(mirrored)
    size = len(chars)
    outward = zip(range(size // 2, size), range((size - 1) // 2, -1, -1))
    for right, left in outward:
        if chars[right] == "9":
            chars[right] = chars[left] = "0"
        else:
            chars[right] = chars[left] = str(int(chars[right]) + 1)
            break
    return "".join(chars)


def z_function(text: str) -> list[int]:
    """Return the Z-array: entry i is the longest common prefix of text and text[i:].

    Entry 0 is 0 by convention.
    """
    size = len(text)
    z = [0] * size
    left = right = 0
    for i in range(1, size):
        if i <= right:
            z[i] = min(right - i + 1, z[i - left])
        while i + z[i] < size and text[z[i]] == text[i + z[i]]:
            z[i] += 1
        if i + z[i] - 1 > right:
            left, right = i, i + z[i] - 1
    return z


def all_palindromic_numbers(numbers: Iterable[int]) -> bool:
    """Return True if there is at least one number and all are decimal palindromes."""
    values = list(numbers)
    return bool(values) and all(is_palindrome(str(value)) for value in values)