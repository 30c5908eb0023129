"""String algorithms: Z and prefix functions, palindromes and rolling hashes."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cmp_to_key

_SEPARATOR = object()


def z_function(text: Sequence) -> list[int]:
    """Z array: entry ``i`` is the longest common prefix of ``text`` and ``text[i:]``.

    The first entry is 0 by convention.
    """
    n = len(text)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i > right or z[i - left] >= right - i + 1:
            if i > right:
                right = i
            left = i
            while right < n and text[right - left] == text[right]:
                right += 1
            z[i] = right - left
            right -= 1
        else:
            z[i] = z[i - left]
    return z


def prefix_function(pattern: Sequence) -> list[int]:
    """Prefix (failure) function used by Knuth-Morris-Pratt matching."""
    pi = [0] * len(pattern)
    k = 0
    for i in range(1, len(pattern)):
        while k > 0 and pattern[k] != pattern[i]:
            k = pi[k - 1]
        if pattern[k] == pattern[i]:
            k += 1
        pi[i] = k
    return pi


def borders(text: Sequence) -> list[int]:
    """Lengths of all proper borders (prefixes that are also suffixes), ascending."""
    z = z_function(text)
    n = len(text)
    return [z[i] for i in reversed(range(1, n)) if z[i] == n - i]


def count_occurrences(text: Sequence, pattern: Sequence) -> int:
    """Number of (possibly overlapping) occurrences of ``pattern`` in ``text``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    combined = [*pattern, _SEPARATOR, *text]
    size = len(pattern)
    return sum(1 for value in z_function(combined) if value == size)


def _char_value(char: str, modulus: int) -> int:
    return (ord(char) - ord("a") + 1) % modulus


class PolynomialHash:
    """Forward and backward polynomial hashes of every substring of a text."""

    def __init__(self, text: str, base: int, modulus: int) -> None:
        self.base = base
        self.modulus = modulus
        self._length = len(text)
        self._powers = [1]
        self._prefix = [0]
        for char in text:
            self._prefix.append((self._prefix[-1] * base + _char_value(char, modulus)) % modulus)
            self._powers.append(self._powers[-1] * base % modulus)
        suffix = [0]
        for char in reversed(text):
            suffix.append((suffix[-1] * base + _char_value(char, modulus)) % modulus)
        self._suffix = suffix[::-1]

    def __len__(self) -> int:
        return self._length

    def _check(self, left: int, right: int) -> None:
        if not 0 <= left <= right < self._length:
            raise IndexError(f"invalid range [{left}, {right}] for length {self._length}")

    def hash(self, left: int, right: int) -> int:
        """Hash of ``text[left:right + 1]``."""
        self._check(left, right)
        span = right - left + 1
        return (self._prefix[right + 1] - self._prefix[left] * self._powers[span]) % self.modulus

    def reverse_hash(self, left: int, right: int) -> int:
        """Hash of ``text[left:right + 1]`` read backwards."""
        self._check(left, right)
        span = right - left + 1
        return (self._suffix[left] - self._suffix[right + 1] * self._powers[span]) % self.modulus


class DoubleHash:
    """Pair of polynomial hashes with different bases and moduli."""

    def __init__(self, text: str) -> None:
        self._first = PolynomialHash(text, 37, 1_000_000_021)
        self._second = PolynomialHash(text, 39, 1_000_000_007)

    def __len__(self) -> int:
        return len(self._first)

    def hash(self, left: int, right: int) -> tuple[int, int]:
        return self._first.hash(left, right), self._second.hash(left, right)

    def reverse_hash(self, left: int, right: int) -> tuple[int, int]:
        return self._first.reverse_hash(left, right), self._second.reverse_hash(left, right)

    def is_palindrome(self, left: int, right: int) -> bool:
        return self.hash(left, right) == self.reverse_hash(left, right)


def minimal_rotation(text: str) -> str:
    """Lexicographically smallest rotation of ``text``."""
    n = len(text)
    if n == 0:
        return text
    doubled = text + text
    hashes = DoubleHash(doubled)

    def compare(i: int, j: int) -> int:
        low, high, common = 1, n, 0
        while low <= high:
            mid = (low + high) // 2
            if hashes.hash(i, i + mid - 1) == hashes.hash(j, j + mid - 1):
                common = mid
                low = mid + 1
            else:
                high = mid - 1
        if common == n:
            return 0
        return -1 if doubled[i + common] < doubled[j + common] else 1

    start = min(range(n), key=cmp_to_key(compare))
    return text[start:] + text[:start]


class Manacher:
    """Palindrome radii around every character and every gap of a text."""

    def __init__(self, text: str) -> None:
        self._length = len(text)
        padded = "#" + "".join(char + "#" for char in text)
        size = len(padded)
        radii = [1] * size
        left = right = 1
        for i in range(1, size):
            radius = min(right - i, radii[left + right - i]) if i < right else 0
            while i + radius < size and i - radius >= 0 and padded[i - radius] == padded[i + radius]:
                radius += 1
            radii[i] = radius
            if i + radius > right:
                left, right = i - radius, i + radius
        self.radii = radii

    def longest(self, center: int, odd: bool) -> int:
        """Longest palindrome centred on character ``center`` (odd) or just after it (even)."""
        position = 2 * center + 1 + (0 if odd else 1)
        if not 0 <= position < len(self.radii):
            raise IndexError(f"center {center} out of range")
        return self.radii[position] - 1

    def is_palindrome(self, left: int, right: int) -> bool:
        """Whether ``text[left:right + 1]`` is a palindrome."""
        if not 0 <= left <= right < self._length:
            raise IndexError(f"invalid range [{left}, {right}] for length {self._length}")
        odd = left % 2 == right % 2
        return right - left + 1 <= self.longest((left + right) // 2, odd)