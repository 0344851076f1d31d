"""String puzzles: subsequences, palindromes, prefixes, encodings and more."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_CLOSING = {")": "(", "]": "[", "}": "{"}


def is_subsequence(s: str, t: str) -> bool:
    """True if ``s`` can be obtained from ``t`` by deleting characters."""
    remaining = iter(t)
    return all(ch in remaining for ch in s)


def is_palindrome(s: str) -> bool:
    """True if the ASCII alphanumerics of ``s`` read the same both ways, ignoring case."""
    cleaned = [ch.lower() for ch in s if ch.isascii() and ch.isalnum()]
    return cleaned == cleaned[::-1]


def length_of_last_word(s: str) -> int:
    """Length of the last space-separated word in ``s``."""
    return len(s.rstrip(" ").rpartition(" ")[2])


def longest_common_prefix(strs: list[str]) -> str:
    """Longest prefix shared by every string in ``strs``."""
    if not strs:
        return ""
    prefix = strs[0]
    for s in strs[1:]:
        while not s.startswith(prefix):
            prefix = prefix[:-1]
            if not prefix:
                return ""
    return prefix


def encode(strs: Iterable[str]) -> str:
    """Join strings into one, each written as ``<length>#<text>``."""
    return "".join(f"{len(s)}#{s}" for s in strs)


def decode(data: str) -> list[str]:
    """Split a string produced by :func:`encode` back into its parts."""
    result = []
    i = 0
    while i < len(data):
        try:
            sep = data.index("#", i)
        except ValueError:
            raise ValueError(f"missing length separator at offset {i}") from None
        length_text = data[i:sep]
        if not length_text.isdigit():
            raise ValueError(f"invalid length {length_text!r} at offset {i}")
        start = sep + 1
        end = start + int(length_text)
        if end > len(data):
            raise ValueError(f"truncated item at offset {i}")
        result.append(data[start:end])
        i = end
    return result


def is_anagram(s: str, t: str) -> bool:
    """True if ``t`` is a rearrangement of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def is_isomorphic(s: str, t: str) -> bool:
    """True if the characters of ``s`` map one-to-one onto those of ``t``."""
    if len(s) != len(t):
        return False
    first_s: dict[str, int] = {}
    first_t: dict[str, int] = {}
    for i, (a, b) in enumerate(zip(s, t)):
        if first_s.setdefault(a, i) != first_t.setdefault(b, i):
            return False
    return True


def can_construct(ransom_note: str, magazine: str) -> bool:
    """True if ``ransom_note`` can be spelled with the letters of ``magazine``."""
    return not (Counter(ransom_note) - Counter(magazine))


def roman_to_int(s: str) -> int:
    """Value of the Roman numeral ``s``."""
    try:
        values = [_ROMAN[ch] for ch in s]
    except KeyError as exc:
        raise ValueError(f"invalid Roman numeral character {exc.args[0]!r}") from None
    following = values[1:] + [0]
    return sum(-v if v < nxt else v for v, nxt in zip(values, following))


def is_valid_parentheses(s: str) -> bool:
    """True if every closing bracket in ``s`` closes the most recent open one."""
    stack: list[str] = []
    for ch in s:
        if ch in _CLOSING:
            if not stack or stack[-1] != _CLOSING[ch]:
                return False
            stack.pop()
        else:
            stack.append(ch)
    return not stack


def simplify_path(path: str) -> str:
    """Canonical form of a Unix-style absolute path."""
    parts: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if parts:
                parts.pop()
        else:
            parts.append(part)
    return "/" + "/".join(parts)


def add_binary(a: str, b: str) -> str:
    """Sum of two binary strings, keeping the width of the longer one."""
    for text in (a, b):
        if set(text) - {"0", "1"}:
            raise ValueError(f"not a binary string: {text!r}")
    width = max(len(a), len(b))
    digits = []
    carry = 0
    for x, y in zip(reversed(a.zfill(width)), reversed(b.zfill(width))):
        total = int(x) + int(y) + carry
        digits.append(str(total % 2))
        carry = total // 2
    if carry:
        digits.append("1")
    return "".join(reversed(digits))