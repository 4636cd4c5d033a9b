"""Puzzles over strings and characters."""

from bisect import bisect_right
from collections.abc import Sequence
from itertools import takewhile

_GOAL_TOKENS = (("G", "G"), ("()", "o"), ("(al)", "al"))


def array_strings_are_equal(word1: Sequence[str], word2: Sequence[str]) -> bool:
    """Whether both lists of fragments spell the same string."""
    return "".join(word1) == "".join(word2)


def interpret(command: str) -> str:
    """Decode a Goal Parser command made of ``G``, ``()`` and ``(al)``."""
    pieces = []
    pos = 0
    while pos < len(command):
        for token, meaning in _GOAL_TOKENS:
            if command.startswith(token, pos):
                pieces.append(meaning)
                pos += len(token)
                break
        else:
            raise ValueError(f"unexpected command text at position {pos}: {command[pos:]!r}")
    return "".join(pieces)


def longest_common_prefix(strs: Sequence[str]) -> str:
    """The longest prefix shared by every string in ``strs``."""
    if not strs:
        raise ValueError("at least one string is required")
    prefix = strs[0]
    for text in strs[1:]:
        shared = sum(1 for _ in takewhile(lambda pair: pair[0] == pair[1], zip(prefix, text)))
        prefix = prefix[:shared]
        if not prefix:
            break
    return prefix


def most_words_found(sentences: Sequence[str]) -> int:
    """Largest number of space-separated words in any sentence."""
    return max((s.count(" ") + 1 for s in sentences), default=0)


def reverse_words(s: str) -> str:
    """The words of ``s`` in reverse order, joined by single spaces."""
    words = [word for word in s.split(" ") if word]
    if not words:
        raise ValueError("the string holds no words")
    return " ".join(reversed(words))


def restore_string(s: str, indices: Sequence[int]) -> str:
    """Place each character of ``s`` at the position given by ``indices``."""
    result = list(s)
    for ch, index in zip(s, indices):
        result[index] = ch
    return "".join(result)


def is_anagram(s: str, t: str) -> bool:
    """Whether ``s`` and ``t`` hold the same characters."""
    return sorted(s) == sorted(t)


def next_greatest_letter(letters: Sequence[str], target: str) -> str:
    """Smallest letter in sorted ``letters`` greater than ``target``, wrapping round."""
    if not letters:
        raise ValueError("letters must not be empty")
    index = bisect_right(letters, target)
    return letters[index] if index < len(letters) else letters[0]


def next_greatest_letter_linear(letters: Sequence[str], target: str) -> str:
    """Same as :func:`next_greatest_letter`, by a straight scan."""
    if not letters:
        raise ValueError("letters must not be empty")
    return next((letter for letter in letters if letter > target), letters[0])