"""String problems: vowels, embedded numbers, frequencies, Roman numerals, notation."""

from __future__ import annotations

import re
from collections import Counter

VOWELS = frozenset("aeiouAEIOU")

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_PRECEDENCE = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}
_NUMBER_RUN = re.compile(r"[0-9]+")


def remove_vowels(text: str) -> str:
    """Return ``text`` without its English vowels, in either case."""
    return "".join(char for char in text if char not in VOWELS)


def count_vowels(text: str) -> int:
    """Count the English vowels in ``text``, in either case."""
    return sum(char in VOWELS for char in text)


def sum_of_integers(text: str) -> int:
    """Add up every run of decimal digits found in ``text``."""
    return sum(int(run) for run in _NUMBER_RUN.findall(text))


def frequency_sort(text: str) -> str:
    """Group equal characters, most frequent first; ties put the larger character first."""
    ordered = sorted(Counter(text).items(), key=lambda item: (item[1], item[0]), reverse=True)
    return "".join(char * count for char, count in ordered)


def roman_to_int(numeral: str) -> int:
    """Return the value of a Roman numeral, honouring subtractive pairs such as ``IV``."""
    try:
        values = [_ROMAN[char] for char in numeral]
    except KeyError as error:
        raise ValueError(f"not a Roman digit: {error.args[0]!r}") from None
    following = values[1:] + [0]
    return sum(-value if value < after else value for value, after in zip(values, following))


def precedence(op: str) -> int:
    """Binding strength of an operator; -1 for anything that is not one."""
    return _PRECEDENCE.get(op, -1)


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression over single-letter operands to postfix notation."""
    stack: list[str] = []
    output: list[str] = []
    for char in expression:
        if char.isascii() and char.isalpha():
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        else:
            while stack and precedence(stack[-1]) >= precedence(char):
                output.append(stack.pop())
            stack.append(char)
    output.extend(reversed(stack))
    return "".join(output)


def lcs_length(a: str, b: str) -> int:
    """Length of the longest common subsequence of two strings."""
    previous = [0] * (len(b) + 1)
    for char_a in a:
        current = [0]
        for column, char_b in enumerate(b, start=1):
            if char_a == char_b:
                current.append(previous[column - 1] + 1)
            else:
                current.append(max(previous[column], current[column - 1]))
        previous = current
    return previous[-1]