"""Conversions between binary, octal and decimal notations, and digits to words."""

from __future__ import annotations

_UNITS = ("zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")
_TEENS = (
    "ten", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "ninteen",
)
_TENS = ("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninty")
_POWERS = {3: "hundred", 4: "thousand"}
_MAX_WORD_DIGITS = 4


def _require_digits(text: str, allowed: str, kind: str) -> None:
    bad = set(text) - set(allowed)
    if bad:
        raise ValueError(f"not a {kind} string: {text!r}")


def _split_sign(n: int) -> tuple[int, int]:
    return (-1 if n < 0 else 1), abs(n)


def binary_to_decimal(bits: str) -> int:
    """Return the value of a string of binary digits."""
    _require_digits(bits, "01", "binary")
    value = 0
    for bit in bits:
        value = value * 2 + (bit == "1")
    return value


def binary_to_octal(bits: str) -> str:
    """Convert a binary string to octal digits, three bits per digit."""
    _require_digits(bits, "01", "binary")
    width = -(-len(bits) // 3) * 3
    padded = bits.rjust(width, "0")
    return "".join(
        str(binary_to_decimal(padded[start:start + 3])) for start in range(0, width, 3)
    )


def decimal_to_binary(n: int) -> str:
    """Return the binary digits of a non-negative integer; zero gives an empty string."""
    if n < 0:
        raise ValueError("negative numbers have no binary form here")
    digits = []
    while n:
        n, bit = divmod(n, 2)
        digits.append(str(bit))
    return "".join(reversed(digits))


def decimal_to_octal(n: int) -> int:
    """Return an integer whose decimal digits are the octal digits of ``n``."""
    sign, n = _split_sign(n)
    result, place = 0, 1
    while n:
        n, remainder = divmod(n, 8)
        result += remainder * place
        place *= 10
    return sign * result


def octal_to_decimal(octal: int) -> int:
    """Interpret the decimal digits of ``octal`` as an octal number."""
    sign, octal = _split_sign(octal)
    value, place = 0, 1
    while octal:
        octal, digit = divmod(octal, 10)
        if digit > 7:
            raise ValueError(f"digit {digit} is not octal")
        value += digit * place
        place *= 8
    return sign * value


def octal_to_binary(octal: int) -> int:
    """Return an integer whose decimal digits are the binary digits of an octal number."""
    sign, magnitude = _split_sign(octal_to_decimal(octal))
    return sign * int(decimal_to_binary(magnitude) or "0")


def number_to_words(digits: str) -> str:
    """Spell out a number of up to four digits in English words."""
    if not digits:
        return ""
    _require_digits(digits, "0123456789", "decimal")
    if len(digits) > _MAX_WORD_DIGITS:
        raise ValueError(f"at most {_MAX_WORD_DIGITS} digits are supported")
    if len(digits) == 1:
        return _UNITS[int(digits)]

    words: list[str] = []
    head, tail = digits[:-2], digits[-2:]
    for position, digit in zip(range(len(digits), 2, -1), head):
        if digit != "0":
            words += [_UNITS[int(digit)], _POWERS[position]]

    tens, units = int(tail[0]), int(tail[1])
    if tens == 1:
        words.append(_TEENS[units])
    elif tens:
        words.append(_TENS[tens])
        if units:
            words.append(_UNITS[units])
    elif units:
        words.append(_UNITS[units])
    return " ".join(words)