"""Character classification used by the tokenizer.

Only the ASCII letter and digit ranges are recognised; anything else,
including strings that are not exactly one character long, is neither.
"""

__all__ = ["is_digit", "is_letter", "is_letter_or_digit"]


def is_digit(c: str) -> bool:
    return len(c) == 1 and "0" <= c <= "9"


def is_letter(c: str) -> bool:
    return len(c) == 1 and ("A" <= c <= "Z" or "a" <= c <= "z")


def is_letter_or_digit(c: str) -> bool:
    return is_letter(c) or is_digit(c)
