"""
Field Condition Converter

Compiles Saferpay field conditions into regular expressions.

Saferpay documents every field with a compact condition such as ``n[8]``
(exactly eight digits) or ``ans[..50]`` (one to fifty letters, digits or
symbols). Grammar:

    condition := classes "[" length "]"
    classes   := ("a" | "n" | "s")+
    length    := NUMBER | ".." NUMBER | NUMBER ".." NUMBER

Character classes:
    a: any Unicode letter (\\p{L}), space and tab
    n: ASCII digits 0-9 only; other Unicode digits are rejected
    s: + - _ : ; / \\ < > ( ) . , = ? @ &

Example:
    >>> pattern = compile_condition("an[..50]")
    >>> bool(pattern.fullmatch("Bahnhofstrasse 1"))
    True
"""

from __future__ import annotations

from functools import lru_cache

import regex

from .exceptions import ConditionSyntaxError

# n is ASCII only; Unicode digits outside 0-9 do not match.
CHARACTER_CLASSES: dict[str, str] = {
    "a": r"[\p{L} \t]",
    "n": r"[0-9]",
    "s": r"[+\-_:;/\\<>().,=?@&]",
}

PATTERN_FLAGS = regex.IGNORECASE | regex.UNICODE


class _ConditionParser:
    """Recursive-descent parser for a single condition string."""

    def __init__(self, condition: str) -> None:
        self.condition = condition
        self.position = 0

    def parse(self) -> tuple[list[str], int, int]:
        """
        Parse the whole condition.

        Returns:
            Tuple of (class letters in order, minimum length, maximum length)

        Raises:
            ConditionSyntaxError: If the condition is malformed
        """
        classes = self._parse_classes()
        self._expect("[")
        minimum, maximum = self._parse_length()
        self._expect("]")

        if self.position != len(self.condition):
            self._fail("Unexpected trailing characters")

        return classes, minimum, maximum

    def _parse_classes(self) -> list[str]:
        classes: list[str] = []
        while self._peek() in CHARACTER_CLASSES:
            letter = self._advance()
            if letter not in classes:
                classes.append(letter)

        if not classes:
            self._fail("Expected at least one character class (a, n, s)")
        return classes

    def _parse_length(self) -> tuple[int, int]:
        if self.condition.startswith("..", self.position):
            self.position += 2
            return 1, self._parse_number()

        minimum = self._parse_number()
        if not self.condition.startswith("..", self.position):
            return minimum, minimum

        self.position += 2
        maximum = self._parse_number()
        if minimum > maximum:
            self._fail(f"Minimum length {minimum} exceeds maximum {maximum}")
        return minimum, maximum

    def _parse_number(self) -> int:
        start = self.position
        while self._peek().isdigit():
            self.position += 1

        if start == self.position:
            self._fail("Expected a length")

        value = int(self.condition[start : self.position])
        if value < 1:
            self._fail("Length must be at least 1")
        return value

    def _expect(self, char: str) -> None:
        if self._peek() != char:
            self._fail(f"Expected {char!r}")
        self.position += 1

    def _peek(self) -> str:
        if self.position < len(self.condition):
            return self.condition[self.position]
        return ""

    def _advance(self) -> str:
        char = self.condition[self.position]
        self.position += 1
        return char

    def _fail(self, message: str) -> None:
        raise ConditionSyntaxError(self.condition, self.position, message)


def condition_to_regex(condition: str) -> str:
    """
    Translate a condition into a regular expression source string.

    Args:
        condition: Saferpay field condition (e.g. ``a[..50]``, ``n[8]``)

    Returns:
        Anchored pattern source; compile with ``PATTERN_FLAGS``

    Raises:
        ConditionSyntaxError: If the condition is malformed
    """
    classes, minimum, maximum = _ConditionParser(condition).parse()

    alternatives = "|".join(CHARACTER_CLASSES[letter] for letter in classes)
    quantifier = f"{{{minimum}}}" if minimum == maximum else f"{{{minimum},{maximum}}}"

    return f"^((?:{alternatives}){quantifier})$"


@lru_cache(maxsize=256)
def compile_condition(condition: str) -> regex.Pattern:
    """
    Compile a condition into a case-insensitive, Unicode aware pattern.

    Compiled patterns are cached per condition string. Use ``fullmatch``.

    Raises:
        ConditionSyntaxError: If the condition is malformed
    """
    return regex.compile(condition_to_regex(condition), PATTERN_FLAGS)


def matches_condition(value: str | int, condition: str) -> bool:
    """Check a field value against its condition. Integers are matched as decimal strings."""
    return compile_condition(condition).fullmatch(str(value)) is not None
