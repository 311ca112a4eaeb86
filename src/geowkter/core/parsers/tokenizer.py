"""
Low-level WKT tokenizing primitives.

Coordinates are split into numeric pairs, and parenthesized part lists
(polygon rings, multi-linestring lines, multi-polygon members) are split
by scanning matched parenthesis spans rather than by comma-splitting.
"""

import math
import re
from typing import List

from geowkter.core.errors import MalformedCoordinateError, MalformedStructureError
from .geometry import Coordinate, CoordinateSequence

# Whitespace or a literal '+' separates numbers; a '+' after an exponent marker stays in the number
_NUMBER_SEPARATOR = re.compile(r"(?:\s|(?<![eE])\+)+")
_COORDINATE_SEPARATOR = re.compile(r"\s*,\s*")
# ASCII decimal or exponent notation
_NUMBER = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_coordinate(text: str) -> Coordinate:
    """
    Parse a single ``"x y"`` coordinate pair.

    Args:
        text: Coordinate text, e.g. ``"30 10"`` or ``"30+10"``

    Returns:
        (x, y) tuple of floats

    Raises:
        MalformedCoordinateError: If the text does not hold exactly two finite numbers

    Examples:
        >>> parse_coordinate(" 30 10 ")
        (30.0, 10.0)

        >>> parse_coordinate("-1.5e+2+4")
        (-150.0, 4.0)
    """
    tokens = [token for token in _NUMBER_SEPARATOR.split(text.strip()) if token]

    if len(tokens) < 2:
        raise MalformedCoordinateError(
            f"Invalid coordinate: {text.strip()!r} (need x and y)", fragment=text
        )
    if len(tokens) > 2:
        raise MalformedCoordinateError(
            f"Invalid coordinate: {text.strip()!r} (only x and y are supported)",
            fragment=text,
        )

    values = []
    for token in tokens:
        if not _NUMBER.fullmatch(token):
            raise MalformedCoordinateError(
                f"Invalid number {token!r} in coordinate {text.strip()!r}", fragment=text
            )
        value = float(token)
        if not math.isfinite(value):
            raise MalformedCoordinateError(
                f"Non-finite number {token!r} in coordinate {text.strip()!r}", fragment=text
            )
        values.append(value)

    return (values[0], values[1])


def parse_coordinate_list(text: str) -> CoordinateSequence:
    """
    Parse a comma-separated list of coordinate pairs.

    Args:
        text: e.g. ``"30 10, 10 30, 40 40"``

    Returns:
        Tuple of (x, y) coordinates, in input order

    Raises:
        MalformedCoordinateError: If any pair is empty or malformed
    """
    return tuple(parse_coordinate(pair) for pair in _COORDINATE_SEPARATOR.split(text.strip()))


def find_closing_paren(text: str, open_index: int) -> int:
    """
    Find the parenthesis that closes the one at ``open_index``.

    Args:
        text: Text containing the group
        open_index: Index of an opening parenthesis in ``text``

    Returns:
        Index of the matching closing parenthesis

    Raises:
        MalformedStructureError: If the group is never closed
    """
    depth = 0
    for index in range(open_index, len(text)):
        char = text[index]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return index
    raise MalformedStructureError(
        f"Unbalanced parentheses: group opened at position {open_index} is never closed",
        fragment=text,
    )


def split_parts(text: str, required: bool = True) -> List[str]:
    """
    Split ``"(a), (b), ..."`` into the contents of each top-level group.

    Commas inside a group never split it, since groups are delimited by
    matching parentheses.

    Args:
        text: Comma-separated parenthesized groups
        required: Whether at least one group must be present

    Returns:
        Inner contents of each group with the parentheses stripped

    Raises:
        MalformedStructureError: On unbalanced parentheses, stray text between
            groups, or no groups when ``required``

    Examples:
        >>> split_parts("(0 0,1 1),(2 2,3 3)")
        ['0 0,1 1', '2 2,3 3']

        >>> split_parts("((0 0,1 1)), ((2 2,3 3),(4 4,5 5))")
        ['(0 0,1 1)', '(2 2,3 3),(4 4,5 5)']
    """
    parts: List[str] = []
    length = len(text)
    index = 0
    expect_group = True

    while index < length:
        char = text[index]
        if char.isspace():
            index += 1
        elif char == "(" and expect_group:
            close_index = find_closing_paren(text, index)
            parts.append(text[index + 1 : close_index])
            index = close_index + 1
            expect_group = False
        elif char == "," and not expect_group:
            index += 1
            expect_group = True
        elif char == ")":
            raise MalformedStructureError(
                f"Unbalanced parentheses: unexpected ')' at position {index}",
                fragment=text,
            )
        else:
            expected = "'('" if expect_group else "',' or end of parts"
            raise MalformedStructureError(
                f"Expected {expected} at position {index}, found {char!r}",
                fragment=text,
            )

    if parts and expect_group:
        raise MalformedStructureError("Trailing ',' after last part", fragment=text)
    if required and not parts:
        raise MalformedStructureError("Expected at least one parenthesized part", fragment=text)

    return parts
