"""
GEOMETRYCOLLECTION body decomposition.

A collection body is a comma-separated list of complete geometry literals,
each of which may itself contain parentheses and commas. The body is
carved into literals with a depth-aware scan: a type keyword only starts a
new literal when it appears at parenthesis depth 0.
"""

import logging
import re
from typing import List

from geowkter.core.errors import MalformedStructureError
from .geometry import GeometryKind

logger = logging.getLogger(__name__)

# Longest keywords first so the alternation never stops at a shorter prefix
_KEYWORD_PATTERN = re.compile(
    "|".join(sorted((kind.keyword for kind in GeometryKind), key=len, reverse=True))
    + r"(?![A-Za-z0-9_])",
    re.IGNORECASE,
)


def _is_word_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def _close_segment(segment: str, body: str, is_last: bool) -> str:
    # Every member but the last is followed by exactly one ','
    literal = segment.strip()
    if not is_last:
        if not literal.endswith(","):
            raise MalformedStructureError(
                f"Expected ',' between GEOMETRYCOLLECTION members after {literal!r}",
                fragment=body,
            )
        literal = literal[:-1].rstrip()
    if literal.endswith(","):
        raise MalformedStructureError(
            "Unexpected ',' in GEOMETRYCOLLECTION member list", fragment=body
        )
    if not literal:
        raise MalformedStructureError(
            "Empty geometry between separators in GEOMETRYCOLLECTION", fragment=body
        )
    return literal


def decompose_collection(body: str) -> List[str]:
    """
    Split a GEOMETRYCOLLECTION body into its member geometry literals.

    Args:
        body: Text between the collection's outer parentheses

    Returns:
        Member literals in order, e.g. ``["POLYGON((0 0,1 1,1 0,0 0))", "POINT(4 6)"]``;
        an empty list for an empty body

    Raises:
        MalformedStructureError: If parentheses are unbalanced, a member is empty,
            or members are not separated by exactly one comma

    Examples:
        >>> decompose_collection("POLYGON((0 0,1 1,1 0,0 0)),POINT(4 6)")
        ['POLYGON((0 0,1 1,1 0,0 0))', 'POINT(4 6)']
    """
    literals: List[str] = []
    depth = 0
    start = 0

    for index, char in enumerate(body):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                raise MalformedStructureError(
                    f"Unbalanced parentheses: unexpected ')' at position {index}",
                    fragment=body,
                )
        elif depth == 0 and index > start:
            if index > 0 and _is_word_char(body[index - 1]):
                continue
            if _KEYWORD_PATTERN.match(body, index):
                segment = body[start:index]
                if segment.strip():
                    literals.append(_close_segment(segment, body, is_last=False))
                start = index

    if depth != 0:
        raise MalformedStructureError(
            "Unbalanced parentheses: GEOMETRYCOLLECTION member is never closed",
            fragment=body,
        )

    trailing = body[start:]
    if trailing.strip():
        literals.append(_close_segment(trailing, body, is_last=True))

    logger.debug(f"Decomposed GEOMETRYCOLLECTION body into {len(literals)} member(s)")
    return literals
