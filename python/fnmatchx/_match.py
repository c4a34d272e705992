# SPDX-FileCopyrightText: 2025 László Vaskó <opensource@vlaci.email.com>
#
# SPDX-License-Identifier: EUPL-1.2

"""Pattern scanner and bracket expression matcher."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ._flags import MatchFlags

logger = logging.getLogger(__name__)


def _fold(char: str) -> str:
    # One code point in, one out: "İ" folds to "i".
    return char.lower()[0]


class _Cursor:
    """Read position in the candidate string for a single attempt."""

    __slots__ = ("text", "pos", "origin", "pathname")

    def __init__(self, text: str, pathname: bool, origin: int = 0) -> None:
        self.text = text
        self.pos = origin
        self.origin = origin
        self.pathname = pathname

    @property
    def exhausted(self) -> bool:
        return self.pos >= len(self.text)

    @property
    def at_start(self) -> bool:
        """Whether the next character sits at a start position."""
        if self.pos == self.origin:
            return True
        return self.pathname and self.text[self.pos - 1] == "/"

    def peek(self) -> str:
        return self.text[self.pos]

    def advance(self) -> str:
        char = self.text[self.pos]
        self.pos += 1
        return char

    def rest(self) -> str:
        return self.text[self.pos :]


def _read_member(pattern: str, pos: int, noescape: bool) -> Tuple[Optional[str], int]:
    char = pattern[pos]
    pos += 1
    if char == "\\" and not noescape:
        if pos >= len(pattern):
            return None, pos
        char = pattern[pos]
        pos += 1
    return char, pos


def match_range(pattern: str, pos: int, test: str, flags: MatchFlags) -> Tuple[bool, int]:
    """Test *test* against the bracket expression starting at *pattern[pos]*.

    *pos* points just past the opening ``[``. Returns the verdict and the
    position just past the closing ``]``. A malformed expression never
    matches.
    """
    noescape = bool(flags & MatchFlags.NOESCAPE)
    casefold = bool(flags & MatchFlags.CASEFOLD)
    end = len(pattern)

    if casefold:
        test = _fold(test)

    negated = pos < end and pattern[pos] in "!^"
    if negated:
        pos += 1

    found = False
    first = True
    while pos < end and (first or pattern[pos] != "]"):
        first = False
        low, pos = _read_member(pattern, pos, noescape)
        if low is None:
            logger.debug("trailing escape in bracket expression: %r", pattern)
            return False, pos
        if casefold:
            low = _fold(low)

        if pos + 1 < end and pattern[pos] == "-" and pattern[pos + 1] != "]":
            high, pos = _read_member(pattern, pos + 1, noescape)
            if high is None:
                logger.debug("trailing escape in bracket expression: %r", pattern)
                return False, pos
            if casefold:
                high = _fold(high)
            if low <= test <= high:
                found = True
        elif low == test:
            found = True

    if pos >= end:
        logger.debug("unterminated bracket expression: %r", pattern)
        return False, pos

    return found != negated, pos + 1


# (pattern position, next candidate start, flags) of a `*` still to be retried.
_Frame = Tuple[int, int, MatchFlags]


def _scan(pattern: str, pos: int, cursor: _Cursor, flags: MatchFlags, pending: List[_Frame]) -> bool:
    """Run one attempt from *pos*; a `*` needing backtracking is pushed to *pending*."""
    noescape = bool(flags & MatchFlags.NOESCAPE)
    pathname = bool(flags & MatchFlags.PATHNAME)
    period = bool(flags & MatchFlags.PERIOD)
    leading_dir = bool(flags & MatchFlags.LEADING_DIR)
    casefold = bool(flags & MatchFlags.CASEFOLD)

    end = len(pattern)

    while pos < end:
        char = pattern[pos]
        pos += 1

        if char == "?":
            if cursor.exhausted:
                return False
            leading = cursor.at_start
            test = cursor.advance()
            if test == "/" and pathname:
                return False
            if test == "." and period and leading:
                return False

        elif char == "*":
            while pos < end and pattern[pos] == "*":
                pos += 1

            if period and not cursor.exhausted and cursor.peek() == "." and cursor.at_start:
                return False

            if pos == end:
                if pathname:
                    return leading_dir or "/" not in cursor.rest()
                return True

            if pattern[pos] == "/" and pathname:
                slash = cursor.text.find("/", cursor.pos)
                if slash == -1:
                    return False
                cursor.pos = slash + 1
                pos += 1
                continue

            pending.append((pos, cursor.pos, flags & ~MatchFlags.PERIOD))
            return False

        elif char == "[":
            if cursor.exhausted:
                return False
            if pathname and cursor.peek() == "/":
                return False
            matched, pos = match_range(pattern, pos, cursor.advance(), flags)
            if not matched:
                return False

        else:
            if char == "\\" and not noescape and pos < end:
                char = pattern[pos]
                pos += 1
            if cursor.exhausted:
                return False
            test = cursor.advance()
            if test != char and not (casefold and _fold(test) == _fold(char)):
                return False

    return cursor.exhausted or (leading_dir and cursor.peek() == "/")


def match_flags(pattern: str, string: str, flags: MatchFlags) -> bool:
    """Match *string* against *pattern* with an already combined flag set.

    Each ``*`` tries the rest of the pattern against every later suffix of
    *string*, longest first. Pending suffixes are kept on an explicit stack,
    so the number of ``*`` in a pattern does not bound the call depth.
    """
    pending: List[_Frame] = []
    if _scan(pattern, 0, _Cursor(string, bool(flags & MatchFlags.PATHNAME)), flags, pending):
        return True

    while pending:
        pos, start, inner = pending.pop()
        if start >= len(string):
            continue
        pathname = bool(inner & MatchFlags.PATHNAME)
        if not (pathname and string[start] == "/"):
            pending.append((pos, start + 1, inner))
        if _scan(pattern, pos, _Cursor(string, pathname, start), inner, pending):
            return True

    return False
