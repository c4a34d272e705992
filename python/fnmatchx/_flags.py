# SPDX-FileCopyrightText: 2025 László Vaskó <opensource@vlaci.email.com>
#
# SPDX-License-Identifier: EUPL-1.2

"""Matching flags."""

from __future__ import annotations

import enum
from typing import Union


class MatchFlags(enum.IntFlag):
    """Options altering how a pattern is matched.

    ``NOESCAPE``
        Backslash is an ordinary character, also inside brackets.
    ``PATHNAME``
        ``/`` is only matched by a literal ``/`` in the pattern.
    ``PERIOD``
        A leading ``.`` (or, with ``PATHNAME``, one following a ``/``) is only
        matched by a literal ``.``.
    ``LEADING_DIR``
        The pattern may match a leading path component only, i.e. any
        unmatched remainder starting with ``/`` is ignored.
    ``CASEFOLD``
        Compare characters case-insensitively.
    """

    NOESCAPE = 1 << 0
    PATHNAME = 1 << 1
    PERIOD = 1 << 2
    LEADING_DIR = 1 << 3
    CASEFOLD = 1 << 4


FlagLike = Union[MatchFlags, int]

N = NOESCAPE = MatchFlags.NOESCAPE
P = PATHNAME = MatchFlags.PATHNAME
D = PERIOD = MatchFlags.PERIOD
L = LEADING_DIR = MatchFlags.LEADING_DIR
C = CASEFOLD = MatchFlags.CASEFOLD

_ALL = NOESCAPE | PATHNAME | PERIOD | LEADING_DIR | CASEFOLD


def combine(*flags: FlagLike) -> MatchFlags:
    """Fold *flags* into a single value.

    Values are combined with exclusive-or, so giving the same flag twice
    turns it off again: ``combine(PERIOD, PERIOD) == MatchFlags(0)``.
    """
    combined = 0
    for flag in flags:
        combined ^= int(flag)
    return MatchFlags(combined & _ALL)
