# SPDX-FileCopyrightText: 2025 László Vaskó <opensource@vlaci.email.com>
#
# SPDX-License-Identifier: EUPL-1.2

"""Contains a complete, pure Python implementation of POSIX fnmatch."""

from __future__ import annotations

from typing import Iterable, List

from ._flags import (
    CASEFOLD,
    LEADING_DIR,
    NOESCAPE,
    PATHNAME,
    PERIOD,
    C,
    D,
    FlagLike,
    L,
    MatchFlags,
    N,
    P,
    combine,
)
from ._match import match_flags

__all__ = [
    "CASEFOLD",
    "LEADING_DIR",
    "NOESCAPE",
    "PATHNAME",
    "PERIOD",
    "C",
    "D",
    "L",
    "N",
    "P",
    "MatchFlags",
    "combine",
    "filter",
    "fnmatch",
    "match",
]


def match(pattern: str, string: str, *flags: FlagLike) -> bool:
    """Return whether *string* matches the glob *pattern*.

    Any number of flags may be given; they are combined with :func:`combine`,
    so repeating a flag cancels it. Malformed patterns never raise, they
    simply do not match.
    """
    return match_flags(pattern, string, combine(*flags))


def fnmatch(pattern: str, value: str) -> bool:
    """Match *value* against *pattern* with no flags set."""
    return match_flags(pattern, value, MatchFlags(0))


def filter(names: Iterable[str], pattern: str, *flags: FlagLike) -> List[str]:  # noqa: A001
    """Return the items of *names* matching *pattern*, in order."""
    combined = combine(*flags)
    return [name for name in names if match_flags(pattern, name, combined)]
