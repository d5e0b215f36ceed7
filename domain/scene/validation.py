"""Token grammars for scene description fields.

Pure predicates, no exceptions: the entity factory decides which error
to raise when a predicate fails.
"""

from __future__ import annotations

import re

MAX_LENGTH_ID = 10  # Maximum length of an identifier

# ASCII only so that identifier ordering is plain byte ordering
_ID_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*", re.ASCII)
_INTEGER_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)
_POSITIVE_INTEGER_RE = re.compile(r"\+?[0-9]+", re.ASCII)


def is_valid_id(token: str) -> bool:
    """Identifier: letter or underscore, then letters, digits, underscores."""
    return 1 <= len(token) <= MAX_LENGTH_ID and _ID_RE.fullmatch(token) is not None


def is_valid_integer(token: str) -> bool:
    return _INTEGER_RE.fullmatch(token) is not None


def is_valid_positive_integer(token: str) -> bool:
    """Unsigned (or '+') decimal integer, strictly greater than zero."""
    return _POSITIVE_INTEGER_RE.fullmatch(token) is not None and int(token) > 0
