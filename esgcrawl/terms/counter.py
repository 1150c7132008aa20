"""Term incidence counting: whole-word, case-insensitive vocabulary counts."""

from __future__ import annotations

import re
from typing import Dict, Sequence

_FLAGS = re.IGNORECASE | re.ASCII


def build_pattern(term: str, escape: bool = True) -> re.Pattern[str]:
    """Compile a ``\\bterm\\b`` pattern matching *term* as a whole word.

    Word boundaries and case folding are ASCII-only.  With ``escape=False``
    the term is embedded verbatim, so regex metacharacters keep their special
    meaning (the behaviour older result sets were produced with); this may
    raise :class:`re.error` for terms such as ``"C++"``.
    """
    body = re.escape(term) if escape else term
    return re.compile(rf"\b{body}\b", _FLAGS)


def count_term(text: str, term: str, escape: bool = True) -> int:
    """Return the number of non-overlapping whole-word matches of *term*."""
    return sum(1 for _ in build_pattern(term, escape).finditer(text))


def count_terms(text: str, vocabulary: Sequence[str], escape: bool = True) -> Dict[str, int]:
    """Count every vocabulary term in *text*.

    The result has exactly one key per term, in vocabulary order, with ``0``
    for terms that do not occur.
    """
    return {term: count_term(text, term, escape) for term in vocabulary}
