"""Label filtering for the dropdown option list.

Matching is a plain case-insensitive substring test over option labels.
Result order always follows the caller's option order.
"""

from __future__ import annotations

from collections.abc import Sequence

from .options import Option

NO_OPTIONS = "no_options"
NO_MATCHES = "no_matches"


def query_is_blank(query: str) -> bool:
    """Return whether ``query`` should bypass filtering."""
    return not query.strip()


def filter_options(
    options: Sequence[Option],
    query: str,
    with_search: bool = True,
) -> list[Option]:
    """Return options whose label contains ``query``, ignoring case.

    Blank queries and disabled search return every option unchanged.
    """
    if not with_search or query_is_blank(query):
        return list(options)
    folded_query = query.casefold()
    return [option for option in options if folded_query in option.label.casefold()]


def empty_reason(options: Sequence[Option], query: str, filtered: Sequence[Option]) -> str | None:
    """Classify an empty result as ``no_options`` or ``no_matches``."""
    if filtered:
        return None
    if not options or query_is_blank(query):
        return NO_OPTIONS
    return NO_MATCHES
