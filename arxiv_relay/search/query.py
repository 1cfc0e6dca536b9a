"""
Purpose:
- Build arXiv export API query-strings from keyword lists.
- Pure string formatting; terms are not escaped here, the HTTP client
  percent-encodes whatever cannot appear in a URL.

Notes:
- Grammar: https://info.arxiv.org/help/api/user-manual.html#51-details-of-query-construction
- Every term is searched under the "all:" field prefix.
"""

from __future__ import annotations
from typing import Optional, Sequence, Union

FIELD_PREFIX = "all:"
AND = "+AND+"

Number = Union[int, str]

def _as_terms(name: str, terms: Sequence[str]) -> list[str]:
    # A bare string is a sequence too; iterating it would yield characters.
    if isinstance(terms, (str, bytes)) or not isinstance(terms, Sequence):
        raise TypeError(f"{name} must be a sequence of strings, got {type(terms).__name__}")
    out = list(terms)
    for t in out:
        if not isinstance(t, str):
            raise TypeError(f"{name} must contain only strings, got {type(t).__name__}")
    return out

def join_terms(terms: Sequence[str]) -> str:
    """'a', 'b' -> 'all:a+AND+all:b'"""
    return AND.join(f"{FIELD_PREFIX}{t}" for t in terms)

def build_search_query(
    keywords: Sequence[str],
    limit: Number = 15,
    negatives: Sequence[str] = (),
    start: Number = 0,
) -> str:
    """
    Map keywords/negatives/pagination onto the upstream boolean grammar:

        search_query=all:k1+AND+all:k2+AND+NOT+(all:n1+AND+all:n2)&max_results=<limit>&start=<start>

    The NOT group is left out entirely when there are no negatives.
    """
    positives = _as_terms("keywords", keywords)
    if not positives:
        raise ValueError("keywords must contain at least one term")
    negs = _as_terms("negatives", negatives)

    negatives_clause = f"{AND}NOT+({join_terms(negs)})" if negs else ""
    return f"search_query={join_terms(positives)}{negatives_clause}&max_results={limit}&start={start}"

def build_free_query(keywords: str, limit: Number, negative: Optional[str] = None) -> str:
    """
    Free-form variant: the caller writes the boolean expression itself.
    `exclude_fields` is forwarded as-is whenever given, even empty;
    arXiv does not interpret it.
    """
    query = f"search_query={keywords}&max_results={limit}"
    if negative is not None:
        query += f"&exclude_fields={negative}"
    return query
