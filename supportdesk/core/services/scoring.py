"""Lexical similarity scoring between a query and a document.

The score is a pure function of ``(query, content)``:

    score = (matches / distinct_tokens) * (1 + min(occurrences / 100, 1))

``matches`` counts distinct query tokens found in the content and
``occurrences`` sums every hit of every token. Hits are plain
case-insensitive substring matches, so "apply" also counts inside
"application". The result always lies in ``[0, 2]``.
"""

import re

_TOKEN_SPLIT_RE = re.compile(r"\W+")

DENSITY_SATURATION = 100


def tokenize(text: str) -> list[str]:
    """Split text into distinct lowercase word tokens, first occurrence first."""
    return list(dict.fromkeys(token for token in _TOKEN_SPLIT_RE.split(text.lower()) if token))


def count_occurrences(token: str, content: str) -> int:
    """Count non-overlapping case-insensitive occurrences of ``token`` in ``content``."""
    return len(re.findall(re.escape(token), content, re.IGNORECASE))


def score_document(query: str, content: str) -> float:
    """Score how well ``content`` covers the words of ``query``.

    Args:
        query: Raw user query.
        content: Document body.

    Returns:
        Similarity in ``[0.0, 2.0]``; 0.0 when the query has no tokens.
    """
    tokens = tokenize(query)
    if not tokens:
        return 0.0

    matches = 0
    relevance = 0
    for token in tokens:
        occurrences = count_occurrences(token, content)
        if occurrences:
            matches += 1
            relevance += occurrences

    coverage = matches / len(tokens)
    density_bonus = 1 + min(relevance / DENSITY_SATURATION, 1)
    return coverage * density_bonus
