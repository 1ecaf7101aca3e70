"""Word-frequency counting over line-delimited text."""
from __future__ import annotations

import logging
from typing import Iterable

import pandas as pd

from employee_aggregates.models import WordCount

log = logging.getLogger(__name__)


def tokenize(text: str) -> list[str]:
    """Split `text` on ``"\\n"`` only.

    Other control characters (``\\r``, form feed, ...) stay inside the token.
    Trailing empty tokens are dropped, so ``""`` and ``"\\n"`` yield no tokens;
    interior empty lines are kept.
    """
    tokens = text.split("\n")
    while tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


def count_tokens(tokens: Iterable[str]) -> list[WordCount]:
    """Collapse tokens into counts, ordered by token (code point order).

    The counting stage does not determine output order; entries are re-sorted
    by token afterwards.
    """
    counts = pd.Series(list(tokens), dtype="object").value_counts(sort=False)
    return [WordCount(token=token, count=int(n)) for token, n in sorted(counts.items())]


def format_word_count(word: WordCount) -> str:
    return f"{word.token} - {word.count}"


def word_frequencies(text: str) -> list[str]:
    """Count occurrences of each line in `text`.

    Args:
        text: Tokens separated by line breaks.

    Returns:
        ``"<token> - <count>"`` strings sorted lexicographically by token.
    """
    tokens = tokenize(text)
    words = count_tokens(tokens)
    log.info("Counted %d tokens (%d distinct)", len(tokens), len(words))
    return [format_word_count(w) for w in words]
