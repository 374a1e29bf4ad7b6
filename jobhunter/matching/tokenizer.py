"""Text tokenization shared by keyword scoring and embeddings."""

import re

_STRIP_PATTERN = re.compile(r"[^\w\s.-]", re.ASCII)
_SPLIT_PATTERN = re.compile(r"\s+")
MIN_TOKEN_LENGTH = 3


def tokenize(text: str) -> list[str]:
    """Split text into lowercase word tokens.

    Periods and hyphens are kept so tokens like "node.js" and "full-time"
    survive. Word characters are ASCII only, so accented letters split
    tokens. Tokens shorter than three characters are dropped.

    Args:
        text: Free text to tokenize.

    Returns:
        List of tokens in input order.
    """
    if not text:
        return []

    cleaned = _STRIP_PATTERN.sub(" ", text.lower())
    return [token for token in _SPLIT_PATTERN.split(cleaned) if len(token) >= MIN_TOKEN_LENGTH]
