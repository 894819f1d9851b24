# Chad CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Splits a single shell-like command string into word tokens.

Tokens are separated by ASCII spaces. A span opened by one of the quote
characters `"`, `'` or `` ` `` runs until the same character closes it and
becomes exactly one token, spaces included and quotes excluded. Inside a span,
a quote character preceded by a backslash does not close it; the backslash is
kept in the token.

Example:
    tokenize("-d Hello --file \"Some text file.txt\" 'Hello there!'")
    → ["-d", "Hello", "--file", "Some text file.txt", "Hello there!"]
"""
from __future__ import annotations

from chad.exceptions import UnterminatedQuoteError
from chad.logger import logger

QUOTE_CHARS = frozenset({'"', "'", "`"})
SEPARATOR = " "
ESCAPE = "\\"


def tokenize(text: str) -> list[str]:
    """
    Split `text` into tokens, respecting quoted spans.

    Args:
        text (str): The raw command line.

    Returns:
        list[str]: Tokens in order. Runs of spaces never produce empty tokens;
        an empty quoted span (`""`) produces one empty token.

    Raises:
        UnterminatedQuoteError: If the input ends inside a quoted span.
    """
    tokens: list[str] = []
    word: list[str] = []
    quote: str | None = None
    quote_start = 0

    for index, char in enumerate(text):
        if quote is not None:
            if char == quote and text[index - 1] != ESCAPE:
                tokens.append(text[quote_start + 1 : index])
                quote = None
            continue

        if char in QUOTE_CHARS:
            if word:
                tokens.append("".join(word))
                word = []
            quote = char
            quote_start = index
        elif char == SEPARATOR:
            if word:
                tokens.append("".join(word))
                word = []
        else:
            word.append(char)

    if quote is not None:
        raise UnterminatedQuoteError(quote, quote_start)
    if word:
        tokens.append("".join(word))

    logger.debug("Tokenized %r into %d token(s).", text, len(tokens))
    return tokens
