"""Split lines of text into maximal runs of word or separator characters.

A token is either all separators or all non-separators and cannot be
extended to either side without crossing that boundary. The tokens of a
line concatenate back to the line exactly. Lines are tokenized
independently, so a word never spans a line break.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Iterator

from wordcounter.classifier import SEPARATORS, is_separator


@dataclass(frozen=True)
class Token:
    text: str
    is_separator: bool

    def __len__(self) -> int:
        return len(self.text)

    @property
    def is_word(self) -> bool:
        return not self.is_separator


def next_token(
    text: str, position: int, separators: FrozenSet[str] = SEPARATORS
) -> Token:
    """Return the word or separator run starting at `position`.

    Raises:
        ValueError: If `position` is not a valid index into `text`
    """
    if not 0 <= position < len(text):
        raise ValueError(
            f"position {position} out of range for text of length {len(text)}"
        )

    kind = is_separator(text[position], separators)
    end = position + 1
    while end < len(text) and is_separator(text[end], separators) == kind:
        end += 1
    return Token(text=text[position:end], is_separator=kind)


def iter_tokens(text: str, separators: FrozenSet[str] = SEPARATORS) -> Iterator[Token]:
    """Yield every token of a single line, left to right."""
    position = 0
    while position < len(text):
        token = next_token(text, position, separators)
        yield token
        position += len(token)


def iter_words(
    lines: Iterable[str], separators: FrozenSet[str] = SEPARATORS
) -> Iterator[str]:
    """Yield the text of every word token, line by line."""
    for line in lines:
        for token in iter_tokens(line, separators):
            if token.is_word:
                yield token.text
