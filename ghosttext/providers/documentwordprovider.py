"""
module ghosttext.providers.documentwordprovider

Contains the definition of the DocumentWordProvider class, a suggestion provider
that completes the word before the caret with a longer word used earlier on
"""

import re
from typing import List

from ..engine import CancellationToken

_word_pattern: re.Pattern = re.compile(r"\w+")
_trailing_word_pattern: re.Pattern = re.compile(r"\w+$")


class DocumentWordProvider:
    """
    class DocumentWordProvider

    A suggestion provider that completes the partial word before the caret with
    the most recent longer word in the leading text that starts with it
    """

    # pylint: disable=too-few-public-methods

    min_prefix_length: int

    def __init__(self: "DocumentWordProvider", min_prefix_length: int = 2) -> None:
        self.min_prefix_length = min_prefix_length

    def __call__(
        self: "DocumentWordProvider", leading_text: str, _: CancellationToken
    ) -> str | None:
        partial_word: re.Match | None = _trailing_word_pattern.search(leading_text)
        if partial_word is None or len(partial_word.group()) < self.min_prefix_length:
            return None

        prefix: str = partial_word.group()
        earlier_words: List[str] = _word_pattern.findall(
            leading_text[: partial_word.start()]
        )
        for word in reversed(earlier_words):
            if len(word) > len(prefix) and word.startswith(prefix):
                return word[len(prefix) :]

        return None
