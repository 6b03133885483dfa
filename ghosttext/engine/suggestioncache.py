"""
module ghosttext.engine.suggestioncache

Contains the definition of the SuggestionCache class, a bounded least-recently-used
map from the text preceding the caret to the suggestion fetched for it
"""

from cachetools import LRUCache

from .. import constants
from ..config import InvalidConfigException


class SuggestionCache:
    """
    class SuggestionCache

    A bounded least-recently-used map from the text preceding the caret to the
    suggestion fetched for it. Keys are used exactly as extracted (no case or
    whitespace normalization) and entries only leave the cache through eviction
    """

    __entries: LRUCache

    def __init__(
        self: "SuggestionCache", capacity: int = constants.DEFAULT_CACHE_CAPACITY
    ) -> None:
        if capacity < 1:
            raise InvalidConfigException(
                f"Cache capacity must be at least 1 (got {capacity})"
            )

        self.__entries = LRUCache(maxsize=capacity)

    def __contains__(self: "SuggestionCache", leading_text: str) -> bool:
        return leading_text in self.__entries

    def __len__(self: "SuggestionCache") -> int:
        return len(self.__entries)

    @property
    def capacity(self: "SuggestionCache") -> int:
        return int(self.__entries.maxsize)

    def clear(self: "SuggestionCache") -> None:
        self.__entries.clear()

    def get(self: "SuggestionCache", leading_text: str) -> str | None:
        """
        Returns the cached suggestion for the provided leading text and marks it
        as the most recently used entry

        Args:
            leading_text (str): The text preceding the caret

        Returns:
            str | None: The cached suggestion or None on a miss

        Raises:
            Nothing
        """

        return self.__entries.get(leading_text)

    def set(self: "SuggestionCache", leading_text: str, suggestion_text: str) -> None:
        """
        Stores a suggestion for the provided leading text, evicting the least
        recently used entry if the cache is full

        Args:
            leading_text (str): The text preceding the caret
            suggestion_text (str): The suggestion fetched for it

        Returns:
            Nothing

        Raises:
            Nothing
        """

        self.__entries[leading_text] = suggestion_text
