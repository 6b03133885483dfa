from typing import Dict

from ghosttext import __version__


APPLICATION_NAME: str = __name__[: __name__.index(".")]
APPLICATION_VERSION: str = __version__

CONFIG_VERSION: str = "0.1"

DEFAULT_CACHE_CAPACITY: int = 25
DEFAULT_COLOR_SCHEME: str = "monokai"
DEFAULT_DEBOUNCE_MS: int = 1000

NBSP: str = "\xa0"

SPACES_IN_TAB: int = 4

SUGGESTION_CLASS_NAME: str = "suggestion"
SUGGESTION_ID_ATTRIBUTE: str = "data-suggestionid"
SUGGESTION_ID_PREFIX: str = "s-"
SUGGESTION_STYLE: str = "fg:#808080"

# style hints handed to a surface alongside the marker text
SUGGESTION_STYLE_HINTS: Dict[str, str] = {"color": "grey"}
