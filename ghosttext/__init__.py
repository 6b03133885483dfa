"""
module ghosttext.__init__

Contains the imports of the classes that make up the public surface of ghosttext.
Also contains definitions that indicate the current version of ghosttext.
"""

__version_info__: tuple[int, ...] = (0, 1, 0)
__version__: str = ".".join(map(str, __version_info__))

from .config import GhostTextConfig
from .engine import (
    CallbackObserver,
    SuggestionCache,
    SuggestionEngine,
    SuggestionObserver,
)
from .surface.abstract import SurfaceBackend
from .surface.tree import Node, TreeSurface
