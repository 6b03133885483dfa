"""
module ghosttext.surface.backends.prompt_toolkit

Contains the surface backend built on top of a prompt_toolkit Buffer and the
processor that renders its ghost text
"""

from .buffersurface import BufferSurface
from .ghostmarker import GhostMarker
from .ghosttextprocessor import GhostTextProcessor
