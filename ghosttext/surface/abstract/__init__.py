"""
module ghosttext.surface.abstract

Contains the definition of the SurfaceBackend abstract base class that is
implemented by individual editable surfaces (i.e., prompt_toolkit buffers)
"""

from .surfacebackend import SurfaceBackend
