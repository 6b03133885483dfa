"""
module ghosttext.surface.exceptions

Contains the definitions of all exceptions thrown by surface classes
"""

from .surfaceexception import SurfaceException
from .unresolvablecaretexception import UnresolvableCaretException
