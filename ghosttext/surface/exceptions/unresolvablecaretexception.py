"""
module ghosttext.surface.exceptions.unresolvablecaretexception

Contains the definition of the UnresolvableCaretException class, an exception
that is thrown whenever a selection cannot be resolved to a single caret
position inside a surface
"""

from .surfaceexception import SurfaceException


class UnresolvableCaretException(SurfaceException):
    """
    class UnresolvableCaretException

    An exception that is thrown whenever a selection cannot be resolved to a
    single caret position inside a surface (there is no selection, the selection
    is a range or it points at a node that does not exist)
    """
