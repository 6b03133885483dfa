"""
module ghosttext.surface.exceptions.surfaceexception

Contains the definition of the SurfaceException class, a base class that is the
parent for exception classes thrown by surface backends
"""

from ...ghosttextexception import GhostTextException


class SurfaceException(GhostTextException):
    """
    class SurfaceException

    A base exception class that is the parent for exception classes thrown
    by surface backends
    """
