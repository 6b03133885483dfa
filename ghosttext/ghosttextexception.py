"""
module ghosttext.ghosttextexception

Contains the definition of the GhostTextException class, the parent of all
exceptions directly thrown by ghosttext and its surface backends
"""


class GhostTextException(RuntimeError):
    """
    class GhostTextException

    The parent class of all exceptions directly thrown by ghosttext
    """
