"""
module ghosttext.editor.exceptions.userexit

Contains the definition of the UserExit exception class, an exception
thrown whenever the user has performed an expected action that represents
intent to exit the editor
"""

from ...ghosttextexception import GhostTextException


class UserExit(GhostTextException):
    """
    class UserExit

    An exception thrown whenever the user has performed an expected action
    that represents intent to exit the editor
    """
