"""
module ghosttext.config.exceptions.invalidconfigexception

Contains the definition of the InvalidConfigException class, an exception
thrown whenever a configuration contains a value that the engine cannot use
"""

from ...ghosttextexception import GhostTextException


class InvalidConfigException(GhostTextException):
    """
    class InvalidConfigException

    An exception thrown whenever a configuration contains a value that the
    engine cannot use
    """
