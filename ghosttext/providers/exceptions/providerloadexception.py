"""
module ghosttext.providers.exceptions.providerloadexception

Contains the definition of the ProviderLoadException class, an exception thrown
whenever a suggestion provider named by an import path cannot be loaded
"""

from ...ghosttextexception import GhostTextException


class ProviderLoadException(GhostTextException):
    """
    class ProviderLoadException

    An exception thrown whenever a suggestion provider named by an import path
    cannot be loaded
    """
