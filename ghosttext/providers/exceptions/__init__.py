"""
module ghosttext.providers.exceptions

Contains the definitions of all exceptions thrown while loading suggestion providers
"""

from .providerloadexception import ProviderLoadException
