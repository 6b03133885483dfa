"""
module ghosttext.providers

Contains the built-in suggestion providers and the loader used to import a
provider named in the configuration
"""

from .documentwordprovider import DocumentWordProvider
from .exceptions import ProviderLoadException
from .providerloader import load_provider
