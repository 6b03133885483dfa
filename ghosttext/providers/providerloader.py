"""
module ghosttext.providers.providerloader

Contains the load_provider() function which imports a suggestion provider from a
'package.module:attribute' import path
"""

import importlib
import inspect
from types import ModuleType
from typing import Any

from ..engine import SuggestionProvider
from .exceptions import ProviderLoadException


def load_provider(import_path: str) -> SuggestionProvider:
    """
    Imports a suggestion provider from a 'package.module:attribute' import path.
    If the attribute is a class, it is instantiated without arguments

    Args:
        import_path (str): The import path of the provider

    Returns:
        SuggestionProvider: The loaded provider

    Raises:
        ProviderLoadException: If the path is malformed, cannot be imported or
            does not name a callable
    """

    module_name, separator, attribute_path = import_path.partition(":")
    if not separator or len(module_name) == 0 or len(attribute_path) == 0:
        raise ProviderLoadException(
            f"Provider path '{import_path}' is not of the form 'module:attribute'"
        )

    module: ModuleType
    try:
        module = importlib.import_module(module_name)
    except ImportError as ie:
        raise ProviderLoadException(
            f"Unable to import provider module '{module_name}': {ie}"
        ) from ie

    provider: Any = module
    for attribute in attribute_path.split("."):
        if not hasattr(provider, attribute):
            raise ProviderLoadException(
                f"Provider module '{module_name}' has no attribute '{attribute_path}'"
            )

        provider = getattr(provider, attribute)

    if inspect.isclass(provider):
        provider = provider()

    if not callable(provider):
        raise ProviderLoadException(f"Provider '{import_path}' is not callable")

    return provider
