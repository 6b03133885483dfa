"""
module ghosttext.config.exceptions

Contains the definitions of all exceptions thrown while loading or validating
a ghosttext configuration
"""

from .invalidconfigexception import InvalidConfigException
