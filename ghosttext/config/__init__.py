"""
module ghosttext.config

Contains the definitions of all configuration classes used by ghosttext
"""

from .ghosttextconfig import GhostTextConfig
from .exceptions import InvalidConfigException
