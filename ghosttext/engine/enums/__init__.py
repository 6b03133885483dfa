"""
module ghosttext.engine.enums

Contains the definitions of all enum classes used by the suggestion engine and
reported to its observers
"""

from .enginestate import EngineState
from .fetchstatus import FetchStatus
from .removalreason import RemovalReason
