"""
module ghosttext.engine.enums.removalreason

Contains the definition of the RemovalReason enum, the reasons a displayed
suggestion can be removed for
"""

from enum import StrEnum


class RemovalReason(StrEnum):
    """
    class RemovalReason

    The reasons a displayed suggestion can be removed for. Only implicit and
    explicit removals are reported to observers as rejections
    """

    # moved the caret, typed something else, left the surface, disabled autocomplete
    IMPLICIT = "implicit"
    # invoked the reject command
    EXPLICIT = "explicit"
    # accepted, replaced by a partial acceptance or cleared before a redisplay
    SYSTEM = "internal"
