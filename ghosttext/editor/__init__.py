"""
module ghosttext.editor

Contains the GhostTextEditor class, a prompt_toolkit editing session that
displays ghost text suggestions while the user types
"""

from .exceptions import UserExit
from .ghosttexteditor import GhostTextEditor
