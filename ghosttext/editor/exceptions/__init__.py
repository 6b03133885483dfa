"""
module ghosttext.editor.exceptions

Contains the definitions of all exceptions thrown by the editor
"""

from .userexit import UserExit
