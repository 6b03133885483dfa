"""
module ghosttext.surface

Contains all submodules and class definitions related to the editable text
surface that ghost text is rendered into. This includes the abstract surface
contract, the structural tree model used to resolve the caret and all concrete
surface backends
"""

from . import abstract
from . import exceptions
from . import tree
