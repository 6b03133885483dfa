"""
module ghosttext.__main__

Default entrypoint when ghosttext is invoked on the console by a user.
Calls the main() function in ghosttext.entrypoint
"""

import sys

from .entrypoint import main

sys.exit(main())
