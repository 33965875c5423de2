"""Allow running the shell with: python -m string_adder"""

import sys

from .shell import main

sys.exit(main())
