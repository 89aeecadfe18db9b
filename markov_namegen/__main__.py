"""Allow ``python -m markov_namegen``."""

import sys

from markov_namegen.cli import main

sys.exit(main())
