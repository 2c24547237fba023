"""Allow running the package with ``python -m clean_patterns``."""
import sys

from clean_patterns.cli.main import main

sys.exit(main())
