import sys

from .presentation.cli.compute_potential import main

sys.exit(main())
