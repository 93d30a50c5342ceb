import sys

from conventions.cli import main

sys.exit(main())
