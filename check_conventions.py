#!python3 -X utf8

import sys

from conventions.cli import main

if __name__ == '__main__':
    sys.exit(main())
