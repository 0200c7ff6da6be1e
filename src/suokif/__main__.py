"""Main entry point for the suokif command when run as a module."""

import sys

from suokif.suokif_cli import main

if __name__ == '__main__':
    sys.exit(main())
