"""Entry point for the TowerFrog game."""

import sys

from towerfrog.app import main


if __name__ == "__main__":
    sys.exit(main())
