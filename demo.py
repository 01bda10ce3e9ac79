"""
Movement demo: steer a single head around the wrapping grid.
"""

from __future__ import annotations
import logging
import sys

import host
from game.demo import DemoGame


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    host.run(DemoGame, "poo-snake demo")
    return 0


if __name__ == "__main__":
    sys.exit(main())
