"""
PlantCare — Entry Point.

`python main.py --frequency 7 --last 2026-02-10` prints the plant's status.
"""

import logging
import sys

from plantcare.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

from plantcare.cli import main

if __name__ == "__main__":
    sys.exit(main())
