"""
ApexRhythm — Ultradian Performance Scheduler
Entry point for the application.
"""

import faulthandler
import sys
from pathlib import Path

faulthandler.enable()

# Ensure the package is importable when run from a source checkout
sys.path.insert(0, str(Path(__file__).resolve().parent))

from apex_rhythm.app import main


if __name__ == "__main__":
    main()


# ---------------------------------------------------------------------------
# Explanation (for interviews)
# ---------------------------------------------------------------------------
# What this file does:
#   Lets you run `python main.py` from a checkout without installing.
#   The real bootstrap (logging, config, QApplication) is apex_rhythm.app,
#   which is also what the `apex-rhythm` console script calls.
#
# Key points:
#   - faulthandler: prints a Python traceback if Qt crashes in C++.
#   - sys.path manipulation: imports work from any working directory.
