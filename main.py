#!/usr/bin/env python3
"""
Run the dent command line from a source checkout.
"""

# Usage overview:
# 1) ``main.py data.txt`` prints the summary of one sample.
# 2) ``main.py a.txt b.txt`` adds Welch's t-test at ``--alpha``.
# 3) ``main.py a.txt b.txt c.txt --plot`` stacks boxplots on one scale.
# 4) ``main.py --regress pairs.txt`` fits a least-squares line.

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dent.cli import main

if __name__ == "__main__":
    sys.exit(main())
