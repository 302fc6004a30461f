#!/usr/bin/env python3
#
# PROJECT: wireframe-fps-cli
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 10
# LOG_REF: 2026-10-19
#

import os
import sys

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from wireframe_fps.cli import main


if __name__ == "__main__":
    sys.exit(main())
