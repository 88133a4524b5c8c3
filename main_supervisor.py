#!/usr/bin/env python3

"""
Main entry point for the BAMazon supervisor portal.
"""

import sys
import os

# Ensure the project root is in the Python path
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, PROJECT_ROOT)

from supervisor.workflow import main as supervisor_main


def main():
    supervisor_main()


if __name__ == '__main__':
    main()
