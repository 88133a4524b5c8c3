#!/usr/bin/env python3

"""
Main entry point for the BAMazon management portal.

The menu and its actions live in the `inventory.workflow` module.
"""

import sys
import os

# Ensure the project root is in the Python path
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, PROJECT_ROOT)

from inventory.workflow import main as manager_main


def main():
    manager_main()


if __name__ == '__main__':
    main()
