#!/usr/bin/env python3

"""
Main entry point for the BAMazon customer storefront.

This script lets a customer browse the catalog and buy products. Its sole
responsibility is to import and trigger the session from the
`order_management.workflow` module.
"""

import sys
import os

# --- Python Path Configuration ---
# Lets the script be run from any directory and still find 'order_management',
# 'inventory', 'database' and 'common'.
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, PROJECT_ROOT)

from order_management.workflow import main as customer_main


def main():
    customer_main()


if __name__ == '__main__':
    main()
