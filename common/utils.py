# -*- coding: utf-8 -*-
"""
================================================================================
Common Utility Functions
================================================================================
Purpose:
----------------
This module provides the configuration and logging helpers shared by the
customer, manager and supervisor tools.

Settings are read from the environment. A `.env` file in the project root is
loaded first (if present), so a developer can keep the database password out
of their shell profile, e.g.:

    POSTGRES_PASSWORD=secret
    BAMAZON_LOG_LEVEL=INFO

Key Functions:
- `get_setting(key_name, default)`: Reads a single setting.
- `get_int_setting(key_name, default)`: Same, coerced to an integer.
- `get_db_settings()`: Returns the keyword arguments for `psycopg2.connect`.
- `setup_logging(app_name)`: Sends log records to a dated file and the console.
----------------
"""

# =====================================================================================
# --- Imports and Configuration ---
# =====================================================================================
import os
import sys
import logging
from datetime import datetime

from dotenv import load_dotenv

# The `.env` file is expected in the project root, one level above `common/`.
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
ENV_FILE = os.path.join(PROJECT_ROOT, '.env')

load_dotenv(ENV_FILE)

DEFAULT_LOG_DIR = os.path.join(PROJECT_ROOT, 'logs')
DEFAULT_LOW_STOCK_THRESHOLD = 5

logger = logging.getLogger(__name__)


# =====================================================================================
# --- Core Functions ---
# =====================================================================================

def get_setting(key_name, default=None):
    """
    Reads a setting from the environment.

    Empty values are treated as missing so that `KEY=` in a `.env` file falls
    back to the default instead of an empty string.
    """
    value = os.getenv(key_name)
    if value is None or value.strip() == '':
        return default
    return value.strip()


def get_int_setting(key_name, default):
    """
    Reads an integer setting. A malformed value is logged and replaced by the default.
    """
    value = get_setting(key_name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Setting {key_name}={value!r} is not an integer; using {default}.")
        return default


def get_db_settings():
    """
    Returns the connection parameters for the PostgreSQL database.

    Returns:
        dict: Keyword arguments accepted by `psycopg2.connect`.
    """
    return {
        'dbname': get_setting('POSTGRES_DB', 'bamazon'),
        'user': get_setting('POSTGRES_USER', 'postgres'),
        'password': get_setting('POSTGRES_PASSWORD', ''),
        'host': get_setting('POSTGRES_HOST', 'localhost'),
        'port': get_setting('POSTGRES_PORT', '5432'),
    }


def get_low_stock_threshold():
    return get_int_setting('BAMAZON_LOW_STOCK_THRESHOLD', DEFAULT_LOW_STOCK_THRESHOLD)


def setup_logging(app_name):
    """
    Sets up logging to a dated file and to the console.

    The file receives everything from INFO up. The console only shows
    `BAMAZON_LOG_LEVEL` and above (WARNING by default) so that log lines do not
    interleave with the interactive prompts.
    """
    log_dir = get_setting('BAMAZON_LOG_DIR', DEFAULT_LOG_DIR)
    os.makedirs(log_dir, exist_ok=True)
    log_filename = datetime.now().strftime(f"{app_name}_%Y-%m-%d.log")
    log_path = os.path.join(log_dir, log_filename)

    console_level = getattr(logging, get_setting('BAMAZON_LOG_LEVEL', 'WARNING').upper(), logging.WARNING)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_path),
            console_handler
        ]
    )
    return logging.getLogger()
