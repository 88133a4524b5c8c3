"""
Process lifecycle shared by the three interactive tools.

`run_tool` opens the one database connection a tool uses, hands it to the
tool's session function and turns the way the session ended into an exit
status:

- the session returns normally        -> thank-you message, exit 0
- the operator hits Ctrl-C / Ctrl-D   -> short notice, exit 0
- a StorageError escapes the session  -> CRITICAL log line, exit 1
- the database cannot be reached      -> CRITICAL message, exit 1

The connection is closed exactly once on all of these paths.
"""

import os
import sys
import logging

# --- Project Path Setup ---
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from common.utils import setup_logging
from database.db_utils import db_session, StorageError


def run_tool(app_name, title, session):
    """
    Runs `session(conn)` inside a database session and exits the process.

    Args:
        app_name (str): Used for the log file name.
        title (str): Banner printed before the session starts.
        session (callable): Receives the open connection.
    """
    logger = setup_logging(app_name)
    print(f"\n--- {title} ---")
    exit_code = 0
    with db_session() as conn:
        if conn is None:
            print("CRITICAL: Cannot proceed without a database connection.")
            logger.critical(f"{app_name} could not connect to the database.")
            exit_code = 1
        else:
            logger.info(f"{app_name} session started.")
            try:
                session(conn)
            except StorageError as e:
                print(f"\nCRITICAL: {e}")
                logger.critical(f"{app_name} session aborted: {e}")
                exit_code = 1
            except (KeyboardInterrupt, EOFError):
                print("\nInterrupted by user. Exiting.")
                logger.info(f"{app_name} session interrupted by user.")
    if exit_code == 0:
        print("\nThank you for using BAMazon!")
    sys.exit(exit_code)
