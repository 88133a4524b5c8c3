import os
import sys
import logging
import argparse
from contextlib import contextmanager

import psycopg2
from psycopg2 import extras

# --- Project Path Setup ---
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from common.utils import get_db_settings

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """
    Raised when a statement against the BAMazon database fails.

    The original `psycopg2.Error` is kept as `__cause__`.
    """


def get_db_connection():
    """
    Establishes and returns a connection to the PostgreSQL database.
    """
    try:
        conn = psycopg2.connect(**get_db_settings())
        return conn
    except psycopg2.OperationalError as e:
        print(f"""Error: Could not connect to the database. Please ensure it is running.
Details: {e}""")
        logger.error(f"Database connection failed: {e}")
        return None


def close_db_connection(conn):
    """
    Closes the connection, logging (not raising) a failure to do so.
    """
    try:
        conn.close()
        logger.info("Database connection closed.")
    except psycopg2.Error as e:
        logger.error(f"Could not close the database connection cleanly. Reason: {e}")


@contextmanager
def db_session():
    """
    Opens the single connection a tool works with and closes it exactly once.

    Yields None when the database is unreachable so that the caller can decide
    how to report it. The connection is closed on every exit path, including
    exceptions raised inside the `with` block.
    """
    conn = get_db_connection()
    try:
        yield conn
    finally:
        if conn is not None:
            close_db_connection(conn)


def fetch_all(conn, query, params=None):
    """
    Runs a read query and returns every row as a dictionary.

    Raises:
        StorageError: If the query fails.
    """
    try:
        with conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
            cur.execute(query, params)
            return [dict(row) for row in cur.fetchall()]
    except psycopg2.Error as e:
        logger.error(f"Read query failed. Reason: {e}")
        conn.rollback()
        raise StorageError(f"Could not read from the database: {e}") from e


def fetch_one(conn, query, params=None):
    """
    Runs a read query and returns the first row as a dictionary, or None.

    Raises:
        StorageError: If the query fails.
    """
    try:
        with conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
            cur.execute(query, params)
            row = cur.fetchone()
            return dict(row) if row else None
    except psycopg2.Error as e:
        logger.error(f"Read query failed. Reason: {e}")
        conn.rollback()
        raise StorageError(f"Could not read from the database: {e}") from e


def execute_write(conn, query, params=None):
    """
    Executes a single INSERT/UPDATE statement and commits it.

    Returns:
        int: The number of rows affected.

    Raises:
        StorageError: If the statement fails. The transaction is rolled back.
    """
    try:
        with conn.cursor() as cur:
            cur.execute(query, params)
            rowcount = cur.rowcount
        conn.commit()
        return rowcount
    except psycopg2.Error as e:
        logger.error(f"Write failed, rolling back. Reason: {e}")
        conn.rollback()
        raise StorageError(f"Could not write to the database: {e}") from e


def execute_returning(conn, query, params=None):
    """
    Executes an INSERT ... RETURNING statement, commits it and returns the
    returned row as a dictionary.

    Raises:
        StorageError: If the statement fails. The transaction is rolled back.
    """
    try:
        with conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
            cur.execute(query, params)
            row = cur.fetchone()
        conn.commit()
        return dict(row) if row else None
    except psycopg2.Error as e:
        logger.error(f"Write failed, rolling back. Reason: {e}")
        conn.rollback()
        raise StorageError(f"Could not write to the database: {e}") from e


def initialize_database():
    """
    Initializes the database by executing the DDL statements in 'schema.sql'.
    """
    conn = None
    try:
        script_dir = os.path.dirname(os.path.abspath(__file__))
        schema_path = os.path.join(script_dir, 'schema.sql')
        print(f"INFO: Reading database schema from {schema_path}...")
        with open(schema_path, 'r') as f:
            schema_sql = f.read()
        conn = get_db_connection()
        if conn is None:
            return False
        with conn.cursor() as cur:
            print("INFO: Executing schema.sql to initialize database...")
            cur.execute(schema_sql)
            conn.commit()
            print("SUCCESS: Database initialized successfully.")
        return True
    except FileNotFoundError:
        print(f"ERROR: schema.sql not found at {schema_path}")
        return False
    except psycopg2.Error as e:
        print(f"ERROR: An error occurred during database initialization: {e}")
        if conn:
            conn.rollback()
        return False
    finally:
        if conn:
            conn.close()


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description="BAMazon database utility script.")
    parser.add_argument('--init', action='store_true', help='Initialize the database schema without prompting for confirmation.')
    args = parser.parse_args()

    if args.init:
        print("--- Database Initializer (non-interactive) ---")
        ok = initialize_database()
    else:
        print("--- Database Initializer ---")
        print("WARNING: This script is destructive and will drop the products and departments tables.")
        confirm = input("Are you sure you want to drop and re-seed the BAMazon tables? (yes/no): ")
        ok = True
        if confirm.lower() == 'yes':
            ok = initialize_database()
        else:
            print("INFO: Database initialization cancelled.")
    print("--- Finished ---")
    sys.exit(0 if ok else 1)
