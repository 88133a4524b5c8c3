import os
import sys
import logging

from psycopg2 import errors

# --- Project Path Setup ---
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from database.db_utils import fetch_all, execute_returning, StorageError

logger = logging.getLogger(__name__)


class DuplicateDepartmentError(Exception):
    """Raised when a department with the same name already exists."""


def get_department_sales(conn):
    """
    Summarizes sales per department.

    Departments without any products are included with zero sales.

    Args:
        conn: An active psycopg2 database connection object.

    Returns:
        list[dict]: One row per department with `department_id`,
                    `department_name`, `over_head_costs`, `product_sales` and
                    `total_profit`, ordered by `department_id`.
    """
    return fetch_all(conn, """
        SELECT
            d.department_id,
            d.department_name,
            d.over_head_costs,
            COALESCE(SUM(p.product_sales), 0) AS product_sales,
            COALESCE(SUM(p.product_sales), 0) - d.over_head_costs AS total_profit
        FROM departments d
        LEFT JOIN products p ON p.department_name = d.department_name
        GROUP BY d.department_id, d.department_name, d.over_head_costs
        ORDER BY d.department_id;
    """)


def create_department(conn, department_name, over_head_costs):
    """
    Adds a new department.

    Returns:
        The integer `department_id` of the new department.

    Raises:
        DuplicateDepartmentError: If the name is already taken.
        StorageError: For any other database failure.
    """
    try:
        row = execute_returning(
            conn,
            "INSERT INTO departments (department_name, over_head_costs) VALUES (%s, %s) RETURNING department_id;",
            (department_name, over_head_costs)
        )
    except StorageError as e:
        if isinstance(e.__cause__, errors.UniqueViolation):
            raise DuplicateDepartmentError(f"A department named '{department_name}' already exists.") from e
        raise
    logger.info(f"Created department {row['department_id']} '{department_name}'.")
    return row['department_id']
