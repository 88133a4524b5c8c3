"""
Supervisor portal.

Lets a supervisor review how each department is performing (product sales
against overhead costs) and open new departments.
"""

import os
import sys
import logging
from enum import Enum

# --- Project Path Setup ---
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from common.cli import run_tool
from common.display import format_department_sales
from common.prompts import ask, ask_decimal, choose, validate_non_empty, validate_non_negative_amount
from supervisor.db_utils import get_department_sales, create_department, DuplicateDepartmentError

logger = logging.getLogger(__name__)


class SupervisorAction(Enum):
    VIEW_DEPARTMENT_SALES = 'View Product Sales by Department'
    CREATE_DEPARTMENT = 'Create New Department'
    EXIT = 'Exit App'


def show_department_sales(conn):
    departments = get_department_sales(conn)
    if not departments:
        print("\nThere are no departments yet.")
        return
    print()
    print(format_department_sales(departments))


def create_new_department(conn, input_func=None):
    """
    Prompts for a department name and its overhead costs, then inserts it.
    """
    name = ask("\nEnter the name of the new department.", validate_non_empty, input_func)
    over_head_costs = ask_decimal(
        "Enter the overhead costs for this department.",
        validate_non_negative_amount,
        input_func
    )
    try:
        create_department(conn, name, over_head_costs)
    except DuplicateDepartmentError as e:
        print(f"\n{e}")
        return
    print(f"\nDepartment {name} has been created!")


def run_session(conn, input_func=None):
    while True:
        action = choose(
            "\nBAMazon Supervisor Portal\n\nPlease choose an action from the list below.",
            list(SupervisorAction),
            input_func
        )
        logger.info(f"Supervisor chose '{action.value}'.")
        if action is SupervisorAction.VIEW_DEPARTMENT_SALES:
            show_department_sales(conn)
        elif action is SupervisorAction.CREATE_DEPARTMENT:
            create_new_department(conn, input_func)
        elif action is SupervisorAction.EXIT:
            return


def main():
    run_tool('bamazon_supervisor', "BAMazon Supervisor Portal", run_session)


if __name__ == '__main__':
    main()
