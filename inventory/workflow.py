"""
Main workflow for the Inventory Management Module.

This is the manager's portal. From a menu the manager can:
- View every product for sale, with its stock on hand.
- View products whose stock has dropped below the low-stock threshold
  (`BAMAZON_LOW_STOCK_THRESHOLD`, 5 by default).
- Add units to an existing product's inventory.
- Add a brand new product to the store.
"""

import os
import sys
import logging
from enum import Enum

# --- Project Path Setup ---
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from common.cli import run_tool
from common.display import format_products
from common.prompts import (
    ask, ask_int, ask_decimal, choose,
    validate_product_id, validate_positive_int, validate_price, validate_non_empty,
)
from common.utils import get_low_stock_threshold
from inventory.db_utils import (
    get_all_products, get_low_inventory, get_max_product_id, add_stock, create_product,
)

logger = logging.getLogger(__name__)


class ManagerAction(Enum):
    VIEW_PRODUCTS = 'View Products for Sale'
    VIEW_LOW_INVENTORY = 'View Low Inventory'
    ADD_TO_INVENTORY = 'Add to Inventory'
    ADD_NEW_PRODUCT = 'Add New Product'
    EXIT = 'Exit App'


def print_products(products, empty_message):
    if not products:
        print(f"\n{empty_message}")
        return
    print()
    print(format_products(products))


def show_products(conn):
    print_products(get_all_products(conn), "There are no products in the store.")


def show_low_inventory(conn, threshold=None):
    if threshold is None:
        threshold = get_low_stock_threshold()
    print_products(
        get_low_inventory(conn, threshold),
        f"No products have fewer than {threshold} units in stock."
    )


def add_to_inventory(conn, input_func=None):
    """
    Prompts for a product and a number of units, then adds them to its stock.
    """
    show_products(conn)
    max_id = get_max_product_id(conn)
    if max_id < 1:
        return
    item_id = ask_int(
        "\nEnter the ID of the product you would like to add more of.",
        validate_product_id(max_id),
        input_func
    )
    quantity = ask_int(
        "How many units would you like to add to the inventory?",
        validate_positive_int,
        input_func
    )
    if add_stock(conn, item_id, quantity):
        print(f"\n{quantity} units added to inventory.")
    else:
        print(f"\nNo product found with ID {item_id}.")


def add_new_product(conn, input_func=None):
    """
    Prompts for the details of a new product and inserts it.
    """
    name = ask("\nPlease enter the name of the new product.", validate_non_empty, input_func)
    department = ask("Enter the department this product belongs in.", validate_non_empty, input_func)
    price = ask_decimal("Enter the price for this product.", validate_price, input_func)
    stock = ask_int("Enter the stock quantity for this product.", validate_positive_int, input_func)
    create_product(conn, name, department, price, stock)
    print(f"\nYou have added {name} to the store!")


def run_session(conn, input_func=None):
    """
    Shows the manager menu until 'Exit App' is chosen.
    """
    while True:
        action = choose(
            "\nBAMazon Management Portal\n\nPlease choose an action from the list below.",
            list(ManagerAction),
            input_func
        )
        logger.info(f"Manager chose '{action.value}'.")
        if action is ManagerAction.VIEW_PRODUCTS:
            show_products(conn)
        elif action is ManagerAction.VIEW_LOW_INVENTORY:
            show_low_inventory(conn)
        elif action is ManagerAction.ADD_TO_INVENTORY:
            add_to_inventory(conn, input_func)
        elif action is ManagerAction.ADD_NEW_PRODUCT:
            add_new_product(conn, input_func)
        elif action is ManagerAction.EXIT:
            return


def main():
    run_tool('bamazon_manager', "BAMazon Management Portal", run_session)


if __name__ == '__main__':
    main()
