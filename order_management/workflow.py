# -*- coding: utf-8 -*-
"""
================================================================================
Customer Purchase Workflow
================================================================================
Purpose:
----------------
The interactive session a customer uses to buy products from BAMazon.

Key Steps:
1.  **Show Catalog**: The catalog (id, name, price) is printed once when the
    session starts. It is not reprinted after each order.
2.  **Collect Order**: The customer is asked for a product id and a quantity.
    Invalid answers are rejected and the same question is asked again.
3.  **Evaluate**: The product's current stock is read and compared to the
    requested quantity (see `order_management.orders`).
4.  **Fulfill or Decline**: An accepted order writes the new stock level,
    adds the revenue to the product's sales total and prints the cost. A
    declined order prints "Insufficient quantity!" and changes nothing.
5.  **Ask to Continue**: "Yes" goes back to step 2, "No" ends the session.

A product id that passes the range check but matches no row (for example a
gap left by a deleted product) is reported and the customer is asked whether
to continue, instead of aborting the session.

A database error at any step ends the session; `common.cli.run_tool` closes
the connection and exits with status 1.
----------------
"""

# =====================================================================================
# --- Imports ---
# =====================================================================================
import os
import sys
import logging

# --- Project Path Setup ---
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from common.cli import run_tool
from common.display import format_catalog, format_money
from common.prompts import ask_int, confirm, validate_product_id, validate_positive_int
from inventory.db_utils import get_catalog, record_product_sale
from order_management.orders import OrderRequest, ProductNotFoundError, evaluate_order, apply_order

logger = logging.getLogger(__name__)


# =====================================================================================
# --- Session Steps ---
# =====================================================================================

def show_catalog(conn):
    """
    Prints the catalog and returns its rows.
    """
    catalog = get_catalog(conn)
    if catalog:
        print()
        print(format_catalog(catalog))
    return catalog


def collect_order(max_product_id, input_func=None):
    """
    Asks for a product id and a quantity.

    Returns:
        OrderRequest: The validated request.
    """
    product_id = ask_int(
        "\nPlease enter the ID of the product you wish to buy.",
        validate_product_id(max_product_id),
        input_func
    )
    quantity = ask_int("How many would you like to buy?", validate_positive_int, input_func)
    return OrderRequest(product_id=product_id, quantity=quantity)


def fulfill_order(conn, request, outcome):
    """
    Writes the new stock level, records the sale and tells the customer the cost.
    """
    apply_order(conn, request.product_id, outcome.remaining_stock)
    record_product_sale(conn, request.product_id, outcome.total_cost)
    logger.info(
        f"Fulfilled order for {request.quantity} x product {request.product_id} "
        f"totalling {outcome.total_cost}; {outcome.remaining_stock} left."
    )
    print(f"\nThe cost of your order is: {format_money(outcome.total_cost)}")


def decline_order():
    print("\nInsufficient quantity!")


def process_order(conn, request):
    """
    Evaluates one order and either fulfills or declines it.

    Returns:
        OrderOutcome: The evaluation result.

    Raises:
        ProductNotFoundError: If the product id matches no row.
        StorageError: If any read or write fails.
    """
    outcome = evaluate_order(conn, request)
    if outcome.accepted:
        fulfill_order(conn, request, outcome)
    else:
        decline_order()
    return outcome


def run_session(conn, input_func=None):
    """
    Runs the customer session until the customer declines to place another order.
    """
    catalog = show_catalog(conn)
    if not catalog:
        print("\nNo products are currently available.")
        return

    max_product_id = max(product['item_id'] for product in catalog)

    while True:
        request = collect_order(max_product_id, input_func)
        try:
            process_order(conn, request)
        except ProductNotFoundError as e:
            logger.warning(str(e))
            print(f"\n{e}")

        if not confirm("Would you like to place another order?", input_func=input_func):
            return


# =====================================================================================
# --- Script Execution ---
# =====================================================================================

def main():
    run_tool('bamazon_customer', "Welcome to BAMazon", run_session)


if __name__ == '__main__':
    main()
