# -*- coding: utf-8 -*-
"""
================================================================================
Order Evaluation and Fulfillment
================================================================================
Purpose:
----------------
The decision half of the customer purchase flow.

1.  **Evaluate**: `evaluate_order` reads the requested product and decides
    whether there is enough stock. An order is accepted when the stock on hand
    is greater than or equal to the requested quantity, so buying the last
    unit is allowed. Evaluation only reads; it never writes.
2.  **Apply**: `apply_order` writes the remaining stock computed by the
    evaluation back to the `products` table.

The write is a blind overwrite of `stock_quantity`, not a conditional
decrement. Between the read in step 1 and the write in step 2 nothing else
touches the row as long as the tool is used by one operator over one
connection. Running several purchase sessions against the same database at
once can lose updates.
----------------
"""

import os
import sys
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

# --- Project Path Setup ---
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from inventory.db_utils import get_product_by_id, update_stock_quantity

logger = logging.getLogger(__name__)


class ProductNotFoundError(Exception):
    """Raised when an order names a product id that is not in the database."""

    def __init__(self, product_id):
        super().__init__(f"No product found with ID {product_id}.")
        self.product_id = product_id


@dataclass(frozen=True)
class OrderRequest:
    product_id: int
    quantity: int


@dataclass(frozen=True)
class OrderOutcome:
    accepted: bool
    total_cost: Optional[Decimal] = None
    remaining_stock: Optional[int] = None

    @classmethod
    def declined(cls):
        return cls(accepted=False)


def evaluate_order(conn, request):
    """
    Decides whether an order can be filled from current stock.

    Args:
        conn: An active psycopg2 database connection object.
        request (OrderRequest): The product and quantity asked for.

    Returns:
        OrderOutcome: Accepted with the total cost and the stock that would be
        left, or declined with neither.

    Raises:
        ProductNotFoundError: If no product has `request.product_id`.
        StorageError: If the lookup fails.
    """
    product = get_product_by_id(conn, request.product_id)
    if product is None:
        raise ProductNotFoundError(request.product_id)

    stock_quantity = product['stock_quantity']
    if stock_quantity < request.quantity:
        logger.info(
            f"Declined order for {request.quantity} x product {request.product_id}: only {stock_quantity} in stock."
        )
        return OrderOutcome.declined()

    return OrderOutcome(
        accepted=True,
        total_cost=Decimal(product['price']) * request.quantity,
        remaining_stock=stock_quantity - request.quantity,
    )


def apply_order(conn, product_id, remaining_stock):
    """
    Writes the post-order stock quantity for a product.

    Raises:
        ProductNotFoundError: If the product row is gone by the time of the write.
        StorageError: If the update fails. It is not retried.
    """
    if not update_stock_quantity(conn, product_id, remaining_stock):
        logger.warning(f"Stock update for product {product_id} matched no row.")
        raise ProductNotFoundError(product_id)
