import os
import sys
import logging

# --- Project Path Setup ---
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from database.db_utils import fetch_all, fetch_one, execute_write, execute_returning

logger = logging.getLogger(__name__)

# =====================================================================================
# --- Product Database Functions ---
# =====================================================================================
# Every function takes an active psycopg2 connection as its first argument and
# raises `database.db_utils.StorageError` if the statement fails.

PRODUCT_COLUMNS = "item_id, product_name, department_name, price, stock_quantity, product_sales"


def get_catalog(conn):
    """
    Retrieves the customer-facing catalog: id, name and price of every product.

    Returns:
        list[dict]: Products ordered by `item_id`.
    """
    return fetch_all(conn, "SELECT item_id, product_name, price FROM products ORDER BY item_id;")


def get_all_products(conn):
    """
    Retrieves every product with its stock quantity, for the manager view.
    """
    return fetch_all(conn, f"SELECT {PRODUCT_COLUMNS} FROM products ORDER BY item_id;")


def get_low_inventory(conn, threshold):
    """
    Retrieves products whose stock quantity is strictly below `threshold`.
    """
    return fetch_all(
        conn,
        f"SELECT {PRODUCT_COLUMNS} FROM products WHERE stock_quantity < %s ORDER BY item_id;",
        (threshold,)
    )


def get_product_by_id(conn, item_id):
    """
    Retrieves a single product.

    Args:
        conn: An active psycopg2 database connection object.
        item_id (int): The product's `item_id`.

    Returns:
        dict or None: The product row, or None if no product has that id.
    """
    return fetch_one(conn, "SELECT * FROM products WHERE item_id = %s;", (item_id,))


def get_max_product_id(conn):
    """Returns the highest `item_id` in the table, or 0 when it is empty."""
    row = fetch_one(conn, "SELECT COALESCE(MAX(item_id), 0) AS max_id FROM products;")
    return row['max_id'] if row else 0


def update_stock_quantity(conn, item_id, stock_quantity):
    """
    Overwrites the stock quantity of a product.

    This is a plain overwrite, not a compare-and-set: the caller is expected to
    have computed `stock_quantity` from a value it read on the same connection.

    Returns:
        bool: True if a row was updated.
    """
    rowcount = execute_write(
        conn,
        "UPDATE products SET stock_quantity = %s WHERE item_id = %s;",
        (stock_quantity, item_id)
    )
    logger.info(f"Product {item_id} stock set to {stock_quantity}.")
    return rowcount > 0


def add_stock(conn, item_id, quantity):
    """
    Increases the stock quantity of a product by `quantity`.

    Returns:
        bool: True if a row was updated, False if no product has that id.
    """
    rowcount = execute_write(
        conn,
        "UPDATE products SET stock_quantity = stock_quantity + %s WHERE item_id = %s;",
        (quantity, item_id)
    )
    if rowcount > 0:
        logger.info(f"Added {quantity} units to product {item_id}.")
    else:
        logger.warning(f"Restock of product {item_id} matched no rows.")
    return rowcount > 0


def record_product_sale(conn, item_id, amount):
    """
    Adds `amount` to the cumulative `product_sales` of a product.
    """
    rowcount = execute_write(
        conn,
        "UPDATE products SET product_sales = product_sales + %s WHERE item_id = %s;",
        (amount, item_id)
    )
    return rowcount > 0


def create_product(conn, product_name, department_name, price, stock_quantity):
    """
    Adds a new product to the 'products' table.

    Args:
        conn: An active psycopg2 database connection object.
        product_name (str): The name shown to customers.
        department_name (str): The department the product is sold under.
        price (Decimal): Unit price.
        stock_quantity (int): Initial stock.

    Returns:
        The integer `item_id` of the new product.
    """
    row = execute_returning(
        conn,
        "INSERT INTO products (product_name, department_name, price, stock_quantity) "
        "VALUES (%s, %s, %s, %s) RETURNING item_id;",
        (product_name, department_name, price, stock_quantity)
    )
    logger.info(f"Created product {row['item_id']} '{product_name}' in {department_name}.")
    return row['item_id']
