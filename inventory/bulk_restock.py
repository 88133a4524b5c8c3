import os
import sys
import argparse

import pandas as pd

# --- Project Path Setup ---
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from common.utils import setup_logging
from database.db_utils import db_session, StorageError
from inventory.db_utils import add_stock


def read_restock_file(file_path, id_column, quantity_column):
    """
    Reads product ids and quantities from a CSV or XLSX file.

    Rows with a missing or non-numeric id or quantity, a fractional value or a
    quantity of zero or less are skipped. Quantities for the same id are summed.

    Returns:
        list[tuple[int, int]]: (item_id, quantity) pairs ordered by id, or None
        if the file cannot be used.
    """
    if not os.path.exists(file_path):
        print(f"ERROR: File not found at {file_path}")
        return None

    try:
        if file_path.endswith('.csv'):
            df = pd.read_csv(file_path)
        elif file_path.endswith('.xlsx'):
            df = pd.read_excel(file_path)
        else:
            print("ERROR: Unsupported file format. Please use a .csv or .xlsx file.")
            return None
    except (OSError, ValueError) as e:
        print(f"ERROR: Failed to read or process the file. Reason: {e}")
        return None

    for column in (id_column, quantity_column):
        if column not in df.columns:
            print(f"ERROR: Column '{column}' not found in the file.")
            return None

    total_rows = len(df)
    df = df[[id_column, quantity_column]].apply(pd.to_numeric, errors='coerce').dropna()
    df = df[(df % 1 == 0).all(axis=1)].astype(int)
    df = df[(df[id_column] > 0) & (df[quantity_column] > 0)]

    skipped = total_rows - len(df)
    if skipped:
        print(f"WARNING: Skipped {skipped} row(s) without a valid product id and positive whole quantity.")

    totals = df.groupby(id_column)[quantity_column].sum()
    return [(int(item_id), int(quantity)) for item_id, quantity in totals.items()]


def main():
    """
    Main function to run the bulk restock workflow.
    """
    parser = argparse.ArgumentParser(description="Add stock for many BAMazon products from a file.")
    parser.add_argument("file_path", type=str, help="Path to the CSV or XLSX file containing the restock lines.")
    parser.add_argument(
        "--id-column",
        type=str,
        default='item_id',
        help="The name of the column containing the product ids (default: 'item_id')."
    )
    parser.add_argument(
        "--quantity-column",
        type=str,
        default='quantity',
        help="The name of the column containing the units to add (default: 'quantity')."
    )
    args = parser.parse_args()

    logger = setup_logging('bamazon_bulk_restock')

    restock_lines = read_restock_file(args.file_path, args.id_column, args.quantity_column)
    if restock_lines is None:
        sys.exit(1)

    print(f"--- Starting Bulk Restock for {len(restock_lines)} products from {args.file_path} ---")

    restocked = []
    missing = []
    with db_session() as conn:
        if not conn:
            print("CRITICAL: Cannot proceed without a database connection.")
            sys.exit(1)
        try:
            for item_id, quantity in restock_lines:
                if add_stock(conn, item_id, quantity):
                    restocked.append(item_id)
                    print(f"INFO: Added {quantity} units to product {item_id}.")
                else:
                    missing.append(item_id)
                    print(f"WARNING: No product found with ID {item_id}.")
        except StorageError as e:
            print(f"CRITICAL: {e}")
            logger.critical(f"Bulk restock aborted after {len(restocked)} products: {e}")
            sys.exit(1)

    logger.info(f"Bulk restock from {args.file_path}: {len(restocked)} restocked, {len(missing)} not found.")
    print(f"\n--- Bulk Restock Finished: {len(restocked)} restocked, {len(missing)} not found ---")


if __name__ == '__main__':
    main()
