"""
Console tables for product and department rows.
"""

from tabulate import tabulate


def format_money(amount):
    return f"${amount:,.2f}"


def format_catalog(products):
    """Customer view: id, name and price only."""
    rows = [
        (p['item_id'], p['product_name'], format_money(p['price']))
        for p in products
    ]
    return tabulate(rows, headers=["Product ID", "Product Name", "Price"])


def format_products(products):
    """Manager view, including stock on hand."""
    rows = [
        (p['item_id'], p['product_name'], p['department_name'], format_money(p['price']), p['stock_quantity'])
        for p in products
    ]
    return tabulate(rows, headers=["Product ID", "Product Name", "Department", "Price", "Stock Quantity"])


def format_department_sales(departments):
    rows = [
        (
            d['department_id'],
            d['department_name'],
            format_money(d['over_head_costs']),
            format_money(d['product_sales']),
            format_money(d['total_profit']),
        )
        for d in departments
    ]
    return tabulate(
        rows,
        headers=["Department ID", "Department Name", "Overhead Costs", "Product Sales", "Total Profit"]
    )
