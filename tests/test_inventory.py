import os
import sys
import unittest
from decimal import Decimal
from unittest.mock import patch, MagicMock

# Add project root to Python path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from inventory import db_utils as inventory_db
from inventory import workflow

MOCK_PRODUCTS = [
    {'item_id': 1, 'product_name': 'Wireless Headphones', 'department_name': 'Electronics',
     'price': Decimal('79.99'), 'stock_quantity': 25, 'product_sales': Decimal('0')},
    {'item_id': 6, 'product_name': 'Field Guide to Birds', 'department_name': 'Books',
     'price': Decimal('22.00'), 'stock_quantity': 3, 'product_sales': Decimal('0')},
]


class TestInventoryDbUtils(unittest.TestCase):

    def setUp(self):
        self.mock_conn = MagicMock()
        self.mock_cursor = MagicMock()
        self.mock_conn.cursor.return_value.__enter__.return_value = self.mock_cursor

    def test_get_catalog_selects_id_name_price(self):
        self.mock_cursor.fetchall.return_value = [{'item_id': 1, 'product_name': 'A', 'price': Decimal('1.00')}]

        catalog = inventory_db.get_catalog(self.mock_conn)

        self.assertEqual(len(catalog), 1)
        query = self.mock_cursor.execute.call_args.args[0]
        self.assertIn("SELECT item_id, product_name, price FROM products", query)

    def test_get_low_inventory_uses_threshold(self):
        self.mock_cursor.fetchall.return_value = [MOCK_PRODUCTS[1]]

        rows = inventory_db.get_low_inventory(self.mock_conn, 5)

        self.assertEqual(rows, [MOCK_PRODUCTS[1]])
        query, params = self.mock_cursor.execute.call_args.args
        self.assertIn("stock_quantity < %s", query)
        self.assertEqual(params, (5,))

    def test_add_stock_is_a_parameterized_increment(self):
        self.mock_cursor.rowcount = 1

        self.assertTrue(inventory_db.add_stock(self.mock_conn, 4, 10))

        self.mock_cursor.execute.assert_called_once_with(
            "UPDATE products SET stock_quantity = stock_quantity + %s WHERE item_id = %s;", (10, 4)
        )
        self.mock_conn.commit.assert_called_once()

    def test_add_stock_reports_missing_product(self):
        self.mock_cursor.rowcount = 0

        self.assertFalse(inventory_db.add_stock(self.mock_conn, 404, 10))

    def test_record_product_sale(self):
        self.mock_cursor.rowcount = 1

        inventory_db.record_product_sale(self.mock_conn, 3, Decimal('125.00'))

        self.mock_cursor.execute.assert_called_once_with(
            "UPDATE products SET product_sales = product_sales + %s WHERE item_id = %s;", (Decimal('125.00'), 3)
        )

    def test_create_product_returns_new_id(self):
        self.mock_cursor.fetchone.return_value = {'item_id': 11}

        item_id = inventory_db.create_product(self.mock_conn, "Kite", "Toys", Decimal('18.00'), 9)

        self.assertEqual(item_id, 11)
        query, params = self.mock_cursor.execute.call_args.args
        self.assertIn("INSERT INTO products", query)
        self.assertEqual(params, ("Kite", "Toys", Decimal('18.00'), 9))
        self.mock_conn.commit.assert_called_once()

    def test_get_max_product_id_of_empty_table(self):
        self.mock_cursor.fetchone.return_value = {'max_id': 0}

        self.assertEqual(inventory_db.get_max_product_id(self.mock_conn), 0)


class TestManagerWorkflow(unittest.TestCase):

    def setUp(self):
        """Set up mock objects for each test."""
        self.mock_conn = MagicMock()

        self.patchers = {
            'get_all_products': patch('inventory.workflow.get_all_products', return_value=MOCK_PRODUCTS),
            'get_low_inventory': patch('inventory.workflow.get_low_inventory', return_value=[MOCK_PRODUCTS[1]]),
            'get_max_product_id': patch('inventory.workflow.get_max_product_id', return_value=10),
            'add_stock': patch('inventory.workflow.add_stock', return_value=True),
            'create_product': patch('inventory.workflow.create_product', return_value=11),
            'get_low_stock_threshold': patch('inventory.workflow.get_low_stock_threshold', return_value=5),
            'print': patch('builtins.print'),
        }
        self.mocks = {name: patcher.start() for name, patcher in self.patchers.items()}
        self.addCleanup(self.stop_all_patchers)

    def stop_all_patchers(self):
        for patcher in self.patchers.values():
            patcher.stop()

    def printed(self):
        return "\n".join(
            " ".join(str(arg) for arg in call.args) for call in self.mocks['print'].call_args_list
        )

    def run_menu(self, answers):
        answers = iter(answers)
        workflow.run_session(self.mock_conn, input_func=lambda prompt: next(answers))

    def test_view_products(self):
        self.run_menu(['1', '5'])

        self.mocks['get_all_products'].assert_called_once_with(self.mock_conn)
        self.assertIn("Wireless Headphones", self.printed())
        self.assertIn("Stock Quantity", self.printed())

    def test_view_low_inventory_uses_configured_threshold(self):
        self.run_menu(['View Low Inventory', 'Exit App'])

        self.mocks['get_low_inventory'].assert_called_once_with(self.mock_conn, 5)
        self.assertIn("Field Guide to Birds", self.printed())

    def test_view_low_inventory_when_none_are_low(self):
        self.mocks['get_low_inventory'].return_value = []

        self.run_menu(['2', '5'])

        self.assertIn("No products have fewer than 5 units in stock.", self.printed())

    def test_add_to_inventory(self):
        self.run_menu(['3', '4', 'ten', '10', '5'])

        self.mocks['add_stock'].assert_called_once_with(self.mock_conn, 4, 10)
        self.assertIn("10 units added to inventory.", self.printed())

    def test_add_to_inventory_for_missing_product(self):
        self.mocks['add_stock'].return_value = False

        self.run_menu(['3', '7', '2', '5'])

        self.assertIn("No product found with ID 7.", self.printed())

    def test_add_new_product(self):
        self.run_menu(['4', 'Kite', 'Toys', '0', '18.00', '9', '5'])

        self.mocks['create_product'].assert_called_once_with(self.mock_conn, 'Kite', 'Toys', Decimal('18.00'), 9)
        self.assertIn("You have added Kite to the store!", self.printed())

    def test_exit_performs_no_queries(self):
        self.run_menu(['5'])

        self.mocks['get_all_products'].assert_not_called()
        self.mocks['add_stock'].assert_not_called()
        self.mocks['create_product'].assert_not_called()


if __name__ == '__main__':
    unittest.main()
