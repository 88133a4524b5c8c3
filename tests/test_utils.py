import os
import sys
import logging
import tempfile
import unittest
from unittest.mock import patch

# Add the project root to the Python path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from common import utils
from common.display import format_catalog, format_money


class TestSettings(unittest.TestCase):

    def test_get_setting_default_when_missing_or_blank(self):
        with patch.dict(os.environ, {'BAMAZON_TEST_SETTING': '  '}):
            self.assertEqual(utils.get_setting('BAMAZON_TEST_SETTING', 'fallback'), 'fallback')
        with patch.dict(os.environ, {}, clear=True):
            self.assertIsNone(utils.get_setting('BAMAZON_TEST_SETTING'))

    def test_get_int_setting(self):
        with patch.dict(os.environ, {'BAMAZON_LOW_STOCK_THRESHOLD': '12'}):
            self.assertEqual(utils.get_low_stock_threshold(), 12)

    def test_malformed_int_setting_uses_default(self):
        with patch.dict(os.environ, {'BAMAZON_LOW_STOCK_THRESHOLD': 'five'}):
            with self.assertLogs(level='WARNING'):
                self.assertEqual(utils.get_low_stock_threshold(), utils.DEFAULT_LOW_STOCK_THRESHOLD)

    def test_malformed_int_setting_logs_through_module_logger(self):
        with patch.dict(os.environ, {'BAMAZON_LOW_STOCK_THRESHOLD': 'five'}):
            with self.assertLogs('common.utils', level='WARNING') as logs:
                utils.get_low_stock_threshold()
        self.assertIn("BAMAZON_LOW_STOCK_THRESHOLD", logs.output[0])

    def test_db_settings_from_environment(self):
        env = {
            'POSTGRES_DB': 'bamazon_test',
            'POSTGRES_USER': 'clerk',
            'POSTGRES_PASSWORD': 'secret',
            'POSTGRES_HOST': 'db.internal',
            'POSTGRES_PORT': '6543',
        }
        with patch.dict(os.environ, env):
            settings = utils.get_db_settings()
        self.assertEqual(settings, {
            'dbname': 'bamazon_test',
            'user': 'clerk',
            'password': 'secret',
            'host': 'db.internal',
            'port': '6543',
        })

    @patch('common.utils.logging.basicConfig')
    def test_setup_logging_writes_to_log_dir(self, mock_basic_config):
        with tempfile.TemporaryDirectory() as log_dir:
            with patch.dict(os.environ, {'BAMAZON_LOG_DIR': log_dir, 'BAMAZON_LOG_LEVEL': 'info'}):
                utils.setup_logging('bamazon_test')
            handlers = mock_basic_config.call_args.kwargs['handlers']
            file_handler, console_handler = handlers
            self.assertTrue(file_handler.baseFilename.startswith(log_dir))
            self.assertIn('bamazon_test_', os.path.basename(file_handler.baseFilename))
            self.assertEqual(console_handler.level, logging.INFO)
            file_handler.close()


class TestDisplay(unittest.TestCase):

    def test_format_money(self):
        self.assertEqual(format_money(125), "$125.00")
        self.assertEqual(format_money(1234.5), "$1,234.50")

    def test_format_catalog(self):
        table = format_catalog([{'item_id': 3, 'product_name': 'Cast Iron Skillet', 'price': 25}])
        self.assertIn("Product ID", table)
        self.assertIn("Cast Iron Skillet", table)
        self.assertIn("$25.00", table)


if __name__ == '__main__':
    unittest.main()
