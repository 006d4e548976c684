import io
import os
import shutil
import tempfile
import unittest
import sys
from datetime import datetime
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from PIL import Image

from model import ReceiptGenerator, whole_dollars
from models import CartItem
from products import physical_product, virtual_product
from transactions import Receipt


def _receipt():
    receipt = Receipt("John Doe", 560, 308.0, 868.0, created_at=datetime(2025, 12, 6, 12, 0, 0))
    receipt.add_line(CartItem(virtual_product("E-Book", 30, 10), 2))
    receipt.add_line(CartItem(physical_product("TV", 500, 2, 15.0), 1))
    return receipt


class ReceiptTextTests(unittest.TestCase):
    def test_text_lines(self):
        self.assertEqual(ReceiptGenerator.text_lines(_receipt()), [
            "-- Receipt --",
            "2x E-Book         $60",
            "1x TV             $500",
            "----------------",
            "Subtotal: $560",
            "Shipping: $308",
            "Total: $868",
            "",
        ])

    def test_half_amounts_round_up(self):
        receipt = Receipt("John Doe", 2.5, 8.5, 11.0)
        receipt.add_line(CartItem(virtual_product("Gum", 2.5, 5), 1))
        lines = ReceiptGenerator.text_lines(receipt)
        self.assertIn("1x Gum            $3", lines)
        self.assertIn("Subtotal: $3", lines)
        self.assertIn("Shipping: $9", lines)
        self.assertIn("Total: $11", lines)

    def test_whole_dollars(self):
        self.assertEqual(whole_dollars(0.5), "1")
        self.assertEqual(whole_dollars(1166.0), "1166")
        self.assertEqual(whole_dollars(8.0 + 20.0 * 15.4), "316")
        self.assertEqual(whole_dollars(2.49), "2")

    def test_long_name_not_truncated(self):
        receipt = Receipt("John Doe", 10, 8.0, 18.0)
        receipt.add_line(CartItem(virtual_product("Extra Long Product Name", 10, 1), 1))
        self.assertIn("1x Extra Long Product Name $10", ReceiptGenerator.text_lines(receipt))

    def test_print_receipt_writes_stream(self):
        out = io.StringIO()
        ReceiptGenerator.print_receipt(_receipt(), out=out)
        self.assertTrue(out.getvalue().startswith("-- Receipt --\n"))

    def test_order_number_from_timestamp(self):
        self.assertTrue(_receipt().order_number.startswith("QS-20251206-"))


class ReceiptImageTests(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def test_generate_receipt_creates_png(self):
        png = ReceiptGenerator.generate(_receipt(), self.tmpdir)
        self.assertTrue(os.path.exists(png))
        self.assertTrue(png.endswith('.png'))
        with Image.open(png) as img:
            self.assertEqual(img.width, 600)

    def test_generate_receipt_no_lines(self):
        png = ReceiptGenerator.generate(Receipt("Nobody", 0, 8.0, 8.0), os.path.join(self.tmpdir, 'nested'))
        self.assertTrue(os.path.exists(png))


if __name__ == '__main__':
    unittest.main()
