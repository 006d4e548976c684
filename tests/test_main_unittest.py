import io
import os
import shutil
import tempfile
import unittest
import sys
from datetime import date
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import main
from errors import ErrorKind


TODAY = date(2025, 12, 6)


class DemoTests(unittest.TestCase):
    def _run(self, **kwargs):
        out, err = io.StringIO(), io.StringIO()
        results = main.run_demo(today=TODAY, out=out, err=err, **kwargs)
        return results, out.getvalue(), err.getvalue()

    def test_all_scenarios(self):
        results, out, err = self._run()
        self.assertEqual([r.ok for r in results], [True, False, False, False, True])
        self.assertEqual(
            [r.kind for r in results if not r.ok],
            [ErrorKind.INSUFFICIENT_FUNDS, ErrorKind.CART_EMPTY, ErrorKind.ITEM_EXPIRED],
        )
        self.assertIn("Processing checkout for John Doe...", out)
        self.assertIn("Done. Remaining balance: $834.00", out)
        self.assertIn("Done. Remaining balance: $32.00", out)
        self.assertEqual(err.splitlines(), [
            "[Error] Insufficient funds",
            "[Error] Cart cannot be empty",
            "[Error] Old Milk expired",
        ])

    def test_single_scenario(self):
        results, out, err = self._run(only=3)
        self.assertEqual(len(results), 1)
        self.assertIn("Scenario 3: Empty cart", out)
        self.assertNotIn("Scenario 1", out)

    def test_receipts_written_for_successes(self):
        tmpdir = tempfile.mkdtemp()
        try:
            self._run(receipts_dir=tmpdir)
            self.assertEqual(len([f for f in os.listdir(tmpdir) if f.endswith('.png')]), 2)
        finally:
            shutil.rmtree(tmpdir, ignore_errors=True)

    def test_cli_rejects_bad_date(self):
        with self.assertRaises(SystemExit):
            main.main(['--today', 'yesterday'])


if __name__ == '__main__':
    unittest.main()
