import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

import check_wordlists
from game_logic import select_answer, shift_day_key
from support import TODAY, make_config


class TestCheckWordlists(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)

    def run_main(self, config):
        out = io.StringIO()
        with patch("check_wordlists.Config.from_env", return_value=config), \
                patch("check_wordlists.day_key_utc", return_value=TODAY), redirect_stdout(out):
            code = check_wordlists.main()
        return code, out.getvalue()

    def test_reports_counts(self):
        code, output = self.run_main(make_config(self._tmp.name))
        self.assertEqual(code, 0)
        self.assertIn("answers: 3", output)
        self.assertIn("total_allowed: 6", output)
        yesterday = shift_day_key(TODAY, -1)
        expected = select_answer(yesterday, 0, "k1", ["apple", "mango", "grape"])
        self.assertIn(f"Answer for {yesterday}: {expected}", output)
        self.assertIn("changes past answers", output)

    def test_reports_unusable_lists(self):
        config = make_config(self._tmp.name, answers=None)
        self.assertFalse(os.path.exists(config.answers_path))
        code, output = self.run_main(config)
        self.assertEqual(code, 1)
        self.assertIn("Word lists unusable", output)


if __name__ == "__main__":
    unittest.main()
