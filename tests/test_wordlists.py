import os
import tempfile
import unittest

from errors import ConfigurationError
from support import write_lines
from wordlists import WordlistLoader, normalize_lines


class TestNormalizeLines(unittest.TestCase):

    def test_trims_lowercases_and_filters(self):
        text = "  Apple \nMANGO\r\n\nbanana\nab\nx-ray\ngr4pe\ncrane\napple\n"
        self.assertEqual(normalize_lines(text, 5), ["apple", "mango", "crane"])

    def test_respects_word_length(self):
        self.assertEqual(normalize_lines("cat\ndog\napple\n", 3), ["cat", "dog"])

    def test_empty_text(self):
        self.assertEqual(normalize_lines("", 5), [])
        self.assertEqual(normalize_lines(None, 5), [])


class TestWordlistLoader(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.answers_path = os.path.join(self._tmp.name, "answers.txt")
        self.guesses_path = os.path.join(self._tmp.name, "guesses.txt")
        write_lines(self.answers_path, ["Apple", "mango", "mango", "grape"])
        write_lines(self.guesses_path, ["crane", "slate", "crane", "toolong"])

    def loader(self, cache=True):
        return WordlistLoader(self.answers_path, self.guesses_path, word_length=5, cache=cache)

    def test_load_builds_deduplicated_sets(self):
        words = self.loader().load()
        self.assertEqual(words.answers, ("apple", "mango", "grape"))
        self.assertEqual(words.guesses, ("crane", "slate"))
        self.assertEqual(words.word_length, 5)
        self.assertEqual(words.counts, {"answers": 3, "guesses": 2, "total_allowed": 5})
        self.assertEqual(words.paths["answers"], self.answers_path)

    def test_answers_are_always_allowed_guesses(self):
        words = self.loader().load()
        self.assertTrue(set(words.answers) <= words.allowed_guesses)
        self.assertTrue(words.is_allowed("mango"))
        self.assertTrue(words.is_allowed("crane"))
        self.assertFalse(words.is_allowed("zzzzz"))

    def test_missing_answers_file_is_configuration_error(self):
        os.remove(self.answers_path)
        with self.assertRaises(ConfigurationError):
            self.loader().load()

    def test_answers_without_valid_words_is_configuration_error(self):
        write_lines(self.answers_path, ["", "toolong", "abc"])
        with self.assertRaises(ConfigurationError):
            self.loader().load()

    def test_missing_guesses_file_is_tolerated(self):
        os.remove(self.guesses_path)
        with self.assertLogs("wordlists", level="WARNING"):
            words = self.loader().load()
        self.assertEqual(words.guesses, ())
        self.assertEqual(words.allowed_guesses, frozenset(words.answers))

    def test_cached_mode_keeps_first_load_until_reload(self):
        loader = self.loader(cache=True)
        first = loader.load()
        write_lines(self.answers_path, ["lemon"])
        self.assertIs(loader.load(), first)

        reloaded = loader.reload()
        self.assertEqual(reloaded.answers, ("lemon",))
        self.assertIs(loader.load(), reloaded)

    def test_uncached_mode_reads_every_call(self):
        loader = self.loader(cache=False)
        first = loader.load()
        write_lines(self.answers_path, ["lemon"])
        second = loader.load()
        self.assertEqual(first.answers, ("apple", "mango", "grape"))
        self.assertEqual(second.answers, ("lemon",))
        self.assertIsNot(loader.load(), second)


if __name__ == "__main__":
    unittest.main()
