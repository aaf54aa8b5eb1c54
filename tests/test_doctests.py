import doctest
import unittest

from regular_grammar import examples, generator, grammar, helpers, symbols


class TestDocstrings(unittest.TestCase):
    def test_symbols(self):
        doctest_results = doctest.testmod(m=symbols)
        self.assertFalse(doctest_results.failed)

    def test_helpers(self):
        doctest_results = doctest.testmod(m=helpers)
        self.assertFalse(doctest_results.failed)

    def test_grammar(self):
        doctest_results = doctest.testmod(m=grammar)
        self.assertFalse(doctest_results.failed)

    def test_generator(self):
        doctest_results = doctest.testmod(m=generator)
        self.assertFalse(doctest_results.failed)

    def test_examples(self):
        doctest_results = doctest.testmod(m=examples)
        self.assertFalse(doctest_results.failed)


if __name__ == "__main__":
    unittest.main()
