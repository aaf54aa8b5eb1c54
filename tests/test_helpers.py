import unittest

from regular_grammar import MalformedGrammarError, Nonterminal, Terminal
from regular_grammar.helpers import parse_grammar, parse_rule


class TestParseRule(unittest.TestCase):
    def test_single_terminal(self):
        (production,) = parse_rule("A -> d")

        self.assertEqual(Nonterminal("A"), production.lhs)
        self.assertEqual((Terminal("d"),), production.rhs)
        self.assertTrue(production.is_final)

    def test_terminal_and_nonterminal(self):
        (production,) = parse_rule("S->dA")

        self.assertEqual((Terminal("d"), Nonterminal("A")), production.rhs)
        self.assertEqual(Nonterminal("A"), production.successor.unwrap())

    def test_multi_character_nonterminal(self):
        (production,) = parse_rule("Start -> a Rest")
        self.assertEqual((Terminal("a"), Nonterminal("Rest")), production.rhs)

    def test_alternatives(self):
        self.assertEqual(
            ["C -> cA", "C -> aS"],
            [str(production) for production in parse_rule("C → cA | aS")],
        )

    def test_missing_arrow(self):
        with self.assertRaises(MalformedGrammarError):
            parse_rule("A dA")

    def test_empty_alternative(self):
        with self.assertRaises(MalformedGrammarError):
            parse_rule("A -> d |")


class TestParseGrammar(unittest.TestCase):
    def test_declarations_are_optional(self):
        declaration = parse_grammar("S -> aS\nS -> b\n")

        self.assertIsNone(declaration.nonterminals)
        self.assertIsNone(declaration.terminals)
        self.assertIsNone(declaration.start)
        self.assertEqual(2, len(declaration.productions))

    def test_declarations(self):
        declaration = parse_grammar("N = S A\nT = a, b\nS = S\n# comment\nS -> aA\nA -> b")

        self.assertEqual(("S", "A"), declaration.nonterminals)
        self.assertEqual(("a", "b"), declaration.terminals)
        self.assertEqual("S", declaration.start)

    def test_single_start_symbol(self):
        with self.assertRaisesRegex(MalformedGrammarError, "line 1"):
            parse_grammar("S = S A")

    def test_error_reports_line_number(self):
        with self.assertRaisesRegex(MalformedGrammarError, "line 3"):
            parse_grammar("S -> aA\n\nA ->")


if __name__ == "__main__":
    unittest.main()
