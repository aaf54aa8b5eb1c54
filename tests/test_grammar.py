import unittest

from regular_grammar import (
    MalformedGrammarError,
    Nonterminal,
    Production,
    RegularGrammar,
    Terminal,
)
from regular_grammar.examples import VARIANT_20_RULES, variant_20


class TestRegularGrammar(unittest.TestCase):
    def test_productions_for_keeps_declaration_order(self):
        grammar = variant_20()

        self.assertEqual(
            ["C -> cA", "C -> aS"],
            [str(production) for production in grammar.productions_for("C")],
        )
        self.assertEqual(
            grammar.productions_for("C"), grammar.productions_for(Nonterminal("C"))
        )

    def test_productions_for_undeclared_nonterminal_is_empty(self):
        self.assertEqual((), variant_20().productions_for("X"))

    def test_undeclared_lhs_is_rejected(self):
        with self.assertRaises(MalformedGrammarError):
            RegularGrammar(["S", "A"], ["a", "d"], "S", ["S -> dA", "X -> a"])

    def test_undeclared_rhs_nonterminal_is_rejected(self):
        with self.assertRaises(MalformedGrammarError):
            RegularGrammar(["S"], ["a"], "S", ["S -> aB"])

    def test_undeclared_terminal_is_rejected(self):
        with self.assertRaises(MalformedGrammarError):
            RegularGrammar(["S"], ["a"], "S", ["S -> bS"])

    def test_start_must_be_a_nonterminal(self):
        with self.assertRaises(MalformedGrammarError):
            RegularGrammar(["A"], ["a"], "S", ["A -> a"])

    def test_empty_rhs_is_rejected(self):
        with self.assertRaises(MalformedGrammarError):
            RegularGrammar(["S"], ["a"], "S", [Production(Nonterminal("S"), ())])

        with self.assertRaises(MalformedGrammarError):
            RegularGrammar(["S"], ["a"], "S", ["S -> "])

    def test_non_right_linear_production_is_rejected(self):
        left_linear = Production(Nonterminal("S"), (Nonterminal("S"), Terminal("a")))
        with self.assertRaises(MalformedGrammarError):
            RegularGrammar(["S"], ["a"], "S", [left_linear])

        too_long = Production(
            Nonterminal("S"), (Terminal("a"), Nonterminal("S"), Nonterminal("S"))
        )
        with self.assertRaises(MalformedGrammarError):
            RegularGrammar(["S"], ["a"], "S", [too_long])

    def test_terminals_and_nonterminals_are_disjoint(self):
        with self.assertRaises(MalformedGrammarError):
            RegularGrammar(["S", "a"], ["a"], "S", ["S -> a"])

    def test_terminals_are_single_characters(self):
        with self.assertRaises(MalformedGrammarError):
            RegularGrammar(["S"], ["ab"], "S", [])

    def test_terminal_as_start_is_rejected(self):
        with self.assertRaises(MalformedGrammarError):
            RegularGrammar(["S"], ["a"], Terminal("S"), ["S -> a"])

    def test_terminal_as_nonterminal_is_rejected(self):
        with self.assertRaises(MalformedGrammarError):
            RegularGrammar([Terminal("S")], ["a"], "S", ["S -> a"])

    def test_nonterminal_as_terminal_is_rejected(self):
        with self.assertRaises(MalformedGrammarError):
            RegularGrammar(["S"], [Nonterminal("a")], "S", ["S -> a"])

    def test_non_string_symbols_are_rejected(self):
        with self.assertRaises(MalformedGrammarError):
            RegularGrammar(["S"], [1], "S", ["S -> a"])

    def test_declared_symbols_keep_order_without_duplicates(self):
        grammar = RegularGrammar(
            ["S", "A", "S"], ["b", "a", "b"], "S", ["S -> aA | b"]
        )

        self.assertEqual((Nonterminal("S"), Nonterminal("A")), grammar.nonterminals)
        self.assertEqual((Terminal("b"), Terminal("a")), grammar.terminals)

    def test_list_rhs_keeps_grammar_hashable(self):
        production = Production(Nonterminal("S"), [Terminal("a")])
        grammar = RegularGrammar(["S"], ["a"], "S", [production])

        self.assertEqual((Terminal("a"),), production.rhs)
        self.assertEqual(hash(RegularGrammar.from_rules(["S -> a"])), hash(grammar))
        self.assertEqual({grammar}, {RegularGrammar.from_rules(["S -> a"])})

    def test_nonterminal_without_productions_is_accepted(self):
        grammar = RegularGrammar(["S", "A"], ["a"], "S", ["S -> aA"])
        self.assertEqual((Nonterminal("A"),), grammar.dead_ends())

    def test_grammar_is_read_only(self):
        grammar = variant_20()

        with self.assertRaises(AttributeError):
            grammar.start = Nonterminal("A")

        with self.assertRaises(AttributeError):
            grammar.productions_for("A")[0].lhs = Nonterminal("B")

    def test_from_rules_infers_symbols(self):
        grammar = RegularGrammar.from_rules(VARIANT_20_RULES)

        self.assertEqual(variant_20(), grammar)
        self.assertEqual(hash(variant_20()), hash(grammar))
        self.assertEqual(Nonterminal("S"), grammar.start)
        self.assertEqual(
            {"a", "b", "c", "d"}, {terminal.value for terminal in grammar.terminals}
        )

    def test_from_text(self):
        grammar = RegularGrammar.from_text(
            """
            # Variant 20
            VN = {S, A, B, C}
            VT = {a, b, c, d}
            S = S

            S -> dA
            A -> d | aB
            B -> bC
            C -> cA | aS
            """
        )

        self.assertEqual(variant_20(), grammar)

    def test_from_text_respects_declared_start(self):
        grammar = RegularGrammar.from_text("S = B\nA -> a\nB -> bA")
        self.assertEqual(Nonterminal("B"), grammar.start)

    def test_from_text_rejects_undeclared_symbols(self):
        with self.assertRaises(MalformedGrammarError):
            RegularGrammar.from_text("N = S\nT = a\nS -> aA")

    def test_reachable(self):
        grammar = RegularGrammar.from_rules(["S -> aS | b", "A -> aA"])

        self.assertEqual((Nonterminal("S"),), grammar.reachable())
        self.assertEqual((Nonterminal("A"),), grammar.reachable("A"))
        self.assertEqual(
            (Nonterminal("A"), Nonterminal("B"), Nonterminal("C"), Nonterminal("S")),
            variant_20().reachable("A"),
        )

    def test_str_lists_the_grammar(self):
        self.assertEqual(
            "VN = { S A B C }\n"
            "VT = { a b c d }\n"
            "P:\n"
            "  S -> dA\n"
            "  A -> d\n"
            "  A -> aB\n"
            "  B -> bC\n"
            "  C -> cA\n"
            "  C -> aS\n"
            "S = S",
            str(variant_20()),
        )


if __name__ == "__main__":
    unittest.main()
