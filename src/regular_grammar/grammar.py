# Copyright © 2023 CISPA Helmholtz Center for Information Security.
# Author: Dominic Steinhöfel.
#
# This file is part of RegularGrammar.
#
# RegularGrammar is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# RegularGrammar is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with RegularGrammar.  If not, see <http://www.gnu.org/licenses/>.
import logging
from collections import deque
from typing import Any, Iterable, Mapping, Optional, Tuple

from frozendict import frozendict
from ordered_set import OrderedSet

from regular_grammar.exceptions import MalformedGrammarError
from regular_grammar.helpers import parse_grammar, parse_rule
from regular_grammar.symbols import Nonterminal, Production, Terminal

logger = logging.getLogger(__name__)


class RegularGrammar:
    def __init__(
        self,
        nonterminals: Iterable[str | Nonterminal],
        terminals: Iterable[str | Terminal],
        start: str | Nonterminal,
        productions: Iterable[str | Production],
    ):
        """
        Constructs an immutable right-linear grammar. Every production has the
        form :code:`A -> aB` or :code:`A -> a`, where :code:`a` is a terminal
        character and :code:`A`, :code:`B` are nonterminals.

        In the documentation of this class, we use the following example grammar:

        >>> grammar = RegularGrammar(
        ...     nonterminals=["S", "A", "B", "C"],
        ...     terminals=["a", "b", "c", "d"],
        ...     start="S",
        ...     productions=["S -> dA", "A -> d | aB", "B -> bC", "C -> cA | aS"],
        ... )

        >>> print(grammar)
        VN = { S A B C }
        VT = { a b c d }
        P:
          S -> dA
          A -> d
          A -> aB
          B -> bC
          C -> cA
          C -> aS
        S = S

        Grammars violating a structural invariant are rejected:

        >>> RegularGrammar(["S"], ["a"], "S", ["X -> a"])
        Traceback (most recent call last):
        ...
        regular_grammar.exceptions.MalformedGrammarError: undeclared nonterminal X on the left-hand side of X -> a

        :param nonterminals: The nonterminal symbols (names).
        :param terminals: The terminal symbols (single characters).
        :param start: The start symbol; must be one of the nonterminals.
        :param productions: The productions, as :class:`~regular_grammar.symbols.Production`
            objects or in the textual syntax :code:`A -> dA | d`.
        """

        self.__nonterminals: OrderedSet[Nonterminal] = OrderedSet(
            as_nonterminal(symbol) for symbol in nonterminals
        )
        self.__terminals: OrderedSet[Terminal] = OrderedSet(
            as_terminal(symbol) for symbol in terminals
        )
        self.__start: Nonterminal = as_nonterminal(start)
        self.__productions: Tuple[Production, ...] = tuple(
            production
            for elem in productions
            for production in (parse_rule(elem) if isinstance(elem, str) else [elem])
        )

        self.__check_well_formed()

        self.__index: Mapping[Nonterminal, Tuple[Production, ...]] = frozendict(
            {
                nonterminal: tuple(
                    production
                    for production in self.__productions
                    if production.lhs == nonterminal
                )
                for nonterminal in self.__nonterminals
            }
        )

        # Cache
        self.__hash: Optional[int] = None

        logger.debug(
            "Constructed grammar with %d nonterminals, %d terminals, and %d productions",
            len(self.__nonterminals),
            len(self.__terminals),
            len(self.__productions),
        )

    @classmethod
    def from_rules(
        cls,
        rules: Iterable[str | Production],
        start: Optional[str | Nonterminal] = None,
        nonterminals: Optional[Iterable[str | Nonterminal]] = None,
        terminals: Optional[Iterable[str | Terminal]] = None,
    ) -> "RegularGrammar":
        """
        Constructs a grammar from its productions alone. Undeclared symbol sets
        are inferred from the productions, and the start symbol defaults to the
        left-hand side of the first production.

        >>> grammar = RegularGrammar.from_rules(["S -> aS | b"])
        >>> grammar.start
        Nonterminal(value='S')

        >>> grammar.terminals
        (Terminal(value='a'), Terminal(value='b'))

        >>> RegularGrammar.from_rules([])
        Traceback (most recent call last):
        ...
        regular_grammar.exceptions.MalformedGrammarError: cannot infer the start symbol of a grammar without productions

        :param rules: The productions, in textual syntax or as objects.
        :param start: The start symbol, if it should not be inferred.
        :param nonterminals: The nonterminals, if they should not be inferred.
        :param terminals: The terminals, if they should not be inferred.
        :return: The constructed grammar.
        """

        productions = [
            production
            for rule in rules
            for production in (parse_rule(rule) if isinstance(rule, str) else [rule])
        ]

        if start is None:
            if not productions:
                raise MalformedGrammarError(
                    "cannot infer the start symbol of a grammar without productions"
                )
            start = productions[0].lhs

        if nonterminals is None:
            nonterminals = [as_nonterminal(start)] + [
                Nonterminal(symbol.value)
                for production in productions
                for symbol in (production.lhs,) + production.rhs[1:]
            ]

        if terminals is None:
            terminals = [
                Terminal(production.rhs[0].value)
                for production in productions
                if production.rhs
            ]

        return cls(nonterminals, terminals, start, productions)

    @classmethod
    def from_text(cls, text: str) -> "RegularGrammar":
        """
        Constructs a grammar from the textual grammar format; see
        :func:`~regular_grammar.helpers.parse_grammar`.

        >>> grammar = RegularGrammar.from_text('''
        ... N = S A
        ... T = a b
        ... S -> aA
        ... A -> b
        ... ''')
        >>> len(grammar.productions)
        2

        :param text: The grammar file contents.
        :return: The constructed grammar.
        """

        declaration = parse_grammar(text)
        return cls.from_rules(
            declaration.productions,
            start=declaration.start,
            nonterminals=declaration.nonterminals,
            terminals=declaration.terminals,
        )

    @property
    def nonterminals(self) -> Tuple[Nonterminal, ...]:
        return tuple(self.__nonterminals)

    @property
    def terminals(self) -> Tuple[Terminal, ...]:
        return tuple(self.__terminals)

    @property
    def start(self) -> Nonterminal:
        return self.__start

    @property
    def productions(self) -> Tuple[Production, ...]:
        return self.__productions

    def productions_for(
        self, nonterminal: str | Nonterminal
    ) -> Tuple[Production, ...]:
        """
        Returns the productions for the given nonterminal, in the order in which
        they were declared.

        >>> grammar = RegularGrammar.from_rules(["S -> dA", "A -> d | aB", "B -> b"])
        >>> [str(production) for production in grammar.productions_for("A")]
        ['A -> d', 'A -> aB']

        The result is empty for nonterminals without productions:

        >>> grammar.productions_for("C")
        ()

        :param nonterminal: The nonterminal symbol or its name.
        :return: The productions with :code:`nonterminal` as left-hand side.
        """

        return self.__index.get(as_nonterminal(nonterminal), ())

    def dead_ends(self) -> Tuple[Nonterminal, ...]:
        """
        Returns the declared nonterminals without any production. A random walk
        reaching one of them fails.

        >>> RegularGrammar(["S", "A"], ["a"], "S", ["S -> aA"]).dead_ends()
        (Nonterminal(value='A'),)

        :return: The nonterminals without productions, in declaration order.
        """

        return tuple(
            nonterminal
            for nonterminal in self.__nonterminals
            if not self.__index[nonterminal]
        )

    def reachable(
        self, from_symbol: Optional[str | Nonterminal] = None
    ) -> Tuple[Nonterminal, ...]:
        """
        Computes the nonterminals reachable from :code:`from_symbol` in zero or
        more derivation steps, in breadth-first order.

        >>> grammar = RegularGrammar.from_rules(
        ...     ["S -> dA", "A -> d | aB", "B -> bC", "C -> cA | aS", "D -> d"]
        ... )
        >>> [str(nonterminal) for nonterminal in grammar.reachable()]
        ['S', 'A', 'B', 'C']

        >>> [str(nonterminal) for nonterminal in grammar.reachable("D")]
        ['D']

        :param from_symbol: The nonterminal to start from; the start symbol if
            :code:`None`.
        :return: The reachable nonterminals.
        """

        origin = self.__start if from_symbol is None else as_nonterminal(from_symbol)
        visited = OrderedSet([origin])
        queue = deque([origin])
        while queue:
            nonterminal = queue.popleft()
            for production in self.productions_for(nonterminal):
                successor = production.successor.value_or(None)
                if successor is not None and successor not in visited:
                    visited.add(successor)
                    queue.append(successor)

        return tuple(visited)

    def __check_well_formed(self) -> None:
        """
        Raises a :class:`~regular_grammar.exceptions.MalformedGrammarError` if
        any structural invariant is violated.
        """

        if any(not symbol.value for symbol in self.__nonterminals):
            raise MalformedGrammarError("nonterminal names must not be empty")

        if any(len(symbol.value) != 1 for symbol in self.__terminals):
            raise MalformedGrammarError("terminals must be single characters")

        overlap = {symbol.value for symbol in self.__nonterminals} & {
            symbol.value for symbol in self.__terminals
        }
        if overlap:
            raise MalformedGrammarError(
                "symbols declared both as nonterminal and terminal: "
                + ", ".join(sorted(overlap))
            )

        if self.__start not in self.__nonterminals:
            raise MalformedGrammarError(
                f"start symbol {self.__start} is not a nonterminal"
            )

        for production in self.__productions:
            if production.lhs not in self.__nonterminals:
                raise MalformedGrammarError(
                    f"undeclared nonterminal {production.lhs} on the left-hand side of {production}"
                )

            if not production.rhs:
                raise MalformedGrammarError(
                    f"empty right-hand side for {production.lhs}"
                )

            if len(production.rhs) > 2:
                raise MalformedGrammarError(f"{production} is not right-linear")

            terminal = production.rhs[0]
            if not isinstance(terminal, Terminal) or terminal not in self.__terminals:
                raise MalformedGrammarError(
                    f"{production} does not start with a declared terminal"
                )

            successor = production.successor.value_or(None)
            if successor is not None and (
                not isinstance(successor, Nonterminal)
                or successor not in self.__nonterminals
            ):
                raise MalformedGrammarError(
                    f"{production} does not end with a declared nonterminal"
                )

    def __eq__(self, other: Any) -> bool:
        """
        Two grammars are equal if they declare the same symbol sets and start
        symbol, and the same productions in the same order.

        >>> RegularGrammar.from_rules(["S -> a"]) == RegularGrammar(["S"], ["a"], "S", ["S -> a"])
        True

        >>> RegularGrammar.from_rules(["S -> a"]) == RegularGrammar.from_rules(["S -> b"])
        False
        """

        return (
            isinstance(other, RegularGrammar)
            and set(self.__nonterminals) == set(other.nonterminals)
            and set(self.__terminals) == set(other.terminals)
            and self.__start == other.start
            and self.__productions == other.productions
        )

    def __hash__(self):
        if self.__hash is None:
            self.__hash = hash(
                (
                    frozenset(self.__nonterminals),
                    frozenset(self.__terminals),
                    self.__start,
                    self.__productions,
                )
            )

        return self.__hash

    def __str__(self):
        return "\n".join(
            [
                "VN = { " + " ".join(map(str, self.__nonterminals)) + " }",
                "VT = { " + " ".join(map(str, self.__terminals)) + " }",
                "P:",
            ]
            + [f"  {production}" for production in self.__productions]
            + [f"S = {self.__start}"]
        )

    def __repr__(self):
        return (
            f"RegularGrammar({[str(symbol) for symbol in self.__nonterminals]}, "
            f"{[str(symbol) for symbol in self.__terminals]}, "
            f"{str(self.__start)!r}, "
            f"{[str(production) for production in self.__productions]})"
        )


def as_nonterminal(symbol: str | Nonterminal) -> Nonterminal:
    """
    Converts a name to a nonterminal symbol. Symbols of the wrong kind are rejected:

    >>> as_nonterminal(Terminal("S"))
    Traceback (most recent call last):
    ...
    regular_grammar.exceptions.MalformedGrammarError: expected a nonterminal, got Terminal(value='S')
    """

    if isinstance(symbol, Nonterminal):
        return symbol
    if isinstance(symbol, str):
        return Nonterminal(symbol)

    raise MalformedGrammarError(f"expected a nonterminal, got {symbol!r}")


def as_terminal(symbol: str | Terminal) -> Terminal:
    if isinstance(symbol, Terminal):
        return symbol
    if isinstance(symbol, str):
        return Terminal(symbol)

    raise MalformedGrammarError(f"expected a terminal, got {symbol!r}")
