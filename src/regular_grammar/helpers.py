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
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from regular_grammar.exceptions import MalformedGrammarError
from regular_grammar.symbols import Nonterminal, Production, Terminal

RE_RULE = re.compile(r"\s*(?P<lhs>[^\s→]+?)\s*(?:->|→)(?P<rhs>.*)")
RE_DECLARATION = re.compile(r"\s*(?P<kind>VN|VT|N|T|S)\s*=(?P<symbols>.*)")
RE_SEPARATOR = re.compile(r"[\s,{}]+")


def split_alternatives(rhs: str) -> List[str]:
    """
    Splits the right-hand side of a rule at the alternation bars.

    >>> split_alternatives(" dA | d|aB ")
    ['dA', 'd', 'aB']

    :param rhs: The right-hand side of a rule in textual syntax.
    :return: The stripped alternatives, in the original order.
    """

    return [alternative.strip() for alternative in rhs.split("|")]


def parse_rule(rule: str) -> List[Production]:
    """
    Parses a rule in the textual syntax :code:`A -> dA | d` into productions,
    one per alternative. Both :code:`->` and :code:`→` are accepted as arrows.

    >>> [str(production) for production in parse_rule("A -> d | aB")]
    ['A -> d', 'A -> aB']

    The first character of an alternative is its terminal; the remainder, if
    any, is the name of the trailing nonterminal:

    >>> parse_rule("C → aS")[0].rhs
    (Terminal(value='a'), Nonterminal(value='S'))

    Empty alternatives are rejected:

    >>> parse_rule("A -> ")
    Traceback (most recent call last):
    ...
    regular_grammar.exceptions.MalformedGrammarError: empty right-hand side in rule 'A -> '

    :param rule: The rule to parse.
    :return: The productions defined by the rule.
    """

    match = RE_RULE.fullmatch(rule)
    if match is None:
        raise MalformedGrammarError(f"not a production: {rule!r}")

    lhs = Nonterminal(match.group("lhs"))
    productions = []
    for alternative in split_alternatives(match.group("rhs")):
        if not alternative:
            raise MalformedGrammarError(f"empty right-hand side in rule {rule!r}")

        successor = alternative[1:].strip()
        rhs = (Terminal(alternative[0]),) + (
            (Nonterminal(successor),) if successor else ()
        )
        productions.append(Production(lhs, rhs))

    return productions


@dataclass(frozen=True)
class GrammarDeclaration:
    """
    The contents of a grammar file. Symbol sets and the start symbol are
    :code:`None` if the file does not declare them.
    """

    nonterminals: Optional[Tuple[str, ...]]
    terminals: Optional[Tuple[str, ...]]
    start: Optional[str]
    productions: Tuple[Production, ...]


def parse_grammar(text: str) -> GrammarDeclaration:
    """
    Parses the textual grammar format: one production rule per line, optional
    declarations of the nonterminals (:code:`N` or :code:`VN`), terminals
    (:code:`T` or :code:`VT`), and start symbol (:code:`S`), and :code:`#`
    comments.

    >>> declaration = parse_grammar('''
    ... # Variant 20
    ... VN = {S, A, B, C}
    ... VT = {a, b, c, d}
    ... S -> dA
    ... A -> d | aB
    ... ''')

    >>> declaration.nonterminals
    ('S', 'A', 'B', 'C')

    >>> declaration.start is None
    True

    >>> [str(production) for production in declaration.productions]
    ['S -> dA', 'A -> d', 'A -> aB']

    Errors report the offending line:

    >>> parse_grammar("S -> dA\\nS dA")
    Traceback (most recent call last):
    ...
    regular_grammar.exceptions.MalformedGrammarError: line 2: not a production: 'S dA'

    :param text: The grammar file contents.
    :return: The declared symbols and the parsed productions.
    """

    nonterminals: Optional[Tuple[str, ...]] = None
    terminals: Optional[Tuple[str, ...]] = None
    start: Optional[str] = None
    productions: List[Production] = []

    for line_nr, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        try:
            if RE_RULE.fullmatch(line):
                productions.extend(parse_rule(line))
                continue

            declaration = RE_DECLARATION.fullmatch(line)
            if declaration is None:
                raise MalformedGrammarError(f"not a production: {line!r}")

            symbols = tuple(
                symbol
                for symbol in RE_SEPARATOR.split(declaration.group("symbols"))
                if symbol
            )
            match declaration.group("kind"):
                case "N" | "VN":
                    nonterminals = symbols
                case "T" | "VT":
                    terminals = symbols
                case _:
                    if len(symbols) != 1:
                        raise MalformedGrammarError(
                            f"expected one start symbol, got {len(symbols)}"
                        )
                    start = symbols[0]
        except MalformedGrammarError as exc:
            raise MalformedGrammarError(f"line {line_nr}: {exc}") from exc

    return GrammarDeclaration(nonterminals, terminals, start, tuple(productions))
