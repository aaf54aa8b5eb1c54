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
from abc import ABC
from dataclasses import dataclass
from typing import Tuple

from returns.maybe import Maybe


@dataclass(frozen=True)
class Symbol(ABC):
    """
    Represents a symbol of a :class:`~regular_grammar.RegularGrammar`. The kind of
    a symbol is given by its class and fixed at creation; a terminal and a
    nonterminal are never equal, even if their values coincide:

    >>> Terminal("a") == Nonterminal("a")
    False

    Abstract base class.
    """

    value: str

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class Terminal(Symbol):
    """
    A terminal symbol, i.e., a single character appearing literally in the
    generated words.

    >>> print(Terminal("d"))
    d
    """

    pass


@dataclass(frozen=True)
class Nonterminal(Symbol):
    """
    A nonterminal symbol, which is rewritten by the productions of the grammar.

    >>> Nonterminal("S")
    Nonterminal(value='S')

    >>> Nonterminal("S") == Nonterminal("S")
    True
    """

    pass


@dataclass(frozen=True)
class Production:
    """
    A right-linear production rule. The right-hand side is either a single
    terminal or a terminal followed by a nonterminal.

    Example:

    >>> production = Production(Nonterminal("A"), (Terminal("a"), Nonterminal("B")))
    >>> print(production)
    A -> aB

    >>> production.terminal
    Terminal(value='a')

    >>> production.successor.unwrap()
    Nonterminal(value='B')

    >>> production.is_final
    False

    A production with only a terminal on its right-hand side ends a derivation:

    >>> final = Production(Nonterminal("A"), (Terminal("d"),))
    >>> final.is_final
    True

    >>> final.successor.value_or(None) is None
    True

    The right-hand side is stored as a tuple:

    >>> Production(Nonterminal("A"), [Terminal("d")]).rhs
    (Terminal(value='d'),)

    The shape of the right-hand side is not checked here; this happens when the
    production is added to a grammar.
    """

    lhs: Nonterminal
    rhs: Tuple[Symbol, ...]

    def __post_init__(self):
        object.__setattr__(self, "rhs", tuple(self.rhs))

    @property
    def terminal(self) -> Terminal:
        return self.rhs[0]

    @property
    def successor(self) -> Maybe[Nonterminal]:
        return Maybe.from_optional(self.rhs[1] if len(self.rhs) > 1 else None)

    @property
    def is_final(self) -> bool:
        return len(self.rhs) == 1

    def __str__(self):
        return f"{self.lhs} -> {''.join(map(str, self.rhs))}"
