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
from regular_grammar.grammar import RegularGrammar

VARIANT_20_RULES = (
    "S -> dA",
    "A -> d",
    "A -> aB",
    "B -> bC",
    "C -> cA",
    "C -> aS",
)


def variant_20() -> RegularGrammar:
    """
    The grammar of lab variant 20 with :code:`VN = {S, A, B, C}`,
    :code:`VT = {a, b, c, d}`, and start symbol :code:`S`.

    >>> grammar = variant_20()
    >>> [str(production) for production in grammar.productions_for("C")]
    ['C -> cA', 'C -> aS']
    """

    return RegularGrammar(
        nonterminals=("S", "A", "B", "C"),
        terminals=("a", "b", "c", "d"),
        start="S",
        productions=VARIANT_20_RULES,
    )
