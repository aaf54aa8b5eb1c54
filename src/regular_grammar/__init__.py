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
from regular_grammar.exceptions import (
    DeadEndError,
    DepthExceededError,
    GenerationError,
    MalformedGrammarError,
)
from regular_grammar.generator import Generator
from regular_grammar.grammar import RegularGrammar
from regular_grammar.symbols import Nonterminal, Production, Symbol, Terminal
