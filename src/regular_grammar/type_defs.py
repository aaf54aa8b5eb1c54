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
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")

NonterminalType = str
TerminalType = str

# A sentential form of a right-linear grammar: a terminal prefix, optionally
# followed by a single nonterminal, e.g., "dabC".
SententialForm = str

ChoiceFunction = Callable[[Sequence[T]], T]
