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
from regular_grammar.symbols import Nonterminal


class MalformedGrammarError(ValueError):
    """
    Signals that a grammar violates a structural invariant, e.g., a production
    using an undeclared symbol. Raised at construction time; no grammar object
    is created.
    """

    pass


class GenerationError(Exception):
    """
    Signals that a random walk over a grammar did not produce a word. Carries
    the nonterminal at which the walk stopped and the number of steps taken.
    """

    def __init__(self, nonterminal: Nonterminal, steps: int):
        super().__init__(nonterminal, steps)
        self.nonterminal = nonterminal
        self.steps = steps

    def _steps_str(self) -> str:
        return f"{self.steps} step" if self.steps == 1 else f"{self.steps} steps"


class DeadEndError(GenerationError):
    """
    The walk reached a nonterminal without any production.
    """

    def __str__(self):
        return f"no production for {self.nonterminal} after {self._steps_str()}"


class DepthExceededError(GenerationError):
    """
    The walk did not terminate within the step budget.
    """

    def __str__(self):
        return (
            f"no word derived within {self._steps_str()} (stopped at {self.nonterminal})"
        )
