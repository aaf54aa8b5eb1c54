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
import random
from collections import deque
from typing import List, Optional, Tuple

from returns.maybe import Some
from returns.pipeline import is_successful
from returns.result import Failure, Result, Success

from regular_grammar.exceptions import DeadEndError, DepthExceededError, GenerationError
from regular_grammar.grammar import RegularGrammar
from regular_grammar.symbols import Nonterminal, Production
from regular_grammar.type_defs import ChoiceFunction, SententialForm

logger = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 50


class Generator:
    def __init__(
        self,
        grammar: RegularGrammar,
        choice: Optional[ChoiceFunction[Production]] = None,
        seed: Optional[int] = None,
    ):
        """
        Constructs a generator sampling words from the given grammar by random
        walks: starting at the start symbol, a production for the current
        nonterminal is chosen, its terminal emitted, and the walk continues at
        its nonterminal until a production without nonterminal is chosen.

        Productions are chosen uniformly among all productions for the current
        nonterminal. For our running example, in which :code:`A -> d` and
        :code:`A -> aB` are the only productions for :code:`A`, each of them is
        chosen with probability 0.5.

        >>> from regular_grammar.examples import variant_20
        >>> generator = Generator(variant_20(), seed=20)

        >>> word = generator.generate(50).unwrap()
        >>> word.startswith("d") and word.endswith("d")
        True

        For reproducible derivations, the choice function can be injected. Here,
        we always pick the first candidate:

        >>> generator = Generator(variant_20(), choice=lambda candidates: candidates[0])
        >>> generator.generate(10).unwrap()
        'dd'

        :param grammar: The grammar to sample from.
        :param choice: Picks one element of a non-empty sequence of candidate
            productions. Defaults to :meth:`random.Random.choice`.
        :param seed: The seed of the default random number generator; ignored if
            :code:`choice` is given.
        """

        self.grammar = grammar
        self.choice: ChoiceFunction[Production] = (
            choice if choice is not None else random.Random(seed).choice
        )

    def generate(
        self, max_steps: int = DEFAULT_MAX_STEPS
    ) -> Result[str, GenerationError]:
        """
        Samples one word of the grammar's language.

        The walk applies at most :code:`max_steps` productions. If it does not
        terminate within this budget, a
        :class:`~regular_grammar.exceptions.DepthExceededError` is returned:

        >>> from regular_grammar.examples import variant_20
        >>> generator = Generator(variant_20(), choice=lambda candidates: candidates[-1])
        >>> print(generator.generate(10).failure())
        no word derived within 10 steps (stopped at B)

        Reaching a nonterminal without productions results in a
        :class:`~regular_grammar.exceptions.DeadEndError`:

        >>> grammar = RegularGrammar(["S", "A"], ["a"], "S", ["S -> aA"])
        >>> print(Generator(grammar).generate(10).failure())
        no production for A after 1 step

        Failures are never retried; see :meth:`generate_with_retries`.

        :param max_steps: The maximum number of productions to apply.
        :return: The generated word, or the reason why no word was generated.
        """

        return self.__walk(max_steps).map(
            lambda applied: "".join(production.terminal.value for production in applied)
        )

    def generate_batch(
        self, count: int, max_steps: int = DEFAULT_MAX_STEPS
    ) -> Tuple[Result[str, GenerationError], ...]:
        """
        Samples :code:`count` words independently. A failed sample does not
        abort the batch; there is always one result per requested sample.

        >>> from regular_grammar.examples import variant_20
        >>> results = Generator(variant_20(), seed=1).generate_batch(5, 1)
        >>> len(results)
        5

        >>> all(isinstance(result.failure(), DepthExceededError) for result in results)
        True

        :param count: The number of samples.
        :param max_steps: The step budget of each sample.
        :return: The results, in the order in which they were generated.
        """

        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")

        results = tuple(self.generate(max_steps) for _ in range(count))
        logger.debug(
            "Generated %d of %d samples successfully",
            sum(1 for result in results if is_successful(result)),
            count,
        )

        return results

    def generate_with_retries(
        self, max_steps: int = DEFAULT_MAX_STEPS, attempts: int = 10
    ) -> Result[str, GenerationError]:
        """
        Calls :meth:`generate` until it succeeds, at most :code:`attempts` times.

        Below, the first attempt runs out of steps after choosing :code:`A -> aB`;
        the second one derives :code:`dd`.

        >>> from regular_grammar.examples import variant_20
        >>> choices = iter([0, 1, 0, 0])
        >>> generator = Generator(variant_20(), choice=lambda candidates: candidates[next(choices)])
        >>> generator.generate_with_retries(2, attempts=3).unwrap()
        'dd'

        :param max_steps: The step budget of each attempt.
        :param attempts: The maximum number of attempts.
        :return: The first successful result, or the last failure.
        """

        if attempts < 1:
            raise ValueError(f"attempts must be positive, got {attempts}")

        result = self.generate(max_steps)
        for attempt in range(1, attempts):
            if is_successful(result):
                break

            logger.debug("Attempt %d failed: %s", attempt, result.failure())
            result = self.generate(max_steps)

        return result

    def derive(
        self, max_steps: int = DEFAULT_MAX_STEPS
    ) -> Result[Tuple[SententialForm, ...], GenerationError]:
        """
        Samples one derivation and returns its sentential forms, starting with
        the start symbol and ending with the generated word.

        >>> from regular_grammar.examples import variant_20
        >>> choices = iter([0, 1, 0, 1, 0, 0])
        >>> generator = Generator(variant_20(), choice=lambda candidates: candidates[next(choices)])
        >>> for form in generator.derive(10).unwrap():
        ...     print(form)
        S
        dA
        daB
        dabC
        dabaS
        dabadA
        dabadd

        :param max_steps: The maximum number of productions to apply.
        :return: The sentential forms of the derivation, or the reason why the
            derivation failed.
        """

        return self.__walk(max_steps).map(self.__sentential_forms)

    def enumerate_words(
        self, max_words: int, max_length: int = DEFAULT_MAX_STEPS
    ) -> Tuple[str, ...]:
        """
        Enumerates words of the language exhaustively by a breadth-first search
        over sentential forms. Every distinct sentential form is expanded once,
        with all productions for its nonterminal in declaration order. Forms
        whose terminal prefix is longer than :code:`max_length` are pruned.

        >>> from regular_grammar.examples import variant_20
        >>> Generator(variant_20()).enumerate_words(3)
        ('dd', 'dabcd', 'dabadd')

        >>> Generator(variant_20()).enumerate_words(10, max_length=5)
        ('dd', 'dabcd')

        The enumeration does not use the choice function.

        :param max_words: The maximum number of words to return.
        :param max_length: The maximum length of enumerated words.
        :return: The enumerated words, shortest derivations first.
        """

        if max_words < 0:
            raise ValueError(f"max_words must not be negative, got {max_words}")

        words: List[str] = []
        queue: deque[Tuple[str, Optional[Nonterminal]]] = deque(
            [("", self.grammar.start)]
        )
        seen = set()

        while queue and len(words) < max_words:
            prefix, nonterminal = queue.popleft()
            if nonterminal is None:
                words.append(prefix)
                continue

            productions = self.grammar.productions_for(nonterminal)
            if not productions:
                logger.debug(
                    "Dropping sentential form %s%s (dead end)", prefix, nonterminal
                )

            for production in productions:
                form = (
                    prefix + production.terminal.value,
                    production.successor.value_or(None),
                )
                if len(form[0]) > max_length or form in seen:
                    continue

                seen.add(form)
                queue.append(form)

        return tuple(words)

    def __walk(
        self, max_steps: int
    ) -> Result[Tuple[Production, ...], GenerationError]:
        if max_steps < 0:
            raise ValueError(f"max_steps must not be negative, got {max_steps}")

        current = self.grammar.start
        applied: List[Production] = []
        steps = 0

        while True:
            if steps >= max_steps:
                logger.debug("Step budget of %d exhausted at %s", max_steps, current)
                return Failure(DepthExceededError(current, steps))

            candidates = self.grammar.productions_for(current)
            if not candidates:
                logger.debug("Dead end at %s after %d steps", current, steps)
                return Failure(DeadEndError(current, steps))

            production = self.choice(candidates)
            applied.append(production)

            match production.successor:
                case Some(nonterminal):
                    current = nonterminal
                    steps += 1
                case _:
                    return Success(tuple(applied))

    def __sentential_forms(
        self, applied: Tuple[Production, ...]
    ) -> Tuple[SententialForm, ...]:
        forms = [str(self.grammar.start)]
        prefix = ""
        for production in applied:
            prefix += production.terminal.value
            forms.append(prefix + str(production.successor.value_or("")))

        return tuple(forms)
