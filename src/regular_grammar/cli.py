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
import argparse
import logging
import pathlib
import sys
from typing import Optional, Sequence

from returns.result import Failure, Result, Success

from regular_grammar.examples import variant_20
from regular_grammar.exceptions import GenerationError, MalformedGrammarError
from regular_grammar.generator import DEFAULT_MAX_STEPS, Generator
from regular_grammar.grammar import RegularGrammar

DEFAULT_COUNT = 15

FAILURE_MARKER = "!"


def format_result(result: Result[str, GenerationError]) -> str:
    match result:
        case Success(word):
            return word
        case Failure(error):
            return f"{FAILURE_MARKER}{type(error).__name__}: {error}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    logger = logging.getLogger("regular_grammar")
    if not logger.handlers:
        logger.addHandler(logging.StreamHandler())

    parser = argparse.ArgumentParser(
        prog="regular-grammar",
        description="Generate random words of a right-linear grammar, one per line. "
        'Failed samples are printed with a leading "!" and the reason of '
        "the failure.",
    )
    parser.add_argument(
        "--grammar",
        type=pathlib.Path,
        help="A grammar file. Defaults to the grammar of lab variant 20.",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=DEFAULT_COUNT,
        help="The number of words to generate.",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=DEFAULT_MAX_STEPS,
        help="The maximum number of productions applied per word.",
    )
    parser.add_argument("--seed", type=int, help="Random seed.")
    parser.add_argument(
        "--retries",
        type=int,
        default=1,
        help="The number of attempts per word before reporting a failure.",
    )
    parser.add_argument(
        "--enumerate",
        action="store_true",
        help="Enumerate the shortest words breadth-first instead of sampling.",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=DEFAULT_MAX_STEPS,
        help="The maximum length of enumerated words.",
    )
    parser.add_argument(
        "--show-grammar",
        action="store_true",
        help="Print the grammar before the words.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log each generation step to stderr.",
    )
    args = parser.parse_args(argv)

    logger.setLevel(logging.DEBUG if args.verbose else logging.WARNING)

    if args.count < 0:
        parser.error("--count must not be negative")
    if args.max_steps < 0:
        parser.error("--max-steps must not be negative")
    if args.retries < 1:
        parser.error("--retries must be positive")

    try:
        if args.grammar is None:
            grammar = variant_20()
        else:
            grammar = RegularGrammar.from_text(
                args.grammar.read_text(encoding="utf-8")
            )
    except OSError as exc:
        print(f"{parser.prog}: cannot read grammar: {exc}", file=sys.stderr)
        return 2
    except MalformedGrammarError as exc:
        print(f"{parser.prog}: malformed grammar: {exc}", file=sys.stderr)
        return 2

    if args.show_grammar:
        print(grammar)
        print()

    generator = Generator(grammar, seed=args.seed)
    if args.enumerate:
        for word in generator.enumerate_words(args.count, max_length=args.max_length):
            print(word)
        return 0

    if args.retries == 1:
        results = generator.generate_batch(args.count, args.max_steps)
    else:
        results = tuple(
            generator.generate_with_retries(args.max_steps, attempts=args.retries)
            for _ in range(args.count)
        )

    for result in results:
        print(format_result(result))

    return 0
