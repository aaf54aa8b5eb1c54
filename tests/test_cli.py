import contextlib
import io
import pathlib
import tempfile
import unittest

from returns.result import Failure, Success

from regular_grammar import DeadEndError, DepthExceededError, Nonterminal
from regular_grammar.cli import format_result, main


def run(*argv: str):
    stdout = io.StringIO()
    stderr = io.StringIO()
    with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
        status = main(list(argv))

    return status, stdout.getvalue().splitlines(), stderr.getvalue()


class TestCli(unittest.TestCase):
    def test_one_line_per_sample(self):
        status, lines, _ = run("--count", "25", "--seed", "1")

        self.assertEqual(0, status)
        self.assertEqual(25, len(lines))
        self.assertTrue(all(line for line in lines))

    def test_failures_are_marked(self):
        status, lines, _ = run("--count", "4", "--max-steps", "0")

        self.assertEqual(0, status)
        self.assertEqual(4, len(lines))
        self.assertTrue(all(line.startswith("!DepthExceededError") for line in lines))

    def test_retries(self):
        status, lines, _ = run(
            "--count", "10", "--max-steps", "2", "--retries", "100", "--seed", "3"
        )

        self.assertEqual(0, status)
        self.assertEqual(["dd"] * 10, lines)

    def test_show_grammar(self):
        _, lines, _ = run("--count", "1", "--show-grammar", "--seed", "0")

        self.assertEqual("VN = { S A B C }", lines[0])
        self.assertEqual("S = S", lines[9])
        self.assertEqual("", lines[10])
        self.assertEqual(12, len(lines))

    def test_enumerate(self):
        _, lines, _ = run("--enumerate", "--count", "3")
        self.assertEqual(["dd", "dabcd", "dabadd"], lines)

    def test_grammar_file(self):
        with tempfile.TemporaryDirectory() as directory:
            path = pathlib.Path(directory) / "grammar.txt"
            path.write_text("S -> aA | b\nA -> a\n", encoding="utf-8")

            status, lines, _ = run("--grammar", str(path), "--enumerate")

        self.assertEqual(0, status)
        self.assertEqual(["b", "aa"], lines)

    def test_malformed_grammar_file(self):
        with tempfile.TemporaryDirectory() as directory:
            path = pathlib.Path(directory) / "grammar.txt"
            path.write_text("N = S\nT = a\nS -> aX\n", encoding="utf-8")

            status, lines, stderr = run("--grammar", str(path))

        self.assertEqual(2, status)
        self.assertEqual([], lines)
        self.assertIn("malformed grammar", stderr)

    def test_missing_grammar_file(self):
        status, _, stderr = run("--grammar", "/nonexistent/grammar.txt")

        self.assertEqual(2, status)
        self.assertIn("cannot read grammar", stderr)

    def test_negative_count(self):
        with self.assertRaises(SystemExit), contextlib.redirect_stderr(io.StringIO()):
            main(["--count", "-1"])

    def test_format_result(self):
        self.assertEqual("dd", format_result(Success("dd")))
        self.assertEqual(
            "!DeadEndError: no production for A after 1 step",
            format_result(Failure(DeadEndError(Nonterminal("A"), 1))),
        )
        self.assertTrue(
            format_result(Failure(DepthExceededError(Nonterminal("S"), 0))).startswith("!")
        )


if __name__ == "__main__":
    unittest.main()
