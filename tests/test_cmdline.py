import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from currents import cmdline, diagnostics
from currents.errors import UnresolvedIdentifier, TypeMismatch, WrongArity
from currents.evaluator import evaluate
from currents.environment import null_env
from currents.reader import parse, SyntaxFault

def _run(*argv):
	stdout, stderr = io.StringIO(), io.StringIO()
	with mock.patch("sys.stdout", stdout), mock.patch("sys.stderr", stderr):
		status = cmdline.run(cmdline.parser.parse_args(argv))
	return status, stdout.getvalue(), stderr.getvalue()

class CommandLineTests(unittest.TestCase):

	def test_prints_the_result(self):
		self.assertEqual((0, "7\n", ""), _run("(+ 3 4)"))

	def test_short_circuit(self):
		status, out, err = _run("(&& false (/ 1 0))")
		self.assertEqual(0, status)
		self.assertEqual("0\n", out)

	def test_definitions(self):
		status, out, _ = _run("-D", "x=2", "-D", "s='hi'", "(ifelse (== s \"hi\") (/ 1 x) 0)")
		self.assertEqual(0, status)
		self.assertEqual("0.5\n", out)

	def test_bad_definition(self):
		with mock.patch("sys.stderr", io.StringIO()):
			with self.assertRaises(SystemExit):
				_run("-D", "x", "1")

	def test_check_only(self):
		status, out, err = _run("-c", "(+ x 4)")
		self.assertEqual(0, status)
		self.assertEqual("", out)
		self.assertIn("(+ x 4)", err)

	def test_from_file(self):
		with tempfile.TemporaryDirectory() as folder:
			path = Path(folder) / "expr.txt"
			path.write_text("(* 6\n   7)\n", encoding="utf-8")
			self.assertEqual((0, "42\n", ""), _run("-f", str(path)))

	def test_failures_report_and_return_one(self):
		for text in ["(+ x 4)", "(+ 1", '(< "a" 1)', "(3 4)", "({ a b . a } 1)"]:
			with self.subTest(text):
				status, out, err = _run(text)
				self.assertEqual(1, status)
				self.assertEqual("", out)
				self.assertTrue(err)

	def test_parse_binding(self):
		self.assertEqual(("x", cmdline.Num(2.5)), cmdline.parse_binding("x=2.5"))
		self.assertEqual(("s", cmdline.Str("a b")), cmdline.parse_binding('s="a b"'))

class ReportTests(unittest.TestCase):

	def setUp(self) -> None:
		self.report = diagnostics.Report(max_issues=10)

	def _fail(self, text, kind):
		self.report.set_source(text, "<test>")
		root = parse(text)
		with self.assertRaises(kind) as cm:
			evaluate(root, null_env)
		self.report.evaluation_error(root, cm.exception)
		return self.report.issues[-1]

	def test_unresolved_points_at_each_use(self):
		pic = self._fail("(+ x (* x 2))", UnresolvedIdentifier)
		self.assertIn("'x'", pic.intro)
		self.assertEqual([slice(3, 4), slice(8, 9)], [a.slice for a in pic.annotations])

	def test_unresolved_skips_parameters_of_that_name(self):
		pic = self._fail("(+ x ({ x . x } 1))", UnresolvedIdentifier)
		self.assertEqual([slice(3, 4)], [a.slice for a in pic.annotations])

	def test_closure_arity_points_at_the_function(self):
		pic = self._fail("({ a b . a } 1)", WrongArity)
		self.assertEqual([slice(1, 12)], [a.slice for a in pic.annotations])

	def test_ok_until_an_issue(self):
		self.assertTrue(self.report.ok())
		self.report.too_deep()
		self.assertFalse(self.report.ok())

	def test_mismatch_points_at_call_site(self):
		pic = self._fail('(+ 1 (< "a" 1))', TypeMismatch)
		self.assertEqual([slice(5, 14)], [a.slice for a in pic.annotations])

	def test_syntax_error(self):
		self.report.set_source("(+ 1 2", "<test>")
		with self.assertRaises(SyntaxFault) as cm:
			parse("(+ 1 2")
		self.report.syntax_error(cm.exception)
		self.assertTrue(self.report.sick())
		self.assertIn("never closed", self.report.issues[0].as_text())

	def test_too_many_issues(self):
		report = diagnostics.Report(max_issues=2)
		report.too_deep()
		with self.assertRaises(diagnostics.TooManyIssues):
			report.too_deep()

	def test_occurrences(self):
		root = parse("(+ x ({ x . x } x))")
		finder = diagnostics.Occurrences(lambda n: n.symbol() == "x")
		self.assertEqual(3, len(finder.search(root)))

if __name__ == '__main__':
	unittest.main()
