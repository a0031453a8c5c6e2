"""
This is an interpreter for Currents expressions.

{0}

For example:

    currents "(+ 3 4)"

will print 7.

    currents -D x=2 "(&& (> x 0) (/ 1 x))"

binds x before evaluating, and

    currents -h

will explain all the arguments.
"""
import sys, argparse
from pathlib import Path

from .values import Num, Str, VALUE

GLOBALS = {
	"true": Num(1.0),
	"false": Num(0.0),
	"NaN": Num(float("nan")),
}

parser = argparse.ArgumentParser(
	prog="currents",
	description="Interpreter for Currents prefix expressions.",
)
parser.add_argument("expression", nargs="?", help='try "(+ 3 4)" for example.')
parser.add_argument('-f', "--file", type=Path, help="Read the expression from this file instead.")
parser.add_argument('-D', "--define", action="append", default=[], metavar="NAME=VALUE", help="Bind a number or 'quoted text' in the global scope. Repeatable.")
parser.add_argument('-c', "--check", action="store_true", help="Read the expression verbosely but do not evaluate it.")
parser.add_argument('-v', "--verbose", action="count", help="Say more about what is happening.")

def parse_binding(text:str) -> tuple[str, VALUE]:
	name, eq, value = text.partition("=")
	if not (eq and name):
		raise argparse.ArgumentTypeError("Expected NAME=VALUE, not %r" % text)
	if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
		return name, Str(value[1:-1])
	try: return name, Num(float(value))
	except ValueError: raise argparse.ArgumentTypeError("%r is neither a number nor quoted text" % value)

def run(args):
	from .diagnostics import Report
	from .environment import scope_chain
	from .errors import EvaluationError
	from .evaluator import evaluate
	from .reader import parse, SyntaxFault
	report = Report(verbose=args.check or args.verbose)
	if args.file is not None:
		label = str(args.file)
		text = args.file.read_text(encoding="utf-8")
	elif args.expression is not None:
		label, text = "<command line>", args.expression
	else:
		parser.error("Give an expression or a --file.")
	try: bindings = dict(map(parse_binding, args.define))
	except argparse.ArgumentTypeError as ex: parser.error(str(ex))
	report.set_source(text, label)
	try: root = parse(text)
	except SyntaxFault as ex:
		report.syntax_error(ex)
		report.complain_to_console()
		return 1
	except RecursionError:
		report.too_deep()
		report.complain_to_console()
		return 1
	assert report.ok()
	report.info("Read:", root.symbol())
	if args.check:
		print("Looks plausible to me.", file=sys.stderr)
		return 0
	env = scope_chain(bindings, GLOBALS)
	try: result = evaluate(root, env)
	except EvaluationError as ex:
		report.evaluation_error(root, ex)
		report.complain_to_console()
		return 1
	except RecursionError:
		report.too_deep(root)
		report.complain_to_console()
		return 1
	print(result)
	return 0

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
