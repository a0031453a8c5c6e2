"""
The tree-walking evaluator.

There are two things you can do to a node:

	evaluate: produce the value this node denotes.
	apply: invoke a callable form on argument *trees*, not argument values.

A call evaluates its callee and then hands the untouched argument trees to
`apply`, so the callee decides which arguments ever run, and in what order.
Arithmetic and relations run everything left to right. Logical AND/OR and
`ifelse` run only what they need. No thunks are involved: a sub-tree that is
never passed to `evaluate` simply never runs.

Recursion depth follows the nesting depth of the expression. Nothing here
limits it; Python's recursion limit does.
"""
from typing import Sequence
from . import syntax
from .environment import Environment
from .errors import NotApplicable, TypeMismatch, WrongArity
from .values import VALUE, Num, Str, Fun, Closure, truth, is_true

ARGS = Sequence[syntax.Node]

EVALUATE = {}
APPLY = {}

def evaluate(expr:syntax.Node, env:Environment) -> VALUE:
	assert isinstance(env, Environment), env
	try: fn = EVALUATE[type(expr)]
	except KeyError: raise NotImplementedError(type(expr), expr)
	return fn(expr, env)

def apply(callee, env:Environment, args:ARGS) -> VALUE:
	""" Only callable forms have an entry here. Anything else is a badly-built tree. """
	try: fn = APPLY[type(callee)]
	except KeyError: raise NotApplicable(callee)
	return fn(callee, env, args)

def symbol_of(node) -> str:
	return node.symbol()

def _family(cls):
	yield cls
	for sub in cls.__subclasses__():
		yield from _family(sub)

def attach_evaluation_methods(python_scope):
	for _k, _v in list(python_scope.items()):
		if _k.startswith("_eval_"):
			table, param = EVALUATE, "expr"
		elif _k.startswith("_apply_"):
			table, param = APPLY, "fn"
		else:
			continue
		_t = _v.__annotations__[param]
		assert isinstance(_t, type), (_k, _t)
		for _c in _family(_t):
			table.setdefault(_c, _v)

###############################################################################

def _eval_literal(expr:syntax.Literal, env:Environment):
	return expr.value

def _eval_identifier(expr:syntax.Identifier, env:Environment):
	return env.lookup(expr.name)

def _eval_primitive(expr:syntax.Primitive, env:Environment):
	return expr.fun

def _eval_lambda(expr:syntax.Lambda, env:Environment):
	return Fun(Closure(expr, env))

def _eval_call(expr:syntax.Call, env:Environment):
	function = evaluate(expr.callee, env)
	if not isinstance(function, Fun):
		raise NotApplicable(expr.callee)
	return apply(function.node, env, expr.args)

###############################################################################

def _check_arity(fn, need:int, args:ARGS):
	if len(args) != need:
		raise WrongArity(fn, need, len(args))

def _strict_number(fn, expr:syntax.Node, env:Environment) -> float:
	it = evaluate(expr, env)
	if not isinstance(it, Num):
		raise TypeMismatch(fn, (it,))
	return it.d

def _apply_arithmetic(fn:syntax.Arithmetic, env:Environment, args:ARGS):
	_check_arity(fn, fn.arity, args)
	a, b = [evaluate(x, env) for x in args]
	if isinstance(a, Num) and isinstance(b, Num):
		return Num(fn.op(a.d, b.d))
	raise TypeMismatch(fn, (a, b))

def _apply_relational(fn:syntax.Relational, env:Environment, args:ARGS):
	_check_arity(fn, fn.arity, args)
	a, b = [evaluate(x, env) for x in args]
	if isinstance(a, Num) and isinstance(b, Num):
		return truth(fn.op(a.d, b.d))
	if fn.compares_text and isinstance(a, Str) and isinstance(b, Str):
		return truth(fn.op(a.text, b.text))
	raise TypeMismatch(fn, (a, b))

def _apply_short_cut(fn:syntax.ShortCut, env:Environment, args:ARGS):
	_check_arity(fn, fn.arity, args)
	lhs = evaluate(args[0], env)
	if not isinstance(lhs, Num):
		raise TypeMismatch(fn, (lhs,))
	return lhs if fn.decides(lhs.d) else evaluate(args[1], env)

def _apply_if_else(fn:syntax.IfElse, env:Environment, args:ARGS):
	_check_arity(fn, fn.arity, args)
	test, then_part, else_part = args
	sequel = then_part if is_true(_strict_number(fn, test, env)) else else_part
	return evaluate(sequel, env)

def _apply_closure(fn:Closure, env:Environment, args:ARGS):
	lam = fn.lam
	_check_arity(lam, len(lam.params), args)
	actuals = [evaluate(x, env) for x in args]
	inner = fn.static_link.child(dict(zip(lam.params, actuals)))
	return evaluate(lam.body, inner)

attach_evaluation_methods(globals())

assert all(cls in EVALUATE for cls in _family(syntax.Node) if cls is not syntax.Node), \
	"Every kind of node needs an evaluation rule."
