"""
Exception types that abort an evaluation.

None of these are caught anywhere inside the evaluator.
Whoever asked for the evaluation gets to decide what happens next.
"""

class EvaluationError(Exception):
	""" Root of everything that can go wrong while evaluating an expression. """
	node = None

class UnresolvedIdentifier(EvaluationError):
	def __init__(self, name:str):
		super().__init__("Unresolved identifier: %s" % name)
		self.name = name

class NotApplicable(EvaluationError):
	""" Somebody tried to apply a node that has no callable semantics. """
	def __init__(self, node):
		super().__init__("Not a function: %s" % node.symbol())
		self.node = node

class TypeMismatch(EvaluationError):
	def __init__(self, node, values):
		kinds = ", ".join(v.kind() for v in values)
		super().__init__("%s cannot take (%s)" % (node.symbol(), kinds))
		self.node = node
		self.values = tuple(values)

class WrongArity(EvaluationError):
	def __init__(self, node, need:int, got:int):
		plural = '' if need == 1 else 's'
		super().__init__("%s takes %d argument%s, but got %d" % (node.symbol(), need, plural, got))
		self.node = node
		self.need, self.got = need, got
