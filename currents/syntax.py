"""
The set of parse-nodes in simple form.

The reader calls these constructors with the tokens it pulls.
Nodes are inert data: nothing here knows how to evaluate anything.
The evaluator keeps one rule per node class, and a second rule for
each class that can also be applied to arguments.

Every node answers `symbol()`, its canonical short printable form.
For primitives, that same text is the key in the primitive registry.
"""
from typing import Callable, Optional, Sequence
from .values import Num, Str, Fun

class Node:
	""" One step of an expression tree. The span is for diagnostics only. """
	span: Optional[slice] = None
	def symbol(self) -> str: raise NotImplementedError(type(self))
	def __str__(self): return self.symbol()
	def __repr__(self): return "<%s %s>" % (type(self).__name__, self.symbol())

class Literal(Node):
	value: object
	def symbol(self): return str(self.value)

class Number(Literal):
	""" A number. Parsed once, here, from exactly one token. """
	def __init__(self, token:str, span:Optional[slice]=None):
		self.value = Num(float(token))
		self.span = span

class Text(Literal):
	""" A string. The token is the characters between the quotes. """
	def __init__(self, token:str, span:Optional[slice]=None):
		self.value = Str(token)
		self.span = span

class Identifier(Node):
	def __init__(self, name:str, span:Optional[slice]=None):
		assert isinstance(name, str) and name
		self.name = name
		self.span = span
	def symbol(self): return self.name

class Call(Node):
	""" Function application: (callee arg ...) """
	def __init__(self, items:Sequence[Node], span:Optional[slice]=None):
		assert items, "A call needs at least the callee."
		self.callee = items[0]
		self.args = tuple(items[1:])
		self.span = span
	def symbol(self):
		return "(%s)" % " ".join(n.symbol() for n in (self.callee,) + self.args)

class Lambda(Node):
	""" A user-defined function: { param ... . body } """
	def __init__(self, params:Sequence[str], body:Node, span:Optional[slice]=None):
		assert len(set(params)) == len(params), params
		self.params = tuple(params)
		self.body = body
		self.span = span
	def symbol(self):
		return "{%s . %s}" % (" ".join(self.params), self.body.symbol())

###############################################################################

class Primitive(Node):
	"""
	A built-in operation. Execution just returns the function.
	*Application* (not execution) applies the function to the arguments.
	Instances are singletons living in the primitive registry.
	"""
	arity: int
	def __init__(self, glyph:str):
		self.glyph = glyph
		self.fun = Fun(self)
	def symbol(self): return self.glyph

class Arithmetic(Primitive):
	""" Eager: both operands must be numbers. """
	arity = 2
	def __init__(self, glyph:str, op:Callable[[float, float], float]):
		super().__init__(glyph)
		self.op = op

class Relational(Primitive):
	""" Eager. Equality tests also work between two texts. """
	arity = 2
	def __init__(self, glyph:str, op:Callable, compares_text:bool=False):
		super().__init__(glyph)
		self.op = op
		self.compares_text = compares_text

class ShortCut(Primitive):
	"""
	Logical AND / OR. The first operand is always evaluated.
	If `decides` says it settles the question, the second never runs.
	"""
	arity = 2
	def __init__(self, glyph:str, decides:Callable[[float], bool]):
		super().__init__(glyph)
		self.decides = decides

class IfElse(Primitive):
	""" (ifelse test then else) evaluates exactly one of its branches. """
	arity = 3
