"""
The run-time values an evaluation can produce.

Numbers and texts play themselves, wrapped just enough to carry a tag.
A function value is a reference to something the evaluator knows how to apply:
either a primitive node or a closure.
"""
import math
from dataclasses import dataclass
from typing import Any, Union

@dataclass(frozen=True)
class Num:
	d: float
	def kind(self): return "number"
	def __str__(self): return render_number(self.d)

@dataclass(frozen=True)
class Str:
	text: str
	def kind(self): return "text"
	def __str__(self):
		""" Quoted so the reader takes it back, unless the text holds both kinds of quote. """
		return ("'%s'" if '"' in self.text else '"%s"') % self.text

@dataclass(frozen=True, eq=False)
class Fun:
	""" Equality is identity of the underlying callable form. """
	node: Any
	def kind(self): return "function"
	def __eq__(self, other): return isinstance(other, Fun) and other.node is self.node
	def __hash__(self): return id(self.node)
	def __str__(self): return self.node.symbol()

VALUE = Union[Num, Str, Fun]

class Closure:
	""" The run-time manifestation of a lambda: a callable form tied to its natal environment. """
	def __init__(self, lam, static_link):
		self.lam = lam
		self.static_link = static_link
	def symbol(self): return self.lam.symbol()
	def __repr__(self): return "<Closure %s>" % self.symbol()

TRUE = Num(1.0)
FALSE = Num(0.0)

def truth(flag:bool) -> Num:
	return TRUE if flag else FALSE

def is_true(d:float) -> bool:
	""" NaN is not true, though it is not zero either. """
	return d != 0 and not math.isnan(d)

def render_number(d:float) -> str:
	if math.isnan(d): return "NaN"
	if math.isinf(d): return "Inf" if d > 0 else "-Inf"
	if d == int(d) and abs(d) < 1e16: return str(int(d))
	return repr(d)
