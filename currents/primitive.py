"""
Build the primitive namespace.

Every built-in operator is one singleton node, entered here under its
canonical symbol. Those symbols are what source text must spell exactly,
so changing one breaks every expression that uses it.

The table fills up once, while this module is imported, and is sealed
before anyone else can see it. After that it is safe to read from as
many simultaneous evaluations as you like.
"""
import math
import operator
from types import MappingProxyType
from typing import Mapping

from .syntax import Primitive, Arithmetic, Relational, ShortCut, IfElse
from .values import is_true

_registry: dict[str, Primitive] = {}
_sealed = False

PRIMS: Mapping[str, Primitive] = MappingProxyType(_registry)

def _install(prim:Primitive) -> Primitive:
	if _sealed:
		raise RuntimeError("The primitive registry is sealed; cannot add %r." % prim.symbol())
	assert prim.symbol() not in _registry, prim.symbol()
	_registry[prim.symbol()] = prim
	return prim

def lookup_primitive(glyph:str) -> Primitive:
	return PRIMS[glyph]

###############################################################################

def _divide(a:float, b:float) -> float:
	# Double-precision semantics: no exceptions, just infinities and NaN.
	try: return a / b
	except ZeroDivisionError:
		if a == 0 or math.isnan(a): return math.nan
		return math.copysign(math.inf, a) * math.copysign(1.0, b)

def _and(a:float, b:float) -> float:
	if a == 0 or b == 0: return 0.0
	if math.isnan(a) or math.isnan(b): return math.nan
	return 1.0

def _or(a:float, b:float) -> float:
	if is_true(a) or is_true(b): return 1.0
	if math.isnan(a) or math.isnan(b): return math.nan
	return 0.0

# Math ops
AND = _install(Arithmetic("&", _and))
DIV = _install(Arithmetic("/", _divide))
MUL = _install(Arithmetic("*", operator.mul))
OR = _install(Arithmetic("|", _or))
PLUS = _install(Arithmetic("+", operator.add))
SUB = _install(Arithmetic("-", operator.sub))

# Relational
GE = _install(Relational(">=", operator.ge))
GT = _install(Relational(">", operator.gt))
LE = _install(Relational("<=", operator.le))
LT = _install(Relational("<", operator.lt))
EQ = _install(Relational("==", operator.eq, compares_text=True))
NE = _install(Relational("!=", operator.ne, compares_text=True))

# Logical - includes short-circuit evaluation
LAND = _install(ShortCut("&&", lambda d: d == 0))
LOR = _install(ShortCut("||", is_true))

# Conditional - evaluates only one branch
IFELSE = _install(IfElse("ifelse"))

_sealed = True
