"""
A small tree-walking interpreter for prefix expressions.

	evaluate(node, environment) -> value
	symbol_of(node) -> text
"""
from .evaluator import evaluate, apply, symbol_of
from .primitive import PRIMS, lookup_primitive
from .reader import parse
