"""
Simplest possible environment concept.

This is the canonical list-structured search: each scope knows its own
bindings and a static link to the next scope out. The first scope that
binds a name wins, so inner bindings shadow outer ones.

The evaluator only ever reads an environment. Whoever runs call frames
makes new scopes with `child` rather than mutating an existing one.
"""
from types import MappingProxyType
from typing import Mapping
import abc

from .errors import UnresolvedIdentifier
from .values import VALUE

class Environment(abc.ABC):
	@abc.abstractmethod
	def lookup(self, name:str) -> VALUE:
		pass

	def child(self, bindings:Mapping[str, VALUE]) -> "Environment":
		return InnerEnv(bindings, self)

class NullEnv(Environment):
	""" The outermost scope binds nothing at all. """
	def lookup(self, name:str) -> VALUE:
		raise UnresolvedIdentifier(name)
	def __repr__(self): return "<NullEnv>"

null_env = NullEnv()

class InnerEnv(Environment):
	def __init__(self, bindings:Mapping[str, VALUE], static_link:Environment):
		assert isinstance(static_link, Environment), type(static_link)
		self._bindings = MappingProxyType(dict(bindings))
		self._static_link = static_link

	@property
	def bindings(self) -> Mapping[str, VALUE]: return self._bindings

	def lookup(self, name:str) -> VALUE:
		if name in self._bindings: return self._bindings[name]
		return self._static_link.lookup(name)

	def __repr__(self): return "<InnerEnv %s>" % ", ".join(self._bindings)

def scope_chain(*scopes:Mapping[str, VALUE]) -> Environment:
	""" Build an environment from scopes listed innermost first. """
	env = null_env
	for bindings in reversed(scopes):
		env = env.child(bindings)
	return env
