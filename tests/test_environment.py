import unittest

from currents.environment import null_env, scope_chain, InnerEnv
from currents.errors import UnresolvedIdentifier
from currents.evaluator import evaluate
from currents import syntax
from currents.values import Num, Str

class EnvironmentTests(unittest.TestCase):

	def setUp(self) -> None:
		self.outer = {"x": Num(1.0), "y": Num(2.0)}
		self.inner = {"x": Str("inner")}
		self.env = scope_chain(self.inner, self.outer)

	def test_inner_binding_shadows_outer(self):
		self.assertEqual(Str("inner"), self.env.lookup("x"))
		self.assertEqual(Num(2.0), self.env.lookup("y"))

	def test_identifier_node_uses_the_chain(self):
		self.assertEqual(Str("inner"), evaluate(syntax.Identifier("x"), self.env))

	def test_unbound_name_has_no_default(self):
		for env in null_env, self.env:
			with self.subTest(env):
				with self.assertRaises(UnresolvedIdentifier) as cm:
					env.lookup("z")
				self.assertEqual("z", cm.exception.name)

	def test_scopes_do_not_follow_later_changes(self):
		self.inner["x"] = Num(99.0)
		self.inner["w"] = Num(0.0)
		self.assertEqual(Str("inner"), self.env.lookup("x"))
		with self.assertRaises(UnresolvedIdentifier):
			self.env.lookup("w")

	def test_bindings_are_read_only(self):
		assert isinstance(self.env, InnerEnv)
		with self.assertRaises(TypeError):
			self.env.bindings["x"] = Num(3.0)  # NOQA

	def test_child_scope(self):
		child = self.env.child({"y": Num(7.0)})
		self.assertEqual(Num(7.0), child.lookup("y"))
		self.assertEqual(Num(2.0), self.env.lookup("y"))

if __name__ == '__main__':
	unittest.main()
