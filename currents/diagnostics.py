"""
Explaining what went wrong, with pictures of the source text.

The evaluator itself never reports anything: it raises, and whoever asked
for the evaluation can hand the exception to a Report. The report finds the
relevant bits of the expression and draws them.
"""
import sys, random
from typing import Any, Optional, Sequence
from boozetools.support.failureprone import SourceText, illustration
from boozetools.support.foundation import Visitor

from . import syntax
from .errors import EvaluationError, UnresolvedIdentifier
from .reader import SyntaxFault

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Confound it', 'Crud', 'Curses', "Crikey",
		'Drat', 'Fiddlesticks', 'Gack', 'Good Grief', "Great Scott",
		'Heavens', 'Jeepers', 'Nuts', 'Rats', 'Woe is me',
	]

	resignations = [
		'I am undone.',
		'I cannot continue.',
		'I have no idea what the right answer is.',
		'I need to ask for help.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	""" Collects issues against one piece of source text at a time. """
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues
		self._text = ""
		self._source = SourceText("")
		self._label = None

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)
	@property
	def issues(self): return tuple(self._issues)

	def set_source(self, text:str, label:Optional[str]=None):
		self._text = text
		self._source = SourceText(text, filename=label)
		self._label = label

	def issue(self, it:"Pic"):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def _annotate(self, span:Optional[slice], caption:str="") -> list["Annotation"]:
		if span is None or span.start >= len(self._text): return []
		return [Annotation(self._source, self._label, span, caption)]

	# Methods the reader's caller is likely to call:
	def syntax_error(self, fault:SyntaxFault):
		intro = "Got confused reading the expression: %s." % fault.message
		at = slice(fault.offset, fault.offset+1)
		self.issue(Pic(intro, self._annotate(at, "confused here")))

	# Methods the evaluator's caller is likely to call:
	def evaluation_error(self, root:syntax.Node, ex:EvaluationError):
		if isinstance(ex, UnresolvedIdentifier):
			intro = "I don't see what '%s' refers to." % ex.name
			culprits = Occurrences(lambda n: isinstance(n, syntax.Identifier) and n.name == ex.name, shadowed=ex.name).search(root)
		else:
			intro = str(ex) + "."
			node = ex.node
			if getattr(node, "span", None) is not None:
				culprits = [node]
			else:
				culprits = Occurrences(lambda n: isinstance(n, syntax.Call) and n.callee is node).search(root)
		problem = []
		for c in culprits: problem.extend(self._annotate(c.span))
		self.issue(Pic(intro, problem))

	def too_deep(self, root:Optional[syntax.Node]=None):
		intro = "This expression nests too deeply for me."
		self.issue(Pic(intro, self._annotate(root.span) if root is not None else []))

class Occurrences(Visitor):
	"""
	Find the nodes in a tree which satisfy some predicate, in reading order.
	If `shadowed` names a parameter, the bodies of functions binding it are not searched.
	"""
	def __init__(self, predicate, shadowed:Optional[str]=None):
		self._predicate = predicate
		self._shadowed = shadowed
		self._found = []

	def search(self, root:syntax.Node) -> list[syntax.Node]:
		self._found = []
		self.visit(root)
		return self._found

	def _leaf(self, node:syntax.Node):
		if self._predicate(node): self._found.append(node)

	visit_Number = visit_Text = visit_Identifier = _leaf
	visit_Arithmetic = visit_Relational = visit_ShortCut = visit_IfElse = _leaf

	def visit_Call(self, call:syntax.Call):
		self._leaf(call)
		self.visit(call.callee)
		for arg in call.args: self.visit(arg)

	def visit_Lambda(self, lam:syntax.Lambda):
		self._leaf(lam)
		if self._shadowed not in lam.params:
			self.visit(lam.body)

class Annotation:
	label: Optional[str]
	slice: slice
	caption: str
	def __init__(self, source:SourceText, label:Optional[str], span:slice, caption:str=""):
		self._source = source
		self.label = label
		self.slice = span
		self.caption = caption
	def illustrate(self):
		row, col = self._source.find_row_col(self.slice.start)
		single_line = self._source.line_of_text(row)
		width = max(1, self.slice.stop - self.slice.start)
		return illustration(single_line, col, width, prefix='% 6d |' % row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer:Sequence[str]=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	@property
	def intro(self): return self._intro
	@property
	def annotations(self): return tuple(self._anns)
	def as_text(self):
		lines = [self._intro, ""]
		label = None
		for ann in self._anns:
			if ann.label != label:
				label = ann.label
				lines.append(str(label))
			lines.append(ann.illustrate())
		lines.extend(self._footer)
		return '\n'.join(lines)

def _bemoan(issues:Sequence[Any]):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
