"""
Reads expressions in prefix notation, like this:

	(+ 3 4)
	(&& (> x 0) (/ 1 x))
	({ a b . (* a b) } 6 7)
	(== name "Sophie")

Bare operator symbols resolve through the primitive registry, not through
any environment. Everything else that is not a number or a quoted text is
an identifier, to be looked up when the expression is evaluated.

The reader only builds trees. It never evaluates anything.
"""
import re
from typing import Optional
from . import syntax
from .primitive import PRIMS

_NUMBER = re.compile(r"[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?$")
_DELIMITERS = frozenset("(){}")
QUOTES = "\"'"

class SyntaxFault(Exception):
	""" Carries a message and the offset into the text where things went wrong. """
	def __init__(self, message:str, offset:int):
		super().__init__(message, offset)
		self.message, self.offset = message, offset
	def __str__(self): return "%s at offset %d" % (self.message, self.offset)

class Cursor:
	""" The lexical side of the reader: a position within some text. """
	def __init__(self, text:str):
		self.text = text
		self.position = 0

	def skip_ws(self):
		text, pos = self.text, self.position
		while pos < len(text) and text[pos].isspace(): pos += 1
		self.position = pos

	def peek(self) -> Optional[str]:
		self.skip_ws()
		return self.text[self.position] if self.position < len(self.text) else None

	def advance(self) -> str:
		c = self.text[self.position]
		self.position += 1
		return c

	def token(self) -> str:
		""" Pull the next run of characters up to whitespace or a bracket. """
		self.skip_ws()
		text, start = self.text, self.position
		pos = start
		while pos < len(text) and not text[pos].isspace() and text[pos] not in _DELIMITERS:
			pos += 1
		if pos == start:
			raise SyntaxFault("Expected a word here", start)
		self.position = pos
		return text[start:pos]

	def match(self, c:str) -> str:
		""" Consume through the next `c`, returning whatever came before it. """
		end = self.text.find(c, self.position)
		if end < 0:
			raise SyntaxFault("Missing closing %s" % c, self.position - 1)
		found = self.text[self.position:end]
		self.position = end + 1
		return found

	def span_from(self, start:int) -> slice:
		return slice(start, self.position)

###############################################################################

def parse(text:str) -> syntax.Node:
	""" Read exactly one expression; anything left over is an error. """
	cursor = Cursor(text)
	if cursor.peek() is None:
		raise SyntaxFault("There is no expression here", cursor.position)
	node = read_expr(cursor)
	if cursor.peek() is not None:
		raise SyntaxFault("Unexpected text after the expression", cursor.position)
	return node

def read_expr(cursor:Cursor) -> syntax.Node:
	c = cursor.peek()
	start = cursor.position
	if c is None:
		raise SyntaxFault("Ran out of text", start)
	if c == '(':
		cursor.advance()
		return _read_call(cursor, start)
	if c == '{':
		cursor.advance()
		return _read_lambda(cursor, start)
	if c in ')}':
		raise SyntaxFault("Unbalanced %s" % c, start)
	if c in QUOTES:
		cursor.advance()
		token = cursor.match(c)
		return syntax.Text(token, cursor.span_from(start))
	return _read_word(cursor.token(), cursor.span_from(start))

def _read_word(token:str, span:slice) -> syntax.Node:
	if token in PRIMS: return PRIMS[token]
	if _NUMBER.match(token): return syntax.Number(token, span)
	return syntax.Identifier(token, span)

def _read_call(cursor:Cursor, start:int) -> syntax.Call:
	items = []
	while True:
		c = cursor.peek()
		if c is None:
			raise SyntaxFault("This parenthesis is never closed", start)
		if c == ')':
			break
		items.append(read_expr(cursor))
	cursor.advance()
	if not items:
		raise SyntaxFault("Empty parentheses apply nothing", start)
	return syntax.Call(items, cursor.span_from(start))

def _read_lambda(cursor:Cursor, start:int) -> syntax.Lambda:
	params = []
	while True:
		if cursor.peek() is None:
			raise SyntaxFault("This brace is never closed", start)
		at = cursor.position
		word = cursor.token()
		if word == '.':
			break
		if word in PRIMS or _NUMBER.match(word) or word[0] in QUOTES:
			raise SyntaxFault("%r cannot be a parameter name" % word, at)
		if word in params:
			raise SyntaxFault("Parameter %r appears twice" % word, at)
		params.append(word)
	body = read_expr(cursor)
	if cursor.peek() != '}':
		raise SyntaxFault("Expected } to close the function", cursor.position)
	cursor.advance()
	return syntax.Lambda(params, body, cursor.span_from(start))
