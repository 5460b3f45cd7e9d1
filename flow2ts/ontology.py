"""
These most-fundamental classes are shared by the Flow side and the
TypeScript side of the house, so they live apart from both to avoid
circular imports.
"""
from typing import NamedTuple, Optional

class Phrase:
	"""
	Anything that came out of the parser.
	The parser (or the Babel adapter) fills in the parent link as it
	builds the enclosing node, and a character span if it knows one.
	"""
	parent: Optional["Phrase"] = None
	span: Optional[slice] = None

	def adopt(self, *children):
		""" Make self the parent of each child that is actually present. """
		for child in children:
			if isinstance(child, Phrase):
				child.parent = self

	def ancestry(self):
		""" Yield the chain of enclosing phrases, innermost first. """
		node = self.parent
		while node is not None:
			yield node
			node = node.parent

	def kind(self) -> str: return type(self).__name__

class Comment(NamedTuple):
	""" Comments ride along verbatim; nobody here reads them. """
	value: str
	block: bool = True

class PropertyKey(NamedTuple):
	text: str
	quoted: bool = False  # As in { "foo-bar": T }
	def __repr__(self): return repr(self.text) if self.quoted else self.text
