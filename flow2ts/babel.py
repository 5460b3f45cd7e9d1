"""
Build Flow trees from the JSON that Babel's parser produces.

Parsing is Babel's business. By the time anything arrives here it is a
tree of plain dictionaries, each with a "type" key naming the kind of node.
This module reads the parts of that tree that matter for type annotations,
with one read_ method per Babel node type.

Babel wraps annotations in a "TypeAnnotation" node. Those wrappers carry no
meaning of their own, so they are unwrapped as they are read.
"""
from typing import Optional
from . import flow
from .ontology import Comment, PropertyKey
from .diagnostics import Unsupported

def build(node:dict) -> flow.Phrase:
	return BabelReader().read(node)

class BabelReader:
	def read(self, node:dict) -> flow.Phrase:
		if not isinstance(node, dict) or "type" not in node:
			raise Unsupported("JSON", "Expected a Babel AST node, but got %.60r" % (node,))
		kind = node["type"]
		try: method = getattr(self, "read_"+kind)
		except AttributeError:
			raise Unsupported(kind, "There is no translation for FlowType(type=%s)." % kind) from None
		phrase = method(node)
		if phrase.span is None and isinstance(node.get("start"), int) and isinstance(node.get("end"), int):
			phrase.span = slice(node["start"], node["end"])
		return phrase

	def _maybe(self, node:Optional[dict]) -> Optional[flow.Phrase]:
		return None if node is None else self.read(node)

	def _each(self, nodes) -> list[flow.Phrase]:
		return [self.read(n) for n in nodes or ()]

	def read_TypeAnnotation(self, node): return self.read(node["typeAnnotation"])

	def read_AnyTypeAnnotation(self, node): return flow.AnyType()
	def read_BooleanTypeAnnotation(self, node): return flow.BooleanType()
	def read_NumberTypeAnnotation(self, node): return flow.NumberType()
	def read_StringTypeAnnotation(self, node): return flow.StringType()
	def read_VoidTypeAnnotation(self, node): return flow.VoidType()
	def read_MixedTypeAnnotation(self, node): return flow.MixedType()
	def read_EmptyTypeAnnotation(self, node): return flow.EmptyType()
	def read_ExistsTypeAnnotation(self, node): return flow.ExistsType()
	def read_ThisTypeAnnotation(self, node): return flow.ThisType()
	def read_NullLiteralTypeAnnotation(self, node): return flow.NullLiteral()

	def read_BooleanLiteralTypeAnnotation(self, node): return flow.BooleanLiteral(node["value"])
	def read_NumberLiteralTypeAnnotation(self, node): return flow.NumberLiteral(node["value"])
	def read_StringLiteralTypeAnnotation(self, node): return flow.StringLiteral(node["value"])

	def read_ArrayTypeAnnotation(self, node): return flow.ArrayType(self.read(node["elementType"]))
	def read_TupleTypeAnnotation(self, node):
		# Newer Babel calls the members elementTypes.
		return flow.TupleType(self._each(node.get("types", node.get("elementTypes"))))
	def read_UnionTypeAnnotation(self, node): return flow.UnionType(self._each(node["types"]))
	def read_IntersectionTypeAnnotation(self, node): return flow.IntersectionType(self._each(node["types"]))
	def read_NullableTypeAnnotation(self, node): return flow.NullableType(self.read(node["typeAnnotation"]))
	def read_TypeofTypeAnnotation(self, node): return flow.TypeofType(self.read(node["argument"]))

	def read_GenericTypeAnnotation(self, node):
		instantiation = node.get("typeParameters")
		type_args = None if instantiation is None else self._each(instantiation["params"])
		return flow.GenericType(self._type_name(node["id"]), type_args)

	def _type_name(self, node):
		if node["type"] == "Identifier":
			return _spanned(flow.Name(node["name"]), node)
		if node["type"] == "QualifiedTypeIdentifier":
			q = flow.QualifiedName(self._type_name(node["qualification"]), self._type_name(node["id"]))
			return _spanned(q, node)
		raise Unsupported(node["type"], "Unexpected kind of type name.")

	def read_ObjectTypeAnnotation(self, node):
		return flow.ObjectType(
			self._each(node.get("properties")),
			self._each(node.get("indexers")),
			self._each(node.get("callProperties")),
			exact=bool(node.get("exact")),
		)

	def read_ObjectTypeProperty(self, node):
		return flow.ObjectTypeProperty(
			_property_key(node["key"]),
			self.read(node["value"]),
			optional=bool(node.get("optional")),
			variance=_variance(node.get("variance")),
			leading_comments=_comments(node.get("leadingComments")),
			inner_comments=_comments(node.get("innerComments")),
			trailing_comments=_comments(node.get("trailingComments")),
		)

	def read_ObjectTypeSpreadProperty(self, node):
		return flow.ObjectTypeSpreadProperty(self.read(node["argument"]))

	def read_ObjectTypeIndexer(self, node):
		id = node.get("id")
		return flow.ObjectTypeIndexer(
			None if id is None else id["name"],
			self.read(node["key"]),
			self.read(node["value"]),
			variance=_variance(node.get("variance")),
		)

	def read_ObjectTypeCallProperty(self, node):
		return flow.ObjectTypeCallProperty(self.read(node["value"]), static=bool(node.get("static")))

	def read_FunctionTypeAnnotation(self, node):
		return flow.FunctionType(
			self._each(node.get("params")),
			self._maybe(node.get("returnType")),
			rest=self._maybe(node.get("rest")),
			type_params=self._type_params(node.get("typeParameters")),
		)

	def read_FunctionTypeParam(self, node):
		name = node.get("name")
		return flow.FunctionTypeParam(
			None if name is None else name["name"],
			self._maybe(node.get("typeAnnotation")),
			optional=bool(node.get("optional")),
		)

	def _type_params(self, node) -> Optional[list[flow.TypeParameter]]:
		if node is None: return None
		return self._each(node["params"])

	def read_TypeParameter(self, node):
		return flow.TypeParameter(
			node["name"],
			bound=self._maybe(node.get("bound")),
			default=self._maybe(node.get("default")),
			variance=_variance(node.get("variance")),
		)

	# Declarations give nullable types their context.

	def read_Identifier(self, node):
		return flow.Identifier(node["name"], self._maybe(node.get("typeAnnotation")), optional=bool(node.get("optional")))

	def read_RestElement(self, node):
		argument = node["argument"]
		if argument.get("type") != "Identifier":
			raise Unsupported("RestElement", "Only a plain name may follow the dots in a rest parameter.")
		annotation = node.get("typeAnnotation") or argument.get("typeAnnotation")
		return flow.Identifier(argument["name"], self._maybe(annotation))

	def read_FunctionDeclaration(self, node):
		params, rest = [], None
		for p in node.get("params") or ():
			if p.get("type") == "RestElement": rest = self.read(p)
			elif p.get("type") == "Identifier": params.append(self.read(p))
			else: raise Unsupported(p.get("type", "?"), "Only plain parameters are translated, not patterns.")
		id = node.get("id")
		return flow.FunctionDeclaration(
			None if id is None else id["name"],
			params,
			self._maybe(node.get("returnType")),
			rest=rest,
			type_params=self._type_params(node.get("typeParameters")),
		)

def _spanned(phrase, node):
	if isinstance(node.get("start"), int) and isinstance(node.get("end"), int):
		phrase.span = slice(node["start"], node["end"])
	return phrase

def _property_key(node) -> PropertyKey:
	if node["type"] == "Identifier": return PropertyKey(node["name"])
	if node["type"] == "StringLiteral": return PropertyKey(node["value"], quoted=True)
	raise Unsupported(node["type"], "Unexpected kind of property key.")

def _variance(node) -> Optional[str]:
	return None if node is None else node["kind"]

def _comments(nodes) -> list[Comment]:
	return [Comment(c["value"], c.get("type") != "CommentLine") for c in nodes or ()]
