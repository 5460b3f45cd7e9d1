"""
The TypeScript side: type-annotation trees as the translator builds them.

These are value objects. Two of them are equal exactly when they have
the same class and the same key, which is what the tests lean on.
Repr goes through the Render visitor, which writes something close to
TypeScript syntax. That is for the benefit of people reading test output;
producing real program text is the printer's job, elsewhere.
"""
from typing import NamedTuple, Optional, Sequence, Union
from .ontology import Comment, PropertyKey

class Node:
	""" Value objects, so they compare and hash structurally. """
	def visit(self, visitor:"TypeVisitor"): raise NotImplementedError(type(self))

	def __init__(self, *key):
		self._key = key
		self._hash = hash(key)
	def __hash__(self): return self._hash
	def __eq__(self, other): return type(self) is type(other) and self._key == other._key
	def __repr__(self) -> str:
		it = self.visit(Render())
		assert isinstance(it, str), (it, type(self))
		return it

class TSType(Node):
	pass

class Keyword(TSType):
	def __init__(self, name:str):
		self.name = name
		super().__init__(name)
	def visit(self, visitor:"TypeVisitor"): return visitor.on_keyword(self)

ANY = Keyword("any")
BOOLEAN = Keyword("boolean")
NEVER = Keyword("never")
NULL = Keyword("null")
NUMBER = Keyword("number")
STRING = Keyword("string")
UNDEFINED = Keyword("undefined")
UNKNOWN = Keyword("unknown")
VOID = Keyword("void")

class ThisType(TSType):
	def __init__(self): super().__init__()
	def visit(self, visitor:"TypeVisitor"): return visitor.on_this(self)

class LiteralType(TSType):
	def __init__(self, value:Union[bool, int, float, str]):
		self.value = value
		# True == 1 in Python, but not in a type system.
		super().__init__(type(value), value)
	def visit(self, visitor:"TypeVisitor"): return visitor.on_literal(self)

class QualifiedName(NamedTuple):
	left: str
	right: str
	def __str__(self): return "%s.%s" % self

class TypeReference(TSType):
	type_args: Optional[tuple[TSType, ...]]
	def __init__(self, name:Union[str, QualifiedName], type_args:Optional[Sequence[TSType]]=None):
		assert isinstance(name, (str, QualifiedName)), name
		self.name = name
		self.type_args = None if type_args is None else tuple(type_args)
		super().__init__(name, self.type_args)
	def visit(self, visitor:"TypeVisitor"): return visitor.on_reference(self)

class TypeOperator(TSType):
	def __init__(self, operator:str, type_annotation:TSType):
		assert operator in ("keyof", "typeof", "unique", "readonly"), operator
		self.operator, self.type_annotation = operator, type_annotation
		super().__init__(operator, type_annotation)
	def visit(self, visitor:"TypeVisitor"): return visitor.on_operator(self)

class IndexedAccessType(TSType):
	def __init__(self, object_type:TSType, index_type:TSType):
		self.object_type, self.index_type = object_type, index_type
		super().__init__(object_type, index_type)
	def visit(self, visitor:"TypeVisitor"): return visitor.on_indexed_access(self)

class ArrayType(TSType):
	def __init__(self, element:TSType):
		self.element = element
		super().__init__(element)
	def visit(self, visitor:"TypeVisitor"): return visitor.on_array(self)

class Composite(TSType):
	types: tuple[TSType, ...]
	def __init__(self, types:Sequence[TSType]):
		self.types = tuple(types)
		super().__init__(self.types)

class UnionType(Composite):
	def visit(self, visitor:"TypeVisitor"): return visitor.on_union(self)

class IntersectionType(Composite):
	def visit(self, visitor:"TypeVisitor"): return visitor.on_intersection(self)

class TupleType(Composite):
	def visit(self, visitor:"TypeVisitor"): return visitor.on_tuple(self)

#######################################################################

class PropertySignature(Node):
	def __init__(
			self, key:PropertyKey, type_annotation:TSType, optional:bool=False, readonly:bool=False,
			leading_comments:Sequence[Comment]=(), inner_comments:Sequence[Comment]=(), trailing_comments:Sequence[Comment]=(),
	):
		self.key, self.type_annotation = key, type_annotation
		self.optional, self.readonly = bool(optional), bool(readonly)
		self.leading_comments = tuple(leading_comments)
		self.inner_comments = tuple(inner_comments)
		self.trailing_comments = tuple(trailing_comments)
		super().__init__(
			key, type_annotation, self.optional, self.readonly,
			self.leading_comments, self.inner_comments, self.trailing_comments,
		)
	def visit(self, visitor:"TypeVisitor"): return visitor.on_property(self)

class IndexSignature(Node):
	def __init__(self, param_name:str, key_type:TSType, type_annotation:TSType):
		self.param_name, self.key_type, self.type_annotation = param_name, key_type, type_annotation
		super().__init__(param_name, key_type, type_annotation)
	def visit(self, visitor:"TypeVisitor"): return visitor.on_index(self)

class TypeLiteral(TSType):
	members: tuple[Union[PropertySignature, IndexSignature], ...]
	def __init__(self, members:Sequence[Union[PropertySignature, IndexSignature]]):
		self.members = tuple(members)
		super().__init__(self.members)
	def visit(self, visitor:"TypeVisitor"): return visitor.on_type_literal(self)

#######################################################################

class TypeParameter(Node):
	def __init__(self, name:str, constraint:Optional[TSType]=None, default:Optional[TSType]=None):
		self.name, self.constraint, self.default = name, constraint, default
		super().__init__(name, constraint, default)
	def visit(self, visitor:"TypeVisitor"): return visitor.on_type_parameter(self)

class Parameter(Node):
	def __init__(self, name:str, type_annotation:Optional[TSType], optional:bool=False):
		self.name, self.type_annotation, self.optional = name, type_annotation, bool(optional)
		super().__init__(name, type_annotation, self.optional)
	def visit(self, visitor:"TypeVisitor"): return visitor.on_parameter(self)

class RestParameter(Node):
	def __init__(self, name:str, type_annotation:Optional[TSType]):
		self.name, self.type_annotation = name, type_annotation
		super().__init__(name, type_annotation)
	def visit(self, visitor:"TypeVisitor"): return visitor.on_rest(self)

class FunctionType(TSType):
	"""
	The rest-parameter, if any, comes last among the parameters,
	just as it would in a TypeScript signature.
	"""
	type_params: Optional[tuple[TypeParameter, ...]]
	params: tuple[Union[Parameter, RestParameter], ...]
	def __init__(self, type_params:Optional[Sequence[TypeParameter]], params:Sequence[Union[Parameter, RestParameter]], return_type:Optional[TSType]):
		self.type_params = None if type_params is None else tuple(type_params)
		self.params = tuple(params)
		self.return_type = return_type
		super().__init__(self.type_params, self.params, return_type)
	def visit(self, visitor:"TypeVisitor"): return visitor.on_function(self)

#######################################################################

class TypeVisitor:
	def on_keyword(self, k:Keyword): pass
	def on_this(self, t:ThisType): pass
	def on_literal(self, l:LiteralType): pass
	def on_reference(self, r:TypeReference): pass
	def on_operator(self, o:TypeOperator): pass
	def on_indexed_access(self, ia:IndexedAccessType): pass
	def on_array(self, a:ArrayType): pass
	def on_union(self, u:UnionType): pass
	def on_intersection(self, i:IntersectionType): pass
	def on_tuple(self, t:TupleType): pass
	def on_property(self, p:PropertySignature): pass
	def on_index(self, i:IndexSignature): pass
	def on_type_literal(self, tl:TypeLiteral): pass
	def on_type_parameter(self, tp:TypeParameter): pass
	def on_parameter(self, p:Parameter): pass
	def on_rest(self, r:RestParameter): pass
	def on_function(self, f:FunctionType): pass

def _literal_text(value) -> str:
	if isinstance(value, bool): return "true" if value else "false"
	if isinstance(value, str): return '"%s"' % value.replace('\\', '\\\\').replace('"', '\\"')
	return repr(value)

class Render(TypeVisitor):
	""" Return a string representation of the term, approximately as TypeScript would spell it. """
	def _each(self, items, sep=", "): return sep.join(i.visit(self) for i in items)
	def _args(self, args): return "<%s>" % self._each(args) if args else ""
	def _optional(self, flag): return "?" if flag else ""
	def _colon(self, t): return "" if t is None else ": " + t.visit(self)

	def on_keyword(self, k: Keyword): return k.name
	def on_this(self, t: ThisType): return "this"
	def on_literal(self, l: LiteralType): return _literal_text(l.value)
	def on_reference(self, r: TypeReference): return str(r.name) + self._args(r.type_args)
	def on_operator(self, o: TypeOperator): return "%s %s" % (o.operator, o.type_annotation.visit(self))
	def on_indexed_access(self, ia: IndexedAccessType):
		return "%s[%s]" % (ia.object_type.visit(self), ia.index_type.visit(self))
	def on_array(self, a: ArrayType): return "(%s)[]" % a.element.visit(self)
	def on_union(self, u: UnionType): return "(%s)" % self._each(u.types, " | ")
	def on_intersection(self, i: IntersectionType): return "(%s)" % self._each(i.types, " & ")
	def on_tuple(self, t: TupleType): return "[%s]" % self._each(t.types)
	def on_property(self, p: PropertySignature):
		prefix = "readonly " if p.readonly else ""
		return "%s%r%s%s" % (prefix, p.key, self._optional(p.optional), self._colon(p.type_annotation))
	def on_index(self, i: IndexSignature):
		return "[%s: %s]: %s" % (i.param_name, i.key_type.visit(self), i.type_annotation.visit(self))
	def on_type_literal(self, tl: TypeLiteral): return "{%s}" % self._each(tl.members, "; ")
	def on_type_parameter(self, tp: TypeParameter):
		text = tp.name
		if tp.constraint is not None: text += " extends " + tp.constraint.visit(self)
		if tp.default is not None: text += " = " + tp.default.visit(self)
		return text
	def on_parameter(self, p: Parameter): return p.name + self._optional(p.optional) + self._colon(p.type_annotation)
	def on_rest(self, r: RestParameter): return "..." + r.name + self._colon(r.type_annotation)
	def on_function(self, f: FunctionType):
		result = "void" if f.return_type is None else f.return_type.visit(self)
		return "%s(%s) => %s" % (self._args(f.type_params), self._each(f.params), result)
