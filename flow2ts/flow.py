"""
The Flow side: type-annotation trees as they come out of the parser.

The parser (or the Babel adapter) calls these constructors bottom-up.
Each constructor adopts its children, so that any node can find its way
back up the tree. Nothing downstream of construction alters these objects.
"""
from typing import Optional, Sequence, Union
from .ontology import Phrase, Comment, PropertyKey

class FlowType(Phrase):
	""" Abstract: Any thing which may appear in a type position. """

class Primitive(FlowType):
	def __repr__(self): return "<%s>" % type(self).__name__

class AnyType(Primitive): pass
class BooleanType(Primitive): pass
class NumberType(Primitive): pass
class StringType(Primitive): pass
class VoidType(Primitive): pass
class MixedType(Primitive): pass
class EmptyType(Primitive): pass
class ExistsType(Primitive): pass  # Spelled "*" in the source
class ThisType(Primitive): pass
class NullLiteral(Primitive): pass

class Literal(FlowType):
	def __init__(self, value):
		self.value = value
	def __repr__(self): return "<%s %r>" % (type(self).__name__, self.value)

class BooleanLiteral(Literal): pass
class NumberLiteral(Literal): pass
class StringLiteral(Literal): pass

class ArrayType(FlowType):
	def __init__(self, element:FlowType):
		self.element = element
		self.adopt(element)

class Composite(FlowType):
	types: tuple[FlowType, ...]
	def __init__(self, types:Sequence[FlowType]):
		self.types = tuple(types)
		self.adopt(*self.types)

class TupleType(Composite): pass
class UnionType(Composite): pass
class IntersectionType(Composite): pass

class NullableType(FlowType):
	def __init__(self, type_annotation:FlowType):
		self.type_annotation = type_annotation
		self.adopt(type_annotation)

class TypeofType(FlowType):
	def __init__(self, argument:FlowType):
		self.argument = argument
		self.adopt(argument)

#######################################################################

class Name(Phrase):
	def __init__(self, text:str):
		assert isinstance(text, str)
		self.text = text
	def __repr__(self): return "<Name %r>" % self.text

class QualifiedName(Phrase):
	""" Namespace.Member, possibly with a qualified qualification. """
	def __init__(self, qualification:Union[Name, "QualifiedName"], id:Name):
		self.qualification, self.id = qualification, id
		self.adopt(qualification, id)
	def depth(self) -> int:
		q = self.qualification
		return 1 + (q.depth() if isinstance(q, QualifiedName) else 0)
	def __repr__(self): return "<Name %r.%r>" % (self.qualification, self.id)

class GenericType(FlowType):
	"""
	A reference to a named type, maybe with type-arguments.
	Also how the utility types like $Keys<X> show up.
	"""
	type_args: Optional[tuple[FlowType, ...]]
	def __init__(self, id:Union[Name, QualifiedName], type_args:Optional[Sequence[FlowType]]=None):
		assert isinstance(id, (Name, QualifiedName)), id
		self.id = id
		self.type_args = None if type_args is None else tuple(type_args)
		self.adopt(id, *(self.type_args or ()))
	def __repr__(self):
		return "%r%r" % (self.id, list(self.type_args)) if self.type_args else repr(self.id)

#######################################################################

class ObjectTypeProperty(Phrase):
	def __init__(
			self, key:PropertyKey, value:FlowType, optional:bool=False, variance:Optional[str]=None,
			leading_comments:Sequence[Comment]=(), inner_comments:Sequence[Comment]=(), trailing_comments:Sequence[Comment]=(),
	):
		assert variance in (None, "plus", "minus"), variance
		self.key, self.value, self.optional, self.variance = key, value, optional, variance
		self.leading_comments = tuple(leading_comments)
		self.inner_comments = tuple(inner_comments)
		self.trailing_comments = tuple(trailing_comments)
		self.adopt(value)
	def __repr__(self): return "<%r%s: %r>" % (self.key, "?" if self.optional else "", self.value)

class ObjectTypeSpreadProperty(Phrase):
	def __init__(self, argument:FlowType):
		self.argument = argument
		self.adopt(argument)

class ObjectTypeIndexer(Phrase):
	def __init__(self, id:Optional[str], key:FlowType, value:FlowType, variance:Optional[str]=None):
		self.id, self.key, self.value, self.variance = id, key, value, variance
		self.adopt(key, value)

class ObjectTypeCallProperty(Phrase):
	def __init__(self, value:"FunctionType", static:bool=False):
		self.value, self.static = value, static
		self.adopt(value)

class ObjectType(FlowType):
	properties: tuple[Union[ObjectTypeProperty, ObjectTypeSpreadProperty], ...]
	indexers: tuple[ObjectTypeIndexer, ...]
	call_properties: tuple[ObjectTypeCallProperty, ...]

	def __init__(self, properties=(), indexers=(), call_properties=(), exact:bool=False):
		self.properties = tuple(properties)
		self.indexers = tuple(indexers)
		self.call_properties = tuple(call_properties)
		self.exact = exact
		self.adopt(*self.properties, *self.indexers, *self.call_properties)

#######################################################################

class TypeParameter(Phrase):
	def __init__(self, name:str, bound:Optional[FlowType]=None, default:Optional[FlowType]=None, variance:Optional[str]=None):
		self.name, self.bound, self.default, self.variance = name, bound, default, variance
		self.adopt(bound, default)

class FunctionTypeParam(Phrase):
	""" In a function type, the parameter name is optional. """
	def __init__(self, name:Optional[str], type_annotation:Optional[FlowType], optional:bool=False):
		self.name, self.type_annotation, self.optional = name, type_annotation, optional
		self.adopt(type_annotation)
	def __repr__(self): return "<:%s%s:%r>" % (self.name or "", "?" if self.optional else "", self.type_annotation)

class FunctionType(FlowType):
	def __init__(
			self, params:Sequence[FunctionTypeParam], return_type:Optional[FlowType],
			rest:Optional[FunctionTypeParam]=None, type_params:Optional[Sequence[TypeParameter]]=None,
	):
		self.params = tuple(params)
		self.return_type = return_type
		self.rest = rest
		self.type_params = None if type_params is None else tuple(type_params)
		self.adopt(*self.params, return_type, rest, *(self.type_params or ()))

#######################################################################
# Declarations are not type annotations, but they do decide what a
# nullable annotation inside them should mean.

class Identifier(Phrase):
	""" A declared parameter, with its annotation if any. """
	def __init__(self, name:str, type_annotation:Optional[FlowType]=None, optional:bool=False):
		self.name, self.type_annotation, self.optional = name, type_annotation, optional
		self.adopt(type_annotation)
	def __repr__(self): return "<:%s%s:%r>" % (self.name, "?" if self.optional else "", self.type_annotation)

class FunctionDeclaration(Phrase):
	def __init__(
			self, name:Optional[str], params:Sequence[Identifier], return_type:Optional[FlowType]=None,
			rest:Optional[Identifier]=None, type_params:Optional[Sequence[TypeParameter]]=None,
	):
		self.name = name
		self.params = tuple(params)
		self.return_type = return_type
		self.rest = rest
		self.type_params = None if type_params is None else tuple(type_params)
		self.adopt(*self.params, return_type, rest, *(self.type_params or ()))
	def __repr__(self): return "<function %s>" % self.name

#######################################################################

VARIANTS = (
	AnyType, BooleanType, NumberType, StringType, VoidType, MixedType, EmptyType, ExistsType, ThisType, NullLiteral,
	BooleanLiteral, NumberLiteral, StringLiteral,
	ArrayType, TupleType, UnionType, IntersectionType, NullableType, TypeofType,
	GenericType, ObjectType, FunctionType,
)
