"""
The translation proper: Flow type-annotation trees in, TypeScript ones out.

This is a straightforward tree-walk, with one visit_ method for each kind
of Flow type. Each method builds its answer from the translations of its
children, so nothing half-built ever escapes. When something has no faithful
translation, the walk either warns (and carries on with the nearest thing)
or raises Unsupported (and produces nothing at all).

Nullable types are the one place where context matters: `?T` means
different things as a return type, an optional parameter, an optional
property, and anywhere else. So along with each node, the walk carries
the Position of the slot that node sits in. See position.py.
"""
from typing import Callable, Iterable, Optional, Sequence
from boozetools.support.foundation import Visitor
from . import flow, typescript as ts
from .diagnostics import Report
from .naming import resolve_identifier, fresh_name
from .position import Position, OTHER, RETURN_TYPE, ObjectProperty, parameter_positions, position_of, admits_missing

EXISTENTIAL = 'Existential type (*) in Flow is converted to "any" in TypeScript, and this conversion loses some type information.'
EXACT_OBJECT = "Exact object type annotation in Flow is ignored. In TypeScript, it's always regarded as exact type"

DEFAULT_INDEX_NAME = "x"

def translate(node:flow.Phrase, report:Report, position:Optional[Position]=None) -> ts.TSType:
	""" Convenience for when the default naming is good enough. """
	return Translator(report).translate(node, position)

class Translator(Visitor):
	def __init__(
			self, report:Report,
			resolve:Callable[[str], str]=resolve_identifier,
			fresh:Callable[[Iterable[str]], str]=fresh_name,
	):
		self.report = report
		self.resolve = resolve
		self.fresh = fresh

	def translate(self, node:flow.Phrase, position:Optional[Position]=None) -> ts.TSType:
		"""
		Without a position, work it out from where the node sits in its tree.
		From there on down, positions are handed along explicitly.
		"""
		if position is None:
			position = position_of(node)
		return self.visit(node, position)

	def translate_signature(self, fn:flow.FunctionDeclaration) -> ts.FunctionType:
		""" The type of a declared function, nullable parameters and all. """
		# TODO: f(a: ?T) should come out as f(a?: T | null) when every later parameter is optional,
		#  since Flow lets callers leave such an argument off. For now the flag stays as written.
		return self._signature(fn, parameter_positions(fn.params), RETURN_TYPE)

	def _each(self, types:Sequence[flow.FlowType], position:Position=OTHER) -> list[ts.TSType]:
		return [self.visit(t, position) for t in types]

	def _maybe(self, node:Optional[flow.FlowType], position:Position=OTHER) -> Optional[ts.TSType]:
		return None if node is None else self.visit(node, position)

	def visit_object(self, node, position):
		# Anything without a more specific visit_ method lands here.
		kind = node.kind() if isinstance(node, flow.Phrase) else type(node).__name__
		self.report.unsupported(kind, "There is no translation for FlowType(type=%s)." % kind, node)

	# The simple ones:

	def visit_AnyType(self, node, position): return ts.ANY
	def visit_BooleanType(self, node, position): return ts.BOOLEAN
	def visit_EmptyType(self, node, position): return ts.NEVER
	def visit_MixedType(self, node, position): return ts.UNKNOWN
	def visit_NullLiteral(self, node, position): return ts.NULL
	def visit_NumberType(self, node, position): return ts.NUMBER
	def visit_StringType(self, node, position): return ts.STRING
	def visit_VoidType(self, node, position): return ts.VOID
	def visit_ThisType(self, node, position): return ts.ThisType()

	def visit_BooleanLiteral(self, node:flow.BooleanLiteral, position): return ts.LiteralType(bool(node.value))
	def visit_NumberLiteral(self, node:flow.NumberLiteral, position): return ts.LiteralType(node.value)
	def visit_StringLiteral(self, node:flow.StringLiteral, position): return ts.LiteralType(node.value)

	def visit_ExistsType(self, node, position):
		self.report.warn(EXISTENTIAL)
		return ts.ANY

	# Structure:

	def visit_ArrayType(self, node:flow.ArrayType, position):
		return ts.ArrayType(self.visit(node.element, position))

	def visit_TupleType(self, node:flow.TupleType, position):
		return ts.TupleType(self._each(node.types, position))

	def visit_UnionType(self, node:flow.UnionType, position):
		# Each member is an alternative for the same slot.
		return ts.UnionType(self._each(node.types, position))

	def visit_IntersectionType(self, node:flow.IntersectionType, position):
		return ts.IntersectionType(self._each(node.types, position))

	def visit_TypeofType(self, node:flow.TypeofType, position):
		return ts.TypeOperator("typeof", self.visit(node.argument, position))

	def visit_NullableType(self, node:flow.NullableType, position):
		it = self.visit(node.type_annotation, position)
		if admits_missing(position):
			# { key?: ?T } -> { key?: T | null }, and likewise optional parameters.
			return ts.UnionType([it, ts.NULL])
		# f(): ?T -> f(): T | undefined | null, and everything else.
		return ts.UnionType([it, ts.UNDEFINED, ts.NULL])

	# Named types, including the utility types:

	def visit_GenericType(self, node:flow.GenericType, position):
		args = None if node.type_args is None else self._each(node.type_args)
		if isinstance(node.id, flow.QualifiedName):
			return self._qualified_reference(node, args)
		name = node.id.text
		if name in UTILITY_TYPES:
			arity, method = UTILITY_TYPES[name]
			if arity is not None:
				self._check_arity(node, name, arity, args)
			return method(self, node, args)
		return self._reference(node, self.resolve(name), args)

	def _check_arity(self, node:flow.GenericType, name:str, arity:int, args):
		got = len(args or ())
		if got != arity:
			pattern = "%s takes %d type argument(s), but got %d."
			self.report.unsupported(name, pattern % (name, arity, got), node)

	def _qualified_reference(self, node:flow.GenericType, args):
		q = node.id
		if q.depth() > 1:
			self.report.unsupported("QualifiedTypeIdentifier", "Nested qualification is not supported.", node)
		return ts.TypeReference(ts.QualifiedName(q.qualification.text, q.id.text), args)

	def _reference(self, node:flow.GenericType, name:str, args) -> ts.TypeReference:
		parts = name.split(".")
		if len(parts) > 2:
			self.report.unsupported("QualifiedTypeIdentifier", "Nested qualification is not supported: %s" % name, node)
		if len(parts) == 2:
			return ts.TypeReference(ts.QualifiedName(*parts), args)
		return ts.TypeReference(name, args)

	def _keys(self, node, args):
		return ts.TypeOperator("keyof", args[0])

	def _values(self, node, args):
		# $Values<X> -> X[keyof X]
		x = args[0]
		return ts.IndexedAccessType(x, ts.TypeOperator("keyof", x))

	def _read_only(self, node, args): return ts.TypeReference("Readonly", args)
	def _read_only_array(self, node, args): return ts.TypeReference("ReadonlyArray", args)
	def _shape(self, node, args): return ts.TypeReference("Partial", args)

	def _exact(self, node, args):
		self.report.warn(EXACT_OBJECT)
		return args[0]

	def _diff(self, node, args):
		# $Diff<X, Y> -> Pick<X, Exclude<keyof X, keyof Y>>
		x, y = args
		exclude = ts.TypeReference("Exclude", [ts.TypeOperator("keyof", x), ts.TypeOperator("keyof", y)])
		return ts.TypeReference("Pick", [x, exclude])

	def _rest(self, node, args):
		self.report.unsupported("$Rest", "$Rest in GenericTypeAnnotation is not supported.", node)

	def _property_type(self, node, args):
		# $PropertyType<T, k> -> T[k]
		t, k = args
		return ts.IndexedAccessType(t, k)

	def _class(self, node, args):
		return ts.TypeOperator("typeof", args[0])

	def _fix_me(self, node, args):
		return ts.TypeReference("any", args)

	def _object(self, node, args):
		# Not quite "object": Flow's Object allows any property at all.
		return ts.TypeLiteral([ts.IndexSignature(DEFAULT_INDEX_NAME, ts.STRING, ts.ANY)])

	# Object types:

	def visit_ObjectType(self, node:flow.ObjectType, position):
		if node.exact:
			self.report.warn(EXACT_OBJECT)
		members, spreads = [], []
		for prop in node.properties:
			if isinstance(prop, flow.ObjectTypeProperty):
				members.append(self._property(prop))
			elif isinstance(prop, flow.ObjectTypeSpreadProperty):
				# {p1:T, ...U} -> {p1:T} & U
				spreads.append(self.visit(prop.argument, OTHER))
			else:
				self.visit_object(prop, OTHER)
		for indexer in node.indexers:
			members.append(ts.IndexSignature(
				indexer.id or DEFAULT_INDEX_NAME,
				self.visit(indexer.key, OTHER),
				self.visit(indexer.value, OTHER),
			))
		if node.call_properties:
			self.report.unsupported(
				"ObjectTypeCallProperty",
				"Call properties would become TSCallSignatureDeclaration, which is not supported yet.",
				node.call_properties[0],
			)
		literal = ts.TypeLiteral(members)
		if spreads:
			return ts.IntersectionType([literal, *spreads])
		return literal

	def _property(self, prop:flow.ObjectTypeProperty) -> ts.PropertySignature:
		return ts.PropertySignature(
			prop.key,
			self.visit(prop.value, ObjectProperty(bool(prop.optional))),
			optional=prop.optional,
			readonly=prop.variance == "plus",
			leading_comments=prop.leading_comments,
			inner_comments=prop.inner_comments,
			trailing_comments=prop.trailing_comments,
		)

	# Function types:

	def visit_FunctionType(self, node:flow.FunctionType, position):
		# Function-type parameters are slots of their own. The return type shares this one.
		return self._signature(node, [OTHER] * len(node.params), position)

	def _signature(self, fn, positions:Sequence[Position], return_position:Position) -> ts.FunctionType:
		if fn.type_params is None: ts_type_params = None
		else: ts_type_params = [self._type_parameter(tp) for tp in fn.type_params]
		# TypeScript insists on parameter names where Flow does not.
		used = [p.name for p in fn.params if p.name is not None]
		ts_params = []
		for p, where in zip(fn.params, positions):
			name = p.name
			if name is None:
				name = self.fresh(used)
				used.append(name)
			ts_params.append(ts.Parameter(name, self._maybe(p.type_annotation, where), p.optional))
		rest = fn.rest
		if rest is not None and rest.name is not None:
			ts_params.append(ts.RestParameter(rest.name, self._maybe(rest.type_annotation)))
		return ts.FunctionType(ts_type_params, ts_params, self._maybe(fn.return_type, return_position))

	def _type_parameter(self, tp:flow.TypeParameter) -> ts.TypeParameter:
		return ts.TypeParameter(tp.name, self._maybe(tp.bound), self._maybe(tp.default))

# name -> (number of type arguments or None for "don't care", method)
UTILITY_TYPES = {
	"$Keys": (1, Translator._keys),
	"$Values": (1, Translator._values),
	"$ReadOnly": (1, Translator._read_only),
	"$ReadOnlyArray": (1, Translator._read_only_array),
	"$Exact": (1, Translator._exact),
	"$Diff": (2, Translator._diff),
	"$Rest": (None, Translator._rest),
	"$PropertyType": (2, Translator._property_type),
	"$ElementType": (2, Translator._property_type),
	"$Shape": (1, Translator._shape),
	"Class": (1, Translator._class),
	"$FlowFixMe": (None, Translator._fix_me),
	"Object": (None, Translator._object),
}
# Not yet: $ObjMap, $TupleMap, $Call, $Supertype, $Subtype.
# These fall through to a plain reference to a type that TypeScript lacks.
