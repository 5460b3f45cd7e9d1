"""
Where a type sits decides what a nullable type there ought to mean.

A slot belongs to the nearest enclosing construct that is not itself
just more type annotation: a function declaration (its return type or
one of its parameters), an object-type property, or anything else.
Whoever introduces a slot works out its Position once and hands it down
to the translator along with the type in the slot. Composite types
(unions, intersections, arrays, tuples, typeof, nullables, and the
return type of a function type) pass their position along to their
parts. Generic type arguments, function-type parameters, type-parameter
bounds, indexers and spreads are slots of their own, and get OTHER.

The function `position_of` recovers the same answer from a node's
ancestry, for callers who start translating somewhere in the middle
of a tree.
"""
from typing import NamedTuple, Sequence, Union
from . import flow

class ReturnType:
	def __repr__(self): return "<return type>"

class Parameter(NamedTuple):
	optional: bool
	all_following_optional: bool = False

class ObjectProperty(NamedTuple):
	optional: bool

class Other:
	def __repr__(self): return "<other>"

Position = Union[ReturnType, Parameter, ObjectProperty, Other]

RETURN_TYPE = ReturnType()
OTHER = Other()

def parameter_positions(params:Sequence) -> list[Parameter]:
	"""
	One position per parameter, given anything with an `optional` flag.
	"All following" means the ones after each parameter, not counting itself.
	"""
	positions = []
	later_optional = True
	for p in reversed(params):
		positions.append(Parameter(bool(p.optional), later_optional))
		later_optional = later_optional and bool(p.optional)
	positions.reverse()
	return positions

def admits_missing(position:Position) -> bool:
	""" Is this a slot where the target language already allows a value to be missing? """
	if isinstance(position, (Parameter, ObjectProperty)):
		return position.optional
	return False

# Annotation all the way through: the slot belongs to whatever is above these.
_PASS_THROUGH = (
	flow.UnionType, flow.IntersectionType, flow.ArrayType, flow.TupleType,
	flow.TypeofType, flow.NullableType, flow.FunctionType, flow.Identifier,
)

def position_of(node:flow.Phrase) -> Position:
	child = node
	for anchor in node.ancestry():
		if isinstance(anchor, _PASS_THROUGH):
			child = anchor
			continue
		if isinstance(anchor, flow.FunctionDeclaration):
			if child is anchor.return_type: return RETURN_TYPE
			return _declared_parameter(anchor, child)
		if isinstance(anchor, flow.ObjectTypeProperty):
			return ObjectProperty(bool(anchor.optional))
		return OTHER
	return OTHER

def _declared_parameter(fn:flow.FunctionDeclaration, param) -> Position:
	for p, pos in zip(fn.params, parameter_positions(fn.params)):
		if p is param: return pos
	# The rest parameter, or a type parameter.
	return OTHER
