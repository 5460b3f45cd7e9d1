import unittest

from flow2ts import flow
from flow2ts.ontology import PropertyKey
from flow2ts.position import (
	position_of, parameter_positions, admits_missing,
	Parameter, ObjectProperty, RETURN_TYPE, OTHER,
)

class Flag:
	def __init__(self, optional): self.optional = optional

class ParameterPositionTests(unittest.TestCase):
	def test_sequencing(self):
		got = parameter_positions([Flag(False), Flag(False), Flag(True), Flag(True)])
		self.assertEqual([
			Parameter(False, False),
			Parameter(False, True),
			Parameter(True, True),
			Parameter(True, True),
		], got)

	def test_nothing(self):
		self.assertEqual([], parameter_positions([]))

	def test_admits_missing(self):
		self.assertTrue(admits_missing(Parameter(True)))
		self.assertTrue(admits_missing(ObjectProperty(True)))
		for position in (Parameter(False, True), ObjectProperty(False), RETURN_TYPE, OTHER):
			with self.subTest(position):
				self.assertFalse(admits_missing(position))

	def test_singletons_differ(self):
		self.assertNotEqual(RETURN_TYPE, OTHER)

class PositionOfTests(unittest.TestCase):
	def test_orphan(self):
		self.assertIs(OTHER, position_of(flow.StringType()))

	def test_declaration(self):
		a = flow.NullableType(flow.StringType())
		b = flow.NullableType(flow.StringType())
		ret = flow.NullableType(flow.StringType())
		flow.FunctionDeclaration("f", [flow.Identifier("a", a), flow.Identifier("b", b, optional=True)], ret)
		self.assertEqual(Parameter(False, True), position_of(a))
		self.assertEqual(Parameter(True, True), position_of(b))
		self.assertIs(RETURN_TYPE, position_of(ret))

	def test_declared_rest_is_other(self):
		more = flow.ArrayType(flow.StringType())
		flow.FunctionDeclaration("f", [], rest=flow.Identifier("more", more))
		self.assertIs(OTHER, position_of(more))

	def test_function_type_parameters_are_other(self):
		a = flow.NullableType(flow.StringType())
		flow.FunctionType([flow.FunctionTypeParam(None, a, optional=True)], None)
		self.assertIs(OTHER, position_of(a))

	def test_function_type_return_shares_the_slot(self):
		ret = flow.NullableType(flow.StringType())
		fn = flow.FunctionType([], ret)
		self.assertIs(OTHER, position_of(ret))
		flow.ObjectTypeProperty(PropertyKey("k"), fn, optional=True)
		self.assertEqual(ObjectProperty(True), position_of(ret))

	def test_composites_pass_through(self):
		for wrap in (
			flow.ArrayType,
			lambda t: flow.TupleType([flow.NumberType(), t]),
			flow.TypeofType,
			flow.NullableType,
		):
			inner = flow.NullableType(flow.StringType())
			flow.ObjectTypeProperty(PropertyKey("k"), wrap(inner), optional=True)
			with self.subTest(inner.parent):
				self.assertEqual(ObjectProperty(True), position_of(inner))

	def test_composites_in_declared_parameter(self):
		inner = flow.NullableType(flow.StringType())
		flow.FunctionDeclaration("f", [flow.Identifier("a", flow.ArrayType(inner), optional=True)])
		self.assertEqual(Parameter(True, True), position_of(inner))

	def test_declared_return_through_array(self):
		inner = flow.NullableType(flow.StringType())
		flow.FunctionDeclaration("f", [], flow.ArrayType(inner))
		self.assertIs(RETURN_TYPE, position_of(inner))

	def test_property_through_union(self):
		inner = flow.NullableType(flow.StringType())
		flow.ObjectType([flow.ObjectTypeProperty(PropertyKey("k"), flow.UnionType([inner, flow.NumberType()]), optional=True)])
		self.assertEqual(ObjectProperty(True), position_of(inner))

	def test_generic_argument_is_other(self):
		inner = flow.NullableType(flow.StringType())
		generic = flow.GenericType(flow.Name("Array"), [inner])
		flow.ObjectTypeProperty(PropertyKey("k"), generic, optional=True)
		self.assertIs(OTHER, position_of(inner))
		self.assertEqual(ObjectProperty(True), position_of(generic))

	def test_parent_links(self):
		inner = flow.StringType()
		array = flow.ArrayType(inner)
		union = flow.UnionType([array])
		self.assertEqual([array, union], list(inner.ancestry()))

if __name__ == '__main__':
	unittest.main()
