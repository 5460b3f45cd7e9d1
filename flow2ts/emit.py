"""
Render TypeScript trees as Babel-style AST JSON, ready for a printer
(such as @babel/generator) to turn into program text.
"""
from . import typescript as ts
from .ontology import Comment, PropertyKey

def emit(node:ts.Node) -> dict:
	return node.visit(Emit())

def _identifier(name:str) -> dict: return {"type": "Identifier", "name": name}

def _comments(comments:tuple[Comment, ...]) -> list[dict]:
	return [{"type": "CommentBlock" if c.block else "CommentLine", "value": c.value} for c in comments]

def _key(key:PropertyKey) -> dict:
	if key.quoted: return {"type": "StringLiteral", "value": key.text}
	return _identifier(key.text)

def _literal(value) -> dict:
	# bool before int, since bool is a kind of int.
	if isinstance(value, bool): kind = "BooleanLiteral"
	elif isinstance(value, str): kind = "StringLiteral"
	else: kind = "NumericLiteral"
	return {"type": kind, "value": value}

class Emit(ts.TypeVisitor):
	def _all(self, items): return [i.visit(self) for i in items]

	def _annotation(self, t):
		if t is None: return None
		return {"type": "TSTypeAnnotation", "typeAnnotation": t.visit(self)}

	def _instantiation(self, args):
		if args is None: return None
		return {"type": "TSTypeParameterInstantiation", "params": self._all(args)}

	def _entity(self, name):
		if isinstance(name, ts.QualifiedName):
			return {"type": "TSQualifiedName", "left": _identifier(name.left), "right": _identifier(name.right)}
		return _identifier(name)

	def on_keyword(self, k: ts.Keyword): return {"type": "TS%sKeyword" % k.name.capitalize()}
	def on_this(self, t: ts.ThisType): return {"type": "TSThisType"}
	def on_literal(self, l: ts.LiteralType): return {"type": "TSLiteralType", "literal": _literal(l.value)}

	def on_reference(self, r: ts.TypeReference):
		return {"type": "TSTypeReference", "typeName": self._entity(r.name), "typeParameters": self._instantiation(r.type_args)}

	def on_operator(self, o: ts.TypeOperator):
		return {"type": "TSTypeOperator", "operator": o.operator, "typeAnnotation": o.type_annotation.visit(self)}

	def on_indexed_access(self, ia: ts.IndexedAccessType):
		return {"type": "TSIndexedAccessType", "objectType": ia.object_type.visit(self), "indexType": ia.index_type.visit(self)}

	def on_array(self, a: ts.ArrayType): return {"type": "TSArrayType", "elementType": a.element.visit(self)}
	def on_union(self, u: ts.UnionType): return {"type": "TSUnionType", "types": self._all(u.types)}
	def on_intersection(self, i: ts.IntersectionType): return {"type": "TSIntersectionType", "types": self._all(i.types)}
	def on_tuple(self, t: ts.TupleType): return {"type": "TSTupleType", "elementTypes": self._all(t.types)}

	def on_property(self, p: ts.PropertySignature):
		it = {
			"type": "TSPropertySignature",
			"key": _key(p.key),
			"computed": False,
			"optional": p.optional,
			"readonly": p.readonly,
			"typeAnnotation": self._annotation(p.type_annotation),
		}
		for field, comments in (
			("leadingComments", p.leading_comments),
			("innerComments", p.inner_comments),
			("trailingComments", p.trailing_comments),
		):
			if comments: it[field] = _comments(comments)
		return it

	def on_index(self, i: ts.IndexSignature):
		param = _identifier(i.param_name)
		param["typeAnnotation"] = self._annotation(i.key_type)
		return {"type": "TSIndexSignature", "parameters": [param], "typeAnnotation": self._annotation(i.type_annotation)}

	def on_type_literal(self, tl: ts.TypeLiteral): return {"type": "TSTypeLiteral", "members": self._all(tl.members)}

	def on_type_parameter(self, tp: ts.TypeParameter):
		return {
			"type": "TSTypeParameter",
			"name": tp.name,
			"constraint": None if tp.constraint is None else tp.constraint.visit(self),
			"default": None if tp.default is None else tp.default.visit(self),
		}

	def on_parameter(self, p: ts.Parameter):
		it = _identifier(p.name)
		it["optional"] = p.optional
		it["typeAnnotation"] = self._annotation(p.type_annotation)
		return it

	def on_rest(self, r: ts.RestParameter):
		return {"type": "RestElement", "argument": _identifier(r.name), "typeAnnotation": self._annotation(r.type_annotation)}

	def on_function(self, f: ts.FunctionType):
		if f.type_params is None: type_params = None
		else: type_params = {"type": "TSTypeParameterDeclaration", "params": self._all(f.type_params)}
		return {
			"type": "TSFunctionType",
			"typeParameters": type_params,
			"parameters": self._all(f.params),
			"typeAnnotation": self._annotation(f.return_type),
		}
