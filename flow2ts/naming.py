"""
Default answers for the two naming questions the translator asks:

1. What should this Flow type-name be called in TypeScript?
2. What can I call a parameter that had no name?

Callers with better information (a scope, say) inject their own.
"""
from typing import Iterable

# Flow's library definitions spell a few things differently.
LIBRARY_NAMES = {
	"React$Node": "React.ReactNode",
	"React$Element": "React.ReactElement",
	"React$Component": "React.Component",
	"React$ComponentType": "React.ComponentType",
	"React$Context": "React.Context",
	"React$Ref": "React.Ref",
	"React$ElementRef": "React.ElementRef",
	"React$StatelessFunctionalComponent": "React.FunctionComponent",
	"SyntheticEvent": "React.SyntheticEvent",
}

# Words TypeScript treats as type keywords, which Flow lets people use as type names.
TYPE_KEYWORDS = frozenset("""
	any bigint boolean never null number object string symbol undefined unknown void
	keyof typeof infer is asserts unique readonly
""".split())

RESERVED_WORDS = frozenset("""
	break case catch class const continue debugger default delete do else enum export extends
	false finally for function if import in instanceof new null return super switch this throw
	true try typeof var void while with as implements interface let package private protected
	public static yield
""".split())

def resolve_identifier(name:str) -> str:
	if name in LIBRARY_NAMES:
		return LIBRARY_NAMES[name]
	if name in TYPE_KEYWORDS:
		return name + "_"
	return name

def _alphabetic(n:int) -> str:
	name = ""
	while n:
		n, remainder = divmod(n-1, 26)
		name = chr(97+remainder) + name
	return name

def fresh_name(existing:Iterable[str]) -> str:
	""" The first of a, b, ..., z, aa, ab, ... which is neither taken nor reserved. """
	taken = set(existing)
	n = 1
	while True:
		name = _alphabetic(n)
		if name not in taken and name not in RESERVED_WORDS:
			return name
		n += 1
