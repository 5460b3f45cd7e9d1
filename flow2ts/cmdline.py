"""
This translates Flow type annotations into TypeScript type annotations.

{0}

For example:

    flow2ts annotations.json

reads a file of Babel AST nodes (one, or a list of them) and writes the
corresponding TypeScript AST nodes, as JSON, to standard output.
Anything that cannot be translated comes out as null, with an explanation
on standard error.

    flow2ts -h

will explain all the arguments.
"""
import sys, argparse, json
from pathlib import Path

parser = argparse.ArgumentParser(
	prog="flow2ts",
	description="Translate Flow type annotations (as Babel AST JSON) into TypeScript type annotations.",
)
parser.add_argument("annotations", help="JSON file holding a Babel AST node, or a list of them.")
parser.add_argument('-s', "--source", help="The source file those nodes came from, for better error messages.")
parser.add_argument('-o', "--output", help="Write the result here instead of standard output.")
parser.add_argument('-v', "--verbose", action="count", help="Say more about what's going on.")
parser.add_argument("--max-issues", type=int, default=10, help="Give up after this many untranslatable entries.")

def _translate(translator, phrase):
	from . import flow
	if isinstance(phrase, flow.FunctionDeclaration):
		return translator.translate_signature(phrase)
	if isinstance(phrase, flow.Identifier):
		if phrase.type_annotation is None: return None
		return translator.translate(phrase.type_annotation)
	return translator.translate(phrase)

def run(args):
	from boozetools.support.failureprone import SourceText
	from .diagnostics import Report, TooManyIssues, Unsupported
	from .translator import Translator
	from . import babel, emit
	source = None
	try:
		if args.source:
			source = SourceText(Path(args.source).read_text(encoding="utf-8"), filename=args.source)
		document = json.loads(Path(args.annotations).read_text(encoding="utf-8"))
	except (OSError, ValueError) as ex:
		print("Could not read input: %s" % ex, file=sys.stderr)
		return 2
	entries = document if isinstance(document, list) else [document]
	report = Report(verbose=args.verbose, max_issues=args.max_issues, source=source)
	translator = Translator(report)
	results = []
	try:
		for nr, entry in enumerate(entries):
			report.info("Entry %d of %d" % (nr+1, len(entries)))
			try:
				result = _translate(translator, babel.build(entry))
			except Unsupported as ex:
				results.append(None)
				report.failed(ex)
			else:
				results.append(None if result is None else emit.emit(result))
	except TooManyIssues:
		report.complain_to_console()
		print(" *"*35, file=sys.stderr)
		print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
		return 1
	text = json.dumps(results if isinstance(document, list) else results[0], indent=2)
	if args.output:
		Path(args.output).write_text(text+"\n", encoding="utf-8")
	else:
		print(text)
	report.complain_to_console()
	return 1 if report.sick() else 0

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
