import sys, random, threading
from typing import Optional, Any
from boozetools.support.failureprone import SourceText, illustration

from .ontology import Phrase

class TooManyIssues(Exception):
	pass

class Unsupported(Exception):
	"""
	Fatal for whatever translation raised it. The kind says which
	feature (or which node-type) we balked at. What happens next
	is up to whoever called the translator.
	"""
	def __init__(self, kind:str, message:str, node:Optional[Phrase]=None):
		super().__init__(kind, message)
		self.kind, self.message, self.node = kind, message, node
	def __str__(self): return "%s: %s" % (self.kind, self.message)

def _outburst():
	particle = ["Oh, ", "Well, ", "Hmm, ", "", ""]
	oaths = ['Drat', 'Rats', 'Fiddlesticks', 'Good Grief', 'Curses', 'Nuts', 'Crikey']
	resignations = [
		'Some types would not go quietly.',
		'Not everything made it across.',
		'There is more to do by hand.',
	]
	return "%s%s! %s"%tuple(map(random.choice, (particle, oaths, resignations)))

class Report:
	"""
	Collects what went wrong during a run.

	Warnings are about information lost in translation. Each distinct message
	is kept once per report, no matter how many times the translator finds
	reason to say it. Issues are about things that did not translate at all.
	"""
	_issues : list["Pic"]
	warnings : list[str]

	def __init__(self, *, verbose:int=0, max_issues=10, source:Optional[SourceText]=None):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self.warnings = []
		self._already_warned = set()
		self._lock = threading.Lock()
		self._max_issues = max_issues
		self._source = source

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	@property
	def issues(self): return tuple(self._issues)

	def issue(self, it:Any):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		""" Forget everything, including which warnings have been given. """
		with self._lock:
			self._issues.clear()
			self.warnings.clear()
			self._already_warned.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def warn(self, message:str) -> bool:
		""" Answers whether this was news. """
		with self._lock:
			if message in self._already_warned: return False
			self._already_warned.add(message)
			self.warnings.append(message)
		self.info("Warning:", message)
		return True

	@staticmethod
	def unsupported(kind:str, message:str, node:Optional[Phrase]=None):
		raise Unsupported(kind, message, node)

	def failed(self, ex:Unsupported, caption:str="this part"):
		""" Make a record of a translation somebody decided to survive. """
		intro = "Could not translate %s. %s" % (ex.kind, ex.message)
		problem = [] if ex.node is None else [Annotation(ex.node, self._source, caption)]
		self.issue(Pic(intro, problem))

	def complain_to_console(self):
		""" Emit all the warnings and issues to the console. """
		for message in self.warnings:
			print("Warning:", message, file=sys.stderr)
		_bemoan(self._issues)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

class Annotation:
	"""
	Points at a phrase. If we know where the phrase came from,
	the illustration shows the line it came from; otherwise
	we make do with the phrase's repr.
	"""
	def __init__(self, node:Phrase, source:Optional[SourceText], caption:str=""):
		self.node = node
		self.source = source
		self.caption = caption
	def illustrate(self):
		span = self.node.span
		if self.source is None or span is None:
			return "    %r  <-- %s" % (self.node, self.caption or self.node.kind())
		row, col = self.source.find_row_col(span.start)
		single_line = self.source.line_of_text(row)
		width = span.stop - span.start
		return illustration(single_line, col, width, prefix='% 6d |' % row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation]):
		self._intro, self._anns = intro, anns
	@property
	def description(self): return self._intro
	def as_text(self):
		lines = [self._intro, ""]
		lines.extend(ann.illustrate() for ann in self._anns)
		return '\n'.join(lines)

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
