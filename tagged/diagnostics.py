"""
Complaints about handler coverage, and the exceptions they turn into.
Nothing here is fancy: issues pile up on a Report and get
printed to the console when somebody asks.
"""
import sys, random
from typing import Iterable, NamedTuple

class TooManyIssues(Exception):
	pass

class NonExhaustive(TypeError):
	""" Some case of a closed union has no handler, or a handler names a stranger. """
	def __init__(self, union:type, missing:Iterable[type], foreign:Iterable=()):
		self.union = union
		self.missing = tuple(c.__name__ for c in missing)
		self.foreign = tuple(getattr(k, "__name__", repr(k)) for k in foreign)
		parts = []
		if self.missing: parts.append("no handler for %s" % ", ".join(self.missing))
		if self.foreign: parts.append("%s not among its cases" % ", ".join(self.foreign))
		super().__init__("%s: %s" % (union.__name__, "; ".join(parts)))

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]
	minced_oaths = ['Drat', 'Rats', 'Curses', 'Fiddlesticks', 'Good Grief', 'Great Scott', 'Nuts']
	resignations = [
		'A case has gone unhandled.',
		'Somebody forgot a branch.',
		'The match is not total.',
	]
	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Issue(NamedTuple):
	intro: str
	footer: tuple[str, ...] = ()
	def as_text(self):
		return '\n'.join([self.intro, *self.footer])

class Report:
	""" Collects issues so one run can show several gaps at once. """
	_issues : list[Issue]

	def __init__(self, *, verbose:int=0, max_issues=10):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	@property
	def issues(self) -> tuple[Issue, ...]: return tuple(self._issues)

	def issue(self, it:Issue):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		if self._issues:
			print("*"*60, file=sys.stderr)
			print(_outburst(), file=sys.stderr)
		for i in self._issues:
			print("  -"*20, file=sys.stderr)
			print(i.as_text(), file=sys.stderr)
		sys.stderr.flush()

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(message)

	# Methods the exhaustiveness audit calls:
	def unhandled_case(self, visitor:type, union:type, case:type):
		intro = "%s cannot visit %s.%s" % (visitor.__name__, union.__name__, case.__name__)
		hint = "Add visit_%s, or a method for one of its superclasses." % case.__name__
		self.issue(Issue(intro, (hint,)))
