"""
Ways to take a closed union apart other than calling `.match` directly.

Python will not refuse to run a program with a forgotten case,
so the best it can do is notice early: `dispatch` checks the whole
handler table before running any of it, and `audit` checks that a
Visitor has somewhere to send each case before it meets one.
"""
from typing import Callable, Mapping
from boozetools.support.foundation import Visitor

from .ontology import Closed
from .diagnostics import Report, NonExhaustive

def dispatch(value:Closed, handlers:Mapping[type, Callable]):
	"""
	Run the handler for whichever case `value` holds.
	The table must name every case of the union, and nothing else.
	Payload-carrying cases pass their payload; empty cases pass nothing.
	"""
	if not isinstance(value, Closed):
		raise TypeError("dispatch needs a case of a closed union, not %s" % type(value).__name__)
	union = value.union()
	cases = union.cases()
	missing = [c for c in cases if c not in handlers]
	foreign = [k for k in handlers if k not in cases]
	if missing or foreign:
		raise NonExhaustive(union, missing, foreign)
	return value._deliver(handlers[type(value)])

def _finds_method(visitor:type, case:type) -> bool:
	# Same fall-back the Visitor itself uses: walk the host's MRO.
	return any(hasattr(visitor, 'visit_'+k.__name__) for k in case.__mro__)

def audit(visitor:type, union:type, report:Report):
	""" Record an issue for each case of the union the visitor cannot receive. """
	assert issubclass(visitor, Visitor), visitor
	for case in union.cases():
		if _finds_method(visitor, case):
			report.info("%s handles %s.%s" % (visitor.__name__, union.__name__, case.__name__))
		else:
			report.unhandled_case(visitor, union, case)

def assert_exhaustive(visitor:type, *unions:type, verbose=0):
	""" Raise NonExhaustive for the first union the visitor does not fully cover. """
	report = Report(verbose=verbose, max_issues=None)
	for union in unions:
		audit(visitor, union, report)
		if report.sick():
			raise NonExhaustive(union, [c for c in union.cases() if not _finds_method(visitor, c)])

#########################

class Show(Visitor):
	"""
	Render values with their case names. This is what repr() uses.
	The Visitor dispatches on bare class names, so each method checks it
	really has one of ours; strangers and containers get the built-in repr,
	which also minds reference cycles.
	"""
	def visit_Pair(self, host):
		from .pair import Pair
		if not isinstance(host, Pair): return repr(host)
		one, two = host
		return "Pair(%s, %s)" % (self.visit(one), self.visit(two))
	def visit_Sum(self, host):
		from .sum import Sum
		if not isinstance(host, Sum): return repr(host)
		return host.match(
			lambda a: "Left(%s)" % self.visit(a),
			lambda b: "Right(%s)" % self.visit(b),
		)
	def visit_Maybe(self, host):
		from .maybe import Maybe
		if not isinstance(host, Maybe): return repr(host)
		return host.match(lambda a: "Full(%s)" % self.visit(a), lambda: "Empty")
	def visit_object(self, host):
		return repr(host)

def show(value) -> str:
	return Show().visit(value)
