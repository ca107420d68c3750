"""
The most-fundamental classes: immutability and closed unions.
Everything else in the package builds on these two ideas,
so they live apart to keep the import graph a simple tree.

A closed union is a root class plus a fixed roster of cases.
Once the roster is sealed, nobody gets to add another case,
and the cases themselves are leaves.
"""
from abc import ABC

class Frozen:
	""" Values that refuse assignment once built. Subclasses initialize through object.__setattr__ """
	__slots__ = ()
	def __setattr__(self, key, value):
		raise AttributeError("%s is immutable; cannot set %r" % (type(self).__name__, key))
	def __delattr__(self, key):
		raise AttributeError("%s is immutable; cannot delete %r" % (type(self).__name__, key))

class Closed(Frozen, ABC):
	"""
	Root for tagged unions with a fixed set of cases.

	Declare the root and its cases as ordinary subclasses, then call
	`Root.seal(CaseA, CaseB)` once. After that, subclassing either
	the root or any case raises TypeError.
	"""
	__slots__ = ()
	_cases: tuple[type, ...] = ()

	def __init_subclass__(cls, **kwargs):
		super().__init_subclass__(**kwargs)
		for base in cls.__mro__[1:]:
			if base.__dict__.get("_sealed"):
				raise TypeError("%s is closed; %s cannot join it." % (base.__name__, cls.__name__))

	@classmethod
	def seal(cls, *cases: type):
		assert cases, "A union needs at least one case."
		assert not cls.__dict__.get("_sealed"), cls
		for case in cases:
			assert issubclass(case, cls) and case is not cls, case
		cls._cases = cases
		cls._sealed = True
		for case in cases:
			case._sealed = True

	@classmethod
	def union(cls) -> type:
		""" The sealed root this class belongs to. """
		for k in cls.__mro__:
			if k.__dict__.get("_cases"):
				return k
		raise TypeError("%s belongs to no sealed union" % cls.__name__)

	@classmethod
	def cases(cls) -> tuple[type, ...]:
		return cls.union()._cases

	def _deliver(self, handler):
		""" Call the handler with this case's payload, if it has one. """
		raise NotImplementedError(type(self))
