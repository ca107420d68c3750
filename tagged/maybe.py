"""
The optional type: either Full of one value, or Empty.

Maybe is covariant in its parameter, and Empty is a Maybe[Never].
Since Never is a subtype of everything, the one Empty value
serves as Maybe[int], Maybe[str], and Maybe[whatever-you-like].
Accordingly there is only ever one of it: EMPTY, made at import.
"""
from abc import abstractmethod
from typing import Callable, Final, Never, Optional
from .ontology import Closed
from .dispatch import show

class Maybe[A](Closed):
	__slots__ = ()

	@staticmethod
	def full[T](value: T) -> "Maybe[T]": return Full(value)
	@staticmethod
	def empty() -> "Maybe[Never]": return EMPTY
	@staticmethod
	def of[T](value: Optional[T]) -> "Maybe[T]":
		""" Bridge from Python's habit: None means absent. """
		return EMPTY if value is None else Full(value)

	@abstractmethod
	def match[T](self, on_full: Callable[[A], T], on_empty: Callable[[], T]) -> T:
		""" Call on_full with the payload, or on_empty with nothing, and return what it returns. """

	def is_full(self) -> bool: return self.match(lambda a: True, lambda: False)
	def is_empty(self) -> bool: return self.match(lambda a: False, lambda: True)

	def map[T](self, fn: Callable[[A], T]) -> "Maybe[T]":
		return self.match(lambda a: Full(fn(a)), Maybe.empty)
	def bind[T](self, fn: Callable[[A], "Maybe[T]"]) -> "Maybe[T]":
		return self.match(fn, Maybe.empty)
	def or_else[T](self, default: T) -> A | T:
		return self.match(lambda a: a, lambda: default)
	def to_optional(self) -> Optional[A]:
		return self.or_else(None)

	def __bool__(self): return self.is_full()
	def __repr__(self): return show(self)

class Full[A](Maybe[A]):
	__slots__ = ("_value",)
	def __init__(self, value: A): object.__setattr__(self, "_value", value)
	def match(self, on_full, on_empty): return on_full(self._value)
	def _deliver(self, handler): return handler(self._value)
	def __eq__(self, other):
		if not isinstance(other, Maybe): return NotImplemented
		return isinstance(other, Full) and self._value == other._value
	def __hash__(self): return hash((Full, self._value))
	def __reduce__(self): return Full, (self._value,)

class Empty(Maybe[Never]):
	""" Carries nothing. Calling Empty() hands back the one shared instance. """
	__slots__ = ()
	_singleton: "Empty"
	def __new__(cls): return Empty._singleton
	def match(self, on_full, on_empty): return on_empty()
	def _deliver(self, handler): return handler()
	# Pickle and copy look the name up rather than building a second one.
	def __reduce__(self): return "EMPTY"

Maybe.seal(Full, Empty)
Empty._singleton = object.__new__(Empty)
EMPTY: Final[Empty] = Empty()
