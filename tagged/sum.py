"""
The two-case sum type: a value is either a Left carrying an A or a Right carrying a B.

There is no accessor for the payload. The way in is `match`,
which wants a handler for each side and calls exactly one of them.
"""
from abc import abstractmethod
from typing import Callable
from .ontology import Closed
from .dispatch import show

class Sum[A, B](Closed):
	__slots__ = ()

	@staticmethod
	def left[L](value: L) -> "Sum[L, object]": return Left(value)
	@staticmethod
	def right[R](value: R) -> "Sum[object, R]": return Right(value)

	@abstractmethod
	def match[T](self, on_left: Callable[[A], T], on_right: Callable[[B], T]) -> T:
		""" Call the handler for the side this value is on, with its payload, and return what it returns. """

	def is_left(self) -> bool: return self.match(lambda a: True, lambda b: False)
	def is_right(self) -> bool: return self.match(lambda a: False, lambda b: True)

	def map_left[C](self, fn: Callable[[A], C]) -> "Sum[C, B]":
		return self.match(lambda a: Left(fn(a)), Right)
	def map_right[D](self, fn: Callable[[B], D]) -> "Sum[A, D]":
		return self.match(Left, lambda b: Right(fn(b)))
	def swap(self) -> "Sum[B, A]":
		return self.match(Right, Left)

	def __repr__(self): return show(self)

class Left[A, B](Sum[A, B]):
	__slots__ = ("_value",)
	def __init__(self, value: A): object.__setattr__(self, "_value", value)
	def match(self, on_left, on_right): return on_left(self._value)
	def _deliver(self, handler): return handler(self._value)
	def __eq__(self, other):
		if not isinstance(other, Sum): return NotImplemented
		return isinstance(other, Left) and self._value == other._value
	def __hash__(self): return hash((Left, self._value))
	def __reduce__(self): return Left, (self._value,)

class Right[A, B](Sum[A, B]):
	__slots__ = ("_value",)
	def __init__(self, value: B): object.__setattr__(self, "_value", value)
	def match(self, on_left, on_right): return on_right(self._value)
	def _deliver(self, handler): return handler(self._value)
	def __eq__(self, other):
		if not isinstance(other, Sum): return NotImplemented
		return isinstance(other, Right) and self._value == other._value
	def __hash__(self): return hash((Right, self._value))
	def __reduce__(self): return Right, (self._value,)

Sum.seal(Left, Right)
