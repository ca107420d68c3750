"""
The product type: two slots, both always present.
"""
from typing import Callable
from .ontology import Frozen
from .dispatch import show

class Pair[A, B](Frozen):
	""" Two values of independently-chosen types. Equal when both slots are equal. """
	__slots__ = ("_one", "_two")

	def __init__(self, one: A, two: B):
		object.__setattr__(self, "_one", one)
		object.__setattr__(self, "_two", two)

	def one(self) -> A: return self._one
	def two(self) -> B: return self._two

	def swap(self) -> "Pair[B, A]":
		return Pair(self._two, self._one)

	def map[C, D](self, f: Callable[[A], C], g: Callable[[B], D]) -> "Pair[C, D]":
		return Pair(f(self._one), g(self._two))

	def __iter__(self):
		yield self._one
		yield self._two

	def __eq__(self, other):
		if not isinstance(other, Pair): return NotImplemented
		return self._one == other._one and self._two == other._two

	def __hash__(self): return hash((Pair, self._one, self._two))
	def __reduce__(self): return Pair, (self._one, self._two)
	def __repr__(self): return show(self)
