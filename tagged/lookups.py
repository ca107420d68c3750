"""
Small functions that might fail, written to say so in their return type
rather than by returning None or raising.
"""
from typing import Iterable, Mapping
from .maybe import Maybe, Full, EMPTY
from .sum import Sum, Left, Right

def safe_divide(num: int, den: int) -> Maybe[int]:
	""" Integer quotient truncated toward zero, or EMPTY when the divisor is zero. """
	if den == 0: return EMPTY
	quotient = abs(num) // abs(den)
	return Full(quotient if (num < 0) == (den < 0) else -quotient)

def lookup[K, V](mapping: Mapping[K, V], key: K) -> Maybe[V]:
	# A key present with value None is Full(None), not EMPTY.
	if key in mapping: return Full(mapping[key])
	return EMPTY

def first[T](items: Iterable[T]) -> Maybe[T]:
	for item in items:
		return Full(item)
	return EMPTY

def parse_int(text: str) -> Sum[str, int]:
	""" Right(number) on success; Left(complaint) otherwise. """
	try:
		return Right(int(text))
	except ValueError:
		return Left("%r is not an integer" % text)
