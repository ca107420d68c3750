"""
Pair, Sum and Maybe: a product type, a two-case sum type, and an optional type.
"""
from .ontology import Closed, Frozen
from .diagnostics import Report, NonExhaustive, TooManyIssues
from .dispatch import dispatch, audit, assert_exhaustive, Show, show
from .pair import Pair
from .sum import Sum, Left, Right
from .maybe import Maybe, Full, Empty, EMPTY
from .lookups import safe_divide, lookup, first, parse_int
