import copy, pickle
import threading
import unittest
from unittest import mock

from tagged import Maybe, Full, Empty, EMPTY

class Widget:
	pass

def describe(m: Maybe[int]) -> str:
	return m.match(lambda n: "got %d" % n, lambda: "nothing")

def name_of(m: Maybe[str]) -> str:
	return m.match(lambda s: s, lambda: "anonymous")

def widget_or_none(m: Maybe[Widget]):
	return m.match(lambda w: w, lambda: None)

class MaybeTests(unittest.TestCase):

	def test_full_calls_the_full_handler(self):
		on_full, on_empty = mock.Mock(return_value="F"), mock.Mock(return_value="E")
		self.assertEqual("F", Full(3).match(on_full, on_empty))
		on_full.assert_called_once_with(3)
		on_empty.assert_not_called()

	def test_empty_calls_the_empty_handler_with_nothing(self):
		on_full, on_empty = mock.Mock(return_value="F"), mock.Mock(return_value="E")
		self.assertEqual("E", EMPTY.match(on_full, on_empty))
		on_empty.assert_called_once_with()
		on_full.assert_not_called()

	def test_one_empty_serves_every_instantiation(self):
		self.assertEqual("nothing", describe(EMPTY))
		self.assertEqual("anonymous", name_of(EMPTY))
		self.assertIsNone(widget_or_none(EMPTY))
		self.assertEqual("got 4", describe(Full(4)))

	def test_empty_is_a_singleton(self):
		self.assertIs(EMPTY, Empty())
		self.assertIs(EMPTY, Maybe.empty())
		self.assertIs(EMPTY, Maybe.of(None))
		self.assertIs(EMPTY, copy.copy(EMPTY))
		self.assertIs(EMPTY, copy.deepcopy(EMPTY))
		self.assertIs(EMPTY, pickle.loads(pickle.dumps(EMPTY)))

	def test_empty_from_many_threads(self):
		seen = []
		threads = [threading.Thread(target=lambda: seen.append(Empty())) for _ in range(8)]
		for t in threads: t.start()
		for t in threads: t.join()
		self.assertTrue(all(e is EMPTY for e in seen))
		self.assertEqual(8, len(seen))

	def test_full_keeps_none(self):
		self.assertTrue(Full(None).is_full())
		self.assertNotEqual(EMPTY, Full(None))

	def test_constructors(self):
		self.assertEqual(Full(1), Maybe.full(1))
		self.assertEqual(Full(0), Maybe.of(0))
		self.assertIsInstance(EMPTY, Maybe)

	def test_equality(self):
		self.assertEqual(Full("a"), Full("a"))
		self.assertNotEqual(Full("a"), Full("b"))
		self.assertEqual(EMPTY, EMPTY)
		self.assertEqual(1, len({Full(2), Full(2)}))

	def test_truthiness(self):
		self.assertFalse(EMPTY)
		self.assertTrue(Full(0))
		self.assertTrue(Full(None))

	def test_combinators(self):
		self.assertEqual(Full(4), Full(2).map(lambda n: n * 2))
		self.assertIs(EMPTY, EMPTY.map(lambda n: n * 2))
		self.assertEqual(Full(1), Full(2).bind(lambda n: Full(n - 1)))
		self.assertIs(EMPTY, Full(2).bind(lambda n: EMPTY))
		self.assertIs(EMPTY, EMPTY.bind(lambda n: Full(n)))
		self.assertEqual(2, Full(2).or_else(0))
		self.assertEqual(0, EMPTY.or_else(0))
		self.assertEqual(2, Full(2).to_optional())
		self.assertIsNone(EMPTY.to_optional())
		self.assertTrue(EMPTY.is_empty())
		self.assertFalse(Full(1).is_empty())

	def test_the_union_is_closed(self):
		self.assertEqual((Full, Empty), Maybe.cases())
		with self.assertRaises(TypeError):
			class Half(Maybe): pass
		with self.assertRaises(TypeError):
			class Emptier(Empty): pass

	def test_immutable(self):
		with self.assertRaises(AttributeError):
			Full(1)._value = 2
		with self.assertRaises(AttributeError):
			EMPTY.anything = 1

	def test_repr(self):
		self.assertEqual("Full(1)", repr(Full(1)))
		self.assertEqual("Empty", repr(EMPTY))
		self.assertEqual("Full([1, Empty])", repr(Full([1, EMPTY])))

	def test_pickle_full(self):
		self.assertEqual(Full({"k": (1,)}), pickle.loads(pickle.dumps(Full({"k": (1,)}))))

if __name__ == '__main__':
	unittest.main()
