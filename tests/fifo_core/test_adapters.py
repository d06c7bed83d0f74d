"""
tests/fifo_core/test_adapters.py
Capa de adaptadores: construcción desde iterables, into() e impresión.
"""
import unittest
from fifo_core import adapters
from fifo_core.ds.queue import AmortizedQueue


class TestAdapters(unittest.TestCase):

    def test_new_from_any_iterable(self):
        self.assertEqual(adapters.new(range(1, 6)).to_list(), [1, 2, 3, 4, 5])
        self.assertEqual(adapters.new([1, 2, 3]).to_list(), [1, 2, 3])
        self.assertEqual(adapters.new((x for x in "abc")).to_list(), ["a", "b", "c"])
        self.assertEqual(adapters.new({"k": 1}).to_list(), ["k"])
        self.assertTrue(adapters.new().is_empty)

    def test_new_with_transform(self):
        squared = lambda n: n * n
        self.assertEqual(adapters.new_with(range(1, 4), squared).to_list(), [1, 4, 9])
        self.assertEqual(adapters.new_with([1, 2, 3], squared).to_list(), [1, 4, 9])

    def test_into_appends_after_existing(self):
        q = AmortizedQueue.from_sequence([1, 2])
        self.assertEqual(adapters.into([3, 4], q).to_list(), [1, 2, 3, 4])
        self.assertEqual(adapters.into([1, 2, 3], AmortizedQueue.empty()),
                         adapters.new([1, 2, 3]))

    def test_into_rejects_non_queue(self):
        with self.assertRaises(TypeError):
            adapters.into([1], [])

    def test_inspect(self):
        q = adapters.new([1, 2, 3])
        self.assertEqual(adapters.inspect(q), "Queue<[1, 2, 3]>")
        self.assertEqual(adapters.inspect(q, "FIFO"), "FIFO<[1, 2, 3]>")
        self.assertEqual(adapters.inspect(adapters.new([[1], "s"])), "Queue<[[1], 's']>")

    def test_inspect_does_not_truncate(self):
        q = adapters.new(range(20))
        self.assertIn("19", adapters.inspect(q))


if __name__ == '__main__':
    unittest.main()
