"""
tests/fifo_core/test_fifo.py
Facade FIFO (API con la cola como primer argumento).
"""
import unittest
from fifo_core import fifo
from fifo_core.ds.queue import AmortizedQueue, EMPTY


class TestFifo(unittest.TestCase):

    def test_new(self):
        self.assertEqual(fifo.to_list(fifo.new()), [])
        self.assertEqual(fifo.to_list(fifo.new(range(1, 6))), [1, 2, 3, 4, 5])
        self.assertEqual(fifo.to_list(fifo.new([1, 2, 3], lambda n: n * n)), [1, 4, 9])

    def test_from_list(self):
        self.assertEqual(fifo.to_list(fifo.from_list([1, 2, 3])), [1, 2, 3])
        with self.assertRaises(TypeError):
            fifo.from_list((1, 2))

    def test_equal(self):
        queue1 = fifo.new([1, 2, 3])
        queue2 = fifo.push(fifo.push(fifo.push(fifo.new(), 1), 2), 3)
        self.assertTrue(fifo.equal(queue1, queue2))
        self.assertFalse(fifo.equal(queue1, fifo.reverse(queue2)))
        self.assertFalse(fifo.equal(queue1, fifo.new([3, 4, 5])))

    def test_filter(self):
        queue = fifo.filter(fifo.from_list([1, 2, 3, 4]), lambda item: item % 2 == 0)
        self.assertEqual(queue, fifo.from_list([2, 4]))

    def test_push_and_push_r(self):
        self.assertEqual(fifo.to_list(fifo.push(fifo.from_list([1, 2]), 3)), [1, 2, 3])
        self.assertEqual(fifo.to_list(fifo.push_r(fifo.from_list([1, 2]), 3)), [3, 1, 2])

    def test_is_empty(self):
        self.assertTrue(fifo.is_empty(fifo.new()))
        self.assertFalse(fifo.is_empty(fifo.from_list([1])))

    def test_is_queue(self):
        self.assertTrue(fifo.is_queue(fifo.new()))
        self.assertFalse(fifo.is_queue({}))
        self.assertFalse(fifo.is_queue(4))
        self.assertFalse(fifo.is_queue("test"))

    def test_join(self):
        joined = fifo.join(fifo.from_list([1, 2]), fifo.from_list([3, 4]))
        self.assertEqual(fifo.to_list(joined), [1, 2, 3, 4])

    def test_length(self):
        self.assertEqual(fifo.length(fifo.new()), 0)
        self.assertEqual(fifo.length(fifo.new([1])), 1)
        self.assertEqual(fifo.length(fifo.new(range(1, 101))), 100)

    def test_member(self):
        queue = fifo.new(range(1, 6))
        self.assertTrue(fifo.member(queue, 1))
        self.assertTrue(fifo.member(queue, 5))
        self.assertFalse(fifo.member(queue, 100))

    def test_pop(self):
        queue = fifo.new([1, 2])
        value, queue = fifo.pop(queue)
        self.assertEqual(value.item, 1)
        value, queue = fifo.pop(queue)
        self.assertEqual(value.item, 2)
        value, queue = fifo.pop(queue)
        self.assertIs(value, EMPTY)
        self.assertIsInstance(queue, AmortizedQueue)

    def test_pop_r(self):
        queue = fifo.new([1, 2])
        value, queue = fifo.pop_r(queue)
        self.assertEqual(value.item, 2)
        value, queue = fifo.pop_r(queue)
        self.assertEqual(value.item, 1)
        value, queue = fifo.pop_r(queue)
        self.assertIs(value, EMPTY)

    def test_reverse(self):
        self.assertEqual(fifo.to_list(fifo.reverse(fifo.new([1, 2, 3]))), [3, 2, 1])

    def test_split(self):
        queue2, queue3 = fifo.split(fifo.from_list([1, 2, 3]), 1)
        self.assertEqual(fifo.to_list(queue2), [1])
        self.assertEqual(fifo.to_list(queue3), [2, 3])

    def test_inspect(self):
        self.assertEqual(fifo.inspect(fifo.new()), "FIFO<[]>")
        self.assertEqual(fifo.inspect(fifo.push(fifo.push(fifo.new(), 1), 2)), "FIFO<[1, 2]>")

    def test_enumerable_style_usage(self):
        queue = fifo.new(range(1, 11))
        self.assertEqual(len(queue), 10)
        self.assertEqual(fifo.to_list(queue)[1:4], [2, 3, 4])
        self.assertEqual([n * n for n in fifo.new([1, 2, 3])], [1, 4, 9])


if __name__ == '__main__':
    unittest.main()
