import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from linked_queue import LinkedQueue


class TestLinkedQueue(unittest.TestCase):
    def test_new_queue_is_empty(self):
        q = LinkedQueue()
        self.assertEqual(q.size(), 0)
        self.assertTrue(q.is_empty())
        self.assertFalse(q)

    def test_dequeue_on_empty_raises(self):
        with self.assertRaises(IndexError):
            LinkedQueue().dequeue()

    def test_peek_on_empty_raises(self):
        with self.assertRaises(IndexError):
            LinkedQueue().peek()

    def test_enqueue_multiple_elements(self):
        q = LinkedQueue()
        q.enqueue(1)
        q.enqueue(2)
        q.enqueue(3)
        self.assertEqual(q.size(), 3)
        self.assertEqual(len(q), 3)
        self.assertTrue(q)

    def test_fifo_order(self):
        q = LinkedQueue()
        for i in range(5):
            q.enqueue(i)
        self.assertEqual([q.dequeue() for _ in range(5)], [0, 1, 2, 3, 4])
        self.assertTrue(q.is_empty())

    def test_peek_does_not_remove(self):
        q = LinkedQueue()
        q.enqueue(10)
        q.enqueue(20)
        self.assertEqual(q.peek(), 10)
        self.assertEqual(q.size(), 2)

    def test_alternating_enqueue_dequeue(self):
        q = LinkedQueue()
        q.enqueue(1)
        q.enqueue(2)
        self.assertEqual(q.dequeue(), 1)
        q.enqueue(3)
        self.assertEqual(q.dequeue(), 2)
        self.assertEqual(q.dequeue(), 3)
        self.assertTrue(q.is_empty())

    def test_enqueue_after_drain(self):
        q = LinkedQueue()
        q.enqueue("a")
        q.dequeue()
        q.enqueue("b")
        self.assertEqual(q.peek(), "b")
        self.assertEqual(q.dequeue(), "b")

    def test_iteration_is_front_to_back_and_non_destructive(self):
        q = LinkedQueue()
        for value in ("x", "y", "z"):
            q.enqueue(value)
        self.assertEqual(list(q), ["x", "y", "z"])
        self.assertEqual(q.size(), 3)

    def test_clear_makes_queue_empty(self):
        q = LinkedQueue()
        q.enqueue(1)
        q.clear()
        self.assertTrue(q.is_empty())

    def test_large_number_of_elements(self):
        q = LinkedQueue()
        for i in range(1000):
            q.enqueue(i)
        for i in range(1000):
            self.assertEqual(q.dequeue(), i)
        self.assertTrue(q.is_empty())

    def test_repr(self):
        q = LinkedQueue()
        q.enqueue(1)
        q.enqueue(2)
        self.assertEqual(repr(q), "LinkedQueue([1, 2])")


if __name__ == "__main__":
    unittest.main()
