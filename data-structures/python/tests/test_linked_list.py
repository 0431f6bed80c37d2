import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from linked_list import LinkedList


class TestLinkedList(unittest.TestCase):
    def test_new_list_is_empty(self):
        ll = LinkedList()
        self.assertEqual(len(ll), 0)
        self.assertTrue(ll.is_empty())
        self.assertEqual(list(ll), [])

    def test_first_on_empty_raises(self):
        with self.assertRaises(IndexError):
            LinkedList().first()

    def test_pop_first_on_empty_raises(self):
        with self.assertRaises(IndexError):
            LinkedList().pop_first()

    def test_append_keeps_order(self):
        ll = LinkedList()
        for value in (1, 2, 3):
            ll.append(value)
        self.assertEqual(list(ll), [1, 2, 3])
        self.assertEqual(ll.first(), 1)
        self.assertEqual(len(ll), 3)

    def test_pop_first_until_empty(self):
        ll = LinkedList()
        ll.append(10)
        ll.append(20)
        self.assertEqual(ll.pop_first(), 10)
        self.assertEqual(ll.pop_first(), 20)
        self.assertTrue(ll.is_empty())
        self.assertEqual(len(ll), 0)

    def test_append_after_draining(self):
        ll = LinkedList()
        ll.append(1)
        ll.pop_first()
        ll.append(2)
        ll.append(3)
        self.assertEqual(list(ll), [2, 3])
        self.assertEqual(ll.first(), 2)

    def test_clear(self):
        ll = LinkedList()
        ll.append(1)
        ll.append(2)
        ll.clear()
        self.assertTrue(ll.is_empty())
        self.assertEqual(list(ll), [])
        ll.append(3)
        self.assertEqual(list(ll), [3])

    def test_works_with_non_primitive_types(self):
        ll = LinkedList()
        ll.append({"a": 1})
        ll.append([1, 2])
        self.assertEqual(ll.pop_first(), {"a": 1})
        self.assertEqual(ll.pop_first(), [1, 2])


if __name__ == "__main__":
    unittest.main()
