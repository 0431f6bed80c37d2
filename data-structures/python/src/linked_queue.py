"""FIFO queue backed by a singly linked list.

Enqueue appends at the tail and dequeue pops the head, so both are O(1).
Used by level-order traversal in ``binary_search_tree``.
"""

from linked_list import LinkedList


class LinkedQueue:
    def __init__(self):
        self._items = LinkedList()

    def enqueue(self, value):
        self._items.append(value)

    def dequeue(self):
        if self._items.is_empty():
            raise IndexError("dequeue from empty queue")
        return self._items.pop_first()

    def peek(self):
        if self._items.is_empty():
            raise IndexError("peek from empty queue")
        return self._items.first()

    def size(self):
        return len(self._items)

    def is_empty(self):
        return self._items.is_empty()

    def clear(self):
        self._items.clear()

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __bool__(self):
        return not self._items.is_empty()

    def __repr__(self):
        return f"LinkedQueue({list(self._items)})"
