"""Singly linked chain of values with O(1) append and O(1) pop from the head.

Only the operations ``LinkedQueue`` needs are provided.
"""


class LinkedList:
    class Link:
        __slots__ = ("value", "following")

        def __init__(self, value):
            self.value = value
            self.following = None

    def __init__(self):
        self._first = None
        self._last = None
        self._count = 0

    def append(self, value):
        link = self.Link(value)
        if self._last is not None:
            self._last.following = link
        else:
            self._first = link
        self._last = link
        self._count += 1

    def pop_first(self):
        link = self._first
        if link is None:
            raise IndexError("pop_first from empty list")
        self._first, link.following = link.following, None
        if self._first is None:
            self._last = None
        self._count -= 1
        return link.value

    def first(self):
        if self._first is None:
            raise IndexError("first from empty list")
        return self._first.value

    def is_empty(self):
        return self._first is None

    def clear(self):
        self._first = self._last = None
        self._count = 0

    def __iter__(self):
        link = self._first
        while link is not None:
            yield link.value
            link = link.following

    def __len__(self):
        return self._count
